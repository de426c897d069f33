"""Ports (interfaces) for the ports-and-adapters architecture."""

from train_ics.domain.ports.calendar_builder import CalendarBuilder

__all__ = ["CalendarBuilder"]
