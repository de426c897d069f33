"""Adapter producing iCalendar files."""

from train_ics.adapters.ics_calendar.ics_calendar_builder import IcsCalendarBuilder

__all__ = ["IcsCalendarBuilder"]
