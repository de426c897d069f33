"""Adapter for hafas-client style journey JSON."""

from train_ics.adapters.hafas_json.journey_parser import JourneyParser

__all__ = ["JourneyParser"]
