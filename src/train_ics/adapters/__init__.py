"""Adapters layer - external system integrations."""

from train_ics.adapters.config import AppConfig
from train_ics.adapters.hafas_json import JourneyParser
from train_ics.adapters.ics_calendar import IcsCalendarBuilder

__all__ = [
    "AppConfig",
    "IcsCalendarBuilder",
    "JourneyParser",
]
