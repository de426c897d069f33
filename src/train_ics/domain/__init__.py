"""Domain layer - core models, errors and ports."""

from train_ics.domain.exceptions import InvalidJourneyError, TrainIcsError
from train_ics.domain.models import Event, Journey, Leg, LinkOptions, Remark, Stopover
from train_ics.domain.ports import CalendarBuilder

__all__ = [
    "CalendarBuilder",
    "Event",
    "InvalidJourneyError",
    "Journey",
    "Leg",
    "LinkOptions",
    "Remark",
    "Stopover",
    "TrainIcsError",
]
