"""Calendar event domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Event:
    """A single calendar entry produced from one journey leg."""

    summary: str
    description: str
    location: str
    start: datetime
    end: datetime
