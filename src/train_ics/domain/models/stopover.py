"""Stopover domain model."""

from dataclasses import dataclass
from datetime import datetime

from train_ics.domain.models.stop import Stop


@dataclass(frozen=True)
class Stopover:
    """A stop passed during a leg.

    Delays are in seconds. A missing delay means the stopover is on time.
    """

    stop: Stop
    arrival: datetime | None = None
    arrival_delay: int | None = None
    departure: datetime | None = None
    departure_delay: int | None = None
