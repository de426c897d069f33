"""Leg domain model."""

from dataclasses import dataclass
from datetime import datetime

from train_ics.domain.exceptions import InvalidJourneyError
from train_ics.domain.models.line import Line
from train_ics.domain.models.remark import Remark
from train_ics.domain.models.stop import Stop
from train_ics.domain.models.stopover import Stopover


@dataclass(frozen=True)
class Leg:
    """One uninterrupted movement within a journey.

    Actual times (``departure``/``arrival``) win over planned ones when both are
    present. Delays are in seconds and ``None`` means no delay. When the upstream
    data carries stopovers, the leg's own origin and destination are the first
    and last entries of ``stopovers``.
    """

    origin: Stop
    destination: Stop
    mode: str = "train"
    departure: datetime | None = None
    planned_departure: datetime | None = None
    departure_delay: int | None = None
    arrival: datetime | None = None
    planned_arrival: datetime | None = None
    arrival_delay: int | None = None
    line: Line | None = None
    departure_platform: str | None = None
    arrival_platform: str | None = None
    cancelled: bool = False
    walking: bool = False
    trip_id: str | None = None
    stopovers: tuple[Stopover, ...] = ()
    remarks: tuple[Remark, ...] = ()

    @property
    def departure_time(self) -> datetime:
        """Actual departure, falling back to the planned one."""
        value = self.departure or self.planned_departure
        if value is None:
            raise InvalidJourneyError(
                f"Leg from '{self.origin.name}' has neither actual nor planned departure"
            )
        return value

    @property
    def arrival_time(self) -> datetime:
        """Actual arrival, falling back to the planned one."""
        value = self.arrival or self.planned_arrival
        if value is None:
            raise InvalidJourneyError(
                f"Leg to '{self.destination.name}' has neither actual nor planned arrival"
            )
        return value
