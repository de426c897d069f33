"""Journey domain model."""

from dataclasses import dataclass

from train_ics.domain.models.leg import Leg
from train_ics.domain.models.stop import Stop


@dataclass(frozen=True)
class Journey:
    """Ordered legs travelled from an origin to a destination."""

    legs: tuple[Leg, ...]

    @property
    def origin(self) -> Stop:
        """Origin of the first leg."""
        return self.legs[0].origin

    @property
    def destination(self) -> Stop:
        """Destination of the last leg."""
        return self.legs[-1].destination
