"""Calendar builder port."""

from collections.abc import Sequence
from typing import Any, Protocol

from train_ics.domain.models.event import Event


class CalendarBuilder(Protocol):
    """Port for assembling events into a calendar container."""

    def build(self, title: str, events: Sequence[Event]) -> Any:
        """Create a calendar named ``title`` holding ``events``."""
        ...

    def serialize(self, calendar: Any) -> str:
        """Render a calendar created by ``build`` to its wire format."""
        ...
