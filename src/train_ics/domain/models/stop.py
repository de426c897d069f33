"""Stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """A station or stop point."""

    name: str
    id: str | None = None
