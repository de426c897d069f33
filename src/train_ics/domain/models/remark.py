"""Remark domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Remark:
    """Service advisory attached to a leg (amenity, warning, status message)."""

    type: str | None = None  # "hint", "warning" or "status"
    code: str | None = None
    text: str | None = None
