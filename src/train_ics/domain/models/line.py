"""Line domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Operator:
    """Company running a line."""

    name: str
    id: str | None = None


@dataclass(frozen=True)
class Line:
    """Transit line serving a leg."""

    name: str
    product: str | None = None  # e.g. "regional", "nationalExpress", "tram"
    product_name: str | None = None  # e.g. "ICE", "RE", "STR"
    fahrt_nr: str | None = None  # Service number (e.g. "1234" for ICE 1234)
    operator: Operator | None = None
    mode: str | None = None
