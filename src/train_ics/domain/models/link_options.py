"""Deep link toggles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkOptions:
    """Selects which deep links are appended to event descriptions."""

    include_traewelling: bool = False  # Träwelling check-in link
    include_travelynx: bool = False  # Travelynx trip details
    include_marudor: bool = False  # Marudor details, long distance and regional trains only
