"""Text for intermediate stops."""

from collections.abc import Sequence

from train_ics.application.formatting.dates import to_short_time
from train_ics.domain.models.stopover import Stopover


def intermediate_stopovers(stopovers: Sequence[Stopover]) -> tuple[Stopover, ...]:
    """Drop the leg's own origin and destination from its stopover list."""
    return tuple(stopovers[1:-1])


def _delay_suffix(delay_seconds: int | None) -> str:
    # Stopover delays are shown as-is, without the departure timezone correction
    if not delay_seconds:
        return ""
    return f" + {delay_seconds // 60}min"


def format_stopover(stopover: Stopover, departure_tz_offset: int = 0) -> str:
    """Render one stopover as ``Name (an: HH:MM, ab: HH:MM)``."""
    arrival = (
        f"an: {to_short_time(stopover.arrival, departure_tz_offset)}"
        f"{_delay_suffix(stopover.arrival_delay)}"
        if stopover.arrival is not None
        else ""
    )
    departure = (
        f"ab: {to_short_time(stopover.departure, departure_tz_offset)}"
        f"{_delay_suffix(stopover.departure_delay)}"
        if stopover.departure is not None
        else ""
    )
    splitter = ", " if arrival and departure else ""
    return f"{stopover.stop.name} ({arrival}{splitter}{departure})"


def format_stopovers(stopovers: Sequence[Stopover], departure_tz_offset: int = 0) -> str:
    """Join already trimmed stopovers with commas.

    Args:
        stopovers: Intermediate stopovers only, see ``intermediate_stopovers``.
        departure_tz_offset: Minutes subtracted from each displayed time.

    Returns:
        Comma separated stopover descriptions, empty if there are none.
    """
    return ", ".join(format_stopover(s, departure_tz_offset) for s in stopovers)
