"""Date arithmetic for delays and the upstream timezone offset."""

from datetime import datetime, timedelta


def date_with_delay(timestamp: datetime, delay_minutes: float) -> datetime:
    """Return ``timestamp`` moved forward by ``delay_minutes``.

    Args:
        timestamp: Timezone-aware base time.
        delay_minutes: Minutes to add. Negative values move the time backwards.

    Returns:
        The shifted timestamp, keeping the original UTC offset.
    """
    if not delay_minutes:
        return timestamp
    return timestamp + timedelta(minutes=delay_minutes)


def to_short_time(timestamp: datetime, offset_minutes: int = 0) -> str:
    """Format as HH:MM after correcting by the departure timezone offset."""
    return date_with_delay(timestamp, -offset_minutes).strftime("%H:%M")
