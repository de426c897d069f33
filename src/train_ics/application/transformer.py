"""Turns journey legs into calendar events."""

import logging

from train_ics.application.formatting import (
    cancelled_banner,
    cancelled_glyph,
    date_with_delay,
    format_remarks,
    format_stopovers,
    intermediate_stopovers,
    marudor_link,
    mode_glyph,
    traewelling_link,
    travelynx_link,
)
from train_ics.domain.models import NON_EVENT_MODES, Event, Journey, Leg, LinkOptions

logger = logging.getLogger(__name__)

DEFAULT_LINK_OPTIONS = LinkOptions()


def _platform_suffix(platform: str | None) -> str:
    return f" (Gl. {platform})" if platform else ""


def _shift_minutes(delay_seconds: int | None, departure_tz_offset: int) -> float:
    # The offset correction only applies to delayed times
    if not delay_seconds:
        return 0
    return delay_seconds / 60 - departure_tz_offset


def _stopover_fragment(leg: Leg, departure_tz_offset: int) -> str:
    stopovers = leg.stopovers
    # Origin and destination are part of the list when stopovers are available
    if len(stopovers) == 2:
        stopovers = ()

    intermediate = intermediate_stopovers(stopovers)
    if not intermediate:
        return ""

    header = "Zwischenstop" if len(stopovers) == 3 else "Zwischenstops"
    return f"\n{header}: {format_stopovers(intermediate, departure_tz_offset)}"


def _links_fragment(leg: Leg, links: LinkOptions) -> str:
    fragment = ""
    if links.include_traewelling:
        fragment += traewelling_link(leg)
    if links.include_travelynx:
        fragment += travelynx_link(leg)
    if links.include_marudor:
        fragment += marudor_link(leg)
    return fragment


def leg_to_event(
    leg: Leg,
    departure_tz_offset: int = 0,
    links: LinkOptions = DEFAULT_LINK_OPTIONS,
) -> Event | None:
    """Convert a single leg into a calendar event.

    Args:
        leg: The leg to convert.
        departure_tz_offset: Minutes subtracted from start and end to correct
            the upstream timestamp encoding.
        links: Deep links to append to the description.

    Returns:
        The event, or None for walking and cycling transfers.

    Raises:
        InvalidJourneyError: If the leg has no departure or arrival time at all.
    """
    if leg.mode in NON_EVENT_MODES or leg.walking:
        return None

    start = date_with_delay(
        leg.departure_time, _shift_minutes(leg.departure_delay, departure_tz_offset)
    )
    end = date_with_delay(leg.arrival_time, _shift_minutes(leg.arrival_delay, departure_tz_offset))

    line_name = leg.line.name if leg.line else ""
    summary = (
        f"{mode_glyph(leg)}{cancelled_glyph(leg)} {line_name}: "
        f"{leg.origin.name}{_platform_suffix(leg.departure_platform)} -> "
        f"{leg.destination.name}{_platform_suffix(leg.arrival_platform)}"
    )

    operator = leg.line.operator if leg.line else None
    operator_text = f"Betreiber: {operator.name}" if operator and operator.name else ""
    description = (
        f"{cancelled_banner(leg)}"
        f"{operator_text}"
        f"{_stopover_fragment(leg, departure_tz_offset)}"
        f"{_links_fragment(leg, links)}"
        f"{format_remarks(leg.remarks)}"
    )

    return Event(
        summary=summary,
        description=description,
        location=leg.origin.name,
        start=start,
        end=end,
    )


def journey_to_events(
    journey: Journey,
    departure_tz_offset: int = 0,
    links: LinkOptions = DEFAULT_LINK_OPTIONS,
) -> list[Event]:
    """Convert every leg of a journey, skipping walking and cycling transfers."""
    events = []
    for leg in journey.legs:
        event = leg_to_event(leg, departure_tz_offset, links)
        if event is None:
            logger.debug(f"Skipping {leg.mode} leg from '{leg.origin.name}'")
            continue
        events.append(event)
    return events


def calendar_title(journey: Journey) -> str:
    """Name a calendar after the journey's first origin and last destination."""
    return f"Reise von {journey.origin.name} nach {journey.destination.name}"
