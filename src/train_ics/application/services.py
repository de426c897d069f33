"""Application services (use cases) for calendar export."""

import logging
from typing import TYPE_CHECKING, Any

from train_ics.application.transformer import (
    DEFAULT_LINK_OPTIONS,
    calendar_title,
    journey_to_events,
)
from train_ics.domain.exceptions import InvalidJourneyError
from train_ics.domain.models import Journey, LinkOptions

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from train_ics.domain.ports import CalendarBuilder


class JourneyCalendarService:
    """Service for turning journeys into calendars."""

    def __init__(self, calendar_builder: "CalendarBuilder") -> None:
        """Initialize with the builder that owns the calendar format."""
        self._calendar_builder = calendar_builder

    def to_calendar(
        self,
        journey: Journey,
        departure_tz_offset: int = 0,
        links: LinkOptions = DEFAULT_LINK_OPTIONS,
    ) -> Any:
        """Build a calendar with one event per non-walking leg of the journey."""
        if not journey.legs:
            raise InvalidJourneyError("Journey has no legs")

        events = journey_to_events(journey, departure_tz_offset, links)
        title = calendar_title(journey)
        logger.debug(
            f"Built {len(events)} event(s) from {len(journey.legs)} leg(s) for '{title}'"
        )
        return self._calendar_builder.build(title, events)

    def to_ics(
        self,
        journey: Journey,
        departure_tz_offset: int = 0,
        links: LinkOptions = DEFAULT_LINK_OPTIONS,
    ) -> str:
        """Build the calendar and serialize it."""
        calendar = self.to_calendar(journey, departure_tz_offset, links)
        return self._calendar_builder.serialize(calendar)
