"""iCalendar builder based on the icalendar library."""

import logging
import uuid
from collections.abc import Sequence
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import icalendar

from train_ics.domain.models import Event
from train_ics.domain.ports import CalendarBuilder

logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_ID = "-//train-ics//Train-ICS-Converter//EN"


class IcsCalendarBuilder(CalendarBuilder):
    """Builds ``icalendar.Calendar`` objects from domain events."""

    def __init__(
        self, timezone: str = "Europe/Berlin", product_id: str = DEFAULT_PRODUCT_ID
    ) -> None:
        """Initialize the builder.

        Args:
            timezone: IANA timezone applied to every event's start and end.
            product_id: PRODID of generated calendars.
        """
        self._timezone = ZoneInfo(timezone)
        self._product_id = product_id

    def build(self, title: str, events: Sequence[Event]) -> icalendar.Calendar:
        """Create a calendar named ``title`` with one entry per event."""
        calendar = icalendar.Calendar()
        calendar.add("prodid", self._product_id)
        calendar.add("version", "2.0")
        calendar.add("x-wr-calname", title)

        for event in events:
            calendar.add_component(self._to_ical_event(event))

        # Adds a VTIMEZONE for every TZID used by the events
        calendar.add_missing_timezones()

        logger.debug(f"Created calendar '{title}' with {len(events)} event(s)")
        return calendar

    def serialize(self, calendar: icalendar.Calendar) -> str:
        """Render the calendar as iCalendar text."""
        return calendar.to_ical().decode("utf-8")

    def _to_ical_event(self, event: Event) -> icalendar.Event:
        """Convert a domain event, writing its times as wall clock in the configured timezone."""
        ical_event = icalendar.Event()
        ical_event.add("uid", str(uuid.uuid4()))
        ical_event.add("dtstamp", datetime.now(UTC))
        ical_event.add("summary", event.summary)
        ical_event.add("description", event.description)
        ical_event.add("location", event.location)
        ical_event.add("dtstart", event.start.astimezone(self._timezone))
        ical_event.add("dtend", event.end.astimezone(self._timezone))
        return ical_event
