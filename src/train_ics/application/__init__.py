"""Application layer - leg to event transformation and calendar assembly."""

from train_ics.application.services import JourneyCalendarService
from train_ics.application.transformer import calendar_title, journey_to_events, leg_to_event

__all__ = ["JourneyCalendarService", "calendar_title", "journey_to_events", "leg_to_event"]
