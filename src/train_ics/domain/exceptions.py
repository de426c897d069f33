"""Domain exceptions."""


class TrainIcsError(Exception):
    """Base class for all errors raised by train_ics."""


class InvalidJourneyError(TrainIcsError, ValueError):
    """Raised when journey data cannot be turned into calendar events."""
