"""Convert public transit journeys into calendar events."""

__version__ = "0.1.0"
