"""Domain models for journeys and calendar events."""

from train_ics.domain.models.event import Event
from train_ics.domain.models.journey import Journey
from train_ics.domain.models.leg import Leg
from train_ics.domain.models.line import Line, Operator
from train_ics.domain.models.link_options import LinkOptions
from train_ics.domain.models.remark import Remark
from train_ics.domain.models.stop import Stop
from train_ics.domain.models.stopover import Stopover
from train_ics.domain.models.transport import NON_EVENT_MODES, PRODUCTS, TRANSPORT_MODES

__all__ = [
    "NON_EVENT_MODES",
    "PRODUCTS",
    "TRANSPORT_MODES",
    "Event",
    "Journey",
    "Leg",
    "Line",
    "LinkOptions",
    "Operator",
    "Remark",
    "Stop",
    "Stopover",
]
