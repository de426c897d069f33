"""Parser for journey responses in hafas-client / transport.rest format."""

import logging
from datetime import datetime
from typing import Any

from train_ics.domain.exceptions import InvalidJourneyError
from train_ics.domain.models import (
    PRODUCTS,
    TRANSPORT_MODES,
    Journey,
    Leg,
    Line,
    Operator,
    Remark,
    Stop,
    Stopover,
)

logger = logging.getLogger(__name__)


class JourneyParser:
    """Parses hafas-client journey dictionaries into Journey objects."""

    @staticmethod
    def parse_journey(data: Any) -> Journey:
        """Parse a journey.

        Args:
            data: Decoded JSON, either a journey object or ``{"journey": {...}}``.

        Returns:
            Journey with all legs parsed.

        Raises:
            InvalidJourneyError: If the data has no legs or a leg lacks its times.
        """
        if not isinstance(data, dict):
            raise InvalidJourneyError("Journey data must be a JSON object")
        if "legs" not in data and isinstance(data.get("journey"), dict):
            data = data["journey"]

        legs_data = data.get("legs")
        if not isinstance(legs_data, list) or not legs_data:
            raise InvalidJourneyError("Journey has no legs")

        legs = tuple(
            JourneyParser._parse_leg(leg, index) for index, leg in enumerate(legs_data)
        )
        logger.debug(f"Parsed journey with {len(legs)} leg(s)")
        return Journey(legs=legs)

    @staticmethod
    def _parse_leg(leg: Any, index: int) -> Leg:
        """Parse a single leg into a Leg object."""
        if not isinstance(leg, dict):
            raise InvalidJourneyError(f"Leg {index} must be a JSON object")

        departure = JourneyParser._parse_time(leg.get("departure"))
        planned_departure = JourneyParser._parse_time(leg.get("plannedDeparture"))
        arrival = JourneyParser._parse_time(leg.get("arrival"))
        planned_arrival = JourneyParser._parse_time(leg.get("plannedArrival"))
        if not departure and not planned_departure:
            raise InvalidJourneyError(f"Leg {index} has neither departure nor plannedDeparture")
        if not arrival and not planned_arrival:
            raise InvalidJourneyError(f"Leg {index} has neither arrival nor plannedArrival")

        line = JourneyParser._parse_line(leg.get("line"))
        walking = bool(leg.get("walking", False))

        return Leg(
            origin=JourneyParser._parse_stop(leg.get("origin"), f"Leg {index} origin"),
            destination=JourneyParser._parse_stop(
                leg.get("destination"), f"Leg {index} destination"
            ),
            mode=JourneyParser._get_mode(leg, line, walking),
            departure=departure,
            planned_departure=planned_departure,
            departure_delay=JourneyParser._parse_delay(leg.get("departureDelay")),
            arrival=arrival,
            planned_arrival=planned_arrival,
            arrival_delay=JourneyParser._parse_delay(leg.get("arrivalDelay")),
            line=line,
            departure_platform=JourneyParser._parse_platform(leg.get("departurePlatform")),
            arrival_platform=JourneyParser._parse_platform(leg.get("arrivalPlatform")),
            cancelled=bool(leg.get("cancelled", False)),
            walking=walking,
            trip_id=leg.get("tripId"),
            stopovers=tuple(
                JourneyParser._parse_stopover(s) for s in leg.get("stopovers") or []
            ),
            remarks=tuple(
                JourneyParser._parse_remark(r)
                for r in leg.get("remarks") or []
                if isinstance(r, dict)
            ),
        )

    @staticmethod
    def _get_mode(leg: dict[str, Any], line: Line | None, walking: bool) -> str:
        """Determine the transport mode from the leg, its line or the walking flag."""
        mode = leg.get("mode") or (line.mode if line else None)
        if not mode:
            return "walking" if walking else "train"
        if mode not in TRANSPORT_MODES:
            logger.debug(f"Unknown transport mode '{mode}', keeping it as is")
        return str(mode)

    @staticmethod
    def _parse_stop(stop: Any, context: str) -> Stop:
        """Parse a stop, station or location object."""
        if not isinstance(stop, dict) or not stop.get("name"):
            raise InvalidJourneyError(f"{context} has no name")
        stop_id = stop.get("id")
        return Stop(name=str(stop["name"]), id=str(stop_id) if stop_id is not None else None)

    @staticmethod
    def _parse_line(line: Any) -> Line | None:
        """Parse line information including its operator."""
        if not isinstance(line, dict):
            return None

        operator = None
        operator_data = line.get("operator")
        if isinstance(operator_data, dict) and operator_data.get("name"):
            operator = Operator(name=operator_data["name"], id=operator_data.get("id"))

        product = line.get("product")
        if product and product not in PRODUCTS:
            logger.debug(f"Unknown product '{product}', keeping it as is")

        fahrt_nr = line.get("fahrtNr")
        return Line(
            name=line.get("name") or "",
            product=product,
            product_name=line.get("productName"),
            fahrt_nr=str(fahrt_nr) if fahrt_nr is not None else None,
            operator=operator,
            mode=line.get("mode"),
        )

    @staticmethod
    def _parse_stopover(stopover: Any) -> Stopover:
        """Parse an intermediate stop with its times and delays."""
        if not isinstance(stopover, dict):
            raise InvalidJourneyError("Stopover must be a JSON object")
        return Stopover(
            stop=JourneyParser._parse_stop(stopover.get("stop"), "Stopover"),
            arrival=JourneyParser._parse_time(stopover.get("arrival")),
            arrival_delay=JourneyParser._parse_delay(stopover.get("arrivalDelay")),
            departure=JourneyParser._parse_time(stopover.get("departure")),
            departure_delay=JourneyParser._parse_delay(stopover.get("departureDelay")),
        )

    @staticmethod
    def _parse_remark(remark: dict[str, Any]) -> Remark:
        """Parse a remark, keeping type, code and text as given."""
        code = remark.get("code")
        return Remark(
            type=remark.get("type"),
            code=str(code) if code is not None else None,
            text=remark.get("text"),
        )

    @staticmethod
    def _parse_time(time_str: Any) -> datetime | None:
        """Parse ISO 8601 time string."""
        if not time_str:
            return None

        try:
            return datetime.fromisoformat(str(time_str).replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidJourneyError(f"Invalid timestamp: {time_str!r}") from e

    @staticmethod
    def _parse_delay(delay: Any) -> int | None:
        """Parse a delay in seconds."""
        if delay is None:
            return None

        try:
            return int(delay)
        except (ValueError, TypeError):
            logger.warning(f"Ignoring invalid delay value: {delay!r}")
            return None

    @staticmethod
    def _parse_platform(platform: Any) -> str | None:
        """Parse a platform, keeping its full text (e.g. "104 D-G")."""
        if platform is None:
            return None
        platform_str = str(platform).strip()
        return platform_str or None
