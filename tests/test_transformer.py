"""Tests for converting legs and journeys into events."""

from dataclasses import replace
from datetime import datetime, timedelta

import pytest

from train_ics.application.transformer import calendar_title, journey_to_events, leg_to_event
from train_ics.domain.exceptions import InvalidJourneyError
from train_ics.domain.models import (
    Event,
    Journey,
    Leg,
    Line,
    LinkOptions,
    Operator,
    Remark,
    Stop,
    Stopover,
)


def ts(value: str) -> datetime:
    """Parse an ISO 8601 timestamp."""
    return datetime.fromisoformat(value)


def make_leg(**overrides: object) -> Leg:
    """Create a simple regional train leg, Beginn 22:00 -> Ende 22:30."""
    leg = Leg(
        origin=Stop(name="Beginn", id="8000001"),
        destination=Stop(name="Ende", id="8000002"),
        mode="train",
        departure=ts("2021-10-16T22:00:00+02:00"),
        arrival=ts("2021-10-16T22:30:00+02:00"),
        line=Line(
            name="RE 1",
            product="regional",
            product_name="RE",
            fahrt_nr="10123",
            operator=Operator(name="DB Regio NRW"),
        ),
        trip_id="1|123|0|80|16102021",
    )
    return replace(leg, **overrides)  # type: ignore[arg-type]


def make_stopover(name: str, arrival: str | None, departure: str | None, **delays: int) -> Stopover:
    """Create a stopover with optional arrival/departure times on 2021-10-16 (+02:00)."""
    return Stopover(
        stop=Stop(name=name, id="90420"),
        arrival=ts(f"2021-10-16T{arrival}:00+02:00") if arrival else None,
        departure=ts(f"2021-10-16T{departure}:00+02:00") if departure else None,
        arrival_delay=delays.get("arrival_delay"),
        departure_delay=delays.get("departure_delay"),
    )


BASE_EVENT = Event(
    summary="🚆 RE 1: Beginn -> Ende",
    description="Betreiber: DB Regio NRW",
    location="Beginn",
    start=ts("2021-10-16T22:00:00+02:00"),
    end=ts("2021-10-16T22:30:00+02:00"),
)


def with_endpoints(*stopovers: Stopover) -> tuple[Stopover, ...]:
    """Surround intermediate stopovers with the leg's origin and destination."""
    return (
        make_stopover("Beginn", None, "22:00"),
        *stopovers,
        make_stopover("Ende", "22:30", None),
    )


def test_simple_leg() -> None:
    """Given a simple regional train leg, when converting, then summary and description are minimal."""
    assert leg_to_event(make_leg()) == BASE_EVENT


def test_platforms_are_shown() -> None:
    """Given platforms, when converting, then they follow the stop names in the summary."""
    leg = make_leg(departure_platform="104 D-G", arrival_platform="9 3/4")

    event = leg_to_event(leg)

    assert event == replace(
        BASE_EVENT, summary="🚆 RE 1: Beginn (Gl. 104 D-G) -> Ende (Gl. 9 3/4)"
    )


def test_delays_shift_start_and_end() -> None:
    """Given ten minute delays on both ends, when converting, then start and end move by ten minutes."""
    leg = make_leg(departure_delay=600, arrival_delay=600)

    event = leg_to_event(leg)

    assert event == replace(
        BASE_EVENT,
        start=ts("2021-10-16T22:10:00+02:00"),
        end=ts("2021-10-16T22:40:00+02:00"),
    )


@pytest.mark.parametrize("delay", [None, 0])
def test_missing_or_zero_delay_keeps_times(delay: int | None) -> None:
    """Given no delay, when converting, then start and end equal the scheduled times."""
    event = leg_to_event(make_leg(departure_delay=delay, arrival_delay=delay))

    assert event is not None
    assert event.start == BASE_EVENT.start
    assert event.end == BASE_EVENT.end


@pytest.mark.parametrize("delay", [None, 0])
def test_offset_does_not_shift_undelayed_leg(delay: int | None) -> None:
    """Given an offset but no delay, when converting, then start and end stay at the scheduled times."""
    leg = make_leg(departure_delay=delay, arrival_delay=delay)

    event = leg_to_event(leg, departure_tz_offset=60)

    assert event is not None
    assert event.start == BASE_EVENT.start
    assert event.end == BASE_EVENT.end


def test_offset_applies_only_to_delayed_side() -> None:
    """Given an offset and a delay on departure only, when converting, then only the start is corrected."""
    event = leg_to_event(make_leg(departure_delay=600, arrival_delay=None), departure_tz_offset=60)

    assert event is not None
    assert event.start == BASE_EVENT.start + timedelta(minutes=10 - 60)
    assert event.end == BASE_EVENT.end


def test_departure_tz_offset_is_subtracted_from_delay() -> None:
    """Given an offset of 60 minutes, when converting, then times move by delay minus offset."""
    leg = make_leg(departure_delay=300, arrival_delay=120)

    event = leg_to_event(leg, departure_tz_offset=60)

    assert event is not None
    assert event.start == BASE_EVENT.start + timedelta(minutes=5 - 60)
    assert event.end == BASE_EVENT.end + timedelta(minutes=2 - 60)


def test_planned_times_are_used_without_actual_times() -> None:
    """Given only planned times, when converting, then they become start and end."""
    leg = make_leg(
        departure=None,
        planned_departure=ts("2021-10-16T21:55:00+02:00"),
        arrival=None,
        planned_arrival=ts("2021-10-16T22:25:00+02:00"),
    )

    event = leg_to_event(leg)

    assert event is not None
    assert event.start == ts("2021-10-16T21:55:00+02:00")
    assert event.end == ts("2021-10-16T22:25:00+02:00")


def test_leg_without_any_departure_raises() -> None:
    """Given a leg without departure times, when converting, then InvalidJourneyError is raised."""
    with pytest.raises(InvalidJourneyError):
        leg_to_event(make_leg(departure=None, planned_departure=None))


@pytest.mark.parametrize(
    "overrides",
    [{"mode": "walking"}, {"mode": "bicycle"}, {"walking": True}],
)
def test_walking_and_cycling_legs_are_skipped(overrides: dict[str, object]) -> None:
    """Given a walking or cycling leg, when converting, then no event is produced."""
    assert leg_to_event(make_leg(**overrides)) is None


class TestStopovers:
    """Tests for the intermediate stop section of the description."""

    def test_one_stopover(self) -> None:
        """Given one intermediate stop, when converting, then the singular header is used."""
        leg = make_leg(stopovers=with_endpoints(make_stopover("Stopover1", "22:10", "22:11")))

        event = leg_to_event(leg)

        assert event == replace(
            BASE_EVENT,
            description="Betreiber: DB Regio NRW\nZwischenstop: Stopover1 (an: 22:10, ab: 22:11)",
        )

    def test_more_than_one_stopover(self) -> None:
        """Given two intermediate stops, when converting, then the plural header is used."""
        leg = make_leg(
            stopovers=with_endpoints(
                make_stopover("Stopover1", "22:10", "22:11"),
                make_stopover("Stopover2", "22:20", "22:21"),
            )
        )

        event = leg_to_event(leg)

        assert event is not None
        assert event.description == (
            "Betreiber: DB Regio NRW\nZwischenstops: "
            "Stopover1 (an: 22:10, ab: 22:11), Stopover2 (an: 22:20, ab: 22:21)"
        )

    def test_stopover_with_delay(self) -> None:
        """Given a delayed intermediate stop, when converting, then delays are appended in minutes."""
        leg = make_leg(
            stopovers=with_endpoints(
                make_stopover(
                    "Stopover1", "22:10", "22:11", arrival_delay=300, departure_delay=300
                )
            )
        )

        event = leg_to_event(leg)

        assert event is not None
        assert event.description.endswith(
            "\nZwischenstop: Stopover1 (an: 22:10 + 5min, ab: 22:11 + 5min)"
        )

    def test_only_origin_and_destination(self) -> None:
        """Given stopovers holding only origin and destination, when converting, then no section is added."""
        leg = make_leg(stopovers=with_endpoints())

        event = leg_to_event(leg)

        assert event is not None
        assert "Zwischenstop" not in event.description

    def test_stopovers_are_not_modified(self) -> None:
        """Given a leg with stopovers, when converting twice, then the result is the same."""
        leg = make_leg(stopovers=with_endpoints(make_stopover("Stopover1", "22:10", "22:11")))

        assert leg_to_event(leg) == leg_to_event(leg)
        assert len(leg.stopovers) == 3


def test_cancelled_leg() -> None:
    """Given a cancelled leg, when converting, then glyph and banner mark the cancellation."""
    event = leg_to_event(make_leg(cancelled=True))

    assert event is not None
    assert event.summary == "🚆⛔ RE 1: Beginn -> Ende"
    assert event.description == "🚨🚨 Achtung! Zug fällt aus! 🚨🚨\n\nBetreiber: DB Regio NRW"


def test_missing_operator_is_omitted() -> None:
    """Given a line without operator, when converting, then the description has no operator line."""
    event = leg_to_event(make_leg(line=Line(name="RE 1", product="regional")))

    assert event is not None
    assert event.description == ""


def test_product_glyph_wins_over_mode() -> None:
    """Given an ICE line on a train leg, when converting, then the product glyph is used."""
    event = leg_to_event(make_leg(line=Line(name="ICE 23", product="nationalExpress")))

    assert event is not None
    assert event.summary.startswith("🚅 ICE 23:")


def test_links_are_appended_in_fixed_order() -> None:
    """Given all link toggles, when converting, then links appear before remarks in a fixed order."""
    leg = make_leg(remarks=(Remark(type="hint", code="wifi", text="WLAN verfügbar"),))
    links = LinkOptions(include_traewelling=True, include_travelynx=True, include_marudor=True)

    event = leg_to_event(leg, links=links)

    assert event is not None
    description = event.description
    assert description.startswith("Betreiber: DB Regio NRW\n\nTräwelling-Check In: ")
    assert (
        description.index("Träwelling")
        < description.index("Travelynx")
        < description.index("Marudor")
        < description.index("Hinweise")
    )
    assert description.endswith("\n\nHinweise:\n📡 WLAN verfügbar")


def test_marudor_link_skipped_for_unsupported_product() -> None:
    """Given a bus leg with the marudor toggle, when converting, then no marudor link is added."""
    leg = make_leg(mode="bus", line=Line(name="Bus 59", product="bus"))

    event = leg_to_event(leg, links=LinkOptions(include_marudor=True))

    assert event is not None
    assert "Marudor" not in event.description
    assert event.summary == "🚌 Bus 59: Beginn -> Ende"


def test_journey_to_events_filters_walking_legs() -> None:
    """Given a journey with a walking transfer, when converting, then only rides become events."""
    journey = Journey(
        legs=(
            make_leg(),
            make_leg(
                mode="walking",
                walking=True,
                line=None,
                origin=Stop(name="Ende"),
                destination=Stop(name="Bushof"),
            ),
            make_leg(origin=Stop(name="Bushof"), destination=Stop(name="Ziel")),
        )
    )

    events = journey_to_events(journey)

    assert [e.location for e in events] == ["Beginn", "Bushof"]


def test_calendar_title() -> None:
    """Given a journey, when naming the calendar, then first origin and last destination are used."""
    journey = Journey(
        legs=(make_leg(), make_leg(origin=Stop(name="Ende"), destination=Stop(name="Ziel")))
    )

    assert calendar_title(journey) == "Reise von Beginn nach Ziel"
