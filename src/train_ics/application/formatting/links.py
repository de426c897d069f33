"""Deep links to third-party trip tracking services."""

from urllib.parse import quote, urlencode

from train_ics.domain.models.leg import Leg

TRAEWELLING_BASE_URL = "https://traewelling.de/trains/trip?"
TRAVELYNX_BASE_URL = "https://travelynx.de/s/"
MARUDOR_BASE_URL = "https://marudor.de/api/hafas/v1/detailsRedirect/"

# marudor.de only offers details for these products
MARUDOR_PRODUCTS = frozenset(
    {"national", "nationalExpress", "regional", "regionalExpress", "suburban"}
)

# Characters left alone by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def traewelling_link(leg: Leg) -> str:
    """Link to the Träwelling check-in page for this trip."""
    departure = leg.departure or leg.planned_departure
    args = {
        "tripID": leg.trip_id or "",
        "lineName": leg.line.name if leg.line else "",
        "start": leg.origin.id or "",
        "departure": departure.isoformat() if departure else "",
    }
    return f"\n\nTräwelling-Check In: {TRAEWELLING_BASE_URL}{urlencode(args)}"


def travelynx_link(leg: Leg) -> str:
    """Link to the Travelynx trip page, identified by product name and service number."""
    product_name = (leg.line.product_name if leg.line else None) or ""
    fahrt_nr = (leg.line.fahrt_nr if leg.line else None) or ""
    train = _encode_component(f"{product_name} {fahrt_nr}".strip())
    return f"\n\nTravelynx-Link: {TRAVELYNX_BASE_URL}{leg.origin.id or ''}?train={train}"


def marudor_link(leg: Leg) -> str:
    """Link to the marudor.de trip details, empty for unsupported products."""
    product = leg.line.product if leg.line else None
    if product not in MARUDOR_PRODUCTS:
        return ""
    return f"\n\nMarudor-Link: {MARUDOR_BASE_URL}{_encode_component(leg.trip_id or '')}"
