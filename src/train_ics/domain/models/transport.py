"""Known transport modes and products."""

TRANSPORT_MODES = frozenset(
    {
        "train",
        "bus",
        "watercraft",
        "taxi",
        "gondola",
        "aircraft",
        "car",
        "bicycle",
        "walking",
    }
)

PRODUCTS = frozenset(
    {
        "regional",
        "regionalExpress",
        "suburban",
        "national",
        "nationalExpress",
        "bus",
        "subway",
        "tram",
    }
)

# Legs in these modes are transfers and never become calendar events
NON_EVENT_MODES = frozenset({"walking", "bicycle"})
