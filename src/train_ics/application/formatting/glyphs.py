"""Emoji for transport modes and cancellations."""

from train_ics.domain.models.leg import Leg

DEFAULT_GLYPH = "🚆"

# Product glyphs take precedence over mode glyphs
PRODUCT_GLYPHS = {
    "bus": "🚌",
    "national": "🚄",
    "nationalExpress": "🚅",
    "subway": "🚇",
    "tram": "🚊",
}

MODE_GLYPHS = {
    "train": DEFAULT_GLYPH,
    "bus": "🚌",
    "watercraft": "🚢",
    "taxi": "🚕",
    "gondola": "🚡",
    "aircraft": "✈️",
    "car": "🚗",
    "bicycle": "🚲",
    "walking": "🚶",
}

CANCELLED_GLYPH = "⛔"
CANCELLED_BANNER = "🚨🚨 Achtung! Zug fällt aus! 🚨🚨\n\n"


def mode_glyph(leg: Leg) -> str:
    """Pick the emoji for a leg, preferring the line product over the mode."""
    product = leg.line.product if leg.line else None
    if product and product in PRODUCT_GLYPHS:
        return PRODUCT_GLYPHS[product]
    return MODE_GLYPHS.get(leg.mode, DEFAULT_GLYPH)


def cancelled_glyph(leg: Leg) -> str:
    return CANCELLED_GLYPH if leg.cancelled else ""


def cancelled_banner(leg: Leg) -> str:
    return CANCELLED_BANNER if leg.cancelled else ""
