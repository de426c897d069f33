"""Emoji classification and text for leg remarks.

Remarks are matched against ``REMARK_RULES`` from top to bottom and the first
matching rule decides the glyph. Code based rules come first, then rules on the
free text, and finally the remark type.
"""

import logging
from collections.abc import Callable, Sequence

from train_ics.domain.models.remark import Remark

logger = logging.getLogger(__name__)

UNKNOWN_REMARK_GLYPH = "⚠️"

RemarkPredicate = Callable[[Remark], bool]


def _code_in(*codes: str) -> RemarkPredicate:
    return lambda r: r.code in codes


def _code_contains(*parts: str) -> RemarkPredicate:
    return lambda r: r.code is not None and any(p in r.code for p in parts)


def _code_contains_ignore_case(*parts: str) -> RemarkPredicate:
    return lambda r: r.code is not None and any(p in r.code.lower() for p in parts)


def _text_contains(*parts: str) -> RemarkPredicate:
    return lambda r: r.text is not None and any(p in r.text for p in parts)


def _text_contains_ignore_case(*parts: str) -> RemarkPredicate:
    return lambda r: r.text is not None and any(p in r.text.lower() for p in parts)


def _any_of(*predicates: RemarkPredicate) -> RemarkPredicate:
    return lambda r: any(p(r) for p in predicates)


def _type_is(remark_type: str) -> RemarkPredicate:
    return lambda r: r.type == remark_type


REMARK_RULES: tuple[tuple[RemarkPredicate, str], ...] = (
    (_code_in("on-board-restaurant", "on-board-bistro", "KG", "BW", "MN"), "🍴"),
    (_code_in("55"), "🚭"),
    (_any_of(_text_contains_ignore_case("mask"), _code_in("3G")), "🤿"),
    (_code_in("komfort-checkin"), "🧸"),
    (_code_in("wifi"), "📡"),
    (_code_in("power-sockets"), "🔌"),
    (_code_in("GL"), "👥"),
    (_code_in("SL"), "🛏️"),
    (_code_in("ice-sprinter"), "⚡"),
    (_code_in("journey-cancelled"), "⛔"),
    (_code_in("snacks"), "🥨"),
    (_code_in("parents-childrens-compartment"), "👪"),
    (_code_in("SA"), "🍼"),
    (
        _any_of(
            _code_in("boarding-ramp", "EA", "EI", "ER"),
            _code_contains_ignore_case("wheelchairs", "barrier"),
        ),
        "♿",
    ),
    (_code_contains("bicycle"), "🚲"),
    (_text_contains("WC", "toilette", "restroom"), "🚾"),
    (_text_contains("Baustelle", "Baumaßnahmen", "construction"), "🚧"),
    (_text_contains_ignore_case("krank"), "🤒"),
    (_type_is("hint"), "ℹ️"),
    (_type_is("warning"), "⚠️"),
    (_type_is("status"), "📜"),
)


def remark_glyph(remark: Remark) -> str:
    """Return the emoji of the first rule matching ``remark``.

    Unknown remarks get a generic warning sign and are logged, they never
    abort the conversion.
    """
    for predicate, glyph in REMARK_RULES:
        if predicate(remark):
            return glyph

    logger.warning(f"Found unknown remark type: {remark!r}")
    return UNKNOWN_REMARK_GLYPH


def format_remarks(remarks: Sequence[Remark] | None) -> str:
    """Build the "Hinweise" section, one remark per line."""
    if not remarks:
        return ""

    lines = "\n".join(f"{remark_glyph(r)} {r.text or ''}" for r in remarks)
    return f"\n\nHinweise:\n{lines}"
