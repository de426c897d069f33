"""Text fragments used to build event summaries and descriptions."""

from train_ics.application.formatting.dates import date_with_delay, to_short_time
from train_ics.application.formatting.glyphs import cancelled_banner, cancelled_glyph, mode_glyph
from train_ics.application.formatting.links import marudor_link, traewelling_link, travelynx_link
from train_ics.application.formatting.remarks import format_remarks, remark_glyph
from train_ics.application.formatting.stopovers import format_stopovers, intermediate_stopovers

__all__ = [
    "cancelled_banner",
    "cancelled_glyph",
    "date_with_delay",
    "format_remarks",
    "format_stopovers",
    "intermediate_stopovers",
    "marudor_link",
    "mode_glyph",
    "remark_glyph",
    "to_short_time",
    "traewelling_link",
    "travelynx_link",
]
