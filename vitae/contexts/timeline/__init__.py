"""
Timeline Context

Responsibilities:
- Resolves year-month and open-ended ("present", "future") dates
- Packs overlapping entries into columns and centers overlap clusters
- Maps months to pixels with zoom zones and a minimum card height
- Holds per-session view state (filters, scale, zoom zones, axis direction)

Owns: Timeline layout and its view state
Never: Reads or writes the resume document's storage
"""

from vitae.contexts.timeline.dates import (
    FUTURE,
    PRESENT,
    is_projected,
    months_duration,
    resolve_for_bounds,
    resolve_for_ordering,
)
from vitae.contexts.timeline.layout_engine import (
    ItemGeometry,
    MonthTick,
    TimelineLayout,
    YearTick,
    compute_layout,
    mirror_top,
)
from vitae.contexts.timeline.packing import ItemLayout, VisualInterval, assign_columns_with_layout
from vitae.contexts.timeline.scale import ScaleConfig, ScaleMap, ZoomZone, clamp_pixels_per_month
from vitae.contexts.timeline.session import TimelineSession

__all__ = [
    # Date resolution
    "PRESENT",
    "FUTURE",
    "resolve_for_ordering",
    "resolve_for_bounds",
    "is_projected",
    "months_duration",
    # Scale
    "ScaleConfig",
    "ScaleMap",
    "ZoomZone",
    "clamp_pixels_per_month",
    # Packing and layout
    "VisualInterval",
    "ItemLayout",
    "assign_columns_with_layout",
    "ItemGeometry",
    "YearTick",
    "MonthTick",
    "TimelineLayout",
    "compute_layout",
    "mirror_top",
    # View state
    "TimelineSession",
]
