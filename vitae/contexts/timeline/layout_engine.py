"""
Timeline layout engine.

Turns a list of dated entries plus a scale configuration into column
placements, pixel geometry and axis ticks. A pure function of its inputs: the
engine keeps no state between calls and never raises for expected conditions.

Pass outline:
- Resolve start (ordering) and end (bounds) dates; unparseable values are
  replaced with the earliest known bound so one bad entry cannot poison the pass
- Timeline bounds: earliest start to latest end, inclusive month count
- Visual intervals: start offset and max(min_visual_months, duration)
- Column packing (see packing.py)
- Pixel geometry through a zoom-aware ScaleMap, mirrored when reversed
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence

from vitae.contexts.timeline.config import get_timeline_settings
from vitae.contexts.timeline.dates import (
    add_months,
    inclusive_months,
    is_projected,
    month_start,
    months_between,
    resolve_for_bounds,
    resolve_for_ordering,
)
from vitae.contexts.timeline.logger import log_layout_pass, log_unparseable_date
from vitae.contexts.timeline.packing import ItemLayout, VisualInterval, assign_columns_with_layout
from vitae.contexts.timeline.scale import ScaleConfig, ScaleMap
from vitae.utils.timestamp import today

MAX_COLUMN_WIDTH_PERCENT = 50.0


@dataclass(frozen=True)
class ItemGeometry:
    """
    Pixel placement of a single entry card.

    Attributes:
        top: Distance from the top of the timeline lane (px)
        height: Card height (px), never below the configured floor
        left: Left edge as a percentage of the lane width
        width: Width as a percentage of the lane width
        is_projected: Entry ends in the future (rendering hint only)
    """

    top: float
    height: float
    left: float
    width: float
    is_projected: bool = False


@dataclass(frozen=True)
class YearTick:
    year: int
    offset: float
    is_zoomed: bool


@dataclass(frozen=True)
class MonthTick:
    month_index: int
    offset: float
    is_zoomed: bool


@dataclass(frozen=True)
class TimelineBounds:
    min_date: date
    max_date: date
    total_months: int


@dataclass
class TimelineLayout:
    """
    Result of one layout pass.

    Attributes:
        layouts: Column placement per entry id
        geometry: Pixel geometry per entry id
        total_height: Rendered height of the whole timeline (px)
        total_months: Inclusive month span (0 for an empty timeline)
        column_count: Global number of columns (1 for an empty timeline)
        year_ticks: Major axis markers, one per calendar year in range
        month_ticks: Minor axis markers for every non-January month
        min_date: First month of the timeline
        max_date: Last month of the timeline
    """

    layouts: Dict[str, ItemLayout] = field(default_factory=dict)
    geometry: Dict[str, ItemGeometry] = field(default_factory=dict)
    total_height: float = 0.0
    total_months: int = 0
    column_count: int = 1
    year_ticks: List[YearTick] = field(default_factory=list)
    month_ticks: List[MonthTick] = field(default_factory=list)
    min_date: Optional[date] = None
    max_date: Optional[date] = None

    @property
    def is_empty(self) -> bool:
        return not self.layouts


@dataclass(frozen=True)
class _ResolvedEntry:
    item_id: str
    start: date
    end: date
    projected: bool


def column_width_percent(column_count: int) -> float:
    """Width of one column, capped at half the lane even when only one column exists."""
    return min(100.0 / max(column_count, 1), MAX_COLUMN_WIDTH_PERCENT)


def column_left_percent(layout: ItemLayout, width: float) -> float:
    """Left edge of an entry with its overlap cluster centered in the lane."""
    centering_offset = (100.0 - width * layout.local_column_count) / 2
    return centering_offset + layout.local_column_offset * width


def mirror_top(top: float, height: float, total_height: float) -> float:
    """Flip a card's top across the timeline axis (applying it twice is the identity)."""
    return total_height - top - height


def _resolve_entries(
    entries: Sequence, now: date, horizon_months: int
) -> List[_ResolvedEntry]:
    starts = {e.id: resolve_for_ordering(e.start_date, now) for e in entries}
    ends = {e.id: resolve_for_bounds(e.end_date, now, horizon_months) for e in entries}

    known = [d for d in list(starts.values()) + list(ends.values()) if d is not None]
    earliest = min(known) if known else month_start(now)

    resolved = []
    for entry in entries:
        start = starts[entry.id]
        if start is None:
            log_unparseable_date(entry.id, "start date", entry.start_date, earliest)
            start = earliest

        end = ends[entry.id]
        if end is None:
            log_unparseable_date(entry.id, "end date", entry.end_date, start)
            end = start

        resolved.append(
            _ResolvedEntry(
                item_id=entry.id,
                start=start,
                end=end,
                projected=is_projected(entry.end_date, now),
            )
        )
    return resolved


def compute_timeline_bounds(resolved: Sequence[_ResolvedEntry]) -> Optional[TimelineBounds]:
    """Earliest start, latest end (or start) and the inclusive month span between them."""
    if not resolved:
        return None

    min_date = min(r.start for r in resolved)
    max_date = max(max(r.start, r.end) for r in resolved)
    return TimelineBounds(
        min_date=min_date,
        max_date=max_date,
        total_months=months_between(min_date, max_date) + 1,
    )


def _year_ticks(
    bounds: TimelineBounds,
    scale_map: ScaleMap,
    scale_config: ScaleConfig,
    total_height: float,
    reversed_axis: bool,
) -> List[YearTick]:
    ticks = []
    for year in range(bounds.min_date.year, bounds.max_date.year + 1):
        months_from_start = months_between(bounds.min_date, date(year, 1, 1))
        offset = scale_map.pixel_offset(max(0, months_from_start))
        ticks.append(
            YearTick(
                year=year,
                offset=total_height - offset if reversed_axis else offset,
                is_zoomed=scale_config.is_zoomed(year),
            )
        )
    return ticks


def _month_ticks(
    bounds: TimelineBounds,
    scale_map: ScaleMap,
    scale_config: ScaleConfig,
    total_height: float,
    reversed_axis: bool,
) -> List[MonthTick]:
    ticks = []
    for idx in range(bounds.total_months):
        month = add_months(bounds.min_date, idx)
        # January is covered by the year marker
        if month.month == 1:
            continue
        offset = scale_map.pixel_offset(idx)
        ticks.append(
            MonthTick(
                month_index=idx,
                offset=total_height - offset if reversed_axis else offset,
                is_zoomed=scale_config.is_zoomed(month.year),
            )
        )
    return ticks


def compute_layout(
    entries: Sequence,
    scale_config: ScaleConfig,
    reversed: bool = False,
    now: Optional[date] = None,
    horizon_months: Optional[int] = None,
) -> TimelineLayout:
    """
    Run one layout pass.

    Args:
        entries: Visible entries (already filtered by category). Only `id`,
                 `start_date` and `end_date` are read.
        scale_config: Base scale, height floor and zoom zones
        reversed: Newest-at-top axis instead of chronological top-down
        now: Evaluation moment for "present" and "future" (defaults to today)
        horizon_months: Reach of "future" end dates (defaults to configured value)

    Returns:
        TimelineLayout with placements, geometry, total height and axis ticks.
        An empty entry list yields a zero-height layout.
    """
    now = now or today()
    if horizon_months is None:
        horizon_months = get_timeline_settings().future_horizon_months

    resolved = _resolve_entries(entries, now, horizon_months)
    bounds = compute_timeline_bounds(resolved)
    if bounds is None:
        return TimelineLayout()

    min_visual_months = scale_config.min_visual_months
    intervals = []
    for entry in resolved:
        start = months_between(bounds.min_date, entry.start)
        duration = inclusive_months(entry.start, entry.end)
        intervals.append(
            VisualInterval(
                item_id=entry.item_id,
                start=start,
                end=start + max(min_visual_months, duration),
            )
        )

    layouts, column_count = assign_columns_with_layout(intervals)

    scale_map = ScaleMap(bounds.min_date, bounds.total_months, scale_config)
    total_height = scale_map.total_height
    width = column_width_percent(column_count)

    projected = {entry.item_id: entry.projected for entry in resolved}
    geometry = {}
    for interval in intervals:
        height = max(
            scale_config.min_item_height_px,
            scale_map.span_height(interval.start, interval.end - interval.start),
        )
        top = scale_map.pixel_offset(interval.start)
        if reversed:
            top = mirror_top(top, height, total_height)

        layout = layouts[interval.item_id]
        geometry[interval.item_id] = ItemGeometry(
            top=top,
            height=height,
            left=column_left_percent(layout, width),
            width=width,
            is_projected=projected[interval.item_id],
        )

    result = TimelineLayout(
        layouts=layouts,
        geometry=geometry,
        total_height=total_height,
        total_months=bounds.total_months,
        column_count=column_count,
        year_ticks=_year_ticks(bounds, scale_map, scale_config, total_height, reversed),
        month_ticks=_month_ticks(bounds, scale_map, scale_config, total_height, reversed),
        min_date=bounds.min_date,
        max_date=bounds.max_date,
    )
    log_layout_pass(result, reversed)
    return result
