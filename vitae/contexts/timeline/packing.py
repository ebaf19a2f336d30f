"""
Column packing for overlapping timeline entries.

Two passes:

1. Greedy first-fit by column index. Entries are taken in start order (stable,
   so equal starts keep their input order) and placed in the lowest-numbered
   column whose last visual end is at or before the entry's visual start. A new
   column opens when none fits.
2. Overlap clusters. For each entry, collect every entry whose visual interval
   strictly overlaps its own; the distinct columns in that set give the local
   column count and this entry's rank among them, which the renderer uses to
   center narrow clusters instead of pinning them to global column slots.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple


@dataclass(frozen=True)
class VisualInterval:
    """
    An entry's span in month-space after the minimum-height floor.

    Attributes:
        item_id: Entry id
        start: Months from the timeline's first month
        end: start + visual duration
    """

    item_id: str
    start: float
    end: float

    def overlaps(self, other: "VisualInterval") -> bool:
        return other.start < self.end and other.end > self.start


@dataclass(frozen=True)
class ItemLayout:
    """
    Column placement of a single entry.

    Attributes:
        column: Global 0-based column index
        local_column_count: Distinct columns occupied within the entry's overlap cluster
        local_column_offset: Rank of the entry's column among those columns
    """

    column: int
    local_column_count: int
    local_column_offset: int


def assign_columns(intervals: Sequence[VisualInterval]) -> Tuple[Dict[str, int], int]:
    """
    First pass: greedy first-fit column assignment.

    Returns:
        (column per item id, number of columns opened)
    """
    column_visual_ends: List[float] = []
    columns: Dict[str, int] = {}

    for interval in sorted(intervals, key=lambda iv: iv.start):
        assigned = next(
            (col for col, end in enumerate(column_visual_ends) if end <= interval.start),
            None,
        )
        if assigned is None:
            assigned = len(column_visual_ends)
            column_visual_ends.append(interval.end)
        else:
            column_visual_ends[assigned] = interval.end
        columns[interval.item_id] = assigned

    return columns, len(column_visual_ends)


def assign_columns_with_layout(
    intervals: Sequence[VisualInterval],
) -> Tuple[Dict[str, ItemLayout], int]:
    """
    Pack intervals into columns and compute per-entry cluster placement.

    Args:
        intervals: Visual intervals in input order

    Returns:
        (ItemLayout per item id, global column count)
    """
    columns, column_count = assign_columns(intervals)

    layouts: Dict[str, ItemLayout] = {}
    for interval in intervals:
        used_columns = sorted(
            {columns[other.item_id] for other in intervals if interval.overlaps(other)}
        )
        # A zero-length interval overlaps nothing, itself included
        if columns[interval.item_id] not in used_columns:
            used_columns = sorted(set(used_columns) | {columns[interval.item_id]})

        layouts[interval.item_id] = ItemLayout(
            column=columns[interval.item_id],
            local_column_count=len(used_columns),
            local_column_offset=used_columns.index(columns[interval.item_id]),
        )

    return layouts, column_count
