"""
Display helpers shared by the timeline card, condensed resume and printable resume.
"""

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Sequence

from vitae.contexts.document.categories import CATEGORY_ORDER, Category
from vitae.contexts.timeline.dates import FUTURE, PRESENT, is_projected, parse_year_month

# Card heights (px) at which each detail becomes visible without hovering.
# Title is always shown.
CARD_THRESHOLDS = {
    "category": 40,
    "organization": 55,
    "date_range": 75,
    "description": 120,
    "highlights": 150,
}
HIGHLIGHT_LINE_HEIGHT_PX = 20

# en-US short month names, independent of the process locale
MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_month(date_str: str) -> str:
    """Format "2023-01" as "Jan 2023". Unparseable input is returned unchanged."""
    parsed = parse_year_month(date_str)
    if parsed is None:
        return date_str
    return f"{MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.year}"


def format_date_range(start_date: str, end_date: str, now: Optional[date] = None) -> str:
    """
    Timeline date range, e.g. "Jan 2023 - Present".

    "present" reads "Present", "future" reads "Ongoing", and a concrete month
    after `now` gets an "(Expected)" suffix.
    """

    def _format(date_str: str) -> str:
        if date_str == PRESENT:
            return "Present"
        if date_str == FUTURE:
            return "Ongoing"
        formatted = format_month(date_str)
        if is_projected(date_str, now):
            return f"{formatted} (Expected)"
        return formatted

    return f"{_format(start_date)} - {_format(end_date)}"


def format_print_date(date_str: str) -> str:
    """Printable resume dates: both open-ended sentinels read "Present"."""
    if date_str in (PRESENT, FUTURE):
        return "Present"
    return format_month(date_str)


@dataclass(frozen=True)
class CardVisibility:
    category: bool
    title: bool
    organization: bool
    date_range: bool
    description: bool
    highlights: bool
    highlight_count: int


def card_visibility(height: float, highlights_total: int, hovered: bool = False) -> CardVisibility:
    """
    Which details fit on a timeline card of the given height.

    Hovering reveals everything. Otherwise details appear in priority order as
    the card grows, and highlights fill whatever lines remain below 120px.
    """
    if hovered:
        return CardVisibility(True, True, True, True, True, True, highlights_total)

    shows = {name: height >= threshold for name, threshold in CARD_THRESHOLDS.items()}
    fitting = max(0, int((height - CARD_THRESHOLDS["description"]) // HIGHLIGHT_LINE_HEIGHT_PX))

    return CardVisibility(
        category=shows["category"],
        title=True,
        organization=shows["organization"],
        date_range=shows["date_range"],
        description=shows["description"],
        highlights=shows["highlights"],
        highlight_count=min(highlights_total, fitting) if shows["highlights"] else 0,
    )


def group_by_category(items: Sequence) -> Dict[Category, List]:
    """
    Group items for the condensed resume, in fixed category order.

    Categories without items are omitted; item order within a group is preserved.
    """
    groups: Dict[Category, List] = {}
    for category in CATEGORY_ORDER:
        members = [item for item in items if Category(item.category) == category]
        if members:
            groups[category] = members
    return groups
