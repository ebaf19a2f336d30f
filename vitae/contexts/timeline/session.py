"""
Timeline view state for one interactive session.

Holds what the user can change between layout passes: the active category
filter, the base scale, zoom zones, axis direction and the condensed toggle.
None of it is persisted with the resume document.
"""

from datetime import date
from typing import Iterable, List, Optional, Sequence

from vitae.contexts.document.categories import CATEGORY_ORDER, Category
from vitae.contexts.timeline.config import TimelineSettings, get_timeline_settings
from vitae.contexts.timeline.layout_engine import TimelineLayout, compute_layout
from vitae.contexts.timeline.scale import ScaleConfig, ZoomZone, clamp_pixels_per_month


class TimelineSession:
    """
    Mutable view state feeding the (pure) layout engine.

    Attributes:
        active_categories: Categories currently shown (never empty)
        pixels_per_month: Base scale, kept within the configured bounds
        zoom_zones: Ordered zoom zones; first match wins
        reversed: Newest-at-top axis
        condensed: Show the condensed resume instead of the timeline
    """

    def __init__(
        self,
        categories: Optional[Iterable[Category]] = None,
        settings: Optional[TimelineSettings] = None,
    ):
        self.settings = settings or get_timeline_settings()
        self.active_categories = set(Category(c) for c in (categories or CATEGORY_ORDER))
        self.pixels_per_month = self.settings.default_pixels_per_month
        self.zoom_zones: List[ZoomZone] = []
        self.reversed = False
        self.condensed = False

    # Category filter

    def toggle_filter(self, category: Category) -> bool:
        """
        Show or hide a category. Hiding the last active category is refused.

        Returns:
            True if the filter changed
        """
        category = Category(category)
        if category in self.active_categories:
            if len(self.active_categories) == 1:
                return False
            self.active_categories.remove(category)
        else:
            self.active_categories.add(category)
        return True

    def is_active(self, category: Category) -> bool:
        return Category(category) in self.active_categories

    def visible_entries(self, entries: Sequence) -> list:
        """Entries in active categories, input order preserved."""
        return [entry for entry in entries if Category(entry.category) in self.active_categories]

    # Scale

    def set_scale(self, pixels_per_month: float) -> float:
        self.pixels_per_month = clamp_pixels_per_month(pixels_per_month, self.settings)
        return self.pixels_per_month

    def increase_scale(self) -> float:
        return self.set_scale(self.pixels_per_month + self.settings.scale_step)

    def decrease_scale(self) -> float:
        return self.set_scale(self.pixels_per_month - self.settings.scale_step)

    def reset_scale(self) -> float:
        return self.set_scale(self.settings.default_pixels_per_month)

    # Zoom zones

    def add_zoom_zone(self, start_year: int = None, end_year: int = None, multiplier: float = None) -> bool:
        """
        Append a zoom zone. Omitted values fall back to the configured defaults.

        Returns:
            False (and no change) if start_year > end_year or the multiplier isn't positive
        """
        default_start, default_end = self.settings.default_zone_years
        start_year = default_start if start_year is None else start_year
        end_year = default_end if end_year is None else end_year
        if multiplier is None:
            multiplier = self.settings.default_multiplier
        if start_year > end_year or multiplier <= 0:
            return False

        self.zoom_zones.append(ZoomZone(start_year, end_year, multiplier))
        return True

    def remove_zoom_zone(self, index: int) -> bool:
        if not 0 <= index < len(self.zoom_zones):
            return False
        del self.zoom_zones[index]
        return True

    # Toggles

    def toggle_reversed(self) -> bool:
        self.reversed = not self.reversed
        return self.reversed

    def toggle_condensed(self) -> bool:
        self.condensed = not self.condensed
        return self.condensed

    # Layout

    @property
    def scale_config(self) -> ScaleConfig:
        return ScaleConfig(
            pixels_per_month=self.pixels_per_month,
            min_item_height_px=self.settings.min_item_height_px,
            zoom_zones=tuple(self.zoom_zones),
        )

    def layout(self, entries: Sequence, now: Optional[date] = None) -> TimelineLayout:
        """Filter entries by the active categories and run a layout pass."""
        return compute_layout(
            self.visible_entries(entries),
            self.scale_config,
            reversed=self.reversed,
            now=now,
            horizon_months=self.settings.future_horizon_months,
        )
