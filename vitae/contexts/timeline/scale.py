"""
Zoom-aware scale math for the timeline axis.

A timeline month normally occupies `pixels_per_month` pixels. Zoom zones
stretch every month of their (inclusive) year range by a multiplier. Zones may
overlap; the first zone in the list that contains a month's year wins.
"""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

from vitae.contexts.timeline.config import TimelineSettings, get_timeline_settings


@dataclass(frozen=True)
class ZoomZone:
    """
    A year range drawn at a local scale multiplier.

    Attributes:
        start_year: First zoomed year (inclusive)
        end_year: Last zoomed year (inclusive)
        multiplier: Scale factor applied to months in the range
    """

    start_year: int
    end_year: int
    multiplier: float

    def contains_year(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year

    @property
    def label(self) -> str:
        return f"{self.start_year}-{self.end_year} ({self.multiplier:g}x)"


@dataclass(frozen=True)
class ScaleConfig:
    """
    Scale inputs for one layout pass.

    Attributes:
        pixels_per_month: Base scale (already clamped to configured bounds)
        min_item_height_px: Floor applied to every card height after scaling
        zoom_zones: Ordered zones; first match wins
    """

    pixels_per_month: float
    min_item_height_px: float
    zoom_zones: Tuple[ZoomZone, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "zoom_zones", tuple(self.zoom_zones))

    @property
    def min_visual_months(self) -> float:
        """Minimum card height expressed in (unzoomed) months at the current scale."""
        return self.min_item_height_px / self.pixels_per_month

    def zone_for_year(self, year: int) -> Optional[ZoomZone]:
        for zone in self.zoom_zones:
            if zone.contains_year(year):
                return zone
        return None

    def is_zoomed(self, year: int) -> bool:
        return self.zone_for_year(year) is not None


def clamp_pixels_per_month(value: float, settings: Optional[TimelineSettings] = None) -> float:
    """Clamp a requested base scale to the configured [min, max] bounds."""
    settings = settings or get_timeline_settings()
    return max(settings.min_pixels_per_month, min(settings.max_pixels_per_month, value))


class ScaleMap:
    """
    Month-index to pixel mapping anchored at the timeline's first month.

    Holds a prefix-sum table of per-month scales, built once per layout pass
    and extended on demand for positions past the last timeline month (a
    height floor can push a card below the final month).
    """

    def __init__(self, origin: date, total_months: int, scale_config: ScaleConfig):
        self.origin_year = origin.year
        self.origin_month = origin.month - 1
        self.total_months = total_months
        self.scale_config = scale_config
        self._prefix: List[float] = [0.0]
        self._extend(total_months)

    def year_of_month(self, month_idx: int) -> int:
        return self.origin_year + (self.origin_month + month_idx) // 12

    def scale_for_month(self, month_idx: int) -> float:
        """Pixel height of the month `month_idx` months after the origin."""
        base = self.scale_config.pixels_per_month
        zone = self.scale_config.zone_for_year(self.year_of_month(month_idx))
        return base * zone.multiplier if zone else base

    def _extend(self, months: int) -> None:
        while len(self._prefix) <= months:
            idx = len(self._prefix) - 1
            self._prefix.append(self._prefix[idx] + self.scale_for_month(idx))

    def pixel_offset(self, months: float) -> float:
        """
        Pixel distance from the origin to a (possibly fractional) month position.

        Negative positions are treated as the origin.
        """
        if months <= 0:
            return 0.0

        whole = int(math.floor(months))
        fraction = months - whole
        self._extend(whole)
        offset = self._prefix[whole]
        if fraction:
            offset += fraction * self.scale_for_month(whole)
        return offset

    def span_height(self, start: float, duration: float) -> float:
        """Summed scale of the months covered by [start, start + duration)."""
        return self.pixel_offset(start + duration) - self.pixel_offset(start)

    @property
    def total_height(self) -> float:
        return self.pixel_offset(self.total_months)
