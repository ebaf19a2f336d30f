"""
Timeline settings loaded from timeline.yaml.

The config directory defaults to the package's bundled vitae/config/ and can be
redirected with the VITAE_CONFIG_PATH environment variable.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from vitae.utils.config import load_yaml_config


@dataclass(frozen=True)
class TimelineSettings:
    """
    Scale bounds and defaults for the timeline view.

    Attributes:
        default_pixels_per_month: Base scale used on start and after reset
        min_pixels_per_month: Lower clamp for the base scale
        max_pixels_per_month: Upper clamp for the base scale
        scale_step: Increment used by the +/- scale controls
        min_item_height_px: Height floor applied to every card after scaling
        future_horizon_months: How far past "now" a "future" end date reaches
        multiplier_choices: Zoom multipliers offered when adding a zone
        default_multiplier: Preselected zoom multiplier
        default_zone_years: (start, end) years preselected when adding a zone
    """

    default_pixels_per_month: float
    min_pixels_per_month: float
    max_pixels_per_month: float
    scale_step: float
    min_item_height_px: float
    future_horizon_months: int
    multiplier_choices: Tuple[float, ...]
    default_multiplier: float
    default_zone_years: Tuple[int, int]


def load_timeline_settings(config_path: Optional[Path] = None) -> TimelineSettings:
    """
    Load timeline.yaml into a TimelineSettings instance.

    Args:
        config_path: Directory containing timeline.yaml (defaults to VITAE_CONFIG_PATH)

    Returns:
        Parsed settings

    Raises:
        FileNotFoundError: If timeline.yaml doesn't exist in the config directory
    """
    raw = load_yaml_config("timeline.yaml", config_path)
    scale = raw["scale"]
    zoom = raw["zoom"]

    return TimelineSettings(
        default_pixels_per_month=scale["default_pixels_per_month"],
        min_pixels_per_month=scale["min_pixels_per_month"],
        max_pixels_per_month=scale["max_pixels_per_month"],
        scale_step=scale["step"],
        min_item_height_px=raw["min_item_height_px"],
        future_horizon_months=raw["future_horizon_months"],
        multiplier_choices=tuple(zoom["multiplier_choices"]),
        default_multiplier=zoom["default_multiplier"],
        default_zone_years=(zoom["default_start_year"], zoom["default_end_year"]),
    )


@lru_cache(maxsize=1)
def get_timeline_settings() -> TimelineSettings:
    """Settings from the default config directory, loaded once per process."""
    return load_timeline_settings()
