"""Unit tests for zoom-aware scale math."""

from datetime import date

import pytest

from vitae.contexts.timeline.config import load_timeline_settings
from vitae.contexts.timeline.scale import ScaleConfig, ScaleMap, ZoomZone, clamp_pixels_per_month


@pytest.mark.unit
def test_settings_load_from_bundled_yaml():
    settings = load_timeline_settings()
    assert settings.default_pixels_per_month == 16
    assert settings.min_item_height_px == 60
    assert settings.future_horizon_months == 6
    assert settings.multiplier_choices == (1.5, 2, 3, 4)
    assert settings.default_zone_years == (2024, 2026)
    assert (settings.min_pixels_per_month, settings.max_pixels_per_month) == (2, 24)


@pytest.mark.unit
def test_settings_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_timeline_settings(tmp_path)


@pytest.mark.unit
def test_min_visual_months():
    config = ScaleConfig(pixels_per_month=16, min_item_height_px=60)
    assert config.min_visual_months == pytest.approx(3.75)


@pytest.mark.unit
def test_first_matching_zone_wins():
    first = ZoomZone(2020, 2022, 2)
    second = ZoomZone(2021, 2021, 4)
    config = ScaleConfig(16, 60, [first, second])

    assert config.zone_for_year(2021) is first
    assert config.zone_for_year(2019) is None
    assert isinstance(config.zoom_zones, tuple)


@pytest.mark.unit
def test_zone_label():
    assert ZoomZone(2024, 2025, 1.5).label == "2024-2025 (1.5x)"


@pytest.mark.unit
@pytest.mark.parametrize("requested, expected", [(1, 2), (30, 24), (10, 10)])
def test_clamp_pixels_per_month(requested, expected):
    assert clamp_pixels_per_month(requested) == expected


@pytest.mark.unit
def test_pixel_offset_without_zones():
    scale_map = ScaleMap(date(2023, 1, 1), 12, ScaleConfig(16, 60))

    assert scale_map.pixel_offset(0) == 0
    assert scale_map.pixel_offset(-3) == 0
    assert scale_map.pixel_offset(3) == 48
    assert scale_map.pixel_offset(2.5) == pytest.approx(40)
    assert scale_map.total_height == 192


@pytest.mark.unit
def test_zoomed_months_use_the_zone_multiplier():
    # Nov 2023 .. Feb 2024, zone covers 2024 only
    scale_map = ScaleMap(date(2023, 11, 1), 4, ScaleConfig(16, 60, [ZoomZone(2024, 2024, 2)]))

    assert scale_map.scale_for_month(1) == 16
    assert scale_map.scale_for_month(2) == 32
    assert scale_map.total_height == 16 + 16 + 32 + 32
    assert scale_map.span_height(1, 2) == 16 + 32


@pytest.mark.unit
def test_pixel_offset_extends_past_total_months():
    scale_map = ScaleMap(date(2023, 1, 1), 2, ScaleConfig(10, 60))
    assert scale_map.pixel_offset(6) == 60
