"""Unit tests for the timeline layout engine."""

from datetime import date

import pytest
from loguru import logger

from vitae.contexts.timeline.layout_engine import (
    TimelineLayout,
    column_left_percent,
    column_width_percent,
    compute_layout,
    mirror_top,
)
from vitae.contexts.timeline.packing import ItemLayout
from vitae.contexts.timeline.scale import ScaleConfig, ZoomZone


@pytest.fixture
def scale():
    return ScaleConfig(pixels_per_month=16, min_item_height_px=60)


@pytest.fixture
def career(make_entry):
    return [
        make_entry("school", "2018-09", "2022-06"),
        make_entry("internship", "2021-06", "2021-08"),
        make_entry("job", "2022-07", "present"),
        make_entry("side", "2022-01", "2023-02"),
        make_entry("course", "2022-03", "2022-04"),
        make_entry("cert", "2023-03", "2023-03"),
    ]


@pytest.mark.unit
def test_two_overlapping_entries_get_distinct_columns(make_entry, scale, now):
    layout = compute_layout(
        [make_entry("a", "2023-01", "2023-06"), make_entry("b", "2023-03", "2023-09")], scale, now=now
    )

    assert layout.column_count == 2
    assert (layout.layouts["a"].column, layout.layouts["b"].column) == (0, 1)
    assert layout.layouts["a"].local_column_count == 2
    assert layout.layouts["b"].local_column_count == 2
    assert layout.layouts["a"].local_column_offset == 0
    assert layout.layouts["b"].local_column_offset == 1

    a, b = layout.geometry["a"], layout.geometry["b"]
    assert (a.top, a.height) == (0, 96)
    assert (b.top, b.height) == (32, 112)
    assert (a.left, a.width) == (0, 50)
    assert (b.left, b.width) == (50, 50)
    assert layout.total_months == 9
    assert layout.total_height == 144


@pytest.mark.unit
def test_present_entry_spans_through_current_month(make_entry, scale, now):
    layout = compute_layout([make_entry("a", "2023-01", "present")], scale, now=now)

    assert layout.layouts["a"].column == 0
    assert layout.geometry["a"].height == 4 * 16
    assert layout.max_date == date(2023, 4, 1)


@pytest.mark.unit
def test_short_entry_is_clamped_to_minimum_height(make_entry, now):
    layout = compute_layout(
        [make_entry("a", "2023-01", "present")], ScaleConfig(8, 60), now=now
    )
    assert layout.geometry["a"].height == 60


@pytest.mark.unit
def test_future_entry_reaches_the_projected_horizon(make_entry, scale, now):
    layout = compute_layout([make_entry("a", "2023-01", "future")], scale, now=now)
    geometry = layout.geometry["a"]

    assert geometry.is_projected
    assert layout.max_date == date(2023, 10, 1)
    assert layout.total_months == 10
    assert geometry.top + geometry.height == layout.total_height == 160


@pytest.mark.unit
def test_zoom_zone_doubles_months_inside_it(make_entry, scale, now):
    zoomed = ScaleConfig(16, 60, [ZoomZone(2024, 2025, 2)])
    layout = compute_layout([make_entry("a", "2023-01", "2026-12")], zoomed, now=now)

    assert layout.total_months == 48
    assert layout.total_height == 12 * 16 + 24 * 32 + 12 * 16
    assert [tick.is_zoomed for tick in layout.year_ticks] == [False, True, True, False]


@pytest.mark.unit
def test_empty_input_yields_zero_height_layout(scale, now):
    layout = compute_layout([], scale, now=now)

    assert layout == TimelineLayout()
    assert layout.total_height == 0
    assert layout.layouts == {}
    assert layout.is_empty


@pytest.mark.unit
def test_every_card_meets_the_height_floor(career, scale, now):
    layout = compute_layout(career, scale, now=now)
    assert all(g.height >= 60 for g in layout.geometry.values())


@pytest.mark.unit
def test_entries_sharing_a_column_never_overlap(career, scale, now):
    layout = compute_layout(career, scale, now=now)

    spans = {}
    for item_id, item_layout in layout.layouts.items():
        geometry = layout.geometry[item_id]
        spans.setdefault(item_layout.column, []).append((geometry.top, geometry.top + geometry.height))

    for column_spans in spans.values():
        column_spans.sort()
        for (_, end), (next_top, _) in zip(column_spans, column_spans[1:]):
            assert end <= next_top


@pytest.mark.unit
def test_local_offsets_are_within_local_count(career, scale, now):
    layout = compute_layout(career, scale, now=now)

    for item_layout in layout.layouts.values():
        assert 1 <= item_layout.local_column_count <= layout.column_count
        assert 0 <= item_layout.local_column_offset < item_layout.local_column_count


@pytest.mark.unit
def test_reversed_layout_mirrors_forward_layout(career, scale, now):
    forward = compute_layout(career, scale, now=now)
    backward = compute_layout(career, scale, reversed=True, now=now)

    assert backward.layouts == forward.layouts
    for item_id, geometry in forward.geometry.items():
        mirrored = backward.geometry[item_id]
        assert mirrored.height == geometry.height
        assert mirrored.top == pytest.approx(forward.total_height - geometry.top - geometry.height)
        assert mirror_top(mirrored.top, mirrored.height, forward.total_height) == pytest.approx(geometry.top)


@pytest.mark.unit
def test_multiplier_of_one_changes_nothing(career, scale, now):
    plain = compute_layout(career, scale, now=now)
    unit_zone = compute_layout(career, ScaleConfig(16, 60, [ZoomZone(2019, 2022, 1)]), now=now)

    assert unit_zone.geometry == plain.geometry
    assert unit_zone.total_height == plain.total_height


@pytest.mark.unit
def test_layout_is_deterministic(career, scale, now):
    assert compute_layout(career, scale, now=now) == compute_layout(career, scale, now=now)


@pytest.mark.unit
def test_single_column_is_capped_at_half_width_and_centered(make_entry, scale, now):
    geometry = compute_layout([make_entry("a", "2020-01", "2020-12")], scale, now=now).geometry["a"]
    assert (geometry.left, geometry.width) == (25, 50)


@pytest.mark.unit
@pytest.mark.parametrize("count, expected", [(0, 50), (1, 50), (2, 50), (3, 100 / 3), (4, 25)])
def test_column_width_percent(count, expected):
    assert column_width_percent(count) == pytest.approx(expected)


@pytest.mark.unit
def test_column_left_percent_centers_narrow_clusters():
    # One-column cluster on a four-column timeline sits in the middle
    assert column_left_percent(ItemLayout(3, 1, 0), 25) == 37.5
    assert column_left_percent(ItemLayout(2, 2, 1), 25) == 50


@pytest.mark.unit
def test_malformed_start_falls_back_to_earliest_bound(make_entry, scale, now):
    warnings = []
    logger.add(warnings.append, level="WARNING", format="{message}")

    layout = compute_layout(
        [make_entry("good", "2023-01", "2023-03"), make_entry("bad", "soon", "2023-02")], scale, now=now
    )

    assert layout.geometry["bad"].top == 0
    assert layout.min_date == date(2023, 1, 1)
    assert any("bad" in str(message) for message in warnings)


@pytest.mark.unit
def test_malformed_end_counts_as_one_month(make_entry, scale, now):
    layout = compute_layout([make_entry("a", "2023-01", "someday")], scale, now=now)

    assert layout.total_months == 1
    assert layout.geometry["a"].height == 60


@pytest.mark.unit
def test_end_before_start_does_not_shrink_bounds(make_entry, scale, now):
    layout = compute_layout([make_entry("a", "2023-05", "2023-01")], scale, now=now)

    assert layout.min_date == layout.max_date == date(2023, 5, 1)
    assert layout.total_months == 1


@pytest.mark.unit
def test_axis_ticks(make_entry, scale, now):
    layout = compute_layout([make_entry("a", "2022-11", "2023-02")], scale, now=now)

    assert [(t.year, t.offset) for t in layout.year_ticks] == [(2022, 0), (2023, 32)]
    # January is covered by the year tick
    assert [t.month_index for t in layout.month_ticks] == [0, 1, 3]
    assert [t.offset for t in layout.month_ticks] == [0, 16, 48]


@pytest.mark.unit
def test_axis_ticks_are_mirrored_when_reversed(make_entry, scale, now):
    layout = compute_layout([make_entry("a", "2022-11", "2023-02")], scale, reversed=True, now=now)

    assert [(t.year, t.offset) for t in layout.year_ticks] == [(2022, 64), (2023, 32)]
    assert [t.offset for t in layout.month_ticks] == [64, 48, 16]


@pytest.mark.unit
def test_out_of_range_year_falls_back_to_earliest_bound(make_entry, scale, now):
    layout = compute_layout(
        [make_entry("a", "2023-01", "2023-03"), make_entry("b", "0000-05", "2023-02")], scale, now=now
    )

    assert layout.min_date == date(2023, 1, 1)
    assert layout.geometry["b"].top == 0
    assert layout.geometry["b"].height == 60


@pytest.mark.unit
def test_out_of_range_year_end_counts_as_one_month(make_entry, scale, now):
    layout = compute_layout([make_entry("a", "2023-01", "0000-12")], scale, now=now)
    assert layout.total_months == 1
