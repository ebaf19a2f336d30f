"""Unit tests for year-month date resolution."""

from datetime import date

import pytest

from vitae.contexts.timeline.dates import (
    FUTURE,
    PRESENT,
    add_months,
    inclusive_months,
    is_projected,
    months_between,
    months_duration,
    parse_year_month,
    resolve_for_bounds,
    resolve_for_ordering,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("2023-01", date(2023, 1, 1)),
        ("2023-1", date(2023, 1, 1)),
        (" 2023-12 ", date(2023, 12, 1)),
        ("2023-13", None),
        ("2023-00", None),
        ("0000-05", None),
        ("2023/01", None),
        ("", None),
        (PRESENT, None),
        (None, None),
    ],
)
def test_parse_year_month(value, expected):
    assert parse_year_month(value) == expected


@pytest.mark.unit
def test_add_months_crosses_year_boundaries():
    assert add_months(date(2023, 11, 1), 3) == date(2024, 2, 1)
    assert add_months(date(2023, 1, 20), -1) == date(2022, 12, 1)


@pytest.mark.unit
def test_months_between_is_signed():
    assert months_between(date(2023, 1, 1), date(2023, 4, 1)) == 3
    assert months_between(date(2023, 4, 1), date(2023, 1, 1)) == -3


@pytest.mark.unit
def test_sentinels_resolve_to_current_month_for_ordering(now):
    assert resolve_for_ordering(PRESENT, now) == date(2023, 4, 1)
    assert resolve_for_ordering(FUTURE, now) == date(2023, 4, 1)


@pytest.mark.unit
def test_future_extends_by_horizon_for_bounds(now):
    assert resolve_for_bounds(FUTURE, now, horizon_months=6) == date(2023, 10, 1)
    assert resolve_for_bounds(PRESENT, now, horizon_months=6) == date(2023, 4, 1)


@pytest.mark.unit
def test_future_uses_configured_horizon_by_default(now):
    assert resolve_for_bounds(FUTURE, now) == date(2023, 10, 1)


@pytest.mark.unit
def test_is_projected(now):
    assert is_projected(FUTURE, now)
    assert not is_projected(PRESENT, now)
    assert is_projected("2023-05", now)
    assert not is_projected("2023-04", now)
    assert not is_projected("garbage", now)


@pytest.mark.unit
def test_months_duration_is_inclusive(now):
    assert months_duration("2023-01", "2023-04", now) == 4
    assert months_duration("2023-01", "2023-01", now) == 1
    assert months_duration("2023-01", PRESENT, now) == 4


@pytest.mark.unit
def test_months_duration_floors_at_one(now):
    assert months_duration("2023-06", "2023-01", now) == 1
    assert months_duration("nope", "2023-01", now) == 1


@pytest.mark.unit
def test_inclusive_months():
    assert inclusive_months(date(2023, 1, 1), date(2023, 4, 1)) == 4
    assert inclusive_months(date(2023, 4, 1), date(2023, 1, 1)) == 1
