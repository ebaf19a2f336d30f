"""Shared fixtures."""

import sys
from datetime import date

import pytest
from loguru import logger

from vitae.contexts.document import Category, Entry


@pytest.fixture(autouse=True)
def reset_loguru():
    """CLI commands reconfigure loguru sinks; restore the default after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def now():
    return date(2023, 4, 15)


@pytest.fixture
def make_entry():
    """Build an Entry with only the fields layout cares about."""

    def _make(item_id, start, end, category=Category.EMPLOYMENT, **kwargs):
        return Entry(id=item_id, category=category, start_date=start, end_date=end, **kwargs)

    return _make
