"""Timestamp utilities and the evaluation moment used by layout passes."""

from datetime import date, datetime


def now() -> str:
    """Current time as a compact timestamp suitable for directory names (e.g. "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> date:
    """
    Current calendar day.

    Layout passes resolve "present" and "future" against this value unless
    an explicit evaluation moment is passed in.
    """
    return date.today()


def epoch_millis() -> int:
    """Milliseconds since the Unix epoch (used for generated item ids)."""
    return int(datetime.now().timestamp() * 1000)
