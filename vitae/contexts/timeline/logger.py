"""
Timeline context logger.

Provides logging interface for the timeline context with automatic [timeline] prefix.
All timeline modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[timeline]"


def setup_timeline_logger(log_dir: Path, pixels_per_month: float) -> Path:
    """
    Setup logger for the timeline context.

    Args:
        log_dir: Directory for this layout session
        pixels_per_month: Base scale recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="timeline",
        log_dir=log_dir,
        extra_provenance={"Pixels per month": pixels_per_month},
    )


# Wrapper functions with automatic [timeline] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [timeline] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [timeline] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level timeline-specific logging helpers


def log_unparseable_date(item_id: str, field_name: str, value: str, substitute) -> None:
    """Log a date that failed to parse and the value used in its place."""
    _log_warning(f"{item_id}: unparseable {field_name} {value!r}, using {substitute}")


def log_layout_pass(layout, reversed_axis: bool) -> None:
    """Log a summary of a completed layout pass."""
    _log_debug(
        f"Layout pass: {len(layout.layouts)} entries, {layout.column_count} columns, "
        f"{layout.total_months} months, {layout.total_height:.1f}px"
        f"{' (reversed)' if reversed_axis else ''}"
    )
