"""
Document context logger.

Provides logging interface for the document context with automatic [document] prefix.
All document modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[document]"


def setup_document_logger(log_dir: Path, store_path: Path) -> Path:
    """
    Setup logger for the document context.

    Args:
        log_dir: Directory for this editing session
        store_path: Key-value store directory recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="document",
        log_dir=log_dir,
        extra_provenance={"Store": store_path},
    )


# Wrapper functions with automatic [document] prefix


def _log_info(message: str) -> None:
    """Log info message with [document] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [document] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [document] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [document] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level document-specific logging helpers


def log_document_loaded(origin: str, resume) -> None:
    """Log where the resume document came from and its size."""
    _log_info(f"Loaded resume from {origin}: {len(resume.items)} items, {len(resume.skills)} skills")


def log_document_saved(key: str, resume) -> None:
    _log_debug(f"Saved '{key}': {len(resume.items)} items, {len(resume.skills)} skills")


def log_source_unavailable(location: str, error: Exception) -> None:
    """Log a failed fetch before falling back to an empty document."""
    _log_warning(f"Could not fetch resume from {location}; starting from an empty document")
    _log_debug(f"  {error}")


def log_validation_result(report) -> None:
    """Log a validation report, one line per issue."""
    if report.is_valid:
        _log_success("Resume document is valid")
        return

    _log_warning(f"Resume document has {len(report.issues)} issue(s)")
    for i, issue in enumerate(report.issues, 1):
        _log_warning(f"  Issue {i}: {issue}")
