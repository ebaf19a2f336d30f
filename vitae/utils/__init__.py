"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logger setup
- Timestamps and the evaluation moment for layout passes
"""

from vitae.utils.timestamp import now, today

__all__ = ["now", "today"]
