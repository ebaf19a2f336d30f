"""
Resume document validation.

Catches data-entry problems before they reach the timeline: the layout engine
tolerates malformed dates by clamping, so this is where they get reported.
Validation never raises; it returns a report of issue strings.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from vitae.contexts.document.data_structures import ResumeData
from vitae.contexts.timeline.dates import (
    SENTINELS,
    parse_year_month,
    resolve_for_bounds,
    resolve_for_ordering,
)


class IssueTemplates:
    """Centralized issue message templates (f-string style)."""

    DUPLICATE_ID = "Item id '{item_id}' is used {count} times"
    MISSING_TITLE = "'{item_id}': missing title"
    MALFORMED_START = "'{item_id}': start date {value!r} is not YYYY-MM"
    MALFORMED_END = "'{item_id}': end date {value!r} is not YYYY-MM, 'present' or 'future'"
    START_AFTER_END = "'{item_id}': starts ({start}) after it ends ({end})"
    BLANK_SKILL = "Skill #{index} is blank"


@dataclass
class ValidationReport:
    """
    Result of validating a resume document.

    Attributes:
        issues: Human-readable problems, in document order
    """

    issues: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.issues) == 0


def validate_resume(resume: ResumeData, now: Optional[date] = None) -> ValidationReport:
    """
    Check a resume document for problems the timeline would silently paper over.

    Args:
        resume: Document to check
        now: Evaluation moment for open-ended end dates (defaults to today)

    Returns:
        ValidationReport (check .is_valid / .issues)
    """
    issues = []

    id_counts = Counter(item.id for item in resume.items)
    for item_id, count in id_counts.items():
        if count > 1:
            issues.append(IssueTemplates.DUPLICATE_ID.format(item_id=item_id, count=count))

    for item in resume.items:
        if not (item.title or "").strip():
            issues.append(IssueTemplates.MISSING_TITLE.format(item_id=item.id))

        # Start dates are always concrete
        start_ok = parse_year_month(item.start_date) is not None
        if not start_ok:
            issues.append(IssueTemplates.MALFORMED_START.format(item_id=item.id, value=item.start_date))

        end_ok = item.end_date in SENTINELS or parse_year_month(item.end_date) is not None
        if not end_ok:
            issues.append(IssueTemplates.MALFORMED_END.format(item_id=item.id, value=item.end_date))

        if start_ok and end_ok:
            start = resolve_for_ordering(item.start_date, now)
            end = resolve_for_bounds(item.end_date, now)
            if start > end:
                issues.append(
                    IssueTemplates.START_AFTER_END.format(
                        item_id=item.id, start=item.start_date, end=item.end_date
                    )
                )

    for index, skill in enumerate(resume.skills, 1):
        if not skill.strip():
            issues.append(IssueTemplates.BLANK_SKILL.format(index=index))

    return ValidationReport(issues=issues)
