"""SM-2 spaced repetition scheduling core. Pure functions, no I/O."""

from srs.due import compute_due_date, is_due
from srs.errors import InvalidGrade, InvalidInterval
from srs.models import MemoryState, ReviewPage, ScheduleResult
from srs.review import grade_review, select_due
from srs.scheduler import compute_next_state

__all__ = [
    "InvalidGrade",
    "InvalidInterval",
    "MemoryState",
    "ReviewPage",
    "ScheduleResult",
    "compute_due_date",
    "compute_next_state",
    "grade_review",
    "is_due",
    "select_due",
]
