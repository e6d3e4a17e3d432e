"""Input-contract errors raised by the scheduling core."""

from typing import Any


class InvalidGrade(ValueError):
    """Raised when a review grade is outside 0-5. Maps to HTTP 400 upstream."""
    def __init__(self, grade: Any):
        super().__init__(f"grade must be between 0 and 5, got {grade!r}")
        self.grade = grade


class InvalidInterval(ValueError):
    """Raised when interval_days is negative, non-finite or not a number."""
    def __init__(self, interval_days: Any, reason: str = "must be a non-negative finite number"):
        super().__init__(f"interval_days {reason}, got {interval_days!r}")
        self.interval_days = interval_days
