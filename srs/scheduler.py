"""SM-2 spaced repetition scheduler."""

import math
import numbers
from decimal import Decimal, ROUND_HALF_UP

from srs.errors import InvalidGrade
from srs.models import (
    MAX_GRADE,
    MIN_EASINESS,
    MIN_GRADE,
    PASSING_GRADE,
    MemoryState,
)

FIRST_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 6
LAPSE_INTERVAL_DAYS = 1

_TWO_PLACES = Decimal('0.01')


def validate_grade(grade) -> int:
    """Return grade unchanged if it is an integer in 0-5, else raise InvalidGrade."""
    if isinstance(grade, bool) or not isinstance(grade, numbers.Integral):
        raise InvalidGrade(grade)
    if not (MIN_GRADE <= grade <= MAX_GRADE):
        raise InvalidGrade(grade)
    return int(grade)


def _adjust_easiness(easiness: float, grade: int) -> float:
    # EF' = EF + 0.1 - (5-q) * (0.08 + (5-q) * 0.02), floored at 1.3
    miss = MAX_GRADE - grade
    return max(MIN_EASINESS, easiness + 0.1 - miss * (0.08 + miss * 0.02))


def _round_easiness(easiness: float) -> float:
    """Two decimals, half-up on the exact binary value."""
    return float(Decimal(easiness).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def compute_next_state(previous: MemoryState, grade: int) -> MemoryState:
    """
    SM-2 spaced repetition scheduling.

    Args:
        previous: Current memory state ((2.5, 0, 0) for an unreviewed card)
        grade:    User grade 0-5 (0=blackout, 5=perfect)

    Returns:
        A new MemoryState. Easiness is adjusted on every review, lapses
        included. Intervals go 1 -> 6 -> floor(interval * easiness).

    Raises:
        InvalidGrade: grade is not an integer in 0-5.
    """
    grade = validate_grade(grade)
    updated_easiness = _adjust_easiness(previous.easiness, grade)

    if grade < PASSING_GRADE:
        # Lapse: restart the streak, show again tomorrow
        return MemoryState(
            easiness=_round_easiness(updated_easiness),
            repetition=0,
            interval_days=LAPSE_INTERVAL_DAYS,
        )

    # A negative stored count is treated as a fresh streak
    new_repetition = max(previous.repetition, 0) + 1
    if new_repetition == 1:
        new_interval = FIRST_INTERVAL_DAYS
    elif new_repetition == 2:
        new_interval = SECOND_INTERVAL_DAYS
    else:
        new_interval = max(1, math.floor(previous.interval_days * updated_easiness))

    return MemoryState(
        easiness=_round_easiness(updated_easiness),
        repetition=new_repetition,
        interval_days=new_interval,
    )
