"""Data models for the scheduling core: MemoryState and ScheduleResult dataclasses."""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from srs.due import format_timestamp

MIN_GRADE = 0
MAX_GRADE = 5
PASSING_GRADE = 3  # grades below this are lapses

MIN_EASINESS = 1.3
DEFAULT_EASINESS = 2.5

MAX_REVIEW_PAGE_LIMIT = 50


@dataclass(frozen=True)
class MemoryState:
    """
    A card's position in the SM-2 model.

    Never mutated: each review produces a new instance. A brand-new card is
    (2.5, 0, 0) unless the caller configures other defaults.
    """
    easiness: float = DEFAULT_EASINESS
    repetition: int = 0
    interval_days: int = 0

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        defaults: Optional['MemoryState'] = None,
    ) -> 'MemoryState':
        """
        Build a state from a stored card record.

        Missing or None fields fall back to `defaults` (unreviewed card state),
        unknown keys are ignored.
        """
        base = defaults or cls()
        easiness = data.get('easiness')
        repetition = data.get('repetition')
        interval_days = data.get('interval_days')
        return cls(
            easiness=float(easiness) if easiness is not None else base.easiness,
            repetition=int(repetition) if repetition is not None else base.repetition,
            interval_days=int(interval_days) if interval_days is not None else base.interval_days,
        )


@dataclass(frozen=True)
class ScheduleResult:
    """New memory state plus the absolute instant the card is next due."""
    state: MemoryState
    next_review_at: datetime

    @property
    def easiness(self) -> float:
        return self.state.easiness

    @property
    def repetition(self) -> int:
        return self.state.repetition

    @property
    def interval_days(self) -> int:
        return self.state.interval_days

    def to_dict(self) -> Dict:
        """Flat review-result record, as persisted and returned to clients."""
        d = self.state.to_dict()
        d['next_review'] = format_timestamp(self.next_review_at)
        return d


@dataclass(frozen=True)
class ReviewPage:
    """One page of the due-review queue plus the total number of due cards."""
    items: List[Mapping[str, Any]]
    page: int
    limit: int
    total: int

    def to_dict(self) -> Dict:
        return {
            'data': list(self.items),
            'pagination': {'page': self.page, 'limit': self.limit, 'total': self.total},
        }
