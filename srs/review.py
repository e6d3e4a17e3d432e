"""Review pipeline: grade a card, compute its next due instant, and pick due cards."""

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Union

from srs.config import Settings, get_settings
from srs.due import compute_due_date, is_due, parse_timestamp
from srs.models import MAX_REVIEW_PAGE_LIMIT, MemoryState, ReviewPage, ScheduleResult
from srs.scheduler import compute_next_state
from srs.schemas import ReviewQuery

logger = logging.getLogger("srs.review")

_ORDERS = ("asc", "desc")


def grade_review(
    previous: Union[MemoryState, Mapping[str, Any]],
    grade: int,
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> ScheduleResult:
    """
    Apply one review to a card.

    previous is either a MemoryState or a stored card record; missing SRS
    fields in a record take the configured unreviewed defaults.
    InvalidGrade / InvalidInterval propagate to the caller untouched.
    """
    if not isinstance(previous, MemoryState):
        settings = settings or get_settings()
        previous = MemoryState.from_dict(previous, defaults=settings.initial_state())

    state = compute_next_state(previous, grade)
    next_review_at = compute_due_date(state.interval_days, now)

    logger.debug(
        "SM-2 grade=%d: rep %d->%d interval %d->%d ef %.2f->%.2f due %s",
        grade,
        previous.repetition, state.repetition,
        previous.interval_days, state.interval_days,
        previous.easiness, state.easiness,
        next_review_at.isoformat(),
    )
    return ScheduleResult(state=state, next_review_at=next_review_at)


def select_due(
    records: Iterable[Mapping[str, Any]],
    now: Optional[datetime] = None,
    *,
    page: int = 1,
    limit: Optional[int] = None,
    order: str = "asc",
    query: Optional[ReviewQuery] = None,
    settings: Optional[Settings] = None,
) -> ReviewPage:
    """
    Cards whose next_review_at is at or before now, sorted by next_review_at.

    Records without a next_review_at have never been scheduled and are left
    out. A validated ReviewQuery, when given, supplies page, limit and order.
    Returns one page together with the total number of due cards.
    """
    if query is not None:
        page, limit, order = query.page, query.limit, query.order
    if limit is None:
        limit = (settings or get_settings()).review_page_limit
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if not (1 <= limit <= MAX_REVIEW_PAGE_LIMIT):
        raise ValueError(f"limit must be between 1 and {MAX_REVIEW_PAGE_LIMIT}, got {limit}")
    if order not in _ORDERS:
        raise ValueError(f"order must be one of {_ORDERS}, got {order!r}")

    if now is None:
        now = datetime.now(timezone.utc)

    due: List[Mapping[str, Any]] = []
    for record in records:
        if is_due(record.get('next_review_at'), now):
            due.append(record)

    due.sort(key=lambda r: parse_timestamp(r['next_review_at']), reverse=(order == "desc"))
    start = (page - 1) * limit
    selected = due[start:start + limit]
    logger.debug("Review queue: %d due, returning %d (page %d)", len(due), len(selected), page)
    return ReviewPage(items=selected, page=page, limit=limit, total=len(due))
