"""Pydantic request/response schemas for the review endpoints that wrap the scheduler."""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from srs.models import (
    MAX_GRADE,
    MAX_REVIEW_PAGE_LIMIT,
    MIN_EASINESS,
    MIN_GRADE,
    ReviewPage,
    ScheduleResult,
)


# ---- Grading ----

class ReviewGradeRequest(BaseModel):
    grade: int = Field(..., ge=MIN_GRADE, le=MAX_GRADE)


class ReviewResultResponse(BaseModel):
    id: Optional[str] = None
    next_review: datetime
    repetition: int = Field(..., ge=0)
    interval_days: int = Field(..., ge=0)
    easiness: float = Field(..., ge=MIN_EASINESS)

    @classmethod
    def from_result(cls, result: ScheduleResult, card_id: Optional[str] = None) -> 'ReviewResultResponse':
        return cls(
            id=card_id,
            next_review=result.next_review_at,
            repetition=result.repetition,
            interval_days=result.interval_days,
            easiness=result.easiness,
        )


# ---- Review queue ----

class ReviewQuery(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=MAX_REVIEW_PAGE_LIMIT)
    sort_by: Literal["next_review_at"] = "next_review_at"
    order: Literal["asc", "desc"] = "asc"


class Pagination(BaseModel):
    page: int
    limit: int
    total: int


class ReviewListResponse(BaseModel):
    data: List[Dict[str, Any]]
    pagination: Pagination

    @classmethod
    def from_page(cls, page: ReviewPage) -> 'ReviewListResponse':
        return cls(
            data=[dict(item) for item in page.items],
            pagination=Pagination(page=page.page, limit=page.limit, total=page.total),
        )
