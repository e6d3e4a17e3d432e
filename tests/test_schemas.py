"""Tests for srs/schemas.py -- request/response validation."""

import sys
from pathlib import Path
from datetime import datetime, timezone

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from pydantic import ValidationError

from srs.models import MemoryState, ReviewPage, ScheduleResult
from srs.schemas import ReviewGradeRequest, ReviewListResponse, ReviewQuery, ReviewResultResponse


def test_grade_request_accepts_range():
    for grade in range(6):
        assert ReviewGradeRequest(grade=grade).grade == grade


def test_grade_request_rejects_out_of_range():
    for bad in (-1, 6, 4.5):
        with pytest.raises(ValidationError):
            ReviewGradeRequest(grade=bad)


def test_grade_request_requires_grade():
    with pytest.raises(ValidationError):
        ReviewGradeRequest()


def test_review_query_defaults():
    query = ReviewQuery()
    assert query.page == 1
    assert query.limit == 10
    assert query.sort_by == "next_review_at"
    assert query.order == "asc"


def test_review_query_bounds():
    with pytest.raises(ValidationError):
        ReviewQuery(limit=51)
    with pytest.raises(ValidationError):
        ReviewQuery(page=0)
    with pytest.raises(ValidationError):
        ReviewQuery(order="sideways")


def test_result_response_from_result():
    due = datetime(2024, 1, 15, tzinfo=timezone.utc)
    result = ScheduleResult(state=MemoryState(2.6, 3, 15), next_review_at=due)
    response = ReviewResultResponse.from_result(result, card_id="c1")
    assert response.id == "c1"
    assert response.next_review == due
    assert response.repetition == 3
    assert response.interval_days == 15
    assert response.easiness == 2.6
    dumped = response.model_dump(mode="json")
    assert dumped["next_review"].startswith("2024-01-15T00:00:00")


def test_result_response_rejects_low_easiness():
    with pytest.raises(ValidationError):
        ReviewResultResponse(
            next_review=datetime(2024, 1, 15, tzinfo=timezone.utc),
            repetition=0,
            interval_days=1,
            easiness=1.2,
        )


def test_review_list_response_from_page():
    page = ReviewPage(items=[{'id': 'c1', 'next_review_at': '2024-01-01T00:00:00Z'}], page=2, limit=1, total=3)
    response = ReviewListResponse.from_page(page)
    assert response.model_dump() == {
        'data': [{'id': 'c1', 'next_review_at': '2024-01-01T00:00:00Z'}],
        'pagination': {'page': 2, 'limit': 1, 'total': 3},
    }
