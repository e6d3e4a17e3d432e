"""Configuration for the scheduling core."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from srs.models import DEFAULT_EASINESS, MemoryState


@dataclass
class Settings:
    """
    Defaults applied to cards that have never been reviewed, plus review queue paging.

    Every field is overridable at construction for testing; fields left as
    None are read from the environment, falling back to the built-in default.
    Malformed environment values are ignored.
    """
    default_easiness: Optional[float] = None
    default_repetition: Optional[int] = None
    default_interval_days: Optional[int] = None
    review_page_limit: Optional[int] = None

    def __post_init__(self):
        if self.default_easiness is None:
            self.default_easiness = _env_number("SRS_DEFAULT_EASINESS", float, DEFAULT_EASINESS)
        if self.default_repetition is None:
            self.default_repetition = _env_number("SRS_DEFAULT_REPETITION", int, 0)
        if self.default_interval_days is None:
            self.default_interval_days = _env_number("SRS_DEFAULT_INTERVAL_DAYS", int, 0)
        if self.review_page_limit is None:
            self.review_page_limit = _env_number("SRS_REVIEW_PAGE_LIMIT", int, 10)

    def initial_state(self) -> MemoryState:
        """MemoryState for a brand-new card."""
        return MemoryState(
            easiness=float(self.default_easiness),
            repetition=int(self.default_repetition),
            interval_days=int(self.default_interval_days),
        )


def _env_number(name: str, cast, default):
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


@lru_cache()
def get_settings() -> Settings:
    """Singleton Settings -- call get_settings.cache_clear() after changing the environment."""
    return Settings()
