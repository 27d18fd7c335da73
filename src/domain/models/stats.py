"""Statistics fetched from LeetCode."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DifficultyStats:
    """Accepted problem counts by difficulty."""

    total_solved: int = 0
    easy_solved: int = 0
    medium_solved: int = 0
    hard_solved: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "totalSolved": self.total_solved,
            "easySolved": self.easy_solved,
            "mediumSolved": self.medium_solved,
            "hardSolved": self.hard_solved,
        }


@dataclass(frozen=True)
class StatsFetched:
    """Successful lookup of a LeetCode account."""

    stats: DifficultyStats
    recent_submissions: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class StatsFetchFailed:
    """Failed lookup; carries the reason so callers can log it."""

    reason: str


StatsFetchResult = StatsFetched | StatsFetchFailed
