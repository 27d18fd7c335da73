"""Merged leaderboard records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .roster import RosterRow
from .stats import DifficultyStats

NO_DATA_INFO = "no data available"


@dataclass
class MergedRecord:
    """Roster identity plus either LeetCode statistics or the no-data marker."""

    row: RosterRow
    account_handle: str | None = None
    stats: DifficultyStats | None = None
    recent_submissions: list[dict[str, Any]] = field(default_factory=list)
    # lookup failed and stats are zero placeholders; not serialized
    fetch_failed: bool = False

    @classmethod
    def without_data(cls, row: RosterRow) -> MergedRecord:
        return cls(row=row)

    @property
    def has_data(self) -> bool:
        return self.stats is not None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = self.row.to_dict()
        if self.stats is None:
            data["info"] = NO_DATA_INFO
            return data

        data["accountHandle"] = self.account_handle
        data["stats"] = self.stats.to_dict()
        data["recentSubmissions"] = list(self.recent_submissions)
        return data
