"""Domain models package."""

from .records import NO_DATA_INFO, MergedRecord
from .roster import RosterRow
from .stats import DifficultyStats, StatsFetched, StatsFetchFailed, StatsFetchResult
from .update import UpdateResult, UpdateStatus

__all__ = [
    "NO_DATA_INFO",
    "DifficultyStats",
    "MergedRecord",
    "RosterRow",
    "StatsFetched",
    "StatsFetchFailed",
    "StatsFetchResult",
    "UpdateResult",
    "UpdateStatus",
]
