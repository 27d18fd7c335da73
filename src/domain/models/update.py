"""Outcome of a single-record profile update."""

from dataclasses import dataclass
from enum import Enum


class UpdateStatus(str, Enum):
    UPDATED = "updated"
    FETCH_FAILED = "fetch_failed"
    UNRECOGNIZED_URL = "unrecognized_url"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class UpdateResult:
    """What happened to an update request.

    ``total_solved`` is None whenever there is no numeric result: the URL was
    not a LeetCode profile, or the lookup failed and zero stats were stored.
    """

    status: UpdateStatus
    dataset: str | None = None
    name: str | None = None
    total_solved: int | None = None

    @classmethod
    def not_found(cls) -> "UpdateResult":
        return cls(status=UpdateStatus.NOT_FOUND)

    @property
    def found(self) -> bool:
        return self.status is not UpdateStatus.NOT_FOUND
