"""Protocol interfaces for infrastructure components."""

from typing import Any, Protocol

from domain.models import RosterRow, StatsFetchResult


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def post_json(self, url: str, payload: dict[str, Any]) -> Any:
        """POST JSON and return decoded JSON."""
        ...


class StatsClientProtocol(Protocol):
    """Protocol for the remote statistics client."""

    async def fetch_stats(self, username: str) -> StatsFetchResult:
        """Fetch stats for one account. Must not raise."""
        ...


class RosterStoreProtocol(Protocol):
    """Protocol for roster persistence."""

    def load(self, dataset: str) -> list[RosterRow]:
        """Load all rows of a dataset roster."""
        ...

    def replace_profile_url(self, dataset: str, row_index: int, new_url: str) -> None:
        """Overwrite one value of the profile URL column."""
        ...


class DocumentStoreProtocol(Protocol):
    """Protocol for merged document persistence."""

    def read(self, dataset: str) -> list[dict[str, Any]]:
        """Read the merged records of a dataset."""
        ...

    def write(self, dataset: str, records: list[dict[str, Any]]) -> None:
        """Replace the merged records of a dataset."""
        ...
