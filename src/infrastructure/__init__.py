from .document_store import DocumentStore
from .http_client import AsyncHTTPClient
from .leetcode_client import LeetCodeStatsClient
from .locks import DatasetLocks
from .roster_store import RosterStore

__all__ = [
    "AsyncHTTPClient",
    "DatasetLocks",
    "DocumentStore",
    "LeetCodeStatsClient",
    "RosterStore",
]
