"""Per-dataset mutual exclusion."""

import asyncio


class DatasetLocks:
    """Hands out one asyncio lock per dataset name.

    Guards the read-modify-write of a dataset's roster URL column and JSON
    document. In-process only.
    """

    def __init__(self):
        self._locks: dict[str, asyncio.Lock] = {}

    def __call__(self, dataset: str) -> asyncio.Lock:
        lock = self._locks.get(dataset)
        if lock is None:
            lock = self._locks[dataset] = asyncio.Lock()
        return lock
