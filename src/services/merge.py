"""Service that rebuilds the merged leaderboard document of each dataset."""

import asyncio

from loguru import logger

from domain.exceptions import DocumentWriteFailed, RosterError
from domain.models import MergedRecord, RosterRow
from domain.ranking import sort_records
from infrastructure.interfaces import DocumentStoreProtocol, RosterStoreProtocol
from infrastructure.locks import DatasetLocks
from services.records import RecordBuilder


class MergeService:
    """Fetches stats for every roster row and replaces the dataset document."""

    def __init__(
        self,
        *,
        roster_store: RosterStoreProtocol,
        document_store: DocumentStoreProtocol,
        record_builder: RecordBuilder,
        locks: DatasetLocks,
        datasets: list[str],
        fetch_concurrency: int = 1,
    ):
        """Initialize service with dependencies."""
        self.roster_store = roster_store
        self.document_store = document_store
        self.record_builder = record_builder
        self.locks = locks
        self.datasets = list(datasets)
        self.fetch_concurrency = max(1, fetch_concurrency)

    async def run(self, dataset: str) -> bool:
        """
        Rebuild one dataset's document.

        Returns True if a new document was written. Roster and write errors
        are logged and leave the previous document in place.
        """
        logger.info(f"Starting merge for {dataset}")

        try:
            rows = self.roster_store.load(dataset)
        except RosterError as e:
            logger.error(f"Skipping merge for {dataset}: {e}")
            return False

        records = await self._build_records(dataset, rows)

        async with self.locks(dataset):
            # The roster may have been edited by an update while we were fetching.
            try:
                current_rows = self.roster_store.load(dataset)
            except RosterError as e:
                logger.error(f"Roster for {dataset} became unusable during merge: {e}")
                return False

            records = await self._reconcile(rows, records, current_rows)
            document = sort_records([record.to_dict() for record in records])

            try:
                self.document_store.write(dataset, document)
            except DocumentWriteFailed as e:
                logger.error(f"Failed to save merged document for {dataset}: {e}")
                return False

        failed = sum(1 for record in records if record.fetch_failed)
        if failed:
            logger.warning(f"{failed} LeetCode lookup(s) failed for {dataset}")
        logger.info(f"Merged {len(records)} records for {dataset}")
        return True

    async def run_all(self) -> dict[str, bool]:
        """Rebuild every configured dataset, one after another."""
        results = {}
        for dataset in self.datasets:
            try:
                results[dataset] = await self.run(dataset)
            except Exception:
                logger.exception(f"Unexpected error while merging {dataset}")
                results[dataset] = False
        return results

    async def _build_records(self, dataset: str, rows: list[RosterRow]) -> list[MergedRecord]:
        logger.debug(f"Building {len(rows)} records for {dataset}")

        if self.fetch_concurrency == 1:
            return [await self.record_builder.build(row) for row in rows]

        semaphore = asyncio.Semaphore(self.fetch_concurrency)

        async def build(row: RosterRow) -> MergedRecord:
            async with semaphore:
                return await self.record_builder.build(row)

        # gather keeps roster order regardless of completion order
        return list(await asyncio.gather(*(build(row) for row in rows)))

    async def _reconcile(
        self,
        snapshot: list[RosterRow],
        records: list[MergedRecord],
        current_rows: list[RosterRow],
    ) -> list[MergedRecord]:
        """Align built records with the roster as it is now, rebuilding changed rows."""
        built = {row: record for row, record in zip(snapshot, records)}
        reconciled = []
        for row in current_rows:
            record = built.get(row)
            if record is None:
                logger.info(f"Row {row} changed during merge, rebuilding it")
                record = await self.record_builder.build(row)
            reconciled.append(record)
        return reconciled
