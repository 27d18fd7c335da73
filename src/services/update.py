"""Service for correcting a single student's profile URL."""

from loguru import logger

from domain.exceptions import DocumentWriteFailed, RosterError
from domain.models import UpdateResult, UpdateStatus
from domain.ranking import sort_records
from infrastructure.interfaces import DocumentStoreProtocol, RosterStoreProtocol
from infrastructure.locks import DatasetLocks
from infrastructure.roster_store import RosterStore
from services.records import RecordBuilder


class UpdateService:
    """Rewrites one roster URL and patches that record in the dataset document."""

    def __init__(
        self,
        *,
        roster_store: RosterStoreProtocol,
        document_store: DocumentStoreProtocol,
        record_builder: RecordBuilder,
        locks: DatasetLocks,
        datasets: list[str],
    ):
        """Initialize service with dependencies."""
        self.roster_store = roster_store
        self.document_store = document_store
        self.record_builder = record_builder
        self.locks = locks
        self.datasets = list(datasets)

    async def update_profile(self, identifier: str, new_url: str) -> UpdateResult:
        """
        Point ``identifier`` at ``new_url`` and refresh its record.

        Datasets are searched in configured order and the first one holding
        the identifier wins. Unreadable rosters are skipped.

        Returns:
            UpdateResult; status NOT_FOUND if no dataset has the identifier,
            in which case nothing is written.

        Raises:
            DocumentReadFailed: If the matched dataset's document is corrupt
            DocumentWriteFailed: If the patched document cannot be saved
            RosterWriteFailed: If the URL column cannot be rewritten
        """
        identifier = identifier.strip()
        new_url = new_url.strip()
        logger.info(f"Updating profile URL for {identifier} to {new_url!r}")

        for dataset in self.datasets:
            async with self.locks(dataset):
                try:
                    rows = self.roster_store.load(dataset)
                except RosterError as e:
                    logger.warning(f"Skipping {dataset} while searching for {identifier}: {e}")
                    continue

                row_index = RosterStore.find_row_index(rows, identifier)
                if row_index is None:
                    continue

                return await self._apply(dataset, rows, row_index, new_url)

        logger.info(f"Identifier {identifier} not found in any dataset")
        return UpdateResult.not_found()

    async def _apply(self, dataset, rows, row_index, new_url) -> UpdateResult:
        row = rows[row_index].with_profile_url(new_url)

        # Read and fetch before writing so a corrupt document fails with no file changed.
        document = self.document_store.read(dataset)

        record = await self.record_builder.build(row)
        entries = [entry for entry in document if entry.get("identifier") != row.identifier]
        entries.append(record.to_dict())

        self.roster_store.replace_profile_url(dataset, row_index, new_url)
        try:
            self.document_store.write(dataset, sort_records(entries))
        except DocumentWriteFailed:
            logger.error(
                f"Roster URL for {row} in {dataset} was changed but the document was not; "
                "the next merge will bring it up to date"
            )
            raise

        logger.info(f"Updated data for {row} in {dataset}")

        if not record.has_data:
            return UpdateResult(UpdateStatus.UNRECOGNIZED_URL, dataset, row.name)
        if record.fetch_failed:
            return UpdateResult(UpdateStatus.FETCH_FAILED, dataset, row.name)
        return UpdateResult(UpdateStatus.UPDATED, dataset, row.name, record.stats.total_solved)
