"""Flat-file roster storage.

A roster is a directory of parallel text files, one value per line. Line *i*
of every file describes the same person.
"""

from pathlib import Path

from loguru import logger

from domain.exceptions import RosterReadFailed, RosterShapeMismatch, RosterWriteFailed
from domain.models import RosterRow

# RosterRow field -> column file name
ROSTER_COLUMNS = {
    "identifier": "roll.txt",
    "name": "name.txt",
    "profile_url": "urls.txt",
    "section": "sections.txt",
    "day": "day.txt",
    "phone": "mobno.txt",
}


class RosterStore:
    """Reads roster columns and rewrites the profile URL column."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def dataset_dir(self, dataset: str) -> Path:
        return self.root / f"details_{dataset}"

    def column_path(self, dataset: str, field_name: str) -> Path:
        return self.dataset_dir(dataset) / ROSTER_COLUMNS[field_name]

    def load(self, dataset: str) -> list[RosterRow]:
        """
        Load all rows of a dataset.

        Lines are trimmed and blank lines dropped before the columns are zipped.

        Raises:
            RosterReadFailed: If a column file cannot be read
            RosterShapeMismatch: If the columns have different row counts
        """
        logger.debug(f"Loading roster for {dataset} from {self.dataset_dir(dataset)}")

        columns = {
            field_name: self._read_column(dataset, field_name) for field_name in ROSTER_COLUMNS
        }

        lengths = {ROSTER_COLUMNS[name]: len(values) for name, values in columns.items()}
        if len(set(lengths.values())) > 1:
            raise RosterShapeMismatch(dataset, lengths)

        rows = [RosterRow(**dict(zip(columns, values))) for values in zip(*columns.values())]
        logger.debug(f"Loaded {len(rows)} roster rows for {dataset}")
        return rows

    def replace_profile_url(self, dataset: str, row_index: int, new_url: str) -> None:
        """Overwrite the whole profile URL column with one value replaced.

        Blank values and values spanning lines are rejected: either would
        shift the column against the others on the next load.
        """
        new_url = new_url.strip()
        if not new_url or len(new_url.splitlines()) > 1:
            raise RosterWriteFailed(dataset, f"Profile URL must be a single non-empty line: {new_url!r}")

        urls = self._read_column(dataset, "profile_url")
        if not 0 <= row_index < len(urls):
            raise RosterWriteFailed(
                dataset, f"Row {row_index} out of range for {len(urls)} profile URLs"
            )

        urls[row_index] = new_url
        path = self.column_path(dataset, "profile_url")
        try:
            path.write_text("\n".join(urls) + "\n", encoding="utf-8")
        except OSError as e:
            raise RosterWriteFailed(dataset, f"Failed to write {path}: {e}") from e

        logger.info(f"Replaced profile URL of row {row_index} in {dataset}")

    @staticmethod
    def find_row_index(rows: list[RosterRow], identifier: str) -> int | None:
        for index, row in enumerate(rows):
            if row.identifier == identifier:
                return index
        return None

    def _read_column(self, dataset: str, field_name: str) -> list[str]:
        path = self.column_path(dataset, field_name)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RosterReadFailed(dataset, f"Failed to read {path}: {e}") from e

        return [line.strip() for line in text.splitlines() if line.strip()]
