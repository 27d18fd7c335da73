"""Storage for merged per-dataset JSON documents."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from loguru import logger

from domain.exceptions import DocumentReadFailed, DocumentWriteFailed


class DocumentStore:
    """Reads and replaces ``data_<dataset>.json`` files."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, dataset: str) -> Path:
        return self.directory / f"data_{dataset}.json"

    def exists(self, dataset: str) -> bool:
        return self.path_for(dataset).is_file()

    def read_bytes(self, dataset: str) -> bytes:
        """Raw document content, as served over HTTP."""
        path = self.path_for(dataset)
        try:
            return path.read_bytes()
        except OSError as e:
            raise DocumentReadFailed(dataset, f"Failed to read {path}: {e}") from e

    def read(self, dataset: str) -> list[dict[str, Any]]:
        """
        Read merged records. A missing document reads as an empty list.

        Raises:
            DocumentReadFailed: If the file exists but is unreadable or not a JSON array
        """
        path = self.path_for(dataset)
        if not path.exists():
            logger.debug(f"No document yet for {dataset}")
            return []

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise DocumentReadFailed(dataset, f"Failed to load {path}: {e}") from e

        if not isinstance(data, list):
            raise DocumentReadFailed(dataset, f"{path} does not contain a JSON array")
        return data

    def write(self, dataset: str, records: list[dict[str, Any]]) -> None:
        """Replace the document atomically with pretty-printed JSON."""
        path = self.path_for(dataset)
        tmp_name = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.directory,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                json.dump(records, tmp, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise DocumentWriteFailed(dataset, f"Failed to write {path}: {e}") from e

        logger.info(f"Saved {len(records)} records to {path}")
