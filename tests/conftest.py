"""Shared fixtures for leaderboard tests."""

import asyncio
from pathlib import Path

import pytest

from domain.models import DifficultyStats, StatsFetched, StatsFetchFailed
from infrastructure.document_store import DocumentStore
from infrastructure.locks import DatasetLocks
from infrastructure.roster_store import ROSTER_COLUMNS, RosterStore
from services import MergeService, RecordBuilder, UpdateService

DATASETS = ["September", "January", "Second"]


def write_roster(root: Path, dataset: str, rows: list[dict[str, str]]) -> Path:
    """Write the six column files of a roster."""
    directory = root / f"details_{dataset}"
    directory.mkdir(parents=True, exist_ok=True)
    for field_name, file_name in ROSTER_COLUMNS.items():
        values = [row[field_name] for row in rows]
        (directory / file_name).write_text("\n".join(values) + "\n", encoding="utf-8")
    return directory


def make_row(identifier: str, handle: str | None = None, **overrides) -> dict[str, str]:
    row = {
        "identifier": identifier,
        "name": f"Student {identifier}",
        "profile_url": f"https://leetcode.com/u/{handle}/" if handle else "https://example.com/me",
        "section": "A",
        "day": "Mon",
        "phone": "5550100",
    }
    row.update(overrides)
    return row


class FakeStatsClient:
    """Stats client answering from a dict of handle -> total solved.

    Handles missing from the dict fail. ``delay`` makes every call yield to
    the event loop.
    """

    def __init__(self, totals: dict[str, int] | None = None, delay: float = 0):
        self.totals = totals or {}
        self.delay = delay
        self.calls: list[str] = []

    async def fetch_stats(self, username: str):
        self.calls.append(username)
        if self.delay:
            await asyncio.sleep(self.delay)
        if username not in self.totals:
            return StatsFetchFailed(reason="user not found")
        total = self.totals[username]
        return StatsFetched(
            stats=DifficultyStats(total_solved=total, easy_solved=total),
            recent_submissions=[{"id": "1", "title": "Two Sum", "lang": "python3"}],
        )


@pytest.fixture
def roster_root(tmp_path) -> Path:
    root = tmp_path / "rosters"
    root.mkdir()
    return root


@pytest.fixture
def documents_dir(tmp_path) -> Path:
    directory = tmp_path / "documents"
    directory.mkdir()
    return directory


@pytest.fixture
def stats_client() -> FakeStatsClient:
    return FakeStatsClient({"alice": 120, "bob": 45, "carol": 300, "dave": 10})


@pytest.fixture
def services(roster_root, documents_dir, stats_client):
    roster_store = RosterStore(roster_root)
    document_store = DocumentStore(documents_dir)
    record_builder = RecordBuilder(stats_client=stats_client)
    locks = DatasetLocks()
    merge = MergeService(
        roster_store=roster_store,
        document_store=document_store,
        record_builder=record_builder,
        locks=locks,
        datasets=DATASETS,
    )
    update = UpdateService(
        roster_store=roster_store,
        document_store=document_store,
        record_builder=record_builder,
        locks=locks,
        datasets=DATASETS,
    )
    return merge, update


@pytest.fixture
def roster(roster_root):
    """Write a roster for a dataset under the test roster root."""

    def _write(dataset: str, rows: list[dict[str, str]]) -> Path:
        return write_roster(roster_root, dataset, rows)

    return _write


@pytest.fixture
def row():
    return make_row
