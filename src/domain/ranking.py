"""Leaderboard ordering."""

import math
from typing import Any


def total_solved_of(record: dict[str, Any]) -> float:
    """Sort key value for a serialized record; anything non-numeric counts as 0."""
    stats = record.get("stats")
    if not isinstance(stats, dict):
        return 0
    value = stats.get("totalSolved")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if math.isnan(value):
        return 0
    return value


def sort_records(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Order records by total solved, highest first. Ties keep their input order."""
    return sorted(records, key=total_solved_of, reverse=True)
