"""Runtime configuration read from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATASETS = ["September", "January", "Second"]


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value else default


@dataclass(frozen=True)
class Settings:
    """Service settings."""

    roster_root: Path = Path(".")
    documents_dir: Path = Path(".")
    datasets: list[str] = field(default_factory=lambda: list(DEFAULT_DATASETS))
    refresh_interval: float = 2 * 60 * 60
    request_timeout: float = 10.0
    graphql_url: str = "https://leetcode.com/graphql"
    recent_submission_limit: int = 2
    fetch_concurrency: int = 1
    admin_password: str | None = None
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, loading .env first."""
        load_dotenv()

        datasets_env = os.getenv("DATASETS")
        datasets = (
            [name.strip() for name in datasets_env.split(",") if name.strip()]
            if datasets_env
            else list(DEFAULT_DATASETS)
        )

        return cls(
            roster_root=Path(os.getenv("ROSTER_ROOT", ".")),
            documents_dir=Path(os.getenv("DOCUMENTS_DIR", ".")),
            datasets=datasets,
            refresh_interval=_get_float("REFRESH_INTERVAL_SECONDS", 2 * 60 * 60),
            request_timeout=_get_float("REQUEST_TIMEOUT_SECONDS", 10.0),
            graphql_url=os.getenv("LEETCODE_GRAPHQL_URL", "https://leetcode.com/graphql"),
            recent_submission_limit=_get_int("RECENT_SUBMISSION_LIMIT", 2),
            fetch_concurrency=_get_int("FETCH_CONCURRENCY", 1),
            admin_password=os.getenv("ADMIN_PASSWORD") or None,
            host=os.getenv("HOST", "0.0.0.0"),
            port=_get_int("PORT", 3001),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
