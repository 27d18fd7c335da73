"""Async HTTP client used for talking to LeetCode."""

from typing import Any

import httpx
from loguru import logger

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Referer": "https://leetcode.com",
    "User-Agent": "Mozilla/5.0 (compatible; leetcode-roster-leaderboard)",
}


class AsyncHTTPClient:
    """Thin wrapper around ``httpx.AsyncClient`` with a mandatory timeout."""

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize client.

        Args:
            timeout: Per-request timeout in seconds (connect, read and write)
            transport: Optional transport, used by tests to stub the network
        """
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers=DEFAULT_HEADERS,
            transport=transport,
        )

    async def post_json(self, url: str, payload: dict[str, Any]) -> Any:
        """POST a JSON payload and return the decoded JSON response.

        Raises:
            httpx.HTTPError: On transport errors, timeouts and non-2xx responses
            ValueError: If the response body is not valid JSON
        """
        logger.debug(f"POST {url}")
        response = await self._client.post(url, json=payload)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        await self._client.aclose()
