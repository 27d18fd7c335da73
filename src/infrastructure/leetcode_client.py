"""Client for the LeetCode GraphQL API."""

from typing import Any

from loguru import logger

from domain.exceptions import RemoteFetchFailed
from domain.models import DifficultyStats, StatsFetched, StatsFetchFailed, StatsFetchResult

from .interfaces import HTTPClientProtocol

GRAPHQL_URL = "https://leetcode.com/graphql"

USER_STATS_QUERY = """
query userStats($username: String!) {
  matchedUser(username: $username) {
    username
    submitStats: submitStatsGlobal {
      acSubmissionNum {
        difficulty
        count
        submissions
      }
    }
  }
}
"""

RECENT_SUBMISSIONS_QUERY = """
query recentAcSubmissions($username: String!, $limit: Int!) {
  recentAcSubmissionList(username: $username, limit: $limit) {
    id
    title
    timestamp
    statusDisplay
    runtime
    memory
    lang
  }
}
"""

# difficulty tag -> DifficultyStats field
DIFFICULTY_FIELDS = {
    "All": "total_solved",
    "Easy": "easy_solved",
    "Medium": "medium_solved",
    "Hard": "hard_solved",
}


class LeetCodeStatsClient:
    """Fetches solved counts and recent accepted submissions for an account."""

    def __init__(
        self,
        http_client: HTTPClientProtocol,
        *,
        graphql_url: str = GRAPHQL_URL,
        recent_limit: int = 2,
    ):
        self.http_client = http_client
        self.graphql_url = graphql_url
        self.recent_limit = recent_limit

    async def fetch_stats(self, username: str) -> StatsFetchResult:
        """
        Fetch stats for a LeetCode account.

        Never raises: any failure is logged and returned as StatsFetchFailed.
        """
        logger.debug(f"Fetching LeetCode data for {username}")

        try:
            stats = await self._fetch_difficulty_stats(username)
            recent = await self._fetch_recent_submissions(username)
        except RemoteFetchFailed as e:
            logger.warning(str(e))
            return StatsFetchFailed(reason=e.reason)
        except Exception as e:
            logger.warning(f"Error fetching data for {username}: {e!r}")
            return StatsFetchFailed(reason=repr(e))

        return StatsFetched(stats=stats, recent_submissions=recent)

    async def _query(self, username: str, query: str, variables: dict[str, Any]) -> dict:
        body = await self.http_client.post_json(
            self.graphql_url, {"query": query, "variables": variables}
        )
        if not isinstance(body, dict):
            raise RemoteFetchFailed(username, "response is not a JSON object")
        if body.get("errors"):
            messages = "; ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in body["errors"]
            )
            raise RemoteFetchFailed(username, messages)
        data = body.get("data")
        if not isinstance(data, dict):
            raise RemoteFetchFailed(username, "response has no data")
        return data

    async def _fetch_difficulty_stats(self, username: str) -> DifficultyStats:
        data = await self._query(username, USER_STATS_QUERY, {"username": username})

        matched_user = data.get("matchedUser")
        if not matched_user:
            raise RemoteFetchFailed(username, "user not found")

        counts = (matched_user.get("submitStats") or {}).get("acSubmissionNum") or []

        values = {}
        for item in counts:
            field_name = DIFFICULTY_FIELDS.get(item.get("difficulty"))
            count = item.get("count")
            if field_name is None or not isinstance(count, int):
                continue
            values[field_name] = count

        return DifficultyStats(**values)

    async def _fetch_recent_submissions(self, username: str) -> list[dict[str, Any]]:
        data = await self._query(
            username,
            RECENT_SUBMISSIONS_QUERY,
            {"username": username, "limit": self.recent_limit},
        )
        return list(data.get("recentAcSubmissionList") or [])
