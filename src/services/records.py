"""Builds merged leaderboard records from roster rows."""

from loguru import logger

from domain.exceptions import ProfileURLParsingError
from domain.models import DifficultyStats, MergedRecord, RosterRow, StatsFetchFailed
from domain.parsers.profile_url import ProfileURLParser
from infrastructure.interfaces import StatsClientProtocol


class RecordBuilder:
    """Classifies a row's profile URL and attaches LeetCode stats to it."""

    def __init__(
        self,
        *,
        stats_client: StatsClientProtocol,
        url_parser: type[ProfileURLParser] = ProfileURLParser,
    ):
        self.stats_client = stats_client
        self.url_parser = url_parser

    async def build(self, row: RosterRow) -> MergedRecord:
        """
        Build the merged record for one roster row.

        Unrecognized profile URLs get the no-data shape without a remote call.
        A failed lookup is coerced to zero stats and no submissions, and the
        record is flagged with ``fetch_failed``.
        """
        try:
            handle = self.url_parser.parse(row.profile_url)
        except ProfileURLParsingError:
            logger.info(f"URL for {row} is not a LeetCode profile, skipping API call")
            return MergedRecord.without_data(row)

        logger.debug(f"Fetching LeetCode data for {row} as {handle}")
        result = await self.stats_client.fetch_stats(handle)

        if isinstance(result, StatsFetchFailed):
            logger.warning(f"Using zero stats for {row} ({handle}): {result.reason}")
            return MergedRecord(
                row=row,
                account_handle=handle,
                stats=DifficultyStats(),
                recent_submissions=[],
                fetch_failed=True,
            )

        return MergedRecord(
            row=row,
            account_handle=handle,
            stats=result.stats,
            recent_submissions=list(result.recent_submissions),
        )
