"""Parser for LeetCode profile URLs."""

from loguru import logger

from domain.exceptions import ProfileURLParsingError


class ProfileURLParser:
    """Extracts the account handle from a LeetCode profile URL."""

    PREFIX = "https://leetcode.com/u/"

    @classmethod
    def parse(cls, url: str) -> str:
        """
        Parse a profile URL and return the account handle.

        Only ``https://leetcode.com/u/<handle>`` is recognized; a single
        trailing slash is dropped.
        """
        logger.debug(f"Parsing profile URL: {url!r}")

        if not url or not url.startswith(cls.PREFIX):
            raise ProfileURLParsingError(
                f"Unrecognized LeetCode profile URL: {url!r}. "
                f"Expected format: {cls.PREFIX}<username>"
            )

        handle = url[len(cls.PREFIX):]
        if handle.endswith("/"):
            handle = handle[:-1]

        if not handle:
            raise ProfileURLParsingError(f"Profile URL has no username: {url!r}")

        return handle

