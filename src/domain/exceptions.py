"""Domain exceptions for the leaderboard pipeline."""


class LeaderboardError(Exception):
    """Base error for the leaderboard pipeline."""

    pass


class ProfileURLParsingError(LeaderboardError, ValueError):
    """Profile URL is not a recognized LeetCode profile link."""

    pass


class RemoteFetchFailed(LeaderboardError):
    """LeetCode lookup failed (transport, payload or unknown user)."""

    def __init__(self, username: str, reason: str):
        self.username = username
        self.reason = reason
        super().__init__(f"Failed to fetch stats for {username}: {reason}")


class RosterError(LeaderboardError):
    """Problem with a dataset's roster files."""

    def __init__(self, dataset: str, message: str):
        self.dataset = dataset
        super().__init__(f"[{dataset}] {message}")


class RosterShapeMismatch(RosterError):
    """Roster column files have different row counts."""

    def __init__(self, dataset: str, lengths: dict[str, int]):
        self.lengths = lengths
        counts = ", ".join(f"{column}={count}" for column, count in lengths.items())
        super().__init__(dataset, f"Roster columns do not match: {counts}")


class RosterReadFailed(RosterError):
    """Roster column file could not be read."""

    pass


class RosterWriteFailed(RosterError):
    """Roster column file could not be written."""

    pass


class DocumentError(LeaderboardError):
    """Problem with a dataset's merged JSON document."""

    def __init__(self, dataset: str, message: str):
        self.dataset = dataset
        super().__init__(f"[{dataset}] {message}")


class DocumentReadFailed(DocumentError):
    """Existing document could not be read or parsed."""

    pass


class DocumentWriteFailed(DocumentError):
    """Document could not be written."""

    pass
