"""Value objects for roster rows."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class RosterRow:
    """One person in a dataset roster, assembled from the parallel column files."""

    identifier: str
    name: str
    profile_url: str
    section: str
    day: str
    phone: str

    def with_profile_url(self, profile_url: str) -> "RosterRow":
        """Return a copy of the row pointing at another profile."""
        return replace(self, profile_url=profile_url)

    def to_dict(self) -> dict[str, str]:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "profileUrl": self.profile_url,
            "section": self.section,
            "day": self.day,
            "phone": self.phone,
        }

    def __str__(self) -> str:
        """String representation."""
        return f"{self.identifier} ({self.name})"
