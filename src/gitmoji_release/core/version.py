"""Semantic version handling.

BumpType is totally ordered (NONE < PATCH < MINOR < MAJOR) so the release
decision for a set of commits is simply the maximum over them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

from gitmoji_release.exceptions import InvalidVersionError

_SEMVER_RE = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>[0-9A-Za-z.-]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z.-]+))?$"
)


@total_ordering
class BumpType(Enum):
    """Magnitude of a version increment."""

    NONE = "none"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"

    @property
    def rank(self) -> int:
        return _BUMP_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BumpType):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value


_BUMP_RANK = {
    BumpType.NONE: 0,
    BumpType.PATCH: 1,
    BumpType.MINOR: 2,
    BumpType.MAJOR: 3,
}


@dataclass(frozen=True)
class Version:
    """A MAJOR.MINOR.PATCH version with optional pre-release label.

    Build metadata is accepted by parse() but not retained.
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None

    @classmethod
    def parse(cls, value: str) -> Version:
        """Parse a version string, tolerating a leading ``v``.

        Raises:
            InvalidVersionError: If the string is not a semantic version
        """
        match = _SEMVER_RE.match(value.strip().removeprefix("v"))
        if not match:
            raise InvalidVersionError(f"Invalid semantic version: {value!r}")
        return cls(
            int(match.group("major")),
            int(match.group("minor")),
            int(match.group("patch")),
            match.group("prerelease"),
        )

    def bump(self, bump_type: BumpType) -> Version:
        """Return the next version for the given bump.

        A pre-release is promoted to its release version on any bump
        rather than skipping past it. BumpType.NONE returns self.
        """
        if bump_type is BumpType.NONE:
            return self
        if self.prerelease:
            return Version(self.major, self.minor, self.patch)
        if bump_type is BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump_type is BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        return Version(self.major, self.minor, self.patch + 1)

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        return f"{base}-{self.prerelease}" if self.prerelease else base


def parse_version(value: str) -> Version:
    """Parse a version string. See Version.parse."""
    return Version.parse(value)
