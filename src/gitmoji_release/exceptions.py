"""Exception hierarchy for gitmoji-release.

All errors raised by the package derive from GitmojiReleaseError so the
CLI can report them uniformly. Classification and release-note generation
never raise: unknown commits are simply excluded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class GitmojiReleaseError(Exception):
    """Base exception for all gitmoji-release errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(GitmojiReleaseError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml was found."""


class ConfigValidationError(ConfigError):
    """Configuration values failed validation."""


# =============================================================================
# Versions
# =============================================================================


class VersionError(GitmojiReleaseError):
    """Base class for version handling errors."""


class InvalidVersionError(VersionError):
    """A version or tag string is not a valid semantic version."""


# =============================================================================
# Git
# =============================================================================


class GitError(GitmojiReleaseError):
    """Git repository access failed."""


class GitCommandError(GitError):
    """A git subprocess exited with a non-zero status."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        self.stderr = stderr
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


# =============================================================================
# Artifacts
# =============================================================================


class ArtifactError(GitmojiReleaseError):
    """Base class for artifact resolution failures. Always fatal."""


class NoArtifactFoundError(ArtifactError):
    """No publishable artifact exists in the build output directory."""

    def __init__(self, directory: Path, listing: list[str]) -> None:
        self.directory = directory
        self.listing = listing
        contents = "\n".join(f"  {line}" for line in listing) if listing else "  (empty)"
        super().__init__(
            f"No built artifact found in {directory}. Did the build step run?\n"
            f"Directory contents:\n{contents}"
        )


class ArtifactIOError(ArtifactError):
    """Copying, moving or deleting an artifact failed."""


class ArtifactVerificationError(ArtifactError):
    """The publish glob does not match exactly one file after resolution."""
