"""Configuration management for gitmoji-release."""

from __future__ import annotations

from gitmoji_release.config.loader import load_config
from gitmoji_release.config.models import (
    ArtifactConfig,
    ChangelogConfig,
    CommitsConfig,
    GitmojiReleaseConfig,
    VersionConfig,
)

__all__ = [
    "ArtifactConfig",
    "ChangelogConfig",
    "CommitsConfig",
    "GitmojiReleaseConfig",
    "VersionConfig",
    "load_config",
]
