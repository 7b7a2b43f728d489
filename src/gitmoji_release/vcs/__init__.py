"""Version control access."""

from __future__ import annotations

from gitmoji_release.vcs.git import GitRepository

__all__ = ["GitRepository"]
