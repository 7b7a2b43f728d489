"""Core business logic for gitmoji-release.

This module contains the fundamental building blocks:
- Gitmoji type rules and bump classification
- Release notes grouping and rendering
- Release artifact resolution
- Semantic version bumping
"""

from __future__ import annotations

from gitmoji_release.core.artifacts import ReleaseAsset, find_candidates, resolve_artifact
from gitmoji_release.core.commits import (
    Commit,
    Dropped,
    Kept,
    calculate_bump,
    classify_commit,
    filter_skip_release_commits,
    parse_commit,
    parse_header,
)
from gitmoji_release.core.gitmoji import DEFAULT_RULES, Gitmoji, RuleTable, TypeRule
from gitmoji_release.core.notes import NoteEntry, NoteGroup, render_markdown, transform
from gitmoji_release.core.release import ReleasePlan, plan_release
from gitmoji_release.core.version import BumpType, Version, parse_version

__all__ = [
    # Gitmoji
    "DEFAULT_RULES",
    "Gitmoji",
    "RuleTable",
    "TypeRule",
    # Commits
    "Commit",
    "Dropped",
    "Kept",
    "calculate_bump",
    "classify_commit",
    "filter_skip_release_commits",
    "parse_commit",
    "parse_header",
    # Notes
    "NoteEntry",
    "NoteGroup",
    "render_markdown",
    "transform",
    # Artifacts
    "ReleaseAsset",
    "find_candidates",
    "resolve_artifact",
    # Release
    "ReleasePlan",
    "plan_release",
    # Version
    "BumpType",
    "Version",
    "parse_version",
]
