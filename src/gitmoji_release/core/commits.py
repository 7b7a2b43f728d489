"""Gitmoji commit parsing and bump classification.

A commit header has the form ``<type-token> <subject>``. The type token is
looked up in a RuleTable; commits whose token is unknown are kept out of
both the bump decision and the release notes. Nothing here raises for
malformed input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gitmoji_release.core.gitmoji import DEFAULT_RULES
from gitmoji_release.core.version import BumpType
from gitmoji_release.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from gitmoji_release.core.gitmoji import RuleTable, TypeRule

logger = get_logger("commits")

_HEADER_RE = re.compile(r"^(\S+)\s(.*)$")


@dataclass(frozen=True)
class Commit:
    """A commit reduced to what release decisions need.

    Attributes:
        header: First line of the commit message, stripped
        type: First whitespace-delimited token of the header
        subject: Remainder of the header after the type token
        scope: Optional scope supplied by the caller
        hash: Full commit SHA (may be empty)
        message: Full original commit message
    """

    header: str
    type: str
    subject: str
    scope: str | None = None
    hash: str = ""
    message: str = ""


@dataclass(frozen=True)
class Kept:
    """A commit whose type has a release rule."""

    commit: Commit
    rule: TypeRule


@dataclass(frozen=True)
class Dropped:
    """A commit whose type is not recognized."""

    commit: Commit


Classification = Kept | Dropped


def parse_header(header: str) -> tuple[str, str]:
    """Split a header into (type, subject).

    Exactly one whitespace character separates the two; any further
    whitespace belongs to the subject. A header without whitespace is all
    type and has an empty subject.
    """
    header = header.strip()
    match = _HEADER_RE.match(header)
    if match is None:
        return header, ""
    return match.group(1), match.group(2)


def parse_commit(message: str, sha: str = "", scope: str | None = None) -> Commit:
    """Build a Commit from a raw commit message."""
    lines = message.strip().splitlines()
    header = lines[0].strip() if lines else ""
    commit_type, subject = parse_header(header)
    return Commit(
        header=header,
        type=commit_type,
        subject=subject,
        scope=scope or None,
        hash=sha,
        message=message,
    )


def parse_commits(messages: Iterable[tuple[str, str]]) -> list[Commit]:
    """Parse ``(sha, message)`` pairs into commits, preserving order."""
    return [parse_commit(message, sha) for sha, message in messages]


def classify_commit(commit: Commit, rules: RuleTable = DEFAULT_RULES) -> Classification:
    """Decide whether a commit takes part in the release."""
    rule = rules.lookup(commit.type)
    if rule is None:
        logger.debug("Ignoring unclassified commit %s: %s", commit.hash[:7], commit.header)
        return Dropped(commit)
    return Kept(commit, rule)


def calculate_bump(commits: Iterable[Commit], rules: RuleTable = DEFAULT_RULES) -> BumpType:
    """Return the strongest bump implied by the commits.

    Unclassified commits contribute BumpType.NONE, so an empty or fully
    unclassified history yields NONE (no release).
    """
    bump = BumpType.NONE
    for commit in commits:
        outcome = classify_commit(commit, rules)
        if isinstance(outcome, Kept) and outcome.rule.bump > bump:
            bump = outcome.rule.bump
            if bump is BumpType.MAJOR:
                break
    return bump


def filter_skip_release_commits(
    commits: Sequence[Commit],
    skip_patterns: Sequence[str],
) -> list[Commit]:
    """Drop commits whose message contains a skip marker.

    Markers are matched case-insensitively anywhere in the full message.

    Args:
        commits: Commits to filter
        skip_patterns: Marker strings such as "[skip ci]"

    Returns:
        Commits without any skip marker, in their original order
    """
    if not skip_patterns:
        return list(commits)

    lowered = [pattern.lower() for pattern in skip_patterns]
    kept: list[Commit] = []
    for commit in commits:
        text = (commit.message or commit.header).lower()
        if any(pattern in text for pattern in lowered):
            logger.debug("Skipping commit %s with release skip marker", commit.hash[:7])
            continue
        kept.append(commit)
    return kept
