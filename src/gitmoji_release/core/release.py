"""Release planning.

Combines the bump decision and the release notes for one run. Pure: the
caller reads the commits and the latest tag, and performs any writes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gitmoji_release.core.commits import calculate_bump, filter_skip_release_commits
from gitmoji_release.core.gitmoji import DEFAULT_RULES
from gitmoji_release.core.notes import transform
from gitmoji_release.core.version import BumpType, Version
from gitmoji_release.exceptions import InvalidVersionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gitmoji_release.config.models import GitmojiReleaseConfig
    from gitmoji_release.core.commits import Commit
    from gitmoji_release.core.gitmoji import RuleTable
    from gitmoji_release.core.notes import NoteGroup


@dataclass(frozen=True)
class ReleasePlan:
    """Outcome of release planning.

    next_version is None when no release is warranted.
    """

    bump: BumpType
    current_version: Version | None
    next_version: Version | None
    notes: tuple[NoteGroup, ...]
    commits: tuple[Commit, ...]

    @property
    def should_release(self) -> bool:
        return self.next_version is not None


def plan_release(
    commits: Sequence[Commit],
    latest_tag: str | None,
    config: GitmojiReleaseConfig,
    rules: RuleTable = DEFAULT_RULES,
) -> ReleasePlan:
    """Decide the next version and notes for the commits since latest_tag.

    The first release (no tag yet) gets config.version.initial_version.

    Raises:
        InvalidVersionError: If latest_tag does not hold a semantic version
    """
    commits = tuple(filter_skip_release_commits(commits, config.commits.skip_release_patterns))
    bump = calculate_bump(commits, rules)
    notes = tuple(transform(commits, rules, config.changelog.section_order))

    current: Version | None = None
    if latest_tag is not None:
        tag_version = config.version.parse_tag(latest_tag)
        if tag_version is None:
            raise InvalidVersionError(
                f"Tag {latest_tag!r} does not match format {config.version.tag_format!r}"
            )
        current = Version.parse(tag_version)

    if bump is BumpType.NONE:
        next_version = None
    elif current is None:
        next_version = Version.parse(config.version.initial_version)
    else:
        next_version = current.bump(bump)

    return ReleasePlan(
        bump=bump,
        current_version=current,
        next_version=next_version,
        notes=notes,
        commits=commits,
    )
