"""Release notes from gitmoji commits.

transform() groups classified commits into sections ordered by a fixed
priority list and sorts the entries inside each section, so the output is
identical for any ordering of the input commits. render_markdown() and
prepend_changelog() turn the groups into CHANGELOG.md content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gitmoji_release.core.commits import Kept, classify_commit
from gitmoji_release.core.gitmoji import DEFAULT_RULES, DEFAULT_SECTION_ORDER

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import date
    from pathlib import Path

    from gitmoji_release.core.commits import Commit
    from gitmoji_release.core.gitmoji import RuleTable

SHORT_HASH_LENGTH = 7
CHANGELOG_TITLE = "# Changelog"


@dataclass(frozen=True)
class NoteEntry:
    """One line of the release notes."""

    section: str
    subject: str
    short_hash: str
    scope: str | None = None

    @property
    def sort_key(self) -> tuple[str, str, str]:
        # Entries without a scope sort before scoped ones; the hash breaks ties.
        return (self.scope or "", self.subject, self.short_hash)


@dataclass(frozen=True)
class NoteGroup:
    """All entries of one section, already sorted."""

    section: str
    entries: tuple[NoteEntry, ...]


def to_note_entry(commit: Commit, rules: RuleTable = DEFAULT_RULES) -> NoteEntry | None:
    """Map a commit to its note entry, or None if its type is unclassified."""
    outcome = classify_commit(commit, rules)
    if not isinstance(outcome, Kept):
        return None
    return NoteEntry(
        section=outcome.rule.section,
        subject=commit.subject,
        short_hash=(commit.hash or "")[:SHORT_HASH_LENGTH],
        scope=commit.scope,
    )


def transform(
    commits: Iterable[Commit],
    rules: RuleTable = DEFAULT_RULES,
    section_order: Sequence[str] = DEFAULT_SECTION_ORDER,
) -> list[NoteGroup]:
    """Group commits into ordered release-note sections.

    Args:
        commits: Commits since the last release
        rules: Rule table resolving commit types to sections
        section_order: Section priority; unknown sections sort after it

    Returns:
        Fresh NoteGroup values; the input commits are never modified
    """
    by_section: dict[str, list[NoteEntry]] = {}
    for commit in commits:
        entry = to_note_entry(commit, rules)
        if entry is None:
            continue
        by_section.setdefault(entry.section, []).append(entry)

    rank = {section: index for index, section in enumerate(section_order)}
    unranked = len(section_order)

    def group_key(section: str) -> tuple[int, str]:
        return (rank.get(section, unranked), section)

    return [
        NoteGroup(
            section=section,
            entries=tuple(sorted(by_section[section], key=lambda e: e.sort_key)),
        )
        for section in sorted(by_section, key=group_key)
    ]


def format_entry(entry: NoteEntry, *, include_scope: bool = True, include_sha: bool = True) -> str:
    """Format a single entry as a markdown list item."""
    parts = ["-"]
    if include_scope and entry.scope:
        parts.append(f"**{entry.scope}:**")
    parts.append(entry.subject)
    if include_sha and entry.short_hash:
        parts.append(f"({entry.short_hash})")
    return " ".join(parts)


def render_markdown(
    groups: Sequence[NoteGroup],
    version: str,
    release_date: date,
    *,
    include_scope: bool = True,
    include_sha: bool = True,
) -> str:
    """Render note groups as a changelog section for one release."""
    lines = [f"## [{version}] - {release_date.isoformat()}", ""]

    for group in groups:
        lines.append(f"### {group.section}")
        lines.append("")
        lines.extend(
            format_entry(entry, include_scope=include_scope, include_sha=include_sha)
            for entry in group.entries
        )
        lines.append("")

    return "\n".join(lines)


def prepend_changelog(path: Path, content: str) -> Path:
    """Insert release content at the top of a changelog file.

    An existing ``# Changelog`` title stays first; the file is created
    with that title when missing.
    """
    section = content.rstrip("\n") + "\n"

    if path.exists():
        existing = path.read_text(encoding="utf-8")
    else:
        existing = ""

    if existing.startswith(CHANGELOG_TITLE):
        title, _, rest = existing.partition("\n")
        body = rest.lstrip("\n")
    else:
        title, body = CHANGELOG_TITLE, existing

    new_content = f"{title}\n\n{section}"
    if body:
        new_content += f"\n{body}"

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(new_content, encoding="utf-8")
    return path
