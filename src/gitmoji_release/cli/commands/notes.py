"""Implementation of the 'notes' command."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from gitmoji_release.cli.commands._common import build_plan, load_project_config, project_path_from
from gitmoji_release.core.notes import render_markdown

if TYPE_CHECKING:
    from rich.console import Console


def run_notes(
    path: str | None,
    version_override: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Print release notes for the commits since the last release.

    Args:
        path: Optional path to project directory
        version_override: Version for the notes heading instead of the computed one
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = project_path_from(path)
    config = load_project_config(project_path, err_console)
    plan = build_plan(project_path, config, err_console)

    version = version_override or (str(plan.next_version) if plan.next_version else None)
    if version is None:
        console.print("[yellow]No release warranted; no notes to render.[/]")
        return

    content = render_markdown(
        plan.notes,
        version,
        datetime.now(UTC).date(),
        include_scope=config.changelog.include_scope,
        include_sha=config.changelog.include_sha,
    )
    # Plain output so the markdown can be piped into a file.
    console.print(content, markup=False, highlight=False)
