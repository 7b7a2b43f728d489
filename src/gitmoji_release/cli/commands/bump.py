"""Implementation of the 'bump' command.

Prints the bump decision and the next version without changing anything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitmoji_release.cli.commands._common import build_plan, load_project_config, project_path_from

if TYPE_CHECKING:
    from rich.console import Console


def run_bump(path: str | None, console: Console, err_console: Console) -> None:
    """Run the bump command.

    Args:
        path: Optional path to project directory
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = project_path_from(path)
    config = load_project_config(project_path, err_console)
    plan = build_plan(project_path, config, err_console)

    if not plan.should_release:
        console.print(
            f"[yellow]No release warranted[/] ({len(plan.commits)} commits, none classified)."
        )
        return

    current = str(plan.current_version) if plan.current_version else "(first release)"
    console.print(f"Bump:         [cyan]{plan.bump}[/]")
    console.print(f"Current:      {current}")
    console.print(f"Next version: [green]{plan.next_version}[/]")
    console.print(f"Tag:          {config.version.format_tag(str(plan.next_version))}")
