"""Implementation of the 'prepare' command.

Runs the whole release decision: bump, notes, changelog and artifact.
Publishing, tagging and committing stay with the CI workflow, which reads
the printed tag and release commit message.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from gitmoji_release.cli.commands._common import (
    build_plan,
    check_release_branch,
    load_project_config,
    project_path_from,
)
from gitmoji_release.cli.commands.artifact import resolve_configured_artifact
from gitmoji_release.core.artifacts import canonical_name
from gitmoji_release.core.notes import prepend_changelog, render_markdown
from gitmoji_release.exceptions import GitmojiReleaseError

if TYPE_CHECKING:
    from rich.console import Console


def run_prepare(
    path: str | None,
    execute: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the prepare command.

    Args:
        path: Optional path to project directory
        execute: Whether to actually write the changelog and rename the artifact
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = project_path_from(path)
    config = load_project_config(project_path, err_console)
    plan = build_plan(project_path, config, err_console)

    if not plan.commits:
        console.print("[yellow]No commits found since last release. Nothing to do.[/]")
        return

    if not plan.should_release:
        console.print(
            "[yellow]No releasable changes found (only unrecognized commit types).[/]"
        )
        return

    version = str(plan.next_version)
    tag = config.version.format_tag(version)
    mode_str = "[green]EXECUTING[/]" if execute else "[yellow]DRY-RUN[/]"
    current = plan.current_version or "nothing"
    console.print(
        f"\n{mode_str} - {plan.bump} release from [cyan]{current}[/] to [green]{version}[/]\n"
    )

    notes = render_markdown(
        plan.notes,
        version,
        datetime.now(UTC).date(),
        include_scope=config.changelog.include_scope,
        include_sha=config.changelog.include_sha,
    )
    changelog_path = project_path / config.changelog.path

    if not execute:
        asset_name = canonical_name(config.artifact.name_pattern, version)
        console.print(
            Panel(
                "[bold]Would make the following changes:[/]\n\n"
                + (
                    f"  • Prepend release notes to [cyan]{config.changelog.path}[/]\n"
                    if config.changelog.enabled
                    else ""
                )
                + f"  • Rename the built artifact to [cyan]{asset_name}[/]\n"
                f"  • Tag [cyan]{tag}[/]",
                title="[yellow]Dry Run Preview[/]",
                border_style="yellow",
            )
        )
        console.print(notes, markup=False, highlight=False)
        console.print("\n[dim]Run with [cyan]--execute[/] to apply these changes.[/]")
        return

    check_release_branch(project_path, config, err_console)

    # Resolve the artifact before writing anything so a broken build leaves no trace.
    try:
        asset = resolve_configured_artifact(project_path, version, config.artifact)
    except GitmojiReleaseError as e:
        err_console.print(f"[red]Error resolving artifact:[/] {e}")
        raise SystemExit(1) from e
    console.print(f"  [green]✓[/] Release artifact [cyan]{asset.path}[/]")

    if config.changelog.enabled:
        try:
            prepend_changelog(changelog_path, notes)
        except OSError as e:
            err_console.print(f"[red]Error writing changelog:[/] {e}")
            raise SystemExit(1) from e
        console.print(f"  [green]✓[/] Updated {config.changelog.path}")

    console.print(
        Panel(
            f"[green]Prepared release {version}![/]\n\n"
            f"Tag:     [cyan]{tag}[/]\n"
            f"Asset:   [cyan]{asset.path}[/] ({config.artifact.label})\n"
            f"Message: [cyan]{escape(repr(config.version.format_release_message(version)))}[/]",
            title="[green]Prepare Complete[/]",
            border_style="green",
        )
    )
