"""Implementation of the 'resolve-artifact' command."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from gitmoji_release.cli.commands._common import load_project_config, project_path_from
from gitmoji_release.core.artifacts import resolve_artifact
from gitmoji_release.core.version import Version
from gitmoji_release.exceptions import GitmojiReleaseError

if TYPE_CHECKING:
    from rich.console import Console

    from gitmoji_release.config.models import ArtifactConfig
    from gitmoji_release.core.artifacts import ReleaseAsset


def resolve_configured_artifact(
    project_path: Path,
    version: str,
    artifact_config: ArtifactConfig,
    output_dir: Path | None = None,
) -> ReleaseAsset:
    """Run resolve_artifact with configured values, relative to project_path."""
    directory = output_dir or artifact_config.output_dir
    if not directory.is_absolute():
        directory = project_path / directory
    return resolve_artifact(
        directory,
        version,
        artifact_config.extension,
        artifact_config.exclude_pattern,
        artifact_config.name_pattern,
    )


def run_resolve_artifact(
    path: str | None,
    version: str,
    output_dir: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the resolve-artifact command.

    Args:
        path: Optional path to project directory
        version: Release version for the canonical name
        output_dir: Build output directory overriding the configured one
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = project_path_from(path)
    config = load_project_config(project_path, err_console)

    try:
        release_version = Version.parse(version)
        asset = resolve_configured_artifact(
            project_path,
            str(release_version),
            config.artifact,
            Path(output_dir) if output_dir else None,
        )
    except GitmojiReleaseError as e:
        err_console.print(f"[red]Error resolving artifact:[/] {e}")
        raise SystemExit(1) from e

    console.print(f"  [green]✓[/] {config.artifact.label}: [cyan]{asset.path}[/]")
