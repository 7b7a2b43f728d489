"""Shared setup for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from gitmoji_release.config import load_config
from gitmoji_release.core.release import plan_release
from gitmoji_release.exceptions import GitmojiReleaseError
from gitmoji_release.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from gitmoji_release.config.models import GitmojiReleaseConfig
    from gitmoji_release.core.release import ReleasePlan


def project_path_from(path: str | None) -> Path:
    return Path(path) if path else Path.cwd()


def load_project_config(project_path: Path, err_console: Console) -> GitmojiReleaseConfig:
    """Load configuration or exit with status 1."""
    try:
        return load_config(project_path)
    except GitmojiReleaseError as e:
        err_console.print(f"[red]Error loading config:[/] {e}")
        raise SystemExit(1) from e


def check_release_branch(
    project_path: Path,
    config: GitmojiReleaseConfig,
    err_console: Console,
) -> None:
    """Exit with status 1 unless HEAD is on the configured release branch."""
    try:
        branch = GitRepository(project_path).current_branch()
    except GitmojiReleaseError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    if branch != config.default_branch:
        err_console.print(
            f"[red]Error:[/] Releases are only made from [cyan]{config.default_branch}[/], "
            f"current branch is [cyan]{branch}[/]"
        )
        raise SystemExit(1)


def build_plan(
    project_path: Path,
    config: GitmojiReleaseConfig,
    err_console: Console,
) -> ReleasePlan:
    """Read the commits since the last release tag and plan the release."""
    try:
        repo = GitRepository(project_path)
        latest_tag = repo.get_latest_tag(config.version.tag_pattern)
        commits = repo.get_commits_since_tag(latest_tag)
        return plan_release(commits, latest_tag, config)
    except GitmojiReleaseError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e
