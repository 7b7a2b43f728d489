"""Read-only git access via the git CLI.

Only what a release decision needs: the latest release tag and the commit
messages since it. Tags, commits and pushes are left to the CI workflow.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from gitmoji_release.core.commits import Commit, parse_commit
from gitmoji_release.exceptions import GitCommandError, GitError
from gitmoji_release.logging import get_logger

logger = get_logger("git")

# ASCII unit/record separators keep multi-line messages intact.
_FIELD_SEP = "\x1f"
_RECORD_SEP = "\x1e"
_LOG_FORMAT = f"%H{_FIELD_SEP}%B{_RECORD_SEP}"


class GitRepository:
    """A git working tree."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).resolve()
        if not self.path.is_dir():
            raise GitError(f"Not a directory: {self.path}")
        self.path = Path(self._run("rev-parse", "--show-toplevel").strip())

    def _run(self, *args: str) -> str:
        try:
            result = subprocess.run(
                ["git", *args],
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitCommandError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    def current_branch(self) -> str:
        """Return the checked-out branch name ("HEAD" when detached)."""
        return self._run("rev-parse", "--abbrev-ref", "HEAD").strip()

    def get_latest_tag(self, pattern: str = "v*") -> str | None:
        """Return the most recent tag reachable from HEAD matching pattern.

        Returns None when the repository has no matching tag.
        """
        try:
            output = self._run("describe", "--tags", "--abbrev=0", "--match", pattern)
        except GitCommandError as e:
            stderr = (e.stderr or "").lower()
            if "no names found" in stderr or "no tags can describe" in stderr:
                return None
            raise
        return output.strip() or None

    def get_commits_since_tag(self, tag: str | None) -> list[Commit]:
        """Return commits after tag (or all commits), oldest first."""
        revision = f"{tag}..HEAD" if tag else "HEAD"
        output = self._run("log", "--reverse", f"--format={_LOG_FORMAT}", revision)

        commits = []
        for record in output.split(_RECORD_SEP):
            record = record.strip("\n")
            if not record:
                continue
            sha, _, message = record.partition(_FIELD_SEP)
            commits.append(parse_commit(message, sha=sha.strip()))

        logger.debug("Read %d commits since %s", len(commits), tag or "repository start")
        return commits
