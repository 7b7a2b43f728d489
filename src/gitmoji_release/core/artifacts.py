"""Release artifact resolution.

Selects the single build output to publish and places it under its
canonical, version-stamped name. After a successful resolve_artifact()
exactly one file in the output directory matches the publish glob.

The chosen candidate is copied to a temporary file before stale canonical
files are removed, then moved into place. If anything fails midway the
directory ends up with no canonical artifact rather than two.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path

from gitmoji_release.exceptions import (
    ArtifactIOError,
    ArtifactVerificationError,
    ConfigValidationError,
    NoArtifactFoundError,
)
from gitmoji_release.logging import get_logger

logger = get_logger("artifacts")

VERSION_PLACEHOLDER = "{version}"
_TEMP_SUFFIX = ".partial"


@dataclass(frozen=True)
class ReleaseAsset:
    """The canonical artifact approved for publication."""

    path: Path
    version: str

    @property
    def name(self) -> str:
        return self.path.name


def publish_glob(name_pattern: str) -> str:
    """Return the glob matching every versioned instance of name_pattern."""
    _check_name_pattern(name_pattern)
    return name_pattern.replace(VERSION_PLACEHOLDER, "*")


def canonical_name(name_pattern: str, version: str) -> str:
    """Return name_pattern instantiated with version."""
    _check_name_pattern(name_pattern)
    return name_pattern.replace(VERSION_PLACEHOLDER, version)


def _check_name_pattern(name_pattern: str) -> None:
    if VERSION_PLACEHOLDER not in name_pattern:
        raise ConfigValidationError(
            f"Artifact name pattern {name_pattern!r} must contain {VERSION_PLACEHOLDER}"
        )


def list_directory(directory: Path) -> list[str]:
    """Describe directory contents for diagnostics, one line per entry."""
    if not directory.is_dir():
        return [f"{directory} does not exist"]

    lines = []
    for entry in sorted(directory.iterdir()):
        if entry.is_dir():
            lines.append(f"{entry.name}/")
        else:
            try:
                size = entry.stat().st_size
            except OSError:
                # Dangling symlink or a file removed while listing.
                lines.append(entry.name)
                continue
            lines.append(f"{entry.name} ({size} bytes)")
    return lines


def _matching_files(directory: Path, pattern: str) -> list[Path]:
    return sorted(
        entry for entry in directory.iterdir() if entry.is_file() and fnmatchcase(entry.name, pattern)
    )


def find_candidates(
    output_dir: Path,
    extension: str,
    exclude_pattern: str,
    name_pattern: str | None = None,
) -> list[Path]:
    """Return publishable build outputs in selection order.

    Candidates are regular files directly inside output_dir ending with
    extension and not matching exclude_pattern. The list is sorted by path,
    except that when name_pattern is given files already carrying a
    canonical name (left over from earlier releases) come last.
    """
    if not output_dir.is_dir():
        return []

    candidates = [
        entry
        for entry in output_dir.iterdir()
        if entry.is_file()
        and entry.name.endswith(extension)
        and not fnmatchcase(entry.name, exclude_pattern)
    ]

    if name_pattern is None:
        return sorted(candidates)

    stale_glob = publish_glob(name_pattern)
    return sorted(candidates, key=lambda p: (fnmatchcase(p.name, stale_glob), p))


def resolve_artifact(
    output_dir: Path,
    version: str,
    extension: str,
    exclude_pattern: str,
    name_pattern: str,
) -> ReleaseAsset:
    """Select one build artifact and rename it for release.

    When several candidates exist the lexicographically smallest path wins,
    with one exception: files already matching the publish glob (usually a
    previous release's artifact) are only chosen when no other candidate
    exists, so a stale release is never republished under the new version.

    Args:
        output_dir: Build output directory (e.g. target/)
        version: Release version embedded in the canonical name
        extension: Artifact suffix (e.g. ".jar")
        exclude_pattern: Glob of intermediate artifacts never published
        name_pattern: Canonical name containing ``{version}``

    Returns:
        The canonical ReleaseAsset

    Raises:
        NoArtifactFoundError: If no candidate exists; nothing is modified
        ArtifactIOError: If copying, deleting or moving fails
        ArtifactVerificationError: If the publish glob does not match
            exactly the canonical file afterwards
    """
    glob = publish_glob(name_pattern)
    target = output_dir / canonical_name(name_pattern, version)

    candidates = find_candidates(output_dir, extension, exclude_pattern, name_pattern)
    if not candidates:
        raise NoArtifactFoundError(output_dir, list_directory(output_dir))

    source = candidates[0]
    if len(candidates) > 1:
        logger.warning(
            "Found %d candidate artifacts, using %s (ignored: %s)",
            len(candidates),
            source.name,
            ", ".join(c.name for c in candidates[1:]),
        )
    logger.info("Using built artifact: %s", source)

    temp_path = _copy_to_temp(source, output_dir)
    try:
        _remove_stale(output_dir, glob)
        try:
            os.replace(temp_path, target)
        except OSError as e:
            raise ArtifactIOError(f"Failed to move artifact into {target}: {e}") from e
    finally:
        temp_path.unlink(missing_ok=True)

    _verify_single_match(output_dir, glob, target)
    logger.info("Release artifact ready: %s", target)
    return ReleaseAsset(path=target, version=version)


def _copy_to_temp(source: Path, output_dir: Path) -> Path:
    """Copy source into a temporary file that the publish glob cannot match."""
    try:
        fd, name = tempfile.mkstemp(prefix=f".{source.name}.", suffix=_TEMP_SUFFIX, dir=output_dir)
    except OSError as e:
        raise ArtifactIOError(f"Failed to create temporary file in {output_dir}: {e}") from e

    os.close(fd)
    temp_path = Path(name)
    try:
        shutil.copy2(source, temp_path)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise ArtifactIOError(f"Failed to copy {source} to {temp_path}: {e}") from e
    return temp_path


def _remove_stale(output_dir: Path, glob: str) -> None:
    for stale in _matching_files(output_dir, glob):
        logger.info("Removing previous release artifact: %s", stale.name)
        try:
            stale.unlink()
        except OSError as e:
            raise ArtifactIOError(f"Failed to remove {stale}: {e}") from e


def _verify_single_match(output_dir: Path, glob: str, target: Path) -> None:
    matches = _matching_files(output_dir, glob)
    if matches != [target]:
        names = ", ".join(m.name for m in matches) or "nothing"
        raise ArtifactVerificationError(
            f"Expected exactly {target.name} to match {glob} in {output_dir}, found: {names}"
        )
