"""Tests for release artifact resolution."""

from __future__ import annotations

import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from gitmoji_release.core.artifacts import (
    ReleaseAsset,
    canonical_name,
    find_candidates,
    list_directory,
    publish_glob,
    resolve_artifact,
)
from gitmoji_release.exceptions import (
    ArtifactIOError,
    ArtifactVerificationError,
    ConfigValidationError,
    NoArtifactFoundError,
)

EXTENSION = ".jar"
EXCLUDE = "original-*.jar"
NAME_PATTERN = "windtrader-java-{version}.jar"


def _resolve(directory: Path, version: str = "1.2.0") -> ReleaseAsset:
    return resolve_artifact(directory, version, EXTENSION, EXCLUDE, NAME_PATTERN)


def _snapshot(directory: Path) -> dict[str, bytes]:
    return {p.name: p.read_bytes() for p in directory.iterdir() if p.is_file()}


def _published(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.glob(publish_glob(NAME_PATTERN)))


class TestNamePatterns:
    """Tests for publish_glob() and canonical_name()."""

    def test_publish_glob(self):
        assert publish_glob(NAME_PATTERN) == "windtrader-java-*.jar"

    def test_canonical_name(self):
        assert canonical_name(NAME_PATTERN, "2.0.0") == "windtrader-java-2.0.0.jar"

    def test_pattern_without_placeholder(self):
        with pytest.raises(ConfigValidationError):
            publish_glob("windtrader-java.jar")


class TestFindCandidates:
    """Tests for find_candidates()."""

    def test_excludes_original_and_other_extensions(self, tmp_path: Path):
        (tmp_path / "app.jar").write_bytes(b"x")
        (tmp_path / "original-app.jar").write_bytes(b"x")
        (tmp_path / "app.pom").write_bytes(b"x")
        (tmp_path / "lib.jar").mkdir()

        assert find_candidates(tmp_path, EXTENSION, EXCLUDE) == [tmp_path / "app.jar"]

    def test_sorted_lexicographically(self, tmp_path: Path):
        for name in ("c.jar", "a.jar", "b.jar"):
            (tmp_path / name).write_bytes(b"x")

        assert [p.name for p in find_candidates(tmp_path, EXTENSION, EXCLUDE)] == [
            "a.jar",
            "b.jar",
            "c.jar",
        ]

    def test_previous_release_artifacts_come_last(self, tmp_path: Path):
        (tmp_path / "windtrader-java-0.9.0.jar").write_bytes(b"old")
        (tmp_path / "zz-shaded.jar").write_bytes(b"new")

        names = [p.name for p in find_candidates(tmp_path, EXTENSION, EXCLUDE, NAME_PATTERN)]

        assert names == ["zz-shaded.jar", "windtrader-java-0.9.0.jar"]

    def test_missing_directory(self, tmp_path: Path):
        assert find_candidates(tmp_path / "nope", EXTENSION, EXCLUDE) == []

    def test_does_not_recurse(self, tmp_path: Path):
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "app.jar").write_bytes(b"x")

        assert find_candidates(tmp_path, EXTENSION, EXCLUDE) == []


class TestResolveArtifact:
    """Tests for resolve_artifact()."""

    def test_single_candidate(self, tmp_path: Path):
        (tmp_path / "app-shaded.jar").write_bytes(b"payload")

        asset = _resolve(tmp_path)

        assert asset == ReleaseAsset(path=tmp_path / "windtrader-java-1.2.0.jar", version="1.2.0")
        assert asset.path.read_bytes() == b"payload"
        assert _published(tmp_path) == ["windtrader-java-1.2.0.jar"]

    def test_source_kept_when_not_canonical(self, tmp_path: Path):
        (tmp_path / "app-shaded.jar").write_bytes(b"payload")

        _resolve(tmp_path)

        assert (tmp_path / "app-shaded.jar").read_bytes() == b"payload"

    def test_candidate_matching_publish_glob(self, build_dir: Path):
        """The shaded jar itself matches the glob; its content must survive cleanup."""
        asset = _resolve(build_dir, "1.0.0")

        assert asset.path.read_bytes() == b"shaded-content"
        assert _published(build_dir) == ["windtrader-java-1.0.0.jar"]
        assert not (build_dir / "windtrader-java-1.0-SNAPSHOT-shaded.jar").exists()
        assert (build_dir / "original-windtrader-java-1.0-SNAPSHOT.jar").exists()

    def test_stale_release_removed(self, tmp_path: Path):
        (tmp_path / "windtrader-java-0.9.0.jar").write_bytes(b"old")
        (tmp_path / "windtrader-java-0.8.0.jar").write_bytes(b"older")
        (tmp_path / "shaded.jar").write_bytes(b"new")

        asset = _resolve(tmp_path, "1.0.0")

        assert _published(tmp_path) == ["windtrader-java-1.0.0.jar"]
        assert asset.path.read_bytes() == b"new"

    def test_rerun_same_version(self, tmp_path: Path):
        (tmp_path / "shaded.jar").write_bytes(b"new")
        _resolve(tmp_path, "1.0.0")

        asset = _resolve(tmp_path, "1.0.0")

        assert _published(tmp_path) == ["windtrader-java-1.0.0.jar"]
        assert asset.path.read_bytes() == b"new"

    def test_multiple_candidates_pick_smallest(self, tmp_path: Path):
        (tmp_path / "b.jar").write_bytes(b"b")
        (tmp_path / "a.jar").write_bytes(b"a")

        asset = _resolve(tmp_path)

        assert asset.path.read_bytes() == b"a"

    def test_previous_release_loses_to_fresh_build(self, tmp_path: Path):
        (tmp_path / "windtrader-java-0.9.0.jar").write_bytes(b"old")
        (tmp_path / "x.jar").write_bytes(b"new")

        asset = _resolve(tmp_path, "1.0.0")

        assert asset.path.read_bytes() == b"new"
        assert _published(tmp_path) == ["windtrader-java-1.0.0.jar"]

    def test_previous_release_used_when_alone(self, tmp_path: Path):
        (tmp_path / "windtrader-java-0.9.0.jar").write_bytes(b"old")

        asset = _resolve(tmp_path, "1.0.0")

        assert asset.path.read_bytes() == b"old"
        assert _published(tmp_path) == ["windtrader-java-1.0.0.jar"]

    def test_no_temp_files_left(self, tmp_path: Path):
        (tmp_path / "app.jar").write_bytes(b"payload")

        _resolve(tmp_path)

        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "app.jar",
            "windtrader-java-1.2.0.jar",
        ]

    def test_no_candidates_raises_and_leaves_directory_untouched(self, tmp_path: Path):
        (tmp_path / "original-app.jar").write_bytes(b"orig")
        (tmp_path / "windtrader-java-0.9.0.jar").mkdir()
        (tmp_path / "build.log").write_text("BUILD FAILURE")
        before = _snapshot(tmp_path)

        with pytest.raises(NoArtifactFoundError) as exc_info:
            _resolve(tmp_path)

        assert _snapshot(tmp_path) == before
        assert "original-app.jar" in str(exc_info.value)
        assert "build.log (13 bytes)" in exc_info.value.listing

    def test_missing_output_directory(self, tmp_path: Path):
        with pytest.raises(NoArtifactFoundError, match="does not exist"):
            _resolve(tmp_path / "target")

    def test_copy_failure_raises_io_error(self, tmp_path: Path):
        (tmp_path / "app.jar").write_bytes(b"payload")
        (tmp_path / "windtrader-java-0.9.0.jar").write_bytes(b"old")

        with (
            patch.object(shutil, "copy2", side_effect=PermissionError("denied")),
            pytest.raises(ArtifactIOError, match="Failed to copy"),
        ):
            _resolve(tmp_path)

        # Nothing was cleaned up and no temporary file remains.
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "app.jar",
            "windtrader-java-0.9.0.jar",
        ]

    def test_move_failure_leaves_no_canonical_artifact(self, tmp_path: Path):
        (tmp_path / "app.jar").write_bytes(b"payload")
        (tmp_path / "windtrader-java-0.9.0.jar").write_bytes(b"old")

        with (
            patch("gitmoji_release.core.artifacts.os.replace", side_effect=OSError("disk full")),
            pytest.raises(ArtifactIOError, match="Failed to move"),
        ):
            _resolve(tmp_path)

        assert _published(tmp_path) == []
        assert sorted(p.name for p in tmp_path.iterdir()) == ["app.jar"]

    def test_verification_failure(self, tmp_path: Path):
        (tmp_path / "app.jar").write_bytes(b"payload")

        with (
            patch("gitmoji_release.core.artifacts._remove_stale"),
            patch("gitmoji_release.core.artifacts.os.replace"),
            pytest.raises(ArtifactVerificationError),
        ):
            _resolve(tmp_path)


class TestListDirectory:
    """Tests for list_directory()."""

    def test_lists_files_and_directories(self, build_dir: Path):
        listing = list_directory(build_dir)

        assert listing[0] == "classes/"
        assert "original-windtrader-java-1.0-SNAPSHOT.jar (16 bytes)" in listing

    def test_missing_directory(self, tmp_path: Path):
        assert list_directory(tmp_path / "nope") == [f"{tmp_path / 'nope'} does not exist"]

    def test_dangling_symlink_listed_by_name(self, tmp_path: Path):
        (tmp_path / "app.jar").write_bytes(b"jar")
        (tmp_path / "broken.jar").symlink_to(tmp_path / "missing.jar")

        assert list_directory(tmp_path) == ["app.jar (3 bytes)", "broken.jar"]

    def test_dangling_symlink_in_failure_listing(self, tmp_path: Path):
        (tmp_path / "broken.jar").symlink_to(tmp_path / "missing.jar")

        with pytest.raises(NoArtifactFoundError) as exc_info:
            resolve_artifact(tmp_path, "1.0.0", EXTENSION, EXCLUDE, NAME_PATTERN)

        assert exc_info.value.listing == ["broken.jar"]
