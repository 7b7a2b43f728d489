"""Shared fixtures for gitmoji-release tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gitmoji_release.core.commits import Commit, parse_commit

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def feat_commit() -> Commit:
    return parse_commit("✨ add user authentication", sha="feat1234567890")


@pytest.fixture
def fix_commit() -> Commit:
    return parse_commit("🐛 handle empty config", sha="fix4567890abcd", scope="core")


@pytest.fixture
def breaking_commit() -> Commit:
    return parse_commit("💥 drop legacy parser", sha="brk7890abcdef0")


@pytest.fixture
def sample_commits() -> list[Commit]:
    """A realistic history mixing every section and some noise."""
    return [
        parse_commit("✨ add widget", sha="a1b2c3d4e5f6a7b8"),
        parse_commit("🐛 fix crash on startup", sha="b2c3d4e5f6a7b8c9"),
        parse_commit("📝 update docs", sha="c3d4e5f6a7b8c9d0"),
        parse_commit("🔧 ci tweak", sha="d4e5f6a7b8c9d0e1"),
        parse_commit("⚙️ bump maven plugins", sha="e5f6a7b8c9d0e1f2"),
        parse_commit("💥 remove v1 API", sha="f6a7b8c9d0e1f2a3"),
        parse_commit("Merge branch 'main' into feature", sha="0718293a4b5c6d7e"),
        parse_commit("wip", sha="18293a4b5c6d7e8f"),
    ]


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    """A Maven-like target/ directory with a shaded and an original jar."""
    target = tmp_path / "target"
    target.mkdir()
    (target / "windtrader-java-1.0-SNAPSHOT-shaded.jar").write_bytes(b"shaded-content")
    (target / "original-windtrader-java-1.0-SNAPSHOT.jar").write_bytes(b"original-content")
    (target / "classes").mkdir()
    return target


@pytest.fixture
def project_with_pyproject(tmp_path: Path) -> Path:
    """A project directory whose pyproject.toml configures gitmoji-release."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.gitmoji-release]
default_branch = "develop"

[tool.gitmoji-release.artifact]
output_dir = "build/libs"
name_pattern = "demo-{version}.jar"
""",
        encoding="utf-8",
    )
    return tmp_path
