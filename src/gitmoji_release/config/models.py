"""Configuration models for gitmoji-release.

Values come from ``[tool.gitmoji-release]`` in pyproject.toml. Every model
is frozen: the CLI builds one GitmojiReleaseConfig per run and hands it to
each component explicitly.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gitmoji_release.core.gitmoji import DEFAULT_SECTION_ORDER


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class CommitsConfig(_FrozenModel):
    """Commit filtering."""

    skip_release_patterns: list[str] = Field(
        default_factory=lambda: ["[skip ci]", "[skip release]", "[release skip]"],
        description="Commits containing any of these markers are ignored",
    )


class ChangelogConfig(_FrozenModel):
    """Release notes and CHANGELOG.md output."""

    enabled: bool = True
    path: Path = Path("CHANGELOG.md")
    section_order: list[str] = Field(default_factory=lambda: list(DEFAULT_SECTION_ORDER))
    include_scope: bool = True
    include_sha: bool = True


class ArtifactConfig(_FrozenModel):
    """Build artifact selection and canonical naming."""

    output_dir: Path = Path("target")
    extension: str = ".jar"
    exclude_pattern: str = "original-*.jar"
    name_pattern: str = "windtrader-java-{version}.jar"
    label: str = "windtrader-java shaded jar"

    @field_validator("name_pattern")
    @classmethod
    def require_version_placeholder(cls, value: str) -> str:
        if "{version}" not in value:
            raise ValueError("name_pattern must contain {version}")
        return value

    @field_validator("extension")
    @classmethod
    def require_leading_dot(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("extension must start with '.'")
        return value


class VersionConfig(_FrozenModel):
    """Tagging and release commit conventions."""

    tag_format: str = "v{version}"
    initial_version: str = "1.0.0"
    release_message: str = "🔖 Release v{version}\n\n[skip ci]"

    @field_validator("tag_format", "release_message")
    @classmethod
    def require_version_placeholder(cls, value: str) -> str:
        if "{version}" not in value:
            raise ValueError("must contain {version}")
        return value

    @property
    def tag_pattern(self) -> str:
        """Glob matching every release tag."""
        return self.tag_format.replace("{version}", "*")

    def format_tag(self, version: str) -> str:
        return self.tag_format.replace("{version}", version)

    def parse_tag(self, tag: str) -> str | None:
        """Extract the version from a tag, or None if it does not fit tag_format."""
        prefix, _, suffix = self.tag_format.partition("{version}")
        if not tag.startswith(prefix) or not tag.endswith(suffix):
            return None
        version = tag[len(prefix) : len(tag) - len(suffix)]
        return version or None

    def format_release_message(self, version: str) -> str:
        return self.release_message.replace("{version}", version)


class GitmojiReleaseConfig(_FrozenModel):
    """Root configuration."""

    default_branch: str = "main"
    commits: CommitsConfig = Field(default_factory=CommitsConfig)
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)
    artifact: ArtifactConfig = Field(default_factory=ArtifactConfig)
    version: VersionConfig = Field(default_factory=VersionConfig)
