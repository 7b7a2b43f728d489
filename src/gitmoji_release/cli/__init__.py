"""Command-line interface for gitmoji-release."""

from __future__ import annotations

from gitmoji_release.cli.main import main

__all__ = ["main"]
