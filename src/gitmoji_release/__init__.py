"""gitmoji-release: release decisions for gitmoji-style commit histories.

Determines the next semantic version bump, renders grouped release notes
and resolves the single build artifact to publish.
"""

from __future__ import annotations

__version__ = "0.1.0"
