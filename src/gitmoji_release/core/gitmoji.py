"""Gitmoji commit types and their release rules.

The recognized tokens form a closed enumeration. Each member maps to exactly
one TypeRule through an exhaustive match, so adding a member without a rule
fails type checking (and raises at import time) instead of silently falling
through to "unclassified".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, assert_never

from gitmoji_release.core.version import BumpType

if TYPE_CHECKING:
    from collections.abc import Mapping

# Emoji presentation selector; editors and terminals add or drop it freely.
_VARIATION_SELECTOR = "\ufe0f"

BREAKING_CHANGES = "Breaking Changes"
FEATURES = "Features"
BUG_FIXES = "Bug Fixes"
DOCUMENTATION = "Documentation"
MAINTENANCE = "Maintenance"
OTHER = "Other"

DEFAULT_SECTION_ORDER: tuple[str, ...] = (
    BREAKING_CHANGES,
    FEATURES,
    BUG_FIXES,
    DOCUMENTATION,
    MAINTENANCE,
    OTHER,
)


class Gitmoji(Enum):
    """Commit type tokens that participate in releases."""

    BOOM = "💥"
    SPARKLES = "✨"
    BUG = "🐛"
    MEMO = "📝"
    WRENCH = "🔧"
    GEAR = "⚙️"

    @classmethod
    def _missing_(cls, value: object) -> Gitmoji | None:
        if not isinstance(value, str):
            return None
        bare = value.replace(_VARIATION_SELECTOR, "")
        for member in cls:
            if member.value.replace(_VARIATION_SELECTOR, "") == bare:
                return member
        return None

    @classmethod
    def from_token(cls, token: str) -> Gitmoji | None:
        """Return the member for a header token, or None if unrecognized."""
        if not token:
            return None
        try:
            return cls(token)
        except ValueError:
            return None


@dataclass(frozen=True)
class TypeRule:
    """Release effect of a commit type."""

    bump: BumpType
    section: str


def rule_for(gitmoji: Gitmoji) -> TypeRule:
    """Return the release rule for a gitmoji."""
    match gitmoji:
        case Gitmoji.BOOM:
            return TypeRule(BumpType.MAJOR, BREAKING_CHANGES)
        case Gitmoji.SPARKLES:
            return TypeRule(BumpType.MINOR, FEATURES)
        case Gitmoji.BUG:
            return TypeRule(BumpType.PATCH, BUG_FIXES)
        case Gitmoji.MEMO:
            return TypeRule(BumpType.PATCH, DOCUMENTATION)
        case Gitmoji.WRENCH | Gitmoji.GEAR:
            return TypeRule(BumpType.PATCH, MAINTENANCE)
        case _:
            assert_never(gitmoji)


class RuleTable:
    """Lookup from raw type tokens to release rules.

    Built from rule_for() for every Gitmoji member unless an explicit
    mapping is given (tests use that to exercise custom tables).
    """

    def __init__(self, rules: Mapping[Gitmoji, TypeRule] | None = None) -> None:
        if rules is None:
            rules = {gitmoji: rule_for(gitmoji) for gitmoji in Gitmoji}
        self._rules: Mapping[Gitmoji, TypeRule] = MappingProxyType(dict(rules))

    def lookup(self, token: str) -> TypeRule | None:
        """Return the rule for a type token, or None if it is unclassified."""
        gitmoji = Gitmoji.from_token(token)
        if gitmoji is None:
            return None
        return self._rules.get(gitmoji)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.lookup(token) is not None

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def sections(self) -> list[str]:
        """Distinct sections in declaration order of the Gitmoji members."""
        seen: list[str] = []
        for gitmoji in Gitmoji:
            rule = self._rules.get(gitmoji)
            if rule is not None and rule.section not in seen:
                seen.append(rule.section)
        return seen


DEFAULT_RULES = RuleTable()
