"""Character classes recognised inside operands.

The set is closed: every table that consumes a class (predicates, translate
rules) is keyed by this enum, so adding or removing a class shows up as a
missing key instead of a silently unmatched string.
"""

from __future__ import annotations

from enum import Enum


class ClassKind(str, Enum):
    """Named character classes, written as ``[:name:]`` in an operand."""

    ALNUM = "alnum"
    ALPHA = "alpha"
    BLANK = "blank"
    CNTRL = "cntrl"
    DIGIT = "digit"
    LOWER = "lower"
    SPACE = "space"
    UPPER = "upper"

    @classmethod
    def from_name(cls, name: str) -> "ClassKind | None":
        """Exact, case-sensitive lookup; ``None`` for unknown names."""

        try:
            return cls(name)
        except ValueError:
            return None

    def token(self) -> str:
        """Bracketed form as it appears in an operand."""

        return f"[:{self.value}:]"
