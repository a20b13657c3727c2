"""Pattern parser: operand string -> ``Spec``.

Tokens are either a bracketed class reference ``[:name:]`` or a single
Unicode scalar value. Combining marks are not merged with their base
character.
"""

from __future__ import annotations

from core.domain.char_class import ClassKind
from core.domain.errors import InvalidClassName
from core.domain.models import ClassPattern, LiteralPattern, Spec
from core.log import get_logger

_OPEN = "[:"
_CLOSE = ":]"

_logger = get_logger("parser")


def _read_class(operand: str, start: int) -> tuple[ClassPattern, int]:
    """Parse the class token opening at ``start``; return it and the next index."""

    end = operand.find(_CLOSE, start + len(_OPEN))
    if end == -1:
        raise InvalidClassName(operand[start:], start)

    token = operand[start : end + len(_CLOSE)]
    kind = ClassKind.from_name(operand[start + len(_OPEN) : end])
    if kind is None:
        raise InvalidClassName(token, start)
    return ClassPattern(name=kind), end + len(_CLOSE)


def parse(operand: str) -> Spec:
    """Convert one operand into its ordered token sequence.

    Raises:
        InvalidClassName: a ``[:...:]`` token names no known class, or a
            ``[:`` is never closed.
    """

    patterns: list[LiteralPattern | ClassPattern] = []
    i = 0
    while i < len(operand):
        if operand.startswith(_OPEN, i):
            pattern, i = _read_class(operand, i)
            patterns.append(pattern)
            continue
        patterns.append(LiteralPattern(char=operand[i]))
        i += 1

    spec = Spec(patterns=tuple(patterns))
    _logger.debug("parsed %r into %d pattern(s)", operand, len(spec))
    return spec
