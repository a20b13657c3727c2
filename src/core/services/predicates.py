"""Class predicate table.

One membership test per ``ClassKind``. Delete and squeeze use the FILTER
context; translate uses the TRANSLATE context, where ``blank`` and ``space``
only match the ASCII space character instead of any whitespace.
"""

from __future__ import annotations

import unicodedata
from enum import Enum
from typing import Callable

import regex

from core.domain.char_class import ClassKind
from core.domain.models import ClassPattern, LiteralPattern

Predicate = Callable[[str], bool]


class PredicateContext(str, Enum):
    FILTER = "filter"
    TRANSLATE = "translate"


_ALPHABETIC = regex.compile(r"\p{Alphabetic}")
_WHITE_SPACE = regex.compile(r"\p{White_Space}")


def _is_alphabetic(ch: str) -> bool:
    return _ALPHABETIC.match(ch) is not None


def _is_numeric(ch: str) -> bool:
    # any N* category; CJK numerals such as U+4E00 are letters, not numbers
    return unicodedata.category(ch)[0] == "N"


def _is_alphanumeric(ch: str) -> bool:
    return _is_alphabetic(ch) or _is_numeric(ch)


def _is_whitespace(ch: str) -> bool:
    return _WHITE_SPACE.match(ch) is not None


def _is_control(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"


def _is_ascii_space(ch: str) -> bool:
    return ch == " "


CLASS_PREDICATES: dict[ClassKind, Predicate] = {
    ClassKind.ALNUM: _is_alphanumeric,
    ClassKind.ALPHA: _is_alphabetic,
    ClassKind.BLANK: _is_whitespace,
    ClassKind.CNTRL: _is_control,
    ClassKind.DIGIT: _is_numeric,
    ClassKind.LOWER: str.islower,
    ClassKind.SPACE: _is_whitespace,
    ClassKind.UPPER: str.isupper,
}

_TRANSLATE_OVERRIDES: dict[ClassKind, Predicate] = {
    ClassKind.BLANK: _is_ascii_space,
    ClassKind.SPACE: _is_ascii_space,
}


def class_predicate(kind: ClassKind, context: PredicateContext = PredicateContext.FILTER) -> Predicate:
    """Return the membership test of ``kind`` for the given context."""

    if context is PredicateContext.TRANSLATE and kind in _TRANSLATE_OVERRIDES:
        return _TRANSLATE_OVERRIDES[kind]
    return CLASS_PREDICATES[kind]


def predicate_for(
    pattern: LiteralPattern | ClassPattern,
    context: PredicateContext = PredicateContext.FILTER,
) -> Predicate:
    """Membership test for a parsed pattern (literal equality or class test)."""

    if isinstance(pattern, LiteralPattern):
        char = pattern.char
        return lambda ch: ch == char
    return class_predicate(pattern.name, context)
