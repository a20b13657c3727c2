"""Translate operation.

Every ``(source, target)`` pair rewrites the whole line: each character that
matches the source (TRANSLATE predicate context) is replaced according to the
rule table below. Pairs are applied in order and each one sees the output of
the previous one, so a character rewritten by an earlier pair can be matched
again by a later pair.

The table is not POSIX ``tr`` class-to-class mapping. It reproduces a fixed
per-cell behavior, including cells that are effectively constant (for example
a ``lower`` source with a ``digit`` target always yields ``'9'``).
"""

from __future__ import annotations

import unicodedata
from typing import Callable

from core.domain.char_class import ClassKind
from core.domain.errors import CodePointOverflow
from core.domain.models import ClassPattern, LiteralPattern, PairedSpec
from core.services.predicates import PredicateContext, predicate_for

# (character, position in line) -> replacement text
Rewrite = Callable[[str, int], str]

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def _keep(ch: str, pos: int) -> str:
    return ch


def _const(value: str) -> Rewrite:
    def rewrite(ch: str, pos: int) -> str:
        return value

    return rewrite


def _shift(delta: int) -> Rewrite:
    def rewrite(ch: str, pos: int) -> str:
        code = ord(ch) + delta
        if code < 0 or code > _MAX_CODE_POINT or code in _SURROGATES:
            raise CodePointOverflow(ch, delta, pos)
        return chr(code)

    return rewrite


def _lower(ch: str, pos: int) -> str:
    return ch.lower()


def _upper(ch: str, pos: int) -> str:
    return ch.upper()


def _nine_unless_ascii_digit(ch: str, pos: int) -> str:
    if "0" <= ch <= "9":
        return ch
    return "9"


def _digit_to_letter(first: str) -> Rewrite:
    def rewrite(ch: str, pos: int) -> str:
        value = unicodedata.decimal(ch, None)
        if value is None:
            return ch
        return chr(ord(first) + value)

    return rewrite


_SPACE = _const(" ")

# Every source row except blank/space sends blank, cntrl and space targets to ' '.
_BLANKING = {
    ClassKind.BLANK: _SPACE,
    ClassKind.CNTRL: _SPACE,
    ClassKind.SPACE: _SPACE,
}

_WHITESPACE_ROW: dict[ClassKind, Rewrite] = {
    ClassKind.ALNUM: _const("2"),
    ClassKind.ALPHA: _const("C"),
    ClassKind.BLANK: _keep,
    ClassKind.CNTRL: _SPACE,
    ClassKind.DIGIT: _const("2"),
    ClassKind.LOWER: _keep,
    ClassKind.SPACE: _keep,
    ClassKind.UPPER: _keep,
}

CLASS_RULES: dict[ClassKind, dict[ClassKind, Rewrite]] = {
    ClassKind.ALNUM: {
        **_BLANKING,
        ClassKind.ALNUM: _keep,
        ClassKind.ALPHA: _shift(10),
        ClassKind.DIGIT: _nine_unless_ascii_digit,
        ClassKind.LOWER: _lower,
        ClassKind.UPPER: _upper,
    },
    ClassKind.ALPHA: {
        **_BLANKING,
        ClassKind.ALNUM: _shift(10),
        ClassKind.ALPHA: _keep,
        ClassKind.DIGIT: _nine_unless_ascii_digit,
        ClassKind.LOWER: _lower,
        ClassKind.UPPER: _upper,
    },
    ClassKind.BLANK: _WHITESPACE_ROW,
    ClassKind.SPACE: _WHITESPACE_ROW,
    ClassKind.CNTRL: {
        ClassKind.ALNUM: _const("A"),
        ClassKind.ALPHA: _const("K"),
        ClassKind.BLANK: _SPACE,
        ClassKind.CNTRL: _keep,
        ClassKind.DIGIT: _nine_unless_ascii_digit,
        ClassKind.LOWER: _keep,
        ClassKind.SPACE: _SPACE,
        ClassKind.UPPER: _keep,
    },
    ClassKind.DIGIT: {
        **_BLANKING,
        ClassKind.ALNUM: _keep,
        ClassKind.ALPHA: _keep,
        ClassKind.DIGIT: _keep,
        ClassKind.LOWER: _digit_to_letter("a"),
        ClassKind.UPPER: _digit_to_letter("A"),
    },
    ClassKind.LOWER: {
        **_BLANKING,
        ClassKind.ALNUM: _shift(-49),
        ClassKind.ALPHA: _upper,
        ClassKind.DIGIT: _const("9"),
        ClassKind.LOWER: _keep,
        ClassKind.UPPER: _upper,
    },
    ClassKind.UPPER: {
        **_BLANKING,
        ClassKind.ALNUM: _shift(-49),
        ClassKind.ALPHA: _upper,
        ClassKind.DIGIT: _const("9"),
        ClassKind.LOWER: _lower,
        ClassKind.UPPER: _keep,
    },
}

LITERAL_RULES: dict[ClassKind, Rewrite] = {
    **_BLANKING,
    ClassKind.ALNUM: _const("0"),
    ClassKind.ALPHA: _const("A"),
    ClassKind.DIGIT: _const("0"),
    ClassKind.LOWER: _lower,
    ClassKind.UPPER: _upper,
}


def rule_for(source: LiteralPattern | ClassPattern, target: LiteralPattern | ClassPattern) -> Rewrite:
    """Rewrite applied to characters matching ``source`` when paired with ``target``."""

    if isinstance(target, LiteralPattern):
        return _const(target.char)
    if isinstance(source, LiteralPattern):
        return LITERAL_RULES[target.name]
    return CLASS_RULES[source.name][target.name]


def translate_pair(line: str, source: LiteralPattern | ClassPattern, target: LiteralPattern | ClassPattern) -> str:
    """Apply a single pair to ``line`` and return the new line."""

    matches = predicate_for(source, PredicateContext.TRANSLATE)
    rewrite = rule_for(source, target)
    return "".join(rewrite(ch, pos) if matches(ch) else ch for pos, ch in enumerate(line))


def translate(line: str, paired: PairedSpec) -> str:
    """Fold every pair of ``paired`` over ``line``, left to right.

    Raises:
        CodePointOverflow: a code point shift produced an invalid scalar
            value. The line is discarded as a whole.
    """

    for source, target in paired.pairs:
        line = translate_pair(line, source, target)
    return line
