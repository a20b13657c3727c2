from __future__ import annotations

import dataclasses

import pytest

from core.domain.errors import EmptyAlignmentTarget, ExtraOperand, InvalidClassName, MissingOperand
from core.domain.models import Mode
from core.services.engine import Transliterator, apply, build_spec, select_mode


@pytest.mark.parametrize(
    "delete, squeeze, mode",
    [
        (False, False, Mode.TRANSLATE),
        (True, False, Mode.DELETE),
        (False, True, Mode.COMPRESS),
        (True, True, Mode.DELETE_COMPRESS),
    ],
)
def test_select_mode(delete: bool, squeeze: bool, mode: Mode):
    assert select_mode(delete=delete, squeeze=squeeze) is mode


def test_build_spec_parses_the_operand():
    assert len(build_spec("ab[:digit:]")) == 3


@pytest.mark.parametrize(
    "mode, string1, string2, line, expected",
    [
        (Mode.TRANSLATE, "c", "C", "coding challenge", "Coding Challenge"),
        (Mode.TRANSLATE, "[:lower:]", "[:upper:]", "coding challenge", "CODING CHALLENGE"),
        (Mode.TRANSLATE, "[:alnum:]", "[:digit:]", "1oding challenge", "199999 999999999"),
        (Mode.DELETE, "[:digit:]", None, "123 challenge", " challenge"),
        (Mode.COMPRESS, "l", None, "Coding challenge", "Coding chalenge"),
        (Mode.DELETE_COMPRESS, "[:digit:]", "l", "Co11ding chall2lenge", "Coding chalenge"),
    ],
)
def test_apply(mode: Mode, string1: str, string2: str | None, line: str, expected: str):
    spec2 = build_spec(string2) if string2 is not None else None
    assert apply(mode, line, build_spec(string1), spec2) == expected


@pytest.mark.parametrize("mode", [Mode.TRANSLATE, Mode.DELETE_COMPRESS])
def test_apply_requires_string2(mode: Mode):
    with pytest.raises(MissingOperand):
        apply(mode, "line", build_spec("a"))


def test_transliterator_aligns_once_for_translate():
    t = Transliterator.build(Mode.TRANSLATE, "abc", "x")
    assert t.paired is not None
    assert len(t.paired) == 3
    assert t.apply("abcd") == "xxxd"


@pytest.mark.parametrize("mode", [Mode.DELETE, Mode.COMPRESS, Mode.DELETE_COMPRESS])
def test_transliterator_does_not_align_filters(mode: Mode):
    string2 = "a" if mode is Mode.DELETE_COMPRESS else None
    assert Transliterator.build(mode, "x", string2).paired is None


def test_transliterator_matches_apply():
    t = Transliterator.build(Mode.DELETE_COMPRESS, "[:digit:]", "[:space:]")
    line = "a1  2b\t\t3"
    assert t.apply(line) == apply(Mode.DELETE_COMPRESS, line, t.spec1, t.spec2) == "a b\t"


@pytest.mark.parametrize(
    "mode, string1, string2, error",
    [
        (Mode.TRANSLATE, "a", None, MissingOperand),
        (Mode.DELETE_COMPRESS, "a", None, MissingOperand),
        (Mode.DELETE, "a", "b", ExtraOperand),
        (Mode.COMPRESS, "a", "b", ExtraOperand),
        (Mode.DELETE, None, None, MissingOperand),
    ],
)
def test_transliterator_checks_operand_arity(mode, string1, string2, error):
    with pytest.raises(error):
        Transliterator.build(mode, string1, string2)


def test_invalid_class_fails_before_any_line():
    with pytest.raises(InvalidClassName):
        Transliterator.build(Mode.TRANSLATE, "a", "[:nope:]")


def test_empty_string2_cannot_be_aligned():
    with pytest.raises(EmptyAlignmentTarget):
        Transliterator.build(Mode.TRANSLATE, "abc", "")


def test_transliterator_is_immutable():
    t = Transliterator.build(Mode.DELETE, "a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.mode = Mode.COMPRESS  # type: ignore[misc]
