from __future__ import annotations

import pytest

from core.domain.char_class import ClassKind
from core.services.predicates import (
    CLASS_PREDICATES,
    PredicateContext,
    class_predicate,
    predicate_for,
)


def test_table_covers_every_class():
    assert set(CLASS_PREDICATES) == set(ClassKind)


@pytest.mark.parametrize(
    "kind, inside, outside",
    [
        (ClassKind.ALNUM, "a7Zé٣", " -_"),
        (ClassKind.ALPHA, "aZé漢", "1 _"),
        (ClassKind.DIGIT, "07٣½", "a x"),
        (ClassKind.LOWER, "azé", "AZ1 "),
        (ClassKind.UPPER, "AZÉ", "az1 "),
        (ClassKind.CNTRL, "\x00\x1f\x7f\t\n", "a \u200b"),
        (ClassKind.BLANK, " \t\n\u3000", "a_"),
        (ClassKind.SPACE, " \t\r\x0b", "a_"),
    ],
)
def test_filter_context_membership(kind: ClassKind, inside: str, outside: str):
    test = class_predicate(kind, PredicateContext.FILTER)
    assert all(test(ch) for ch in inside)
    assert not any(test(ch) for ch in outside)


@pytest.mark.parametrize("kind", [ClassKind.BLANK, ClassKind.SPACE])
def test_translate_context_only_matches_ascii_space(kind: ClassKind):
    test = class_predicate(kind, PredicateContext.TRANSLATE)
    assert test(" ")
    assert not test("\t")
    assert not test("\u3000")


@pytest.mark.parametrize("kind", [k for k in ClassKind if k not in (ClassKind.BLANK, ClassKind.SPACE)])
def test_other_classes_are_the_same_in_both_contexts(kind: ClassKind):
    assert class_predicate(kind, PredicateContext.TRANSLATE) is class_predicate(kind, PredicateContext.FILTER)


def test_literal_predicate_is_equality(lit):
    test = predicate_for(lit("é"))
    assert test("é")
    assert not test("e")
    assert not test("É")


def test_alpha_follows_the_unicode_alphabetic_property():
    test = class_predicate(ClassKind.ALPHA)
    # combining vowel signs are alphabetic without being letters
    assert test("\u093f")
    assert test("\u0345")
    assert class_predicate(ClassKind.ALNUM)("\u093f")


def test_space_follows_the_unicode_white_space_property():
    test = class_predicate(ClassKind.SPACE)
    assert not any(test(chr(code)) for code in range(0x1C, 0x20))
    assert test(" ")
    assert test("\x85")


def test_digit_means_a_number_category():
    test = class_predicate(ClassKind.DIGIT)
    assert not test("\u4e00")
    assert test("\u216b")
    assert test("\u00b2")
