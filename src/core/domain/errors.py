"""Errors raised by the transliteration core.

All of them are fatal for the current invocation: the core never retries,
it surfaces a typed error and the CLI decides how to report it.
"""

from __future__ import annotations


class TransliterationError(Exception):
    """Base class for every error the core can raise."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidClassName(TransliterationError):
    """A ``[:...:]`` token does not name a known class."""

    def __init__(self, token: str, position: int) -> None:
        super().__init__(f"invalid character class {token!r} at position {position}")
        self.token = token
        self.position = position


class EmptyAlignmentTarget(TransliterationError):
    """string2 is empty but has to be padded to the length of string1."""

    def __init__(self, required: int) -> None:
        super().__init__(f"string2 is empty, cannot pad it to {required} element(s)")
        self.required = required


class CodePointOverflow(TransliterationError):
    """Shifting a character left the range of valid Unicode scalar values."""

    def __init__(self, char: str, shift: int, position: int) -> None:
        super().__init__(
            f"shifting {char!r} (U+{ord(char):04X}) by {shift:+d} at position {position} "
            "is not a valid Unicode scalar value"
        )
        self.char = char
        self.shift = shift
        self.position = position


class OperandError(TransliterationError):
    """The number of operands does not fit the selected mode."""


class MissingOperand(OperandError):
    def __init__(self, mode: str, operand: str) -> None:
        super().__init__(f"missing operand {operand} for mode {mode!r}")
        self.mode = mode
        self.operand = operand


class ExtraOperand(OperandError):
    def __init__(self, mode: str, operand: str) -> None:
        super().__init__(f"extra operand {operand} for mode {mode!r}")
        self.mode = mode
        self.operand = operand
