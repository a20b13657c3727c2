"""Entry points of the transliteration core.

The CLI (or any other caller) talks to the core through this module:

- ``build_spec``: parse an operand once at startup.
- ``select_mode``: pick the transformation from the delete/squeeze flags.
- ``apply``: transform one line for a mode.
- ``Transliterator``: immutable bundle of mode + parsed specs (+ pairs) built
  once and applied to every line.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.errors import ExtraOperand, MissingOperand
from core.domain.models import Mode, PairedSpec, Spec
from core.log import get_logger
from core.services.aligner import align
from core.services.filters import delete, delete_compress, squeeze
from core.services.parser import parse
from core.services.translate import translate

_logger = get_logger("engine")


def build_spec(operand: str) -> Spec:
    return parse(operand)


def select_mode(*, delete: bool, squeeze: bool) -> Mode:
    """Map the delete/squeeze flags to a mode.

    Complement and unbuffered flags are not inputs here on purpose: they do
    not change what the core does.
    """

    if delete and squeeze:
        return Mode.DELETE_COMPRESS
    if delete:
        return Mode.DELETE
    if squeeze:
        return Mode.COMPRESS
    return Mode.TRANSLATE


def _require_spec2(mode: Mode, spec2: Spec | None) -> Spec:
    if spec2 is None:
        raise MissingOperand(mode.value, "string2")
    return spec2


def apply(mode: Mode, line: str, spec1: Spec, spec2: Spec | None = None) -> str:
    """Transform a single line.

    ``spec2`` is required for translate and delete-compress. For translate
    the specs are aligned on every call; callers processing many lines
    should use ``Transliterator`` to align once.
    """

    if mode is Mode.TRANSLATE:
        return translate(line, align(spec1, _require_spec2(mode, spec2)))
    if mode is Mode.DELETE:
        return delete(line, spec1)
    if mode is Mode.COMPRESS:
        return squeeze(line, spec1)
    return delete_compress(line, spec1, _require_spec2(mode, spec2))


def check_operands(mode: Mode, string1: str | None, string2: str | None) -> None:
    """Validate operand arity for ``mode``.

    Raises:
        MissingOperand: string1 missing, or string2 missing for
            translate / delete-compress.
        ExtraOperand: string2 given for delete / compress.
    """

    if string1 is None:
        raise MissingOperand(mode.value, "string1")
    if mode.needs_string2() and string2 is None:
        raise MissingOperand(mode.value, "string2")
    if not mode.needs_string2() and string2 is not None:
        raise ExtraOperand(mode.value, "string2")


@dataclass(frozen=True)
class Transliterator:
    """Parsed, validated operands for one invocation.

    Built once before any input is read; read-only afterwards.
    """

    mode: Mode
    spec1: Spec
    spec2: Spec | None = None
    paired: PairedSpec | None = None

    @classmethod
    def build(cls, mode: Mode, string1: str | None, string2: str | None = None) -> "Transliterator":
        check_operands(mode, string1, string2)

        spec1 = build_spec(string1)
        spec2 = build_spec(string2) if string2 is not None else None
        paired = align(spec1, spec2) if mode is Mode.TRANSLATE else None

        _logger.debug(
            "mode=%s string1=%d pattern(s) string2=%s",
            mode.value,
            len(spec1),
            "-" if spec2 is None else f"{len(spec2)} pattern(s)",
        )
        return cls(mode=mode, spec1=spec1, spec2=spec2, paired=paired)

    def apply(self, line: str) -> str:
        if self.paired is not None:
            return translate(line, self.paired)
        return apply(self.mode, line, self.spec1, self.spec2)
