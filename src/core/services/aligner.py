"""Pattern aligner: pair string1 with string2 for translate."""

from __future__ import annotations

from core.domain.errors import EmptyAlignmentTarget
from core.domain.models import PairedSpec, Spec


def align(spec1: Spec, spec2: Spec) -> PairedSpec:
    """Pair every element of ``spec1`` with one of ``spec2``.

    A shorter ``spec2`` is padded by repeating its last element; a longer
    one is truncated from the right. The result always has ``len(spec1)``
    pairs.
    """

    sources = spec1.patterns
    targets = spec2.patterns

    missing = len(sources) - len(targets)
    if missing > 0:
        if not targets:
            raise EmptyAlignmentTarget(len(sources))
        targets = targets + (targets[-1],) * missing

    return PairedSpec(pairs=tuple(zip(sources, targets)))
