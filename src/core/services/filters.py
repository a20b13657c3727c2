"""Delete and squeeze operations.

Both use the FILTER predicate context (``blank``/``space`` match any
whitespace) and run one independent pass per pattern over the evolving line.
"""

from __future__ import annotations

from core.domain.models import Spec
from core.services.predicates import PredicateContext, predicate_for


def delete(line: str, spec: Spec) -> str:
    """Remove every character matching any pattern of ``spec``."""

    for pattern in spec.patterns:
        matches = predicate_for(pattern, PredicateContext.FILTER)
        line = "".join(ch for ch in line if not matches(ch))
    return line


def squeeze(line: str, spec: Spec) -> str:
    """Collapse runs of an identical, pattern-matching character to one.

    Runs of different characters that merely share a class are kept.
    """

    for pattern in spec.patterns:
        matches = predicate_for(pattern, PredicateContext.FILTER)
        out: list[str] = []
        for ch in line:
            if out and out[-1] == ch and matches(ch):
                continue
            out.append(ch)
        line = "".join(out)
    return line


def delete_compress(line: str, delete_spec: Spec, squeeze_spec: Spec) -> str:
    """Delete with the first spec, then squeeze the result with the second."""

    return squeeze(delete(line, delete_spec), squeeze_spec)
