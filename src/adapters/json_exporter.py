"""JSON export of parsed operands.

Why JSON:
- Shows exactly how each operand was tokenized and paired, without running
  any input through the engine.
- Stable, diffable output for scripts and bug reports.
"""

from __future__ import annotations

import json
from typing import Any

from core.services.engine import Transliterator


def specs_payload(transliterator: Transliterator) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "mode": transliterator.mode.value,
        "string1": transliterator.spec1.model_dump(mode="json")["patterns"],
        "string2": None,
    }
    if transliterator.spec2 is not None:
        payload["string2"] = transliterator.spec2.model_dump(mode="json")["patterns"]
    if transliterator.paired is not None:
        payload["pairs"] = [
            [source.model_dump(mode="json"), target.model_dump(mode="json")]
            for source, target in transliterator.paired.pairs
        ]
    return payload


def export_specs_json(*, transliterator: Transliterator) -> str:
    """Serialize the parsed specs to UTF-8 friendly JSON with a stable layout."""

    return json.dumps(specs_payload(transliterator), ensure_ascii=False, indent=2, sort_keys=True)
