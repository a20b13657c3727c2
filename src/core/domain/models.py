"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation (a literal is exactly one scalar value, a class is one
  of the known names) without coupling the core to the CLI.
- Frozen models are hashable and read-only, so a spec built at startup can
  be shared by every line without copies.

Note:
- These models describe *what* an operand means, not *how* it is applied.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.char_class import ClassKind


class Mode(str, Enum):
    """Transformation selected for an invocation."""

    TRANSLATE = "translate"
    DELETE = "delete"
    COMPRESS = "compress"
    DELETE_COMPRESS = "delete_compress"

    def needs_string2(self) -> bool:
        return self in (Mode.TRANSLATE, Mode.DELETE_COMPRESS)


class LiteralPattern(BaseModel):
    """A single character taken verbatim from the operand."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    char: str = Field(
        ...,
        min_length=1,
        max_length=1,
        description="One Unicode scalar value (not a grapheme cluster).",
    )

    def __str__(self) -> str:
        return self.char


class ClassPattern(BaseModel):
    """A ``[:name:]`` reference to a character class."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["class"] = "class"
    name: ClassKind = Field(
        ...,
        description="Referenced class.",
    )

    def __str__(self) -> str:
        return self.name.token()


Pattern = Annotated[Union[LiteralPattern, ClassPattern], Field(discriminator="kind")]


class Spec(BaseModel):
    """Parsed operand: patterns in the textual order of their tokens."""

    model_config = ConfigDict(frozen=True)

    patterns: tuple[Pattern, ...] = Field(
        default_factory=tuple,
        description="Tokens of the operand, left to right.",
    )

    def __len__(self) -> int:
        return len(self.patterns)

    def __str__(self) -> str:
        return "".join(str(p) for p in self.patterns)


class PairedSpec(BaseModel):
    """Source/target pairs used by translate, one per element of string1."""

    model_config = ConfigDict(frozen=True)

    pairs: tuple[tuple[Pattern, Pattern], ...] = Field(
        default_factory=tuple,
        description="(source, target) pairs, applied in order.",
    )

    def __len__(self) -> int:
        return len(self.pairs)
