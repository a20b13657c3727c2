from __future__ import annotations

import pytest

from core.domain.models import ClassPattern, LiteralPattern, Spec
from core.services.engine import build_spec


@pytest.fixture
def spec():
    """Parse an operand: ``spec("[:lower:]")``."""

    return build_spec


@pytest.fixture
def lit():
    return lambda ch: LiteralPattern(char=ch)


@pytest.fixture
def cls():
    return lambda name: ClassPattern(name=name)


@pytest.fixture
def empty_spec() -> Spec:
    return Spec(patterns=())
