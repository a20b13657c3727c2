"""Line I/O contracts.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The line processor can run against stdin/stdout or in-memory lists in
  tests without knowing which.
"""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class LineSource(Protocol):
    """Yields input lines without their line terminator."""

    def __iter__(self) -> Iterator[str]:
        ...


@runtime_checkable
class LineSink(Protocol):
    """Receives transformed lines."""

    def write_line(self, line: str) -> None:
        """Write ``line`` followed by a newline."""

        ...

    def flush(self) -> None:
        ...
