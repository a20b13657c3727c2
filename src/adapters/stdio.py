"""stdin/stdout adapters for the line processor.

- Terminal stdin: one line is requested and processed.
- Piped stdin: every line is streamed.

Line terminators (``\\n`` and ``\\r\\n``) are stripped on input and a single
``\\n`` is written after every output line.
"""

from __future__ import annotations

import sys
from typing import Iterator, TextIO


def strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class StdinLineSource:
    """``LineSource`` over a text stream (stdin by default)."""

    def __init__(self, stream: TextIO | None = None, *, interactive: bool | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._interactive = interactive

    @property
    def interactive(self) -> bool:
        if self._interactive is not None:
            return self._interactive
        isatty = getattr(self._stream, "isatty", None)
        return bool(isatty and isatty())

    def __iter__(self) -> Iterator[str]:
        if self.interactive:
            line = self._stream.readline()
            if line:
                yield strip_terminator(line)
            return

        for line in self._stream:
            yield strip_terminator(line)


class StdoutLineSink:
    """``LineSink`` over a text stream (stdout by default).

    Output stays buffered by the stream; ``flush`` is called once the
    processor is done.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        self._stream.write(line)
        self._stream.write("\n")

    def flush(self) -> None:
        self._stream.flush()
