"""Line processing loop.

Pulls lines from a ``LineSource``, transforms them with a ``Transliterator``
and pushes the results to a ``LineSink``. Side effects beyond the sink
(progress, warnings) go through optional hooks so the CLI can decide how to
present them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from core.interfaces.line_io import LineSink, LineSource
from core.log import get_logger
from core.services.engine import Transliterator

_logger = get_logger("lines")


@dataclass
class ProcessHooks:
    """Optional callbacks for UI layers."""

    line_done: Callable[[int], None] | None = None


@dataclass
class ProcessResult:
    """Output of a processing run."""

    lines: int = 0


def process_lines(
    *,
    source: LineSource,
    sink: LineSink,
    transliterator: Transliterator,
    hooks: ProcessHooks | None = None,
) -> ProcessResult:
    """Transform every line of ``source`` into ``sink``.

    A line that fails is not written; lines written before it stay written
    and the error propagates to the caller. The sink is flushed in both
    cases.
    """

    hooks = hooks or ProcessHooks()
    result = ProcessResult()
    try:
        for line in source:
            sink.write_line(transliterator.apply(line))
            result.lines += 1
            if hooks.line_done:
                hooks.line_done(result.lines)
    finally:
        sink.flush()

    _logger.debug("processed %d line(s) in %s mode", result.lines, transliterator.mode.value)
    return result
