"""Logging helpers for the ``cctr`` logger tree.

- ``configure_logging``: installs a single rich handler on stderr (idempotent).
- ``get_logger``: namespaced logger factory (``cctr.*``).

stdout carries the transformed lines, so nothing here ever writes to it.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "cctr"


def configure_logging(level: str | int = logging.WARNING, *, console: Console | None = None) -> logging.Logger:
    """Configure the base ``cctr`` logger once and return it.

    Calling it again only updates the level.
    """

    base = logging.getLogger(ROOT_LOGGER)
    base.setLevel(level.upper() if isinstance(level, str) else level)
    if base.handlers:
        return base

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    base.addHandler(handler)
    base.propagate = False
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under ``cctr`` (``get_logger("engine")`` -> ``cctr.engine``)."""

    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
