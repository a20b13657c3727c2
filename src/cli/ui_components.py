"""CLI UI components (Rich).

Why separate components:
- Keeps command logic free of presentation details.
- Error rendering is shared by every failure path of the command.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.errors import OperandError, TransliterationError


def _title(error: TransliterationError) -> str:
    if isinstance(error, OperandError):
        return "Usage error"
    return type(error).__name__


def build_error_panel(error: TransliterationError) -> Panel:
    """Panel describing a core error."""

    body = Text(error.message)
    return Panel(body, title=Text(_title(error), style="bold red"), border_style="red", expand=False)


def print_error(console: Console, error: TransliterationError, *, rich: bool = True) -> None:
    """Print ``error`` on ``console``; a plain ``cctr: ...`` line when ``rich`` is off."""

    if rich:
        console.print(build_error_panel(error))
    else:
        console.print(f"cctr: {error.message}", markup=False, highlight=False)
