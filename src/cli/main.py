"""``cctr`` command.

The CLI owns everything the core leaves out: flag parsing, non-empty
operand checks, mode selection, stream setup and exit codes (0 on success,
2 on any usage or core error).
"""

from __future__ import annotations

import codecs
import sys
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import export_specs_json
from adapters.stdio import StdinLineSource, StdoutLineSink
from cli.ui_components import print_error
from core import __version__
from core.config import AppSettings
from core.domain.errors import TransliterationError
from core.log import configure_logging, get_logger
from core.services.engine import Transliterator, select_mode
from core.services.line_processor import ProcessHooks, process_lines

EXIT_USAGE = 2

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "The tr utility copies the standard input to the standard output "
        "with substitution or deletion of selected characters."
    ),
)

_err_console = Console(stderr=True)
_logger = get_logger("cli")


def _not_empty(value: Optional[str]) -> Optional[str]:
    if value is not None and value == "":
        raise typer.BadParameter("operand contains no characters")
    return value


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cctr {__version__}")
        raise typer.Exit()


def _reconfigure(stream: object, encoding: str) -> None:
    current = getattr(stream, "encoding", None)
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is None or not current:
        return
    if codecs.lookup(current).name != codecs.lookup(encoding).name:
        reconfigure(encoding=encoding)


def _log_progress(lines: int) -> None:
    _logger.debug("line %d done", lines)


def _fail(error: TransliterationError, settings: AppSettings) -> NoReturn:
    _logger.debug("aborting: %s", error.message)
    print_error(_err_console, error, rich=settings.rich_errors)
    raise typer.Exit(code=EXIT_USAGE)


@app.command()
def main(
    string1: str = typer.Argument(
        ...,
        callback=_not_empty,
        show_default=False,
        help="A set of characters to translate, delete or squeeze.",
    ),
    string2: Optional[str] = typer.Argument(
        None,
        callback=_not_empty,
        show_default=False,
        help="A set of characters to replace the characters in STRING1.",
    ),
    complement1: bool = typer.Option(
        False,
        "-C",
        help="Complement the set of characters in STRING1 (accepted, no effect).",
    ),
    complement2: bool = typer.Option(
        False,
        "-c",
        help="Same as -C (accepted, no effect).",
    ),
    delete: bool = typer.Option(False, "-d", help="Delete characters in STRING1 from the input."),
    squeeze: bool = typer.Option(
        False,
        "-s",
        help="Squeeze repeated characters listed in the last operand into a single instance.",
    ),
    unbuffered: bool = typer.Option(False, "-u", help="Unbuffered output (accepted, no effect)."),
    dump_spec: bool = typer.Option(
        False,
        "--dump-spec",
        help="Print the parsed operands as JSON and exit without reading input.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Translate, delete or squeeze characters from standard input."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_USAGE)

    configure_logging(settings.log_level, console=_err_console)
    _reconfigure(sys.stdin, settings.io_encoding)
    _reconfigure(sys.stdout, settings.io_encoding)

    mode = select_mode(delete=delete, squeeze=squeeze)
    _logger.debug(
        "mode=%s complement1=%s complement2=%s unbuffered=%s",
        mode.value,
        complement1,
        complement2,
        unbuffered,
    )

    try:
        transliterator = Transliterator.build(mode, string1, string2)
    except TransliterationError as exc:
        _fail(exc, settings)

    if dump_spec:
        typer.echo(export_specs_json(transliterator=transliterator))
        raise typer.Exit()

    try:
        process_lines(
            source=StdinLineSource(),
            sink=StdoutLineSink(),
            transliterator=transliterator,
            hooks=ProcessHooks(line_done=_log_progress),
        )
    except TransliterationError as exc:
        _fail(exc, settings)


def run() -> None:
    app()
