# topmark:header:start
#
#   project      : Jsonnetic
#   file         : render.py
#   file_relpath : src/jsonnetic/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Jsonnetic `render` command.

Loads a TOML or JSON document (from a file or STDIN), converts it to a
Jsonnet value tree and prints the rendered text followed by a newline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonnetic.cli.errors import JsonnetCliError, JsonnetUsageError, cli_error_from_load_error
from jsonnetic.cli.options import input_format_option
from jsonnetic.config.logging import get_logger
from jsonnetic.errors import DocumentLoadError, UnsupportedValueError
from jsonnetic.io.loaders import STDIN_SOURCE, load_document, load_path
from jsonnetic.io.types import InputFormat
from jsonnetic.producer import from_python
from jsonnetic.render import render

if TYPE_CHECKING:
    from jsonnetic.cli.console import ClickConsole
    from jsonnetic.model import Value

logger = get_logger(__name__)


def _load(path: str, fmt: InputFormat | None) -> object:
    if path == "-":
        if fmt is None:
            raise JsonnetUsageError("'--format' is required when reading from STDIN.")
        raw: bytes = click.get_binary_stream("stdin").read()
        try:
            text: str = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentLoadError(STDIN_SOURCE, f"not valid UTF-8: {exc}") from exc
        return load_document(text, fmt)
    return load_path(path, fmt)


@click.command(
    name="render",
    help=(
        "Render a TOML or JSON document as Jsonnet. "
        "PATH defaults to '-' (read the document from STDIN; requires --format)."
    ),
)
@click.argument("path", required=False, default="-", type=str)
@input_format_option
def render_command(*, path: str, input_format: str | None) -> None:
    """Render a document as Jsonnet text.

    Args:
        path (str): Input file, or ``-`` for STDIN.
        input_format (str | None): Explicit input format (``toml`` or ``json``).

    Raises:
        JsonnetCliError: If the input cannot be loaded or has no Jsonnet
            representation; the subclass selects the exit code.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    fmt: InputFormat | None = InputFormat(input_format) if input_format else None

    try:
        data: object = _load(path, fmt)
    except DocumentLoadError as exc:
        raise cli_error_from_load_error(exc) from exc

    try:
        value: Value = from_python(data)
    except UnsupportedValueError as exc:
        raise JsonnetCliError(str(exc)) from exc

    logger.info("Rendering %s", STDIN_SOURCE if path == "-" else path)
    console.document(render(value))
