# topmark:header:start
#
#   project      : Jsonnetic
#   file         : errors.py
#   file_relpath : src/jsonnetic/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Jsonnetic CLI.

Each exception carries a sysexits-aligned exit code. Errors are displayed
through the project console when one is present in the Click context, and
fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from jsonnetic.cli.exit_codes import ExitCode
from jsonnetic.errors import DocumentLoadError


class JsonnetCliError(click.ClickException):
    """Base class for all Jsonnetic CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class JsonnetUsageError(JsonnetCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class JsonnetFileNotFoundError(JsonnetCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class JsonnetIOError(JsonnetCliError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR


class JsonnetEncodingError(JsonnetCliError):
    """Error for undecodable or unparsable input documents."""

    exit_code = ExitCode.ENCODING_ERROR


def cli_error_from_load_error(exc: DocumentLoadError) -> JsonnetCliError:
    """Map a `DocumentLoadError` to the CLI error carrying the matching exit code.

    Args:
        exc (DocumentLoadError): The loader error; its ``__cause__`` selects the code.

    Returns:
        JsonnetCliError: The CLI error to raise.
    """
    cause: BaseException | None = exc.__cause__
    message: str = str(exc)
    if isinstance(cause, FileNotFoundError):
        return JsonnetFileNotFoundError(message)
    if isinstance(cause, OSError):
        return JsonnetIOError(message)
    if cause is None:
        # Raised before any read, e.g. an unrecognized suffix.
        return JsonnetUsageError(message)
    return JsonnetEncodingError(message)
