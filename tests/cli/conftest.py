# topmark:header:start
#
#   project      : Jsonnetic
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for invoking Jsonnetic through Click's test runner."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from jsonnetic.cli.exit_codes import ExitCode
from jsonnetic.cli.main import cli
from jsonnetic.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall the suite-wide TRACE logging after each CLI invocation.

    The CLI reconfigures the root logger against the runner's temporary streams.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with color disabled.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    args: list[str] = [argv] if isinstance(argv, str) else list(argv or [])
    return runner.invoke(cli, ["--no-color", *args], input=input_text)


def write_doc(tmp_path: Path, name: str, text: str) -> Path:
    """Write a UTF-8 input document under ``tmp_path`` and return its path."""
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
