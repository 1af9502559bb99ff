# topmark:header:start
#
#   project      : Jsonnetic
#   file         : test_cli_basics.py
#   file_relpath : tests/cli/test_cli_basics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: group help, `version`, and verbosity flags."""

from __future__ import annotations

from importlib.metadata import version

import pytest

from jsonnetic.cli.errors import JsonnetUsageError
from jsonnetic.cli.exit_codes import ExitCode
from jsonnetic.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from jsonnetic.config.logging import TRACE_LEVEL
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert "jsonnetic render" in result.output
    assert "Usage:" in result.output


@mark_cli
def test_version_command() -> None:
    result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.output.strip() == version("jsonnetic")


@mark_cli
def test_verbose_and_quiet_flags_parse() -> None:
    for args in (["-v", "version"], ["-vvv", "version"], ["-q", "version"], ["-qq", "version"]):
        assert_SUCCESS(run_cli(args))


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    assert_exit(run_cli(["-v", "-q", "version"]), ExitCode.USAGE_ERROR)


def test_resolve_verbosity_levels() -> None:
    assert resolve_verbosity(0, 0) == 30
    assert resolve_verbosity(1, 0) == 20
    assert resolve_verbosity(2, 0) == 10
    assert resolve_verbosity(3, 0) == TRACE_LEVEL
    assert resolve_verbosity(0, 2) == 40
    with pytest.raises(JsonnetUsageError):
        resolve_verbosity(1, 1)


def test_resolve_color_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=False) is True
    assert resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=True) is False
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is True
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is False
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=False) is True
