# topmark:header:start
#
#   project      : Jsonnetic
#   file         : version.py
#   file_relpath : src/jsonnetic/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Jsonnetic `version` command.

Prints the current Jsonnetic version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonnetic.constants import JSONNETIC_VERSION

if TYPE_CHECKING:
    from jsonnetic.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Jsonnetic.",
)
def version_command() -> None:
    """Show the current version of Jsonnetic."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    console.print(console.styled(JSONNETIC_VERSION, bold=True))
