# topmark:header:start
#
#   project      : Jsonnetic
#   file         : constants.py
#   file_relpath : src/jsonnetic/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Jsonnetic Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

JSONNETIC_VERSION: str = get_version("jsonnetic")

# One level of block indentation in rendered output.
INDENT_UNIT: Final[str] = "  "

NULL_LITERAL: Final[str] = "null"
TRUE_LITERAL: Final[str] = "true"
FALSE_LITERAL: Final[str] = "false"

STRING_QUOTE: Final[str] = "'"
ENTRY_TERMINATOR: Final[str] = ","
KEY_SEPARATOR: Final[str] = ": "
