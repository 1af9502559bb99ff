# topmark:header:start
#
#   project      : Jsonnetic
#   file         : render.py
#   file_relpath : src/jsonnetic/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render Jsonnet value trees as indented text.

The output format is fixed and consumed verbatim by snapshot tests and
downstream tooling:

- strings are single-quoted and never escaped;
- every array/object entry ends with a trailing comma, the last one included;
- blocks are indented two spaces per nesting level;
- empty containers keep an internal blank line (``[\\n\\n]`` / ``{\\n\\n}``);
- object keys appear in ascending order (guaranteed by `Object`).

Numbers use Python's shortest round-trippable ``repr`` of the float, so
``12.5`` renders as ``12.5`` and ``1.0`` as ``1.0``. Non-finite values render
as ``nan`` / ``inf`` with no special handling.

A string containing a single quote yields output that is not valid Jsonnet.
That is a known limitation of the format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import assert_never

from jsonnetic.config.logging import get_logger
from jsonnetic.constants import (
    ENTRY_TERMINATOR,
    FALSE_LITERAL,
    INDENT_UNIT,
    KEY_SEPARATOR,
    NULL_LITERAL,
    STRING_QUOTE,
    TRUE_LITERAL,
)
from jsonnetic.model import Array, Bool, Null, Number, Object, String

if TYPE_CHECKING:
    from collections.abc import Iterable

    from jsonnetic.config.logging import JsonnetLogger
    from jsonnetic.model import Value

logger: JsonnetLogger = get_logger(__name__)


def indent(text: str, n: int) -> str:
    """Prefix every line of ``text`` with ``n`` indentation units.

    Lines are separated by ``\\n``. Blank lines are indented too, so an embedded
    empty line becomes a line of pure whitespace, and a trailing ``\\n`` yields a
    final indented empty line.

    Args:
        text (str): Block of text to indent.
        n (int): Number of two-space units to prepend to each line.

    Returns:
        str: The indented block, joined with ``\\n``.
    """
    prefix: str = INDENT_UNIT * n
    return "\n".join(f"{prefix}{line}" for line in text.split("\n"))


def render(value: Value) -> str:
    """Render a value tree as Jsonnet text.

    Args:
        value (Value): Root of the tree to render.

    Returns:
        str: The rendered text, without a trailing newline.
    """
    logger.trace("Rendering %s value", type(value).__name__)
    return _render(value)


def _quote(text: str) -> str:
    return f"{STRING_QUOTE}{text}{STRING_QUOTE}"


def _block(opening: str, closing: str, entries: Iterable[str]) -> str:
    # Each entry is indented one level here; enclosing blocks add their own level.
    body: str = "\n".join(indent(entry, 1) for entry in entries)
    return f"{opening}\n{body}\n{closing}"


def _render(value: Value) -> str:
    match value:
        case Null():
            return NULL_LITERAL
        case Bool(value=flag):
            return TRUE_LITERAL if flag else FALSE_LITERAL
        case String(value=text):
            return _quote(text)
        case Number(value=number):
            return repr(number)
        case Array(items=items):
            return _block(
                "[",
                "]",
                (f"{_render(item)}{ENTRY_TERMINATOR}" for item in items),
            )
        case Object():
            return _block(
                "{",
                "}",
                (
                    f"{_quote(key)}{KEY_SEPARATOR}{_render(child)}{ENTRY_TERMINATOR}"
                    for key, child in value.items()
                ),
            )
        case _:
            assert_never(value)
