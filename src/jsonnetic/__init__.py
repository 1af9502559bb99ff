# topmark:header:start
#
#   project      : Jsonnetic
#   file         : __init__.py
#   file_relpath : src/jsonnetic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Jsonnetic package.

Jsonnetic models Jsonnet values (null, boolean, string, number, array and
object) and renders value trees as deterministic, indented Jsonnet text.
Host objects take part by implementing the `HasJsonnet` protocol.
"""

from __future__ import annotations

from jsonnetic.errors import DocumentLoadError, JsonnetError, UnsupportedValueError
from jsonnetic.model import (
    FALSE,
    NULL,
    TRUE,
    Array,
    Bool,
    JsonnetType,
    Null,
    Number,
    Object,
    String,
    Value,
    type_of,
)
from jsonnetic.producer import HasJsonnet, from_python, render_any, to_jsonnet
from jsonnetic.render import indent, render

__all__ = [
    # Value model
    "Value",
    "Null",
    "Bool",
    "String",
    "Number",
    "Array",
    "Object",
    "NULL",
    "TRUE",
    "FALSE",
    "JsonnetType",
    "type_of",
    # Rendering
    "render",
    "indent",
    # Producers
    "HasJsonnet",
    "from_python",
    "to_jsonnet",
    "render_any",
    # Exceptions
    "JsonnetError",
    "UnsupportedValueError",
    "DocumentLoadError",
]
