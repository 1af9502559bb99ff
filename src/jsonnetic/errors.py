# topmark:header:start
#
#   project      : Jsonnetic
#   file         : errors.py
#   file_relpath : src/jsonnetic/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Jsonnetic exceptions.

Rendering is total and never raises. These exceptions cover the host-facing
operations around it: converting arbitrary Python data into a value tree and
loading input documents.
"""

from __future__ import annotations


class JsonnetError(Exception):
    """Base exception for Jsonnetic errors."""

    pass


class UnsupportedValueError(JsonnetError, TypeError):
    """Raised when Python data cannot be represented as a Jsonnet value.

    Attributes:
        obj (object): The offending object.
        path (str): Location of ``obj`` in the input, e.g. ``$.servers[1].port``.
    """

    def __init__(self, obj: object, path: str = "$", reason: str | None = None) -> None:
        self.obj = obj
        self.path = path
        detail = reason or f"unsupported type {type(obj).__name__!r}"
        super().__init__(f"Cannot convert value at {path}: {detail}")


class DocumentLoadError(JsonnetError):
    """Raised when an input document cannot be read or parsed.

    Attributes:
        source (str): Name of the input (file path or ``<stdin>``).
    """

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"{source}: {message}")
