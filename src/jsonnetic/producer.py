# topmark:header:start
#
#   project      : Jsonnetic
#   file         : producer.py
#   file_relpath : src/jsonnetic/producer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Produce Jsonnet value trees from host objects and plain Python data.

Host types join the renderer by implementing `HasJsonnet`, a single-method
protocol; no common base class is required. Plain Python data (the shapes
returned by JSON and TOML loaders) is converted by `from_python`.

Example:
    ```python
    from dataclasses import dataclass

    from jsonnetic.model import Object, String, Value
    from jsonnetic.producer import render_any

    @dataclass
    class Service:
        name: str

        def jsonnet(self) -> Value:
            return Object({"name": String(self.name)})

    render_any(Service("web"))
    render_any({"ports": [80, 443]})
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from jsonnetic.config.logging import get_logger
from jsonnetic.errors import UnsupportedValueError
from jsonnetic.model import (
    FALSE,
    NULL,
    TRUE,
    Array,
    Bool,
    Null,
    Number,
    Object,
    String,
    Value,
)
from jsonnetic.render import render

logger = get_logger(__name__)

_VALUE_TYPES: tuple[type, ...] = (Null, Bool, String, Number, Array, Object)


@runtime_checkable
class HasJsonnet(Protocol):
    """Protocol for objects that can describe themselves as a Jsonnet value."""

    def jsonnet(self) -> Value:
        """Return a value tree representing this object."""
        ...


def from_python(data: object) -> Value:
    """Convert plain Python data into a value tree.

    Conversion rules:
        - ``None`` -> `Null`; ``bool`` -> `Bool`; ``str`` -> `String`;
        - ``int`` / ``float`` -> `Number`;
        - ``list`` / ``tuple`` -> `Array`;
        - string-keyed ``Mapping`` -> `Object`;
        - existing values are returned unchanged;
        - `HasJsonnet` producers are asked for their value.

    Args:
        data (object): The data to convert.

    Returns:
        Value: The converted tree.

    Raises:
        UnsupportedValueError: If ``data`` (or anything nested in it) has no
            Jsonnet representation, or a mapping has a non-string key.
    """
    logger.trace("Converting %s to a Jsonnet value", type(data).__name__)
    return _convert(data, "$")


def _convert(data: object, path: str) -> Value:
    if isinstance(data, _VALUE_TYPES):
        return data  # type: ignore[return-value]
    if data is None:
        return NULL
    if isinstance(data, bool):
        return TRUE if data else FALSE
    if isinstance(data, str):
        return String(data)
    if isinstance(data, (int, float)):
        try:
            return Number(data)
        except OverflowError as exc:
            raise UnsupportedValueError(data, path, "integer too large for a float") from exc
    if isinstance(data, Mapping):
        entries: list[tuple[str, Value]] = []
        for key, child in data.items():
            if not isinstance(key, str):
                raise UnsupportedValueError(
                    key, path, f"object keys must be strings, not {type(key).__name__!r}"
                )
            entries.append((key, _convert(child, f"{path}.{key}")))
        return Object(entries)
    if isinstance(data, (list, tuple)):
        return Array(_convert(child, f"{path}[{i}]") for i, child in enumerate(data))
    if isinstance(data, HasJsonnet):
        return data.jsonnet()
    raise UnsupportedValueError(data, path)


def to_jsonnet(obj: object) -> Value:
    """Return the value tree for ``obj``.

    Producers implementing `HasJsonnet` are trusted to build their own tree;
    anything else goes through `from_python`.

    Args:
        obj (object): A `HasJsonnet` producer or plain Python data.

    Returns:
        Value: The value tree representing ``obj``.
    """
    if isinstance(obj, HasJsonnet):
        return obj.jsonnet()
    return from_python(obj)


def render_any(obj: object) -> str:
    """Render a producer or plain Python data as Jsonnet text.

    Args:
        obj (object): A `HasJsonnet` producer or plain Python data.

    Returns:
        str: The rendered text.
    """
    return render(to_jsonnet(obj))
