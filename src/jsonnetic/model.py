# topmark:header:start
#
#   project      : Jsonnetic
#   file         : model.py
#   file_relpath : src/jsonnetic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Jsonnet value model.

A value tree is built from six immutable variants: `Null`, `Bool`, `String`,
`Number`, `Array` and `Object`. `Value` is the closed union of those variants;
consumers dispatch on it with ``match`` and close the match with
``assert_never`` so a missing case is reported by the type checker.

Trees are strictly owned: containers hold their children and nothing else,
and no variant exposes a mutation API.

`Object` keeps its entries sorted by key as a structural property: the
mapping is rebuilt in ascending key order when the object is constructed, so
every consumer iterates keys in the same order regardless of insertion order.

Example:
    ```python
    from jsonnetic.model import Array, Bool, Null, Number, Object, String

    tree = Object({"name": String("web"), "replicas": Number(3)})
    list(tree.keys())  # ['name', 'replicas']
    Array([Null(), Bool(True)])
    ```
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TypeAlias, cast

from typing_extensions import assert_never


class JsonnetType(str, Enum):
    """Type tags of the Jsonnet language.

    ``FUNCTION`` names the language's function type. The value model has no
    function variant, so `type_of` never returns it.
    """

    NULL = "null"
    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    ARRAY = "array"
    OBJECT = "object"
    FUNCTION = "function"


class _Renders:
    """Give every variant a ``str()`` that renders it as Jsonnet text."""

    def __str__(self) -> str:
        from jsonnetic.render import render

        return render(cast("Value", self))


@dataclass(frozen=True)
class Null(_Renders):
    """The ``null`` value."""


@dataclass(frozen=True)
class Bool(_Renders):
    """A boolean value."""

    value: bool


@dataclass(frozen=True)
class String(_Renders):
    """A text value, stored verbatim."""

    value: str


@dataclass(frozen=True)
class Number(_Renders):
    """A 64-bit floating point value. Integers are coerced to ``float``."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True, init=False)
class Array(_Renders):
    """An ordered sequence of values."""

    items: tuple[Value, ...]

    def __init__(self, items: Iterable[Value] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)


@dataclass(frozen=True, init=False)
class Object(_Renders):
    """A mapping from string keys to values, always iterated in key order.

    Args:
        fields (Mapping[str, Value] | Iterable[tuple[str, Value]]): Entries of the
            object. When pairs are given and a key repeats, the last pair wins.
    """

    fields: Mapping[str, Value]

    def __init__(
        self,
        fields: Mapping[str, Value] | Iterable[tuple[str, Value]] = (),
    ) -> None:
        entries: dict[str, Value] = dict(fields)
        ordered: dict[str, Value] = {key: entries[key] for key in sorted(entries)}
        object.__setattr__(self, "fields", MappingProxyType(ordered))

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __getitem__(self, key: str) -> Value:
        return self.fields[key]

    def __hash__(self) -> int:
        return hash(tuple(self.fields.items()))

    def keys(self) -> Iterator[str]:
        """Iterate over keys in ascending order."""
        return iter(self.fields)

    def items(self) -> Iterator[tuple[str, Value]]:
        """Iterate over ``(key, value)`` pairs in ascending key order."""
        return iter(self.fields.items())


Value: TypeAlias = Null | Bool | String | Number | Array | Object

NULL: Null = Null()
TRUE: Bool = Bool(True)
FALSE: Bool = Bool(False)


def type_of(value: Value) -> JsonnetType:
    """Return the type tag of ``value``.

    Args:
        value (Value): The value to classify.

    Returns:
        JsonnetType: The tag matching the variant of ``value``.
    """
    match value:
        case Null():
            return JsonnetType.NULL
        case Bool():
            return JsonnetType.BOOLEAN
        case String():
            return JsonnetType.STRING
        case Number():
            return JsonnetType.NUMBER
        case Array():
            return JsonnetType.ARRAY
        case Object():
            return JsonnetType.OBJECT
        case _:
            assert_never(value)
