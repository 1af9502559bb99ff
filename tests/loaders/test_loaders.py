# topmark:header:start
#
#   project      : Jsonnetic
#   file         : test_loaders.py
#   file_relpath : tests/loaders/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input loaders: TOML/JSON parsing, format inference and error chaining."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from jsonnetic.errors import DocumentLoadError, UnsupportedValueError
from jsonnetic.io.loaders import load_document, load_path, resolve_format
from jsonnetic.io.types import InputFormat
from jsonnetic.producer import from_python
from jsonnetic.render import render

if TYPE_CHECKING:
    from pathlib import Path

TOML_TEXT = """\
# comments are dropped
name = "web"
replicas = 2

[tls]
enabled = true
"""


def test_load_toml_unwraps_to_plain_data() -> None:
    data = load_document(TOML_TEXT, InputFormat.TOML)
    assert data == {"name": "web", "replicas": 2, "tls": {"enabled": True}}
    assert type(data) is dict


def test_load_json() -> None:
    assert load_document('{"a": [1, null, "x"]}', InputFormat.JSON) == {"a": [1, None, "x"]}


def test_loaded_toml_renders() -> None:
    value = from_python(load_document(TOML_TEXT, InputFormat.TOML))
    assert render(value) == (
        "{\n"
        "  'name': 'web',\n"
        "  'replicas': 2.0,\n"
        "  'tls': {\n"
        "    'enabled': true,\n"
        "  },\n"
        "}"
    )


def test_toml_datetimes_are_not_representable() -> None:
    data = load_document("when = 2025-01-01T00:00:00Z\n", InputFormat.TOML)
    with pytest.raises(UnsupportedValueError) as excinfo:
        from_python(data)
    assert excinfo.value.path == "$.when"


def test_invalid_toml_raises_with_cause() -> None:
    with pytest.raises(DocumentLoadError, match="invalid TOML") as excinfo:
        load_document("name = ", InputFormat.TOML, source="broken.toml")
    assert excinfo.value.source == "broken.toml"
    assert excinfo.value.__cause__ is not None


def test_invalid_json_raises() -> None:
    with pytest.raises(DocumentLoadError, match="invalid JSON"):
        load_document("{", InputFormat.JSON)


def test_format_inference(tmp_path: Path) -> None:
    assert resolve_format(tmp_path / "a.toml", None) is InputFormat.TOML
    assert resolve_format(tmp_path / "a.JSON", None) is InputFormat.JSON
    assert resolve_format(tmp_path / "a.txt", InputFormat.JSON) is InputFormat.JSON
    with pytest.raises(DocumentLoadError, match="cannot infer"):
        resolve_format(tmp_path / "a.yaml", None)


def test_load_path_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text('{"k": "v"}', encoding="utf-8")
    assert load_path(path) == {"k": "v"}
    assert load_path(str(path)) == {"k": "v"}


def test_load_path_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DocumentLoadError) as excinfo:
        load_path(tmp_path / "missing.toml")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_load_path_bad_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin1.toml"
    path.write_bytes('name = "caf\xe9"\n'.encode("latin-1"))
    with pytest.raises(DocumentLoadError, match="UTF-8") as excinfo:
        load_path(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
