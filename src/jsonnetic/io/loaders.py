# topmark:header:start
#
#   project      : Jsonnetic
#   file         : loaders.py
#   file_relpath : src/jsonnetic/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load input documents as plain Python data.

TOML is parsed with `tomlkit` and unwrapped to plain ``dict``/``list``
structures; JSON uses the standard library. The returned data is meant to be
passed to `jsonnetic.producer.from_python`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jsonnetic.config.logging import get_logger
from jsonnetic.errors import DocumentLoadError
from jsonnetic.io.types import InputFormat

if TYPE_CHECKING:
    from jsonnetic.config.logging import JsonnetLogger

logger: JsonnetLogger = get_logger(__name__)

STDIN_SOURCE: str = "<stdin>"


def load_document(text: str, fmt: InputFormat, *, source: str = STDIN_SOURCE) -> object:
    """Parse document text into plain Python data.

    Args:
        text (str): Raw document content.
        fmt (InputFormat): Format of ``text``.
        source (str): Name of the input, used in error messages.

    Returns:
        object: The parsed data (a ``dict`` for TOML, any JSON value for JSON).

    Raises:
        DocumentLoadError: If ``text`` is not a valid document of format ``fmt``.
    """
    logger.debug("Parsing %s as %s", source, fmt.value)
    if fmt is InputFormat.TOML:
        try:
            doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        except TomlkitParseError as exc:
            raise DocumentLoadError(source, f"invalid TOML: {exc}") from exc
        data: Any = doc.unwrap()
        return data
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(source, f"invalid JSON: {exc}") from exc


def resolve_format(path: Path, fmt: InputFormat | None) -> InputFormat:
    """Return ``fmt`` or infer it from the suffix of ``path``.

    Raises:
        DocumentLoadError: If no format was given and the suffix is not recognized.
    """
    if fmt is not None:
        return fmt
    inferred: InputFormat | None = InputFormat.from_suffix(path.suffix)
    if inferred is None:
        raise DocumentLoadError(
            str(path),
            f"cannot infer input format from suffix {path.suffix!r}; use --format",
        )
    return inferred


def load_path(path: Path | str, fmt: InputFormat | None = None) -> object:
    """Read and parse a UTF-8 document from disk.

    Args:
        path (Path | str): File to read.
        fmt (InputFormat | None): Explicit format; inferred from the suffix if None.

    Returns:
        object: The parsed data.

    Raises:
        DocumentLoadError: If the file cannot be read, decoded or parsed. The
            underlying exception is chained as ``__cause__``.
    """
    p = Path(path)
    effective: InputFormat = resolve_format(p, fmt)
    try:
        text: str = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentLoadError(str(p), f"not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise DocumentLoadError(str(p), exc.strerror or str(exc)) from exc
    return load_document(text, effective, source=str(p))
