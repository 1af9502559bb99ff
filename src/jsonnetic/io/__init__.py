# topmark:header:start
#
#   project      : Jsonnetic
#   file         : __init__.py
#   file_relpath : src/jsonnetic/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input document loading (TOML and JSON)."""

from __future__ import annotations

from jsonnetic.io.loaders import load_document, load_path
from jsonnetic.io.types import InputFormat

__all__ = ["InputFormat", "load_document", "load_path"]
