# topmark:header:start
#
#   project      : Jsonnetic
#   file         : types.py
#   file_relpath : src/jsonnetic/io/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input document formats accepted by the loaders."""

from __future__ import annotations

from enum import Enum


class InputFormat(str, Enum):
    """Supported input document formats."""

    TOML = "toml"
    JSON = "json"

    @classmethod
    def from_suffix(cls, suffix: str) -> InputFormat | None:
        """Return the format matching a file suffix (``.toml``/``.json``), if any."""
        normalized: str = suffix.lower().lstrip(".")
        for member in cls:
            if member.value == normalized:
                return member
        return None
