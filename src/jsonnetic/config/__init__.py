# topmark:header:start
#
#   project      : Jsonnetic
#   file         : __init__.py
#   file_relpath : src/jsonnetic/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for Jsonnetic (logging setup and environment lookups)."""

from __future__ import annotations

from jsonnetic.config import logging

__all__ = ["logging"]
