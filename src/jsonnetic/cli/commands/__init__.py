# topmark:header:start
#
#   project      : Jsonnetic
#   file         : __init__.py
#   file_relpath : src/jsonnetic/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the Jsonnetic CLI."""
