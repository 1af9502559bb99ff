# topmark:header:start
#
#   project      : Jsonnetic
#   file         : __main__.py
#   file_relpath : src/jsonnetic/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Jsonnetic via ``python -m jsonnetic``.

Equivalent to running the ``jsonnetic`` console script.

Examples:
    Render a TOML file::

        python -m jsonnetic render config.toml
"""

from __future__ import annotations

from jsonnetic.cli.main import cli

if __name__ == "__main__":
    cli()
