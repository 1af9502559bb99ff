# topmark:header:start
#
#   project      : Jsonnetic
#   file         : test_public_imports.py
#   file_relpath : tests/api/test_public_imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Smoke tests for public imports and __all__."""

from __future__ import annotations


def test_package_all_contains_expected_symbols() -> None:
    """__all__ exposes the expected stable symbols (at least this subset)."""
    import jsonnetic

    expected: set[str] = {
        "Value",
        "Null",
        "Bool",
        "String",
        "Number",
        "Array",
        "Object",
        "render",
        "indent",
        "HasJsonnet",
        "from_python",
    }
    exported: set[str] = set(jsonnetic.__all__)
    missing: set[str] = expected - exported
    assert not missing, f"Missing from jsonnetic.__all__: {sorted(missing)}"


def test_all_names_resolve() -> None:
    """Every name listed in __all__ is importable from the package."""
    import jsonnetic

    for name in jsonnetic.__all__:
        assert getattr(jsonnetic, name) is not None


def test_package_level_render_matches_module() -> None:
    from jsonnetic import Array, Null, render
    from jsonnetic.render import render as render_impl

    assert render is render_impl
    assert render(Array([Null()])) == "[\n  null,\n]"
