# topmark:header:start
#
#   project      : HumanJoin
#   file         : test_public_imports.py
#   file_relpath : tests/api/test_public_imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Smoke tests for public imports and __all__ (Google-style)."""

from __future__ import annotations

import inspect


def test_package_all_contains_expected_symbols() -> None:
    """__all__ exposes the expected stable symbols (at least this subset)."""
    import humanjoin

    # At minimum these should be present; the full list is allowed to grow.
    expected: set[str] = {
        "Joiner",
        "human_join",
        "register_pre_processor",
        "register_renderer",
        "register_post_processor",
        "register_config_shortcut",
        "StageExecutionError",
    }
    exported: set[str] = set(humanjoin.__all__)
    missing: set[str] = expected - exported
    assert not missing, f"Missing from humanjoin.__all__: {sorted(missing)}; have: {sorted(exported)}"


def test_public_imports() -> None:
    """Public modules import cleanly without raising."""
    from humanjoin import human_join
    from humanjoin.registry import Registry

    # Mark as used so static analyzers don't complain:
    assert human_join is not None
    assert Registry is not None


def test_exported_symbols_resolve() -> None:
    """Every exported symbol exists and is a class, a callable or the default joiner."""
    import humanjoin

    for name in humanjoin.__all__:
        obj = getattr(humanjoin, name)
        assert callable(obj) or inspect.isclass(obj) or isinstance(obj, humanjoin.Joiner)


def test_version_is_a_string() -> None:
    """The package exposes its version."""
    import humanjoin

    assert isinstance(humanjoin.__version__, str)
    assert humanjoin.__version__


def test_error_hierarchy() -> None:
    """All errors derive from HumanJoinError and the matching builtin."""
    from humanjoin import (
        ConfigError,
        HumanJoinError,
        PluginCollisionError,
        PluginNameError,
        StageExecutionError,
        UnknownRendererError,
    )

    assert issubclass(PluginNameError, ValueError)
    assert issubclass(PluginCollisionError, ValueError)
    assert issubclass(StageExecutionError, RuntimeError)
    assert issubclass(UnknownRendererError, LookupError)
    for err in (ConfigError, PluginNameError, PluginCollisionError, StageExecutionError):
        assert issubclass(err, HumanJoinError)
