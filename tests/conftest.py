# topmark:header:start
#
#   project      : HumanJoin
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the HumanJoin test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests must not leave throw-away plugins in the process-wide registry: names can
    never be unregistered. Register test plugins on a private builder instead
    (see the `builder` fixture) and hand the frozen result to
    ``Joiner(..., registry=...)``. Tests that exercise the module-level
    registration functions use `unique_name` so repeated runs never collide.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from humanjoin import Joiner
from humanjoin.config import logging
from humanjoin.registry import get_registry

if TYPE_CHECKING:
    from humanjoin.config.options import PluginOptions
    from humanjoin.registry import Registry, RegistryBuilder

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_dev_validation: DecoratorType[Any] = as_typed_mark(pytest.mark.dev_validation)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_humanjoin_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure HumanJoin's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("HUMANJOIN_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for all tests so every stage is logged.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


_counter = itertools.count()


def unique_name(prefix: str = "test_plugin") -> str:
    """Return a plugin name never used before in this process."""
    return f"{prefix}_{next(_counter)}"


@pytest.fixture
def builder() -> RegistryBuilder:
    """Return a private registry builder seeded with the built-in plugins."""
    return get_registry().thaw()


def make_joiner(registry: Registry, config: Any = None) -> Joiner:
    """Return a joiner bound to ``registry`` (default configuration if ``config`` is None)."""
    return Joiner(config, registry=registry)


def recording_stage(calls: list[str], label: str) -> Callable[[Any, PluginOptions], Any]:
    """Return a pass-through stage that appends ``label`` to ``calls`` when run."""

    def _stage(subject: Any, opts: PluginOptions) -> Any:
        calls.append(label)
        return subject

    return _stage
