# topmark:header:start
#
#   project      : HumanJoin
#   file         : errors.py
#   file_relpath : src/humanjoin/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for HumanJoin.

Usage:
    Registration errors (`PluginNameError`, `PluginCollisionError`) are raised
    while plugins register, normally at import time, and are meant to abort
    the import of a faulty extension module.

    Execution errors (`UnknownRendererError`, `StageExecutionError`) are raised
    from `Joiner.join()` and always surface to its caller. Nothing is retried:
    every stage is deterministic, so a repeated call would fail identically.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from humanjoin.registry.plugins import PluginKind


class HumanJoinError(Exception):
    """Base class for all HumanJoin errors."""


class PluginNameError(HumanJoinError, ValueError):
    """Error for plugin names that are not valid identifiers."""

    def __init__(self, name: object) -> None:
        self.name: object = name
        super().__init__(
            f"invalid plugin name {name!r}: a plugin name must be a string at least one "
            "character long consisting of only letters, digits, and underscores, and not "
            "starting with a digit"
        )


class PluginCollisionError(HumanJoinError, ValueError):
    """Error for plugin names already used by another plugin or a facade member."""

    def __init__(self, name: str) -> None:
        self.name: str = name
        super().__init__(
            f"the name '{name}' is not available, another plugin or core function/property "
            "is already using it"
        )


class UnknownRendererError(HumanJoinError, LookupError):
    """Error when the resolved configuration names no registered renderer."""

    def __init__(self, name: str | None) -> None:
        self.name: str | None = name
        if name is None:
            message = "no renderer selected"
        else:
            message = f"no renderer registered under the name '{name}'"
        super().__init__(message)


class StageExecutionError(HumanJoinError, RuntimeError):
    """Error raised when a pipeline stage fails.

    Attributes:
        kind (PluginKind): The kind of the failing stage.
        name (str): The registered name of the failing stage.
        original_message (str): The message of the underlying exception. The
            exception itself is chained as ``__cause__``.
    """

    def __init__(self, kind: PluginKind, name: str, error: BaseException) -> None:
        self.kind: PluginKind = kind
        self.name: str = name
        self.original_message: str = str(error)
        super().__init__(
            f"failed to execute {kind.label} '{name}' with error: {self.original_message}"
        )


class ConfigError(HumanJoinError):
    """Error for configuration files that are missing, malformed or invalid."""
