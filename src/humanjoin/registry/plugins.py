# topmark:header:start
#
#   project      : HumanJoin
#   file         : plugins.py
#   file_relpath : src/humanjoin/registry/plugins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plugin registries for HumanJoin.

Three kinds of pipeline stages can be registered, each in its own table:

* pre-processors: ``fn(data, options) -> None``, mutate the working copy of the data;
* renderers: ``fn(data, options) -> str``, produce the joined string;
* post-processors: ``fn(text, options) -> str``, transform the joined string.

Configuration shortcuts (named partial configurations) live in a fourth table.
All four tables and every member of the `Joiner` facade share **one** name
space, so a plugin can never shadow an existing feature.

Registries come in two shapes, mirroring the mutable/frozen split used for
configuration:

* `RegistryBuilder`: mutable, validates every registration;
* `Registry`: the frozen, read-only value handed to joiners and the executor.

Typical usage:
    ```python
    from humanjoin.registry import post_processor

    @post_processor("shout")
    def shout(text: str, opts: PluginOptions) -> str:
        return text.upper()
    ```

Warning:
    The module-level functions mutate the process-wide registry. Registration
    is meant to happen once, while extension modules are imported; a name can
    never be registered twice and nothing is ever unregistered. Use a private
    `RegistryBuilder` (e.g. ``get_registry().thaw()``) for throw-away entries.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from humanjoin.config.logging import get_logger
from humanjoin.config.model import JoinConfig
from humanjoin.constants import PLUGIN_NAME_RE
from humanjoin.errors import PluginCollisionError, PluginNameError

if TYPE_CHECKING:
    from humanjoin.config.logging import HumanJoinLogger

logger: HumanJoinLogger = get_logger(__name__)

PluginFn = Callable[..., Any]
F = TypeVar("F", bound=PluginFn)


class PluginKind(str, Enum):
    """The kind of a pipeline stage."""

    PRE_PROCESSOR = "pre_processor"
    RENDERER = "renderer"
    POST_PROCESSOR = "post_processor"

    @property
    def label(self) -> str:
        """Human-readable name used in messages (e.g. ``"pre-processor"``)."""
        return self.value.replace("_", "-")


@dataclass(frozen=True)
class PluginEntry:
    """A registered pipeline stage."""

    kind: PluginKind
    name: str
    fn: PluginFn


def is_plugin_name(value: object) -> bool:
    """Return True if ``value`` can be used as a plugin or shortcut name.

    A valid name is a non-empty string of letters, digits and underscores that
    does not start with a digit.
    """
    return isinstance(value, str) and PLUGIN_NAME_RE.match(value) is not None


def is_dunder_name(name: str) -> bool:
    """Return True for special names such as ``__init__``, which Python itself owns."""
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def assert_plugin_name(value: object) -> bool:
    """Return True if ``value`` is a valid plugin name.

    Raises:
        PluginNameError: If it is not.
    """
    if not is_plugin_name(value):
        raise PluginNameError(value)
    return True


@dataclass(frozen=True)
class Registry:
    """Frozen plugin registry.

    Every table is a read-only mapping that iterates in registration order,
    which is also the order the executor runs pre- and post-processors in.

    Attributes:
        pre_processors (Mapping[str, PluginEntry]): Pre-processors by name.
        renderers (Mapping[str, PluginEntry]): Renderers by name.
        post_processors (Mapping[str, PluginEntry]): Post-processors by name.
        shortcuts (Mapping[str, JoinConfig]): Configuration shortcut presets by name.
        reserved (frozenset[str]): Names reserved by the facade.
    """

    pre_processors: Mapping[str, PluginEntry]
    renderers: Mapping[str, PluginEntry]
    post_processors: Mapping[str, PluginEntry]
    shortcuts: Mapping[str, JoinConfig]
    reserved: frozenset[str] = frozenset()

    def table(self, kind: PluginKind) -> Mapping[str, PluginEntry]:
        """Return the table holding stages of ``kind``."""
        if kind is PluginKind.PRE_PROCESSOR:
            return self.pre_processors
        if kind is PluginKind.RENDERER:
            return self.renderers
        return self.post_processors

    def kind_of(self, name: str) -> PluginKind | None:
        """Return the kind of the stage registered as ``name``, if any."""
        for kind in PluginKind:
            if name in self.table(kind):
                return kind
        return None

    def names(self) -> tuple[str, ...]:
        """Return every registered stage and shortcut name (sorted)."""
        return tuple(
            sorted(
                (*self.pre_processors, *self.renderers, *self.post_processors, *self.shortcuts)
            )
        )

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and (
            name in self.shortcuts or self.kind_of(name) is not None
        )

    def iter_entries(self) -> Iterator[PluginEntry]:
        """Iterate over all stages: pre-processors, renderers, then post-processors."""
        for kind in PluginKind:
            yield from self.table(kind).values()

    def thaw(self) -> RegistryBuilder:
        """Return a mutable builder seeded with this registry's entries."""
        builder = RegistryBuilder(reserved=self.reserved)
        for entry in self.iter_entries():
            builder.register(entry.kind, entry.name, entry.fn)
        for name, preset in self.shortcuts.items():
            builder.register_config_shortcut(name, preset)
        return builder


class RegistryBuilder:
    """Mutable, validating plugin registry.

    Args:
        reserved (Iterable[str]): Names that plugins may not use (facade members).
    """

    def __init__(self, reserved: Iterable[str] = ()) -> None:
        self._tables: dict[PluginKind, dict[str, PluginEntry]] = {kind: {} for kind in PluginKind}
        self._shortcuts: dict[str, JoinConfig] = {}
        self._reserved: set[str] = set(reserved)

    def reserve_names(self, names: Iterable[str]) -> None:
        """Reserve ``names`` for the facade.

        Raises:
            PluginCollisionError: If a plugin already uses one of the names.
        """
        for name in names:
            if self._is_registered(name):
                raise PluginCollisionError(name)
            self._reserved.add(name)

    def _is_registered(self, name: str) -> bool:
        return name in self._shortcuts or any(name in table for table in self._tables.values())

    def is_available_name(self, name: object) -> bool:
        """Return True if ``name`` is a valid plugin name that nothing uses yet.

        Special ``__dunder__`` names are never available: they belong to the
        facade's object protocol whether or not it defines them.
        """
        if not is_plugin_name(name):
            return False
        assert isinstance(name, str)
        return (
            not is_dunder_name(name)
            and name not in self._reserved
            and not self._is_registered(name)
        )

    def assert_available_name(self, name: object) -> bool:
        """Return True if ``name`` can be registered.

        Raises:
            PluginNameError: If ``name`` is not a valid plugin name.
            PluginCollisionError: If ``name`` is already in use.
        """
        assert_plugin_name(name)
        if not self.is_available_name(name):
            assert isinstance(name, str)
            raise PluginCollisionError(name)
        return True

    def register(self, kind: PluginKind, name: str, fn: PluginFn) -> None:
        """Register stage ``fn`` of ``kind`` under ``name``.

        Args:
            kind (PluginKind): The stage kind.
            name (str): The plugin name.
            fn (PluginFn): The stage callable.

        Raises:
            PluginNameError: If ``name`` is not a valid plugin name.
            PluginCollisionError: If ``name`` is already in use.
            TypeError: If ``fn`` is not callable.
        """
        self.assert_available_name(name)
        if not callable(fn):
            raise TypeError(f"{kind.label} '{name}' must be callable")
        logger.debug("Registering %s '%s'", kind.label, name)
        self._tables[kind][name] = PluginEntry(kind=kind, name=name, fn=fn)

    def register_pre_processor(self, name: str, fn: PluginFn) -> None:
        """Register a pre-processor (see `register`)."""
        self.register(PluginKind.PRE_PROCESSOR, name, fn)

    def register_renderer(self, name: str, fn: PluginFn) -> None:
        """Register a renderer (see `register`)."""
        self.register(PluginKind.RENDERER, name, fn)

    def register_post_processor(self, name: str, fn: PluginFn) -> None:
        """Register a post-processor (see `register`)."""
        self.register(PluginKind.POST_PROCESSOR, name, fn)

    def register_config_shortcut(
        self, name: str, preset: JoinConfig | Mapping[str, Any]
    ) -> None:
        """Register a configuration shortcut.

        Args:
            name (str): The shortcut name.
            preset (JoinConfig | Mapping[str, Any]): The partial configuration it applies.

        Raises:
            PluginNameError: If ``name`` is not a valid plugin name.
            PluginCollisionError: If ``name`` is already in use.
        """
        self.assert_available_name(name)
        if not isinstance(preset, JoinConfig):
            preset = JoinConfig.from_mapping(preset)
        logger.debug("Registering config shortcut '%s'", name)
        self._shortcuts[name] = preset

    def freeze(self) -> Registry:
        """Return a frozen snapshot of the current entries."""
        return Registry(
            pre_processors=MappingProxyType(dict(self._tables[PluginKind.PRE_PROCESSOR])),
            renderers=MappingProxyType(dict(self._tables[PluginKind.RENDERER])),
            post_processors=MappingProxyType(dict(self._tables[PluginKind.POST_PROCESSOR])),
            shortcuts=MappingProxyType(dict(self._shortcuts)),
            reserved=frozenset(self._reserved),
        )


# --- process-wide registry ---

_lock = RLock()
_builder = RegistryBuilder()
_snapshot: Registry | None = None


def get_registry() -> Registry:
    """Return the frozen snapshot of the process-wide registry."""
    global _snapshot
    with _lock:
        if _snapshot is None:
            _snapshot = _builder.freeze()
        return _snapshot


def _mutate(action: Callable[[RegistryBuilder], None]) -> None:
    global _snapshot
    with _lock:
        action(_builder)
        _snapshot = None


def reserve_names(names: Iterable[str]) -> None:
    """Reserve facade member ``names`` in the process-wide registry."""
    reserved = tuple(names)
    _mutate(lambda b: b.reserve_names(reserved))


def is_available_name(name: object) -> bool:
    """Return True if ``name`` can be registered in the process-wide registry."""
    with _lock:
        return _builder.is_available_name(name)


def assert_available_name(name: object) -> bool:
    """Return True if ``name`` can be registered in the process-wide registry.

    Raises:
        PluginNameError: If ``name`` is not a valid plugin name.
        PluginCollisionError: If ``name`` is already in use.
    """
    with _lock:
        return _builder.assert_available_name(name)


def register_pre_processor(name: str, fn: PluginFn) -> None:
    """Register a pre-processor in the process-wide registry."""
    _mutate(lambda b: b.register_pre_processor(name, fn))


def register_renderer(name: str, fn: PluginFn) -> None:
    """Register a renderer in the process-wide registry."""
    _mutate(lambda b: b.register_renderer(name, fn))


def register_post_processor(name: str, fn: PluginFn) -> None:
    """Register a post-processor in the process-wide registry."""
    _mutate(lambda b: b.register_post_processor(name, fn))


def register_config_shortcut(name: str, preset: JoinConfig | Mapping[str, Any]) -> None:
    """Register a configuration shortcut in the process-wide registry."""
    _mutate(lambda b: b.register_config_shortcut(name, preset))


def _decorator(kind: PluginKind, name: str) -> Callable[[F], F]:
    def decorator(fn: F) -> F:
        _mutate(lambda b: b.register(kind, name, fn))
        return fn

    return decorator


def pre_processor(name: str) -> Callable[[F], F]:
    """Function decorator registering a pre-processor under ``name``.

    Raises:
        PluginNameError: If ``name`` is not a valid plugin name.
        PluginCollisionError: If ``name`` is already in use.
    """
    return _decorator(PluginKind.PRE_PROCESSOR, name)


def renderer(name: str) -> Callable[[F], F]:
    """Function decorator registering a renderer under ``name``."""
    return _decorator(PluginKind.RENDERER, name)


def post_processor(name: str) -> Callable[[F], F]:
    """Function decorator registering a post-processor under ``name``."""
    return _decorator(PluginKind.POST_PROCESSOR, name)
