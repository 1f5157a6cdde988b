# topmark:header:start
#
#   project      : HumanJoin
#   file         : joiner.py
#   file_relpath : src/humanjoin/joiner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The immutable `Joiner` facade.

A `Joiner` wraps one configuration snapshot. Nothing ever changes it: shortcuts,
`with_plugin()` and `with_renderer()` return a *new* joiner carrying a merged copy
of the configuration, so a joiner handed out earlier keeps producing the same
output no matter what is derived from it later.

Registered names are reachable as attributes:

    human_join.oxford_and.q.join(["a", "b", "c"])   # "'a', 'b', and 'c'"
    human_join.wrap("[").join(["a", "b"])          # "[a & b]"
    human_join.inline(["a", "b"], {"conjunction": " + "})  # "a + b"

* a configuration shortcut resolves to a derived joiner;
* a pre- or post-processor resolves to a callable ``(opts=True) -> Joiner``;
* a renderer resolves to a one-shot callable ``(data, opts=None) -> str``.

``or`` and ``and`` are Python keywords; use ``shortcut("or")`` or ``getattr()``.
"""

from __future__ import annotations

import copy
import functools
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from humanjoin.config.io import load_config_toml
from humanjoin.config.logging import get_logger
from humanjoin.config.model import JoinConfig, resolve_config
from humanjoin.config.options import PluginOptions, normalize_options
from humanjoin.errors import UnknownRendererError
from humanjoin.pipeline.executor import execute
from humanjoin.registry.plugins import PluginKind, get_registry, is_dunder_name, reserve_names
from humanjoin.utils import mirror

if TYPE_CHECKING:
    from pathlib import Path

    from humanjoin.config.logging import HumanJoinLogger
    from humanjoin.registry.plugins import Registry

logger: HumanJoinLogger = get_logger(__name__)


class Joiner:
    """Immutable builder producing human-readable joins.

    Args:
        config (JoinConfig | Mapping[str, Any] | None): The configuration to wrap.
            ``None``, or any value that is not a mapping, selects the default
            configuration (the ``inline`` renderer). The joiner keeps a private
            deep copy.
        registry (Registry | None): A frozen registry to resolve plugins from.
            ``None`` uses the process-wide registry as of each call.
    """

    __slots__ = ("_config", "_registry")

    def __init__(
        self,
        config: JoinConfig | Mapping[str, Any] | None = None,
        *,
        registry: Registry | None = None,
    ) -> None:
        if config is None:
            config = JoinConfig.default()
        elif isinstance(config, Mapping):
            config = JoinConfig.from_mapping(config)
        elif not isinstance(config, JoinConfig):
            logger.warning("Ignoring non-mapping joiner configuration: %r", config)
            config = JoinConfig.default()
        self._config: JoinConfig = copy.deepcopy(config)
        self._registry: Registry | None = registry

    # --- read-only views ---

    @property
    def config(self) -> JoinConfig:
        """A copy of the wrapped configuration."""
        return copy.deepcopy(self._config)

    @property
    def renderer(self) -> str | None:
        """The name of the active renderer."""
        return self._config.renderer

    @property
    def registry(self) -> Registry:
        """The registry this joiner resolves plugins from."""
        return self._registry if self._registry is not None else get_registry()

    # --- joining ---

    def join(self, data: Any, opts: Mapping[str, Any] | None = None) -> str:
        """Join ``data`` into a human-readable string.

        Plugins mentioned in ``opts`` are enabled for this call unless their
        options disable them explicitly. The joiner itself is never modified.

        Args:
            data (Any): The data to join. Lists and tuples are joined element by
                element, mappings entry by entry; anything else is rendered whole.
            opts (Mapping[str, Any] | None): Call-time options, keyed by plugin name
                (plus an optional ``renderer`` selection).

        Returns:
            str: The joined text.

        Raises:
            UnknownRendererError: If no registered renderer is selected.
            StageExecutionError: If a pre-processor, renderer or post-processor fails.
        """
        resolved: JoinConfig = resolve_config(opts, self._config)
        return execute(data, resolved, self.registry)

    def j(self, data: Any, opts: Mapping[str, Any] | None = None) -> str:
        """Alias for `join`."""
        return self.join(data, opts)

    # --- derivation ---

    def _derive(self, overlay: JoinConfig) -> Joiner:
        return Joiner(self._config.merge_with(overlay), registry=self._registry)

    def shortcut(self, name: str) -> Joiner:
        """Return a new joiner with the configuration shortcut ``name`` applied.

        Raises:
            AttributeError: If no shortcut is registered under ``name``.
        """
        preset = self.registry.shortcuts.get(name)
        if preset is None:
            raise AttributeError(f"no configuration shortcut named '{name}'")
        return self._derive(preset)

    def with_plugin(self, name: str, opts: Any = True) -> Joiner:
        """Return a new joiner with pre- or post-processor ``name`` configured.

        ``opts`` is normalized and merged into the plugin's options; the plugin is
        enabled unless ``opts`` disables it (``False``, ``None`` or
        ``{"enabled": False}``).

        Raises:
            AttributeError: If no pre- or post-processor is registered under ``name``.
        """
        kind = self.registry.kind_of(name)
        if kind not in (PluginKind.PRE_PROCESSOR, PluginKind.POST_PROCESSOR):
            raise AttributeError(f"no pre-processor or post-processor named '{name}'")
        options: PluginOptions = normalize_options(opts).with_default_enabled(True)
        return self._derive(JoinConfig(plugins={name: options}))

    def with_renderer(self, name: str, opts: Any = None) -> Joiner:
        """Return a new joiner rendering with ``name``, optionally merging ``opts`` into it.

        Raises:
            UnknownRendererError: If no renderer is registered under ``name``.
        """
        if name not in self.registry.renderers:
            raise UnknownRendererError(name)
        plugins = {} if opts is None else {name: normalize_options(opts)}
        return self._derive(JoinConfig(renderer=name, plugins=plugins))

    def render(self, name: str, data: Any, opts: Any = None) -> str:
        """Join ``data`` once with renderer ``name``; this joiner is left unchanged.

        Args:
            name (str): The renderer to use.
            data (Any): The data to join.
            opts (Any): Shorthand or full options for the renderer.

        Returns:
            str: The joined text.
        """
        return self.with_renderer(name, opts).join(data)

    # --- dynamic access to registered names ---

    def __getattr__(self, name: str) -> Any:
        # Only called when regular lookup fails, i.e. for registered plugin names.
        # Unset slots and protocol lookups (copy, pickle) must not reach the registry.
        if name in Joiner.__slots__ or is_dunder_name(name):
            raise AttributeError(name)
        registry = self.registry
        if name in registry.shortcuts:
            return self.shortcut(name)
        kind = registry.kind_of(name)
        if kind is PluginKind.RENDERER:
            return functools.partial(self.render, name)
        if kind is not None:
            return functools.partial(self.with_plugin, name)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self.registry.names()})

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config.to_dict()!r})"

    # --- construction helpers ---

    @classmethod
    def from_toml_file(cls, path: Path, *, registry: Registry | None = None) -> Joiner:
        """Create a joiner from a TOML configuration file.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        config = load_config_toml(path)
        if config.renderer is None:
            config = JoinConfig.default().merge_with(config)
        logger.debug("Loaded joiner configuration from %s", path)
        return cls(config, registry=registry)

    @staticmethod
    def normalize_options(value: Any) -> PluginOptions:
        """Cast a shorthand plugin options value to `PluginOptions`."""
        return normalize_options(value)

    @staticmethod
    def character_mirror_map() -> dict[str, str]:
        """Return a copy of the character mirror table."""
        return mirror.character_mirror_map()

    @staticmethod
    def mirror_character(c: object) -> str:
        """Mirror a single character (see `humanjoin.utils.mirror.mirror_character`)."""
        return mirror.mirror_character(c)

    @staticmethod
    def mirror_string(s: object) -> str:
        """Mirror a string (see `humanjoin.utils.mirror.mirror_string`)."""
        return mirror.mirror_string(s)


def facade_names() -> tuple[str, ...]:
    """Return every member name of `Joiner`, private and special ones included."""
    return tuple(dir(Joiner))


reserve_names(facade_names())
