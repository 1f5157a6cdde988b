# topmark:header:start
#
#   project      : HumanJoin
#   file         : model.py
#   file_relpath : src/humanjoin/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Join configuration model and merge policy.

This module defines:
    - `JoinConfig`: an immutable snapshot naming the active renderer and holding the
      options of every configured plugin.
    - `resolve_config`: the call-time merger used by `Joiner.join()`.

Precedence (lowest to highest):
    builder-stored configuration → configuration shortcuts → call-time options.

    Every layer is merged with `JoinConfig.merge_with`, which is last-wins per leaf
    and recursive for nested option mappings, so overriding one sub-option never
    erases its siblings.

Enabling asymmetry:
    A plugin whose stored options leave ``enabled`` unset does not run. A plugin
    *mentioned* in call-time options runs unless those options disable it
    explicitly (``join(data, {"quote": '"'})`` turns quoting on).

Mapping shape (see `JoinConfig.from_mapping`):

    {
        "renderer": "inline",
        "inline": {"conjunction": " or "},
        "quote": {"enabled": True, "quote_with": '"', "mirror": False},
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from humanjoin.config.logging import get_logger
from humanjoin.config.options import PluginOptions, normalize_options
from humanjoin.constants import DEFAULT_RENDERER

if TYPE_CHECKING:
    from humanjoin.config.logging import HumanJoinLogger

RENDERER_KEY = "renderer"

logger: HumanJoinLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class JoinConfig:
    """Immutable join configuration.

    Attributes:
        renderer (str | None): Name of the active renderer; ``None`` means unset.
        plugins (dict[str, PluginOptions]): Plugin name -> options. Treat as read-only.
    """

    renderer: str | None = None
    plugins: dict[str, PluginOptions] = field(default_factory=dict)

    @classmethod
    def default(cls) -> JoinConfig:
        """Return the default configuration (the ``inline`` renderer, nothing else)."""
        return cls(renderer=DEFAULT_RENDERER)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> JoinConfig:
        """Create a configuration from a plain mapping.

        The ``renderer`` key names the renderer; every other key names a plugin
        whose value is normalized with `normalize_options`.

        Args:
            mapping (Mapping[str, Any] | None): The raw configuration.

        Returns:
            JoinConfig: The parsed configuration.
        """
        if not mapping:
            return cls()
        renderer: Any = mapping.get(RENDERER_KEY)
        if renderer is not None and not isinstance(renderer, str):
            logger.warning("Ignoring non-string renderer selection: %r", renderer)
            renderer = None
        plugins = {
            str(name): normalize_options(value)
            for name, value in mapping.items()
            if name != RENDERER_KEY
        }
        return cls(renderer=renderer, plugins=plugins)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain mapping accepted by `from_mapping`."""
        out: dict[str, Any] = {}
        if self.renderer is not None:
            out[RENDERER_KEY] = self.renderer
        for name, opts in self.plugins.items():
            out[name] = opts.to_dict()
        return out

    def options_for(self, name: str) -> PluginOptions:
        """Return the options for plugin ``name`` (empty options when unconfigured)."""
        return self.plugins.get(name) or PluginOptions()

    def is_enabled(self, name: str) -> bool:
        """Return True if plugin ``name`` is explicitly enabled."""
        return self.options_for(name).is_enabled

    def with_renderer(self, name: str) -> JoinConfig:
        """Return a copy of this configuration selecting renderer ``name``."""
        return self.merge_with(JoinConfig(renderer=name))

    def with_options(self, name: str, opts: PluginOptions) -> JoinConfig:
        """Return a copy of this configuration with ``opts`` merged into plugin ``name``."""
        return self.merge_with(JoinConfig(plugins={name: opts}))

    def merge_with(self, other: JoinConfig) -> JoinConfig:
        """Return a new JoinConfig by applying ``other`` over ``self`` (last-wins).

        An unset renderer in ``other`` keeps the current selection. Plugin options
        present on both sides are merged with `PluginOptions.merge_with`.

        Args:
            other (JoinConfig): The configuration whose explicit values win.

        Returns:
            JoinConfig: A fresh configuration; neither input is mutated.
        """
        # merging with empty options yields a deep copy
        merged: dict[str, PluginOptions] = {
            name: opts.merge_with(PluginOptions()) for name, opts in self.plugins.items()
        }
        for name, override in other.plugins.items():
            merged[name] = self.options_for(name).merge_with(override)
        return JoinConfig(
            renderer=other.renderer if other.renderer is not None else self.renderer,
            plugins=merged,
        )


def call_time_config(opts: Mapping[str, Any] | None) -> JoinConfig:
    """Normalize call-time options into a configuration overlay.

    Every mentioned plugin is enabled unless its options say otherwise. A string
    ``renderer`` entry selects the renderer for the call.

    Args:
        opts (Mapping[str, Any] | None): Options passed to `Joiner.join()`. Any
            non-mapping value is treated as "no options".

    Returns:
        JoinConfig: The overlay to merge over a stored configuration.
    """
    if not isinstance(opts, Mapping):
        return JoinConfig()
    overlay = JoinConfig.from_mapping(opts)
    return JoinConfig(
        renderer=overlay.renderer,
        plugins={
            name: options.with_default_enabled(True) for name, options in overlay.plugins.items()
        },
    )


def resolve_config(opts: Mapping[str, Any] | None, config: JoinConfig) -> JoinConfig:
    """Resolve the effective configuration for a single join call.

    Args:
        opts (Mapping[str, Any] | None): Call-time options (highest precedence).
        config (JoinConfig): The builder's stored configuration.

    Returns:
        JoinConfig: The resolved configuration; ``config`` is left untouched.
    """
    resolved = config.merge_with(call_time_config(opts))
    logger.trace("Resolved configuration: %s", resolved.to_dict())
    return resolved
