# topmark:header:start
#
#   project      : HumanJoin
#   file         : options.py
#   file_relpath : src/humanjoin/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plugin options model, option normalizer and merge policy.

Callers hand plugins options in many shorthand forms: ``True``, ``"'"``,
``[1, 2]``, ``{"mirror": False}``, ``None``. `normalize_options` turns any of them
into a `PluginOptions` value so the rest of the library deals with one shape:

    enabled  tri-state flag; ``None`` means "unset" (inherit on merge)
    arg      the positional shorthand argument, or ``None`` when absent
    fields   the named options (``separator``, ``quote_with``, ...), nested freely

Merge policy:
    `PluginOptions.merge_with` is last-wins per leaf: the override's explicit
    values replace the base values, unset values (``None``) never do, and nested
    mappings in ``fields`` are merged recursively instead of being replaced.
    Merging never mutates either side.

TOML/mapping shape:

    [inline]
    enabled = true
    separator = "; "
    conjunction = " or "
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from numbers import Number
from typing import Any

ENABLED_KEY = "enabled"
ARG_KEY = "arg"


@dataclass(frozen=True, slots=True)
class PluginOptions:
    """Normalized options for a single plugin.

    Attributes:
        enabled (bool | None): Whether the plugin runs. ``None`` means "unset".
        arg (Any): Shorthand positional argument (string, number or sequence).
        fields (dict[str, Any]): Named options. Treat as read-only.
    """

    enabled: bool | None = None
    arg: Any = None
    fields: dict[str, Any] = field(default_factory=dict)

    @property
    def is_enabled(self) -> bool:
        """Return True only when the plugin was explicitly enabled."""
        return self.enabled is True

    def get(self, key: str, default: Any = None) -> Any:
        """Return the named option ``key``, or ``default`` when it is not set."""
        return self.fields.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def with_default_enabled(self, enabled: bool) -> PluginOptions:
        """Return these options with ``enabled`` filled in when it is unset."""
        if self.enabled is not None:
            return self
        return PluginOptions(enabled=enabled, arg=self.arg, fields=self.fields)

    def merge_with(self, other: PluginOptions) -> PluginOptions:
        """Return new options by applying ``other`` over ``self`` (last-wins).

        Args:
            other (PluginOptions): The options whose explicit values win.

        Returns:
            PluginOptions: Merged options sharing no mutable state with either input.
        """
        return PluginOptions(
            enabled=other.enabled if other.enabled is not None else self.enabled,
            arg=copy.deepcopy(other.arg if other.arg is not None else self.arg),
            fields=merge_fields(self.fields, other.fields),
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> PluginOptions:
        """Create options from a full options mapping.

        ``enabled`` and ``arg`` are lifted into their attributes; every other key
        becomes a named option. Values are not copied.
        """
        enabled: Any = mapping.get(ENABLED_KEY)
        fields = {str(k): v for k, v in mapping.items() if k not in (ENABLED_KEY, ARG_KEY)}
        return cls(
            enabled=None if enabled is None else bool(enabled),
            arg=mapping.get(ARG_KEY),
            fields=fields,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize only explicitly set values to a plain dict."""
        out: dict[str, Any] = {}
        if self.enabled is not None:
            out[ENABLED_KEY] = self.enabled
        if self.arg is not None:
            out[ARG_KEY] = copy.deepcopy(self.arg)
        out.update(copy.deepcopy(self.fields))
        return out


def merge_fields(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` over ``base`` into a fresh dict.

    Nested mappings present on both sides are merged recursively; any other
    override value replaces the base value.

    Args:
        base (Mapping[str, Any]): Lower-precedence values.
        override (Mapping[str, Any]): Higher-precedence values.

    Returns:
        dict[str, Any]: The merged values (deep copies; inputs are untouched).
    """
    merged: dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_fields(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def normalize_options(value: Any) -> PluginOptions:
    """Cast a shorthand plugin options value to `PluginOptions`.

    The mapping is total; this function never raises:

    * ``None``: ``enabled=False``
    * ``bool``: ``enabled=value``
    * ``str``, number, ``list`` or ``tuple``: ``arg=value`` (``enabled`` unset)
    * `PluginOptions`: returned unchanged
    * any other mapping: taken as a full options object
    * anything else: ``enabled=True``

    Args:
        value (Any): The shorthand value.

    Returns:
        PluginOptions: The normalized options.
    """
    if value is None:
        return PluginOptions(enabled=False)
    # bool before Number: bool is an int subclass
    if isinstance(value, bool):
        return PluginOptions(enabled=value)
    if isinstance(value, (str, Number, list, tuple)):
        return PluginOptions(arg=value)
    if isinstance(value, PluginOptions):
        return value
    if isinstance(value, Mapping):
        return PluginOptions.from_mapping(value)
    return PluginOptions(enabled=True)
