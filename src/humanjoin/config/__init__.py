# topmark:header:start
#
#   project      : HumanJoin
#   file         : __init__.py
#   file_relpath : src/humanjoin/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for HumanJoin.

This package contains:

- ``options``: the `PluginOptions` model and the shorthand option normalizer.
- ``model``: the immutable `JoinConfig` and the call-time configuration merger.
- ``io``: TOML loading (configuration files and the bundled shortcut presets).
- ``logging``: the HumanJoin logger with its TRACE level and colored output.
"""

from __future__ import annotations

from humanjoin.config.model import JoinConfig, resolve_config
from humanjoin.config.options import PluginOptions, normalize_options

__all__ = ["JoinConfig", "PluginOptions", "normalize_options", "resolve_config"]
