# topmark:header:start
#
#   project      : HumanJoin
#   file         : __init__.py
#   file_relpath : src/humanjoin/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HumanJoin package.

HumanJoin turns sequences into human-readable text (``"a, b & c"``) through a
pluggable pipeline: pre-processors transform the elements, a renderer joins
them, and post-processors transform the result.

Typical usage:
    ```python
    from humanjoin import human_join

    human_join.join(["boogers", "snot", "bogies"])  # "boogers, snot & bogies"
    human_join.shortcut("or").join(["a", "b", "c"])  # "a, b or c"
    human_join.q.bracket.join(["a", "b"])            # "('a' & 'b')"
    ```
"""

from __future__ import annotations

from humanjoin.config.model import JoinConfig
from humanjoin.config.options import PluginOptions, normalize_options
from humanjoin.constants import HUMANJOIN_VERSION
from humanjoin.errors import (
    ConfigError,
    HumanJoinError,
    PluginCollisionError,
    PluginNameError,
    StageExecutionError,
    UnknownRendererError,
)
from humanjoin.joiner import Joiner
from humanjoin.plugins import register_builtin_plugins
from humanjoin.registry import (
    PluginKind,
    post_processor,
    pre_processor,
    register_config_shortcut,
    register_post_processor,
    register_pre_processor,
    register_renderer,
    renderer,
)
from humanjoin.utils.mirror import mirror_character, mirror_string

register_builtin_plugins()

human_join: Joiner = Joiner()
"""The default joiner (``inline`` renderer, default separator and conjunction)."""

__version__: str = HUMANJOIN_VERSION

__all__ = [
    "ConfigError",
    "HumanJoinError",
    "JoinConfig",
    "Joiner",
    "PluginCollisionError",
    "PluginKind",
    "PluginNameError",
    "PluginOptions",
    "StageExecutionError",
    "UnknownRendererError",
    "human_join",
    "mirror_character",
    "mirror_string",
    "normalize_options",
    "post_processor",
    "pre_processor",
    "register_config_shortcut",
    "register_post_processor",
    "register_pre_processor",
    "register_renderer",
    "renderer",
]
