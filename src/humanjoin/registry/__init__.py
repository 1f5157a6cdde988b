# topmark:header:start
#
#   project      : HumanJoin
#   file         : __init__.py
#   file_relpath : src/humanjoin/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plugin registry facade.

This package exposes:

* [`humanjoin.registry.Registry`][] – the frozen, read-only registry value used by
  joiners and the pipeline executor.
* [`humanjoin.registry.RegistryBuilder`][] – the mutable, validating builder.
* Module-level registration functions and decorators operating on the
  process-wide registry.

Most extension modules only need the decorators:

```python
from humanjoin.registry import pre_processor

@pre_processor("upper")
def upper(data, opts):
    data[:] = [str(el).upper() for el in data]
```
"""

from __future__ import annotations

from .plugins import (
    PluginEntry,
    PluginKind,
    Registry,
    RegistryBuilder,
    assert_available_name,
    assert_plugin_name,
    get_registry,
    is_available_name,
    is_dunder_name,
    is_plugin_name,
    post_processor,
    pre_processor,
    register_config_shortcut,
    register_post_processor,
    register_pre_processor,
    register_renderer,
    renderer,
    reserve_names,
)

__all__ = [
    "PluginEntry",
    "PluginKind",
    "Registry",
    "RegistryBuilder",
    "assert_available_name",
    "assert_plugin_name",
    "get_registry",
    "is_available_name",
    "is_dunder_name",
    "is_plugin_name",
    "post_processor",
    "pre_processor",
    "register_config_shortcut",
    "register_post_processor",
    "register_pre_processor",
    "register_renderer",
    "renderer",
    "reserve_names",
]
