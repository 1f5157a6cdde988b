# topmark:header:start
#
#   project      : HumanJoin
#   file         : inline.py
#   file_relpath : src/humanjoin/plugins/inline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``inline`` renderer: join a list on a single line.

Options:
    separator (str): placed between elements (default ``", "``).
    conjunction (str): placed before the last element (default ``" & "``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from humanjoin.constants import DEFAULT_CONJUNCTION, DEFAULT_SEPARATOR
from humanjoin.registry.plugins import renderer

if TYPE_CHECKING:
    from humanjoin.config.options import PluginOptions


def _str_option(opts: PluginOptions | None, key: str, default: str) -> str:
    value: Any = opts.get(key) if opts is not None else None
    return value if isinstance(value, str) else default


@renderer("inline")
def render_inline(data: Any, opts: PluginOptions | None = None) -> str:
    """Render ``data`` as ``"a, b & c"``.

    Lists and tuples are joined element by element and mappings entry by entry
    (as ``"key=value"``). Anything else, strings included, is returned as
    ``str(data)``.

    Args:
        data (Any): The data to render.
        opts (PluginOptions | None): The renderer options.

    Returns:
        str: The joined text.
    """
    parts: list[Any]
    if isinstance(data, (list, tuple)):
        parts = list(data)
    elif isinstance(data, Mapping):
        parts = [f"{key}={value}" for key, value in data.items()]
    else:
        return str(data)

    if not parts:
        return ""
    if len(parts) == 1:
        return str(parts[0])

    separator = _str_option(opts, "separator", DEFAULT_SEPARATOR)
    conjunction = _str_option(opts, "conjunction", DEFAULT_CONJUNCTION)
    head = separator.join(str(part) for part in parts[:-1])
    return f"{head}{conjunction}{parts[-1]}"
