# topmark:header:start
#
#   project      : HumanJoin
#   file         : wrap.py
#   file_relpath : src/humanjoin/plugins/wrap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``wrap`` post-processor: wrap the joined text in brackets.

Options:
    arg (str): shorthand for ``wrap_with``.
    wrap_with (str): the opening delimiter (default ``"("``).
    mirror (bool): close with the mirrored opening delimiter (default ``True``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from humanjoin.constants import DEFAULT_WRAP_WITH
from humanjoin.registry.plugins import post_processor
from humanjoin.utils.mirror import delimiters

if TYPE_CHECKING:
    from humanjoin.config.options import PluginOptions


@post_processor("wrap")
def wrap(text: str, opts: PluginOptions) -> str:
    """Return ``text`` wrapped in the configured delimiters."""
    opening, closing = delimiters(opts, "wrap_with", DEFAULT_WRAP_WITH)
    return f"{opening}{text}{closing}"
