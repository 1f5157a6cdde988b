# topmark:header:start
#
#   project      : HumanJoin
#   file         : quote.py
#   file_relpath : src/humanjoin/plugins/quote.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``quote`` pre-processor: quote every element of a list.

Options:
    arg (str): shorthand for ``quote_with``.
    quote_with (str): the opening quote (default ``"'"``).
    mirror (bool): close with the mirrored opening quote, so ``"<<"`` closes
        with ``">>"`` (default ``True``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from humanjoin.constants import DEFAULT_QUOTE_WITH
from humanjoin.registry.plugins import pre_processor
from humanjoin.utils.mirror import delimiters

if TYPE_CHECKING:
    from humanjoin.config.options import PluginOptions


@pre_processor("quote")
def quote(data: Any, opts: PluginOptions) -> None:
    """Quote each element of ``data`` in place; non-list data is left alone."""
    if not isinstance(data, list):
        return
    opening, closing = delimiters(opts, "quote_with", DEFAULT_QUOTE_WITH)
    for i, element in enumerate(data):
        data[i] = f"{opening}{element}{closing}"
