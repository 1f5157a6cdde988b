# topmark:header:start
#
#   project      : HumanJoin
#   file         : test_join_properties.py
#   file_relpath : tests/api/test_join_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for joins through the public facade.

These explore shortcut chains and option shorthands and assert:
1) joining never mutates the caller's data or the joiner,
2) wrapping and quoting only add delimiters around the inline rendering, and
3) every option shorthand normalizes without raising.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from humanjoin import Joiner, human_join
from humanjoin.config.options import PluginOptions
from humanjoin.utils.mirror import mirror_string
from tests.strategies_humanjoin import (
    s_delimiter,
    s_elements,
    s_option_shorthand,
    s_shortcut,
)

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(data=s_elements, chain=st.lists(s_shortcut, max_size=4))
def test_joins_leave_inputs_untouched(data: list[Any], chain: list[str]) -> None:
    """Any chain of shortcuts leaves the data and the source joiner unchanged."""
    snapshot = copy.deepcopy(data)
    joiner: Joiner = human_join
    for name in chain:
        before = joiner.config
        derived = joiner.shortcut(name)
        derived.join(data)
        assert joiner.config == before
        joiner = derived
    assert data == snapshot


@settings(deadline=None, max_examples=200)
@given(data=s_elements, opening=s_delimiter)
def test_wrap_only_adds_delimiters(data: list[Any], opening: str) -> None:
    """Wrapping surrounds the inline rendering with the mirrored delimiter."""
    plain = human_join.join(data)
    assert human_join.wrap(opening).join(data) == f"{opening}{plain}{mirror_string(opening)}"


@settings(deadline=None, max_examples=200)
@given(data=s_elements, opening=s_delimiter)
def test_quote_matches_manual_quoting(data: list[Any], opening: str) -> None:
    """Quoting equals joining pre-quoted elements."""
    closing = mirror_string(opening)
    manual = [f"{opening}{el}{closing}" for el in data]
    assert human_join.quote(opening).join(data) == human_join.join(manual)


@settings(deadline=None, max_examples=300)
@given(value=s_option_shorthand)
def test_normalize_options_is_total(value: Any) -> None:
    """Every shorthand yields options with a tri-state enabled flag."""
    opts = Joiner.normalize_options(value)
    assert isinstance(opts, PluginOptions)
    assert opts.enabled in (True, False, None)
