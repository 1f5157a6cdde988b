# topmark:header:start
#
#   project      : HumanJoin
#   file         : test_mirror.py
#   file_relpath : tests/utils/test_mirror.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for delimiter mirroring."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from humanjoin import Joiner
from humanjoin.config.options import PluginOptions
from humanjoin.utils.mirror import (
    CHAR_MIRROR_MAP,
    character_mirror_map,
    delimiters,
    mirror_character,
    mirror_string,
)
from tests.conftest import parametrize


@parametrize(
    "c, expected",
    [
        ("(", ")"),
        (")", "("),
        ("[", "]"),
        ("{", "}"),
        ("<", ">"),
        ("!", "¡"),
        ("¡", "!"),
        ("?", "¿"),
        ("'", "'"),
        ("x", "x"),
        ("<<", ">"),
        ("", ""),
        (7, "7"),
        (None, ""),
        (True, ""),
        (["("], ""),
    ],
)
def test_mirror_character(c: object, expected: str) -> None:
    """Mapped characters mirror, others are kept; bad input yields ""."""
    assert mirror_character(c) == expected


@parametrize(
    "s, expected",
    [
        ("-<", ">-"),
        ("<<", ">>"),
        ("([{", "}])"),
        ("ab", "ba"),
        ("", ""),
        (12, "21"),
        (None, ""),
    ],
)
def test_mirror_string(s: object, expected: str) -> None:
    """Strings are reversed and each character mirrored."""
    assert mirror_string(s) == expected


@given(st.text())
def test_mirror_string_is_an_involution(s: str) -> None:
    """Mirroring twice gives the original string back."""
    assert mirror_string(mirror_string(s)) == s


def test_character_mirror_map_is_a_copy() -> None:
    """Callers cannot alter the shared table through the returned map."""
    table = character_mirror_map()
    table["("] = "x"
    assert CHAR_MIRROR_MAP["("] == ")"
    assert Joiner.character_mirror_map()["("] == ")"


def test_joiner_static_helpers_delegate() -> None:
    """The facade exposes the mirror helpers."""
    assert Joiner.mirror_character("[") == "]"
    assert Joiner.mirror_string("<-") == "->"


@parametrize(
    "opts, expected",
    [
        (PluginOptions(), ("(", ")")),
        (PluginOptions(fields={"wrap_with": "-<"}), ("-<", ">-")),
        (PluginOptions(arg="[", fields={"wrap_with": "{"}), ("[", "]")),
        (PluginOptions(fields={"wrap_with": "<", "mirror": False}), ("<", "<")),
    ],
)
def test_delimiters_for_any_option_key(opts: PluginOptions, expected: tuple[str, str]) -> None:
    """The delimiter helper reads whichever option key the plugin names."""
    assert delimiters(opts, "wrap_with", "(") == expected
