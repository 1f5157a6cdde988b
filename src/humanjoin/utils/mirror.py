# topmark:header:start
#
#   project      : HumanJoin
#   file         : mirror.py
#   file_relpath : src/humanjoin/utils/mirror.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Character mirroring for delimiters.

Quoting and wrapping use these helpers to derive a closing delimiter from an
opening one: ``mirror_string("<-")`` is ``"->"``, ``mirror_string("(")`` is ``")"``.
`delimiters` reads the opening delimiter from plugin options and pairs it with
its closing counterpart.
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Number
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from humanjoin.config.options import PluginOptions

_CHAR_MIRROR_MAP: Final[dict[str, str]] = {
    "!": "¡",
    "¡": "!",
    "?": "¿",
    "¿": "?",
    "(": ")",
    ")": "(",
    "{": "}",
    "}": "{",
    "[": "]",
    "]": "[",
    "<": ">",
    ">": "<",
}

CHAR_MIRROR_MAP: Final[Mapping[str, str]] = MappingProxyType(_CHAR_MIRROR_MAP)


def character_mirror_map() -> dict[str, str]:
    """Return a copy of the character mirror table."""
    return dict(_CHAR_MIRROR_MAP)


def _as_text(value: object) -> str | None:
    # bool is a Number subclass but never a delimiter
    if isinstance(value, str):
        return value
    if isinstance(value, Number) and not isinstance(value, bool):
        return str(value)
    return None


def mirror_character(c: object) -> str:
    """Mirror a single character if possible.

    Characters without an entry in the mirror table are returned unaltered.
    Strings longer than one character are truncated to their first character
    before mirroring. Values that are neither strings nor numbers, and the
    empty string, yield ``""``.

    Args:
        c (object): The character to be mirrored.

    Returns:
        str: The mirrored character.
    """
    text = _as_text(c)
    if not text:
        return ""
    first = text[0]
    return _CHAR_MIRROR_MAP.get(first, first)


def mirror_string(s: object) -> str:
    """Reverse a string, mirroring every character that can be mirrored.

    Args:
        s (object): The string to mirror. Numbers are converted with ``str()``;
            any other type yields ``""``.

    Returns:
        str: The mirrored string.
    """
    text = _as_text(s)
    if text is None:
        return ""
    return "".join(mirror_character(c) for c in reversed(text))


def delimiters(opts: PluginOptions, key: str, default: str) -> tuple[str, str]:
    """Return the ``(opening, closing)`` delimiters configured under ``key``.

    A string ``arg`` takes precedence over ``key``; an empty or non-string
    value falls back to ``default``. ``mirror`` (default ``True``) derives the
    closing delimiter with `mirror_string`.
    """
    opening: Any = opts.arg if isinstance(opts.arg, str) else opts.get(key)
    if not isinstance(opening, str) or not opening:
        opening = default
    mirror = bool(opts.get("mirror", True))
    return opening, mirror_string(opening) if mirror else opening
