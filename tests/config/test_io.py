# topmark:header:start
#
#   project      : HumanJoin
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML configuration loading (files and bundled shortcut presets)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from humanjoin import Joiner
from humanjoin.config.io import (
    load_config_toml,
    load_shortcut_presets,
    load_toml_dict,
    parse_toml_text,
)
from humanjoin.config.model import JoinConfig
from humanjoin.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_parse_toml_text_returns_plain_dict() -> None:
    """Parsed documents are unwrapped into plain Python values."""
    data = parse_toml_text('[inline]\nconjunction = " or "\n')
    assert data == {"inline": {"conjunction": " or "}}
    assert type(data["inline"]) is dict


def test_parse_toml_text_reports_parse_errors() -> None:
    """Invalid TOML raises ConfigError naming the source."""
    with pytest.raises(ConfigError, match="my-source"):
        parse_toml_text("renderer = ", source="my-source")


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    """A missing file raises ConfigError."""
    with pytest.raises(ConfigError):
        load_toml_dict(tmp_path / "nope.toml")


def test_load_config_toml_top_level(tmp_path: Path) -> None:
    """A standalone file is read from its top level."""
    path = tmp_path / "humanjoin.toml"
    path.write_text(
        'renderer = "inline"\n\n[inline]\nconjunction = " or "\n\n'
        '[quote]\nenabled = true\nquote_with = \'"\'\n',
        encoding="utf-8",
    )
    cfg = load_config_toml(path)
    assert cfg == JoinConfig.from_mapping(
        {
            "renderer": "inline",
            "inline": {"conjunction": " or "},
            "quote": {"enabled": True, "quote_with": '"'},
        }
    )


def test_load_config_toml_pyproject_tool_table(tmp_path: Path) -> None:
    """``pyproject.toml`` configurations live under ``[tool.humanjoin]``."""
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.humanjoin.inline]\nseparator = "; "\n',
        encoding="utf-8",
    )
    cfg = load_config_toml(path)
    assert cfg.options_for("inline").get("separator") == "; "


def test_load_config_toml_pyproject_without_table(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without a HumanJoin table is a configuration error."""
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="tool.humanjoin"):
        load_config_toml(path)


def test_joiner_from_toml_file(tmp_path: Path) -> None:
    """A joiner built from a file without a renderer falls back to ``inline``."""
    path = tmp_path / "humanjoin.toml"
    path.write_text('[inline]\nconjunction = " and "\n\n[wrap]\nenabled = true\n', encoding="utf-8")
    joiner = Joiner.from_toml_file(path)
    assert joiner.renderer == "inline"
    assert joiner.join(["a", "b"]) == "(a and b)"


def test_bundled_shortcut_presets() -> None:
    """The packaged presets parse and contain the documented shortcuts."""
    presets = load_shortcut_presets()
    assert presets["or"] == JoinConfig.from_mapping(
        {"renderer": "inline", "inline": {"conjunction": " or "}}
    )
    assert presets["qq"].options_for("quote").to_dict() == {
        "enabled": True,
        "quote_with": '"',
        "mirror": False,
    }
    for name in ("oxford_or", "ox_and", "amp", "single_quote", "square_bracket", "cb"):
        assert name in presets


def test_shortcut_presets_from_text() -> None:
    """Presets can be parsed from custom TOML text, in document order."""
    presets = load_shortcut_presets('[shortcuts.semi]\ninline = { separator = "; " }\n')
    assert list(presets) == ["semi"]
    assert presets["semi"].renderer is None


def test_shortcut_presets_must_be_tables() -> None:
    """A preset that is not a table is rejected."""
    with pytest.raises(ConfigError, match="bad"):
        load_shortcut_presets('[shortcuts]\nbad = 1\n')
    with pytest.raises(ConfigError):
        load_shortcut_presets("shortcuts = 1\n")
