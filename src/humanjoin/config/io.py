# topmark:header:start
#
#   project      : HumanJoin
#   file         : io.py
#   file_relpath : src/humanjoin/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading HumanJoin configuration from:
- the packaged shortcut presets (``humanjoin-shortcuts.toml``), and
- on-disk TOML files (``humanjoin.toml`` or a ``[tool.humanjoin]`` table in
  ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures. Unlike
lookups at join time, every failure here is reported as a `ConfigError`: a
configuration that cannot be read is a programming or deployment error.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from humanjoin.config.logging import get_logger
from humanjoin.config.model import JoinConfig
from humanjoin.constants import (
    PYPROJECT_TOOL_TABLE,
    SHORTCUTS_TOML_NAME,
    SHORTCUTS_TOML_PACKAGE,
)
from humanjoin.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from humanjoin.config.logging import HumanJoinLogger

TomlTable = dict[str, Any]

SHORTCUTS_TABLE = "shortcuts"

logger: HumanJoinLogger = get_logger(__name__)


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): The TOML document.
        source (str): Description of the document origin, used in error messages.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the document is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Error decoding TOML from {source}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document. Encoding is assumed to be UTF-8.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Error loading TOML from {path}: {exc}") from exc
    logger.debug("Loaded TOML configuration from %s", path)
    return parse_toml_text(text, source=str(path))


def load_config_toml(path: Path) -> JoinConfig:
    """Load a join configuration from a TOML file.

    For ``pyproject.toml`` the configuration lives in the ``[tool.humanjoin]``
    table; any other file is read from its top level:

        renderer = "inline"

        [inline]
        conjunction = " or "

        [quote]
        enabled = true
        quote_with = '"'

    Args:
        path (Path): The TOML file.

    Returns:
        JoinConfig: The configuration described by the file.

    Raises:
        ConfigError: If the file cannot be read or parsed, or if a
            ``pyproject.toml`` has no ``[tool.humanjoin]`` table.
    """
    data: TomlTable = load_toml_dict(path)
    if path.name == "pyproject.toml":
        tool: Any = data.get("tool", {})
        table: Any = tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, dict) else None
        if not isinstance(table, dict):
            raise ConfigError(f"No [tool.{PYPROJECT_TOOL_TABLE}] table in {path}")
        data = cast("TomlTable", table)
    return JoinConfig.from_mapping(data)


def load_shortcut_presets(text: str | None = None) -> dict[str, JoinConfig]:
    """Load configuration shortcut presets.

    Args:
        text (str | None): TOML text with a ``[shortcuts.<name>]`` table per preset.
            When ``None``, the presets bundled with HumanJoin are read.

    Returns:
        dict[str, JoinConfig]: Shortcut name -> preset, in document order.

    Raises:
        ConfigError: If the document cannot be read or parsed, or if a preset
            is not a table.
    """
    source = "<string>"
    if text is None:
        resource = files(SHORTCUTS_TOML_PACKAGE).joinpath(SHORTCUTS_TOML_NAME)
        source = str(resource)
        try:
            text = resource.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read packaged shortcut presets {source}: {exc}") from exc

    data: TomlTable = parse_toml_text(text, source=source)
    table: Any = data.get(SHORTCUTS_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{SHORTCUTS_TABLE}] must be a table in {source}")

    presets: dict[str, JoinConfig] = {}
    for name, preset in cast("TomlTable", table).items():
        if not isinstance(preset, dict):
            raise ConfigError(f"Shortcut '{name}' must be a table in {source}")
        presets[name] = JoinConfig.from_mapping(cast("TomlTable", preset))
    logger.debug("Loaded %d shortcut presets from %s", len(presets), source)
    return presets
