# topmark:header:start
#
#   project      : HumanJoin
#   file         : constants.py
#   file_relpath : src/humanjoin/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HumanJoin constants."""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    HUMANJOIN_VERSION: str = get_version("humanjoin")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    HUMANJOIN_VERSION = "0.0.0"

DEFAULT_RENDERER: str = "inline"
DEFAULT_SEPARATOR: str = ", "
DEFAULT_CONJUNCTION: str = " & "

DEFAULT_QUOTE_WITH: str = "'"
DEFAULT_WRAP_WITH: str = "("

# Plugin names: letters, digits and underscores, not starting with a digit.
PLUGIN_NAME_RE: re.Pattern[str] = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Name of the bundled shortcut presets inside the package `humanjoin.config`:
SHORTCUTS_TOML_PACKAGE: str = "humanjoin.config"
SHORTCUTS_TOML_NAME: str = "humanjoin-shortcuts.toml"

# Table holding HumanJoin settings inside `pyproject.toml`:
PYPROJECT_TOOL_TABLE: str = "humanjoin"

LOG_LEVEL_ENV_VAR: str = "HUMANJOIN_LOG_LEVEL"
