# topmark:header:start
#
#   project      : HumanJoin
#   file         : __init__.py
#   file_relpath : src/humanjoin/plugins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in plugins.

Every module in this package registers its stage(s) at import time with the
registry decorators. `register_builtin_plugins` imports them all and then
registers the configuration shortcuts bundled in ``humanjoin-shortcuts.toml``.
"""

import importlib
import pkgutil
from pathlib import Path
from threading import RLock

from humanjoin.config.io import load_shortcut_presets
from humanjoin.config.logging import get_logger
from humanjoin.registry.plugins import register_config_shortcut

logger = get_logger(__name__)

_lock = RLock()
_registered = False


def register_builtin_plugins() -> None:
    """Register the built-in plugins and shortcuts (idempotent)."""
    global _registered
    with _lock:
        if _registered:
            return
        package_dir = Path(__file__).parent
        for module_info in pkgutil.iter_modules([str(package_dir)]):
            if not module_info.ispkg:
                # Import the module to ensure it registers its stages
                importlib.import_module(f"{__name__}.{module_info.name}")

        presets = load_shortcut_presets()
        for name, preset in presets.items():
            register_config_shortcut(name, preset)
        logger.debug("Registered %d built-in shortcuts", len(presets))
        _registered = True
