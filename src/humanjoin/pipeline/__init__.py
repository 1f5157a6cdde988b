# topmark:header:start
#
#   project      : HumanJoin
#   file         : __init__.py
#   file_relpath : src/humanjoin/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HumanJoin pipeline (pre-processors → renderer → post-processors)."""

from __future__ import annotations

from .executor import clone_data, execute

__all__ = ["clone_data", "execute"]
