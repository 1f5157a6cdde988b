# topmark:header:start
#
#   project      : HumanJoin
#   file         : executor.py
#   file_relpath : src/humanjoin/pipeline/executor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the HumanJoin pipeline for a single join call.

Stage order:

    pre-processors (registration order, enabled only)
        → the selected renderer
            → post-processors (registration order, enabled only)

The caller's data is deep-copied on entry so pre-processors may transform the
working copy in place. Each stage is isolated: an exception raised inside a
stage stops the run and is re-raised as `StageExecutionError` naming the stage.
The executor performs no I/O and never retries.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from humanjoin.config.logging import get_logger
from humanjoin.errors import StageExecutionError, UnknownRendererError

if TYPE_CHECKING:
    from humanjoin.config.logging import HumanJoinLogger
    from humanjoin.config.model import JoinConfig
    from humanjoin.config.options import PluginOptions
    from humanjoin.registry.plugins import PluginEntry, Registry

logger: HumanJoinLogger = get_logger(__name__)


def clone_data(data: Any) -> Any:
    """Return a private working copy of ``data``.

    Tuples become lists so pre-processors can mutate elements in place.
    """
    working: Any = copy.deepcopy(data)
    if isinstance(working, tuple):
        return list(working)
    return working


def _run_stage(entry: PluginEntry, subject: Any, opts: PluginOptions) -> Any:
    logger.trace("Running %s '%s' with %s", entry.kind.label, entry.name, opts)
    try:
        return entry.fn(subject, opts)
    except Exception as exc:
        logger.debug("%s '%s' failed: %s", entry.kind.label, entry.name, exc)
        raise StageExecutionError(entry.kind, entry.name, exc) from exc


def execute(data: Any, config: JoinConfig, registry: Registry) -> str:
    """Execute the pipeline and return the joined string.

    Args:
        data (Any): The data to join; never mutated.
        config (JoinConfig): The fully resolved configuration for this call.
        registry (Registry): The frozen registry to look stages up in.

    Returns:
        str: The rendered and post-processed string.

    Raises:
        UnknownRendererError: If the configuration selects no registered renderer.
        StageExecutionError: If any stage raises.
    """
    renderer_name = config.renderer
    renderer = registry.renderers.get(renderer_name) if renderer_name is not None else None
    if renderer is None:
        raise UnknownRendererError(renderer_name)

    working: Any = clone_data(data)

    for entry in registry.pre_processors.values():
        opts = config.options_for(entry.name)
        if opts.is_enabled:
            _run_stage(entry, working, opts)

    text: Any = _run_stage(renderer, working, config.options_for(renderer.name))

    for entry in registry.post_processors.values():
        opts = config.options_for(entry.name)
        if opts.is_enabled:
            text = _run_stage(entry, text, opts)

    logger.trace("Pipeline produced %r", text)
    return text
