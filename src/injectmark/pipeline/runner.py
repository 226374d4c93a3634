# topmark:header:start
#
#   project      : InjectMark
#   file         : runner.py
#   file_relpath : src/injectmark/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the injection pipeline for a single target document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from injectmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from injectmark.config.logging import InjectmarkLogger

    from .context import ProcessingContext
    from .protocols import Step

logger: InjectmarkLogger = get_logger(__name__)


def run(ctx: ProcessingContext, steps: Sequence[Step]) -> ProcessingContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.
            Each step takes and returns a context.

    Returns:
        ProcessingContext: The final processing context after all steps have run.
    """
    logger.trace("Running %d step(s) for %s", len(steps), ctx.target.name)
    for step in steps:
        ctx = step(ctx)
    return ctx
