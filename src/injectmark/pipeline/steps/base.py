# topmark:header:start
#
#   project      : InjectMark
#   file         : base.py
#   file_relpath : src/injectmark/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run? → hint
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from injectmark.config.logging import get_logger

if TYPE_CHECKING:
    from injectmark.config.logging import InjectmarkLogger
    from injectmark.pipeline.context import ProcessingContext

logger: InjectmarkLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()``,
    ``run()``, and optionally ``hint()``.

    Attributes:
        name (str): Stable step identifier for logs and flow control.
        axis (str): The status axis this step writes (``locate``, ``compose``, ``rewrite``).
    """

    name: str
    axis: str

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step lifecycle: gate → run (if allowed) → hint.

        Args:
            ctx (ProcessingContext): The mutable processing context for the current target.

        Returns:
            ProcessingContext: The same context instance after mutation.
        """
        ctx.steps.append(self)

        if ctx.flow.halt:
            logger.trace("%s: skipped, pipeline halted by %s", self.name, ctx.flow.at_step)
        elif self.may_proceed(ctx):
            logger.trace("%s: running for %s", self.name, ctx.target.name)
            self.run(ctx)
            if ctx.flow.halt:
                logger.debug(
                    "Pipeline halted by %s for %s: %s",
                    ctx.flow.at_step,
                    ctx.target.name,
                    ctx.flow.reason,
                )
        else:
            logger.trace("%s: may not proceed for %s", self.name, ctx.target.name)

        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context (default: True)."""
        return True

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""
        pass

    def hint(self, ctx: ProcessingContext) -> None:
        """Attach non-binding information to ``ctx`` after the step (optional)."""
        pass
