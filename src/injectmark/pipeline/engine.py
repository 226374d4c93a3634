# topmark:header:start
#
#   project      : InjectMark
#   file         : engine.py
#   file_relpath : src/injectmark/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Execution helpers for running a pipeline over a stream of targets (engine layer).

Injection is a two-phase protocol:

1. Accumulation: sources are added to a `SourceCollector` one at a time.
2. Barrier: `SourceCollector.close` marks the source list as complete. Only
   then can targets be processed; every target sees the same full list.

`run_steps_for_targets` is a generator: targets are processed lazily, one at a
time in arrival order, and abandoning the iteration abandons the remaining
targets.

This module has no CLI dependencies and never prints; the public API and the
CLI both build on it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from injectmark.config.logging import get_logger
from injectmark.pipeline import runner
from injectmark.pipeline.context import ProcessingContext
from injectmark.pipeline.pipelines import INJECT_PIPELINE

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from injectmark.config import Config
    from injectmark.config.logging import InjectmarkLogger
    from injectmark.pipeline.protocols import Step
    from injectmark.pipeline.types import SourceFile, TargetDocument

logger: InjectmarkLogger = get_logger(__name__)


class SourceCollector:
    """Buffer sources until the source list is declared complete.

    Example:
        ```python
        collector = SourceCollector()
        collector.add(SourceFile(Path("lib.js")))
        collector.close()
        collector.sources  # (SourceFile(...),)
        ```
    """

    def __init__(self) -> None:
        self._sources: list[SourceFile] = []
        self._closed: bool = False

    @property
    def closed(self) -> bool:
        """Whether the barrier has been passed."""
        return self._closed

    def add(self, source: SourceFile) -> None:
        """Append ``source`` to the list.

        Raises:
            RuntimeError: If the collector is already closed.
        """
        if self._closed:
            raise RuntimeError("Cannot add sources after the source list was closed")
        self._sources.append(source)
        logger.trace("Collected source %s", source.path)

    def extend(self, sources: Iterable[SourceFile]) -> None:
        """Add every source of ``sources`` in order."""
        for source in sources:
            self.add(source)

    def close(self) -> tuple[SourceFile, ...]:
        """Declare the source list complete and return it (idempotent)."""
        if not self._closed:
            self._closed = True
            logger.debug("Source list ready: %d source(s)", len(self._sources))
        return tuple(self._sources)

    @property
    def sources(self) -> tuple[SourceFile, ...]:
        """The complete source list.

        Raises:
            RuntimeError: If read before `close`.
        """
        if not self._closed:
            raise RuntimeError("Source list is not ready; call close() first")
        return tuple(self._sources)

    def __len__(self) -> int:
        return len(self._sources)


def process_target(
    target: TargetDocument,
    sources: tuple[SourceFile, ...],
    config: Config,
    pipeline: Sequence[Step] = INJECT_PIPELINE,
) -> ProcessingContext:
    """Run ``pipeline`` for a single target and return its context.

    Unless ``config.quiet`` is set, every target gets one INFO summary line,
    whether it was filled, stripped or left alone.
    """
    ctx: ProcessingContext = ProcessingContext(target=target, sources=sources, config=config)
    runner.run(ctx, pipeline)
    if not config.quiet:
        logger.info("%d files into %s.", ctx.injected, target.name)
    return ctx


def run_steps_for_targets(
    *,
    targets: Iterable[TargetDocument],
    collector: SourceCollector,
    config: Config,
    pipeline: Sequence[Step] = INJECT_PIPELINE,
) -> Iterator[ProcessingContext]:
    """Yield one processed context per target, in arrival order.

    Args:
        targets (Iterable[TargetDocument]): Target documents, consumed lazily.
        collector (SourceCollector): A closed source collector.
        config (Config): Effective configuration shared by all targets.
        pipeline (Sequence[Step]): The steps to run for each target.

    Yields:
        ProcessingContext: The context of each target after the pipeline ran.

    Raises:
        RuntimeError: If ``collector`` has not been closed.
    """
    sources: tuple[SourceFile, ...] = collector.sources
    for target in targets:
        yield process_target(target, sources, config, pipeline)
