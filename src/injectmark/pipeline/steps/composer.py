# topmark:header:start
#
#   project      : InjectMark
#   file         : composer.py
#   file_relpath : src/injectmark/pipeline/steps/composer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Composer step: turn every located group into formatted lines.

For each source of a group that has at least one marker region, the path is
computed by `transform_path` and rendered by the caller transform (when set)
or the target's formatter. A transform returning nothing skips the source.
Every region of the group then receives a `Splice` carrying those lines, or a
removal instruction when ``remove_tags`` is set.

Sets:
  - ``ctx.splices``, ``ctx.injected`` and ``group.lines``
  - ``ComposeStatus`` → {COMPOSED, REMOVAL}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from injectmark.config.logging import get_logger
from injectmark.pipeline.context import Splice
from injectmark.pipeline.markers import ScanState
from injectmark.pipeline.paths import transform_path
from injectmark.pipeline.status import ComposeStatus, LocateStatus
from injectmark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from injectmark.config.logging import InjectmarkLogger
    from injectmark.pipeline.context import ProcessingContext, SourceGroup

logger: InjectmarkLogger = get_logger(__name__)


def compose_lines(ctx: ProcessingContext, group: SourceGroup) -> list[str]:
    """Return the formatted lines of ``group`` for the target of ``ctx``."""
    assert ctx.formatter is not None
    lines: list[str] = []
    length: int = len(group.sources)
    for index, source in enumerate(group.sources):
        path: str = transform_path(source, ctx.target, ctx.config)
        line: str | None
        if ctx.config.transform is not None:
            line = ctx.config.transform.format(path, source, index, length)
        else:
            line = ctx.formatter.format_line(
                path,
                source,
                index,
                length,
                self_closing=ctx.config.self_closing_tag,
            )
        if line is None:
            ctx.add_info(f"transform emitted nothing for {source.path}")
            continue
        lines.append(line)
    return lines


class ComposerStep(BaseStep):
    """Build the replacement lines and splice instructions.

    Axis written: **compose**.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="compose")

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only when the locator found at least one region."""
        return ctx.status.locate == LocateStatus.FOUND and ctx.formatter is not None

    def run(self, ctx: ProcessingContext) -> None:
        """Compose lines for every located group."""
        remove: bool = ctx.config.remove_tags
        for group in ctx.groups:
            if group.scan is None or group.scan.state is not ScanState.FOUND_END:
                continue
            if remove:
                ctx.splices.extend(Splice(match=m, remove=True) for m in group.scan.matches)
                continue
            group.lines = compose_lines(ctx, group)
            ctx.injected += len(group.lines)
            ctx.splices.extend(
                Splice(match=m, lines=tuple(group.lines)) for m in group.scan.matches
            )

        ctx.status.compose = ComposeStatus.REMOVAL if remove else ComposeStatus.COMPOSED
        logger.trace("Composed %d line(s) for %s", ctx.injected, ctx.target.name)
