# topmark:header:start
#
#   project      : InjectMark
#   file         : rewriter.py
#   file_relpath : src/injectmark/pipeline/steps/rewriter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rewriter step: splice the composed blocks into the target text.

Splices are applied in document order in a single pass over the original
text, so offsets computed by the locator stay valid. Bytes outside the marker
regions are copied unchanged.

Sets:
  - ``ctx.updated``
  - ``RewriteStatus`` → {CHANGED, UNCHANGED, SKIPPED}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from injectmark.config.logging import get_logger
from injectmark.pipeline.status import ComposeStatus, RewriteStatus
from injectmark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from injectmark.config.logging import InjectmarkLogger
    from injectmark.pipeline.context import ProcessingContext, Splice
    from injectmark.pipeline.markers import MarkerMatch

logger: InjectmarkLogger = get_logger(__name__)

_HSPACE: str = " \t"
_NEWLINES: str = "\r\n"


def render_block(match: MarkerMatch, lines: tuple[str, ...] | list[str]) -> str:
    """Return the text placed between the markers: each line and the end marker
    on their own line, prefixed with the region's separator.
    """
    sep: str = match.separator
    return "".join(sep + line for line in lines) + sep


def removal_span(text: str, match: MarkerMatch) -> tuple[int, int]:
    """Return the ``(begin, end)`` span deleted when a region is removed.

    A region standing on its own lines also loses its indentation, trailing
    blanks and one adjoining line break; an inline region loses only the
    markers and what lies between them.
    """
    begin: int = match.start_index
    end: int = match.end_index

    line_start: int = begin
    while line_start > 0 and text[line_start - 1] in _HSPACE:
        line_start -= 1
    if line_start > 0 and text[line_start - 1] not in _NEWLINES:
        return begin, end

    tail: int = end
    while tail < len(text) and text[tail] in _HSPACE:
        tail += 1
    if text.startswith("\r\n", tail):
        return line_start, tail + 2
    if tail < len(text) and text[tail] in _NEWLINES:
        return line_start, tail + 1
    if tail < len(text):
        # Content follows on the end marker's line: keep the line break before it.
        return line_start, end

    # Region at end of text: drop the line break that precedes it instead.
    if line_start >= 2 and text[line_start - 2 : line_start] == "\r\n":
        return line_start - 2, tail
    if line_start >= 1 and text[line_start - 1] in _NEWLINES:
        return line_start - 1, tail
    return line_start, tail


def apply_splices(text: str, splices: list[Splice]) -> str:
    """Apply ``splices`` to ``text`` and return the rewritten text.

    Overlapping regions (possible with custom markers) keep the first one in
    document order; the others are skipped with a warning.
    """
    edits: list[tuple[int, int, str]] = []
    for splice in splices:
        if splice.remove:
            begin, end = removal_span(text, splice.match)
            edits.append((begin, end, ""))
        else:
            edits.append(
                (
                    splice.match.content_start,
                    splice.match.content_end,
                    render_block(splice.match, splice.lines),
                )
            )
    edits.sort(key=lambda e: (e[0], e[1]))

    parts: list[str] = []
    cursor: int = 0
    for begin, end, replacement in edits:
        if begin < cursor:
            logger.warning("Skipping overlapping marker region at offset %d", begin)
            continue
        parts.append(text[cursor:begin])
        parts.append(replacement)
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)


class RewriterStep(BaseStep):
    """Produce the rewritten target document.

    Axis written: **rewrite**.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="rewrite")

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Run only when the composer produced splice instructions."""
        return ctx.status.compose in (ComposeStatus.COMPOSED, ComposeStatus.REMOVAL)

    def run(self, ctx: ProcessingContext) -> None:
        """Splice and compare with the input."""
        new_text: str = apply_splices(ctx.target.content, ctx.splices)
        if new_text == ctx.target.content:
            ctx.status.rewrite = RewriteStatus.UNCHANGED
            return
        ctx.updated = ctx.target.with_content(new_text)
        ctx.status.rewrite = RewriteStatus.CHANGED

    def hint(self, ctx: ProcessingContext) -> None:
        """Mark the rewrite axis as skipped when the step did not run."""
        if ctx.status.rewrite == RewriteStatus.PENDING:
            ctx.status.rewrite = RewriteStatus.SKIPPED
