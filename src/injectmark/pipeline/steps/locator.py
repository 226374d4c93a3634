# topmark:header:start
#
#   project      : InjectMark
#   file         : locator.py
#   file_relpath : src/injectmark/pipeline/steps/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locator step: resolve the target's formatter and find its marker regions.

Sources are grouped by their resolved marker pair (one group per extension
with the default ``{{ext}}`` markers; a single group when a custom tag omits
``{{ext}}``). Each group's pair is then scanned for in the target with
`MarkerScanner`.

Sets:
  - ``ctx.formatter``, ``ctx.marker_spec`` and ``ctx.groups``
  - ``LocateStatus`` → {FOUND, NOT_FOUND, NO_SOURCES}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from injectmark.config.logging import get_logger
from injectmark.formatters import get_formatter_for_extension
from injectmark.pipeline.context import SourceGroup
from injectmark.pipeline.markers import MarkerScanner, ScanState
from injectmark.pipeline.status import LocateStatus
from injectmark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Iterable

    from injectmark.config.logging import InjectmarkLogger
    from injectmark.pipeline.context import ProcessingContext
    from injectmark.pipeline.markers import MarkerSpec
    from injectmark.pipeline.types import SourceFile

logger: InjectmarkLogger = get_logger(__name__)


def group_sources(sources: Iterable[SourceFile], marker_spec: MarkerSpec) -> list[SourceGroup]:
    """Group sources by resolved marker pair.

    Group order follows the first occurrence of each pair; member order follows
    the input order.

    Args:
        sources (Iterable[SourceFile]): Ordered sources.
        marker_spec (MarkerSpec): Marker templates in effect.

    Returns:
        list[SourceGroup]: The groups, without scan results.
    """
    groups: dict[tuple[str, str], SourceGroup] = {}
    for source in sources:
        start, end = marker_spec.resolve(source.extension)
        group: SourceGroup | None = groups.get((start, end))
        if group is None:
            group = SourceGroup(start_marker=start, end_marker=end)
            groups[(start, end)] = group
        group.sources.append(source)
    return list(groups.values())


class LocatorStep(BaseStep):
    """Resolve the formatter and scan the target for every group's markers.

    Axis written: **locate**.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, axis="locate")

    def run(self, ctx: ProcessingContext) -> None:
        """Populate the formatter, the marker spec and the scanned groups."""
        ctx.formatter = get_formatter_for_extension(ctx.target.extension)
        ctx.marker_spec = ctx.formatter.marker_spec(ctx.config)

        if not ctx.sources:
            ctx.status.locate = LocateStatus.NO_SOURCES
            ctx.add_info("no sources to inject")
            ctx.request_halt("no-sources", self.name)
            return

        ctx.groups = group_sources(ctx.sources, ctx.marker_spec)
        found: bool = False
        for group in ctx.groups:
            group.scan = MarkerScanner(group.start_marker, group.end_marker).scan(
                ctx.target.content
            )
            if group.scan.state is ScanState.FOUND_END:
                found = True
                logger.debug(
                    "%s: %d region(s) for %s",
                    ctx.target.name,
                    len(group.scan.matches),
                    group.start_marker,
                )
            else:
                ctx.add_warning(f"marker {group.start_marker!r} not found")

        if found:
            ctx.status.locate = LocateStatus.FOUND
        else:
            ctx.status.locate = LocateStatus.NOT_FOUND
            ctx.request_halt("no-markers", self.name)
