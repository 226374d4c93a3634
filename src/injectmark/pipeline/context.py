# topmark:header:start
#
#   project      : InjectMark
#   file         : context.py
#   file_relpath : src/injectmark/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing context for the injection pipeline.

A `ProcessingContext` is the mutable per-target state that flows through the
steps. Sources, configuration and the input document are shared read-only;
everything a step produces (groups, splices, the rewritten document, status
and diagnostics) lives on the context, so targets never share mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from injectmark.config.logging import get_logger
from injectmark.core.diagnostics import Diagnostic, DiagnosticLevel
from injectmark.pipeline.status import InjectionStatus, RewriteStatus

if TYPE_CHECKING:
    from injectmark.config import Config
    from injectmark.config.logging import InjectmarkLogger
    from injectmark.formatters.base import TagFormatter
    from injectmark.pipeline.markers import MarkerMatch, MarkerSpec, ScanResult
    from injectmark.pipeline.protocols import Step
    from injectmark.pipeline.types import SourceFile, TargetDocument

logger: InjectmarkLogger = get_logger(__name__)

__all__: list[str] = [
    "FlowControl",
    "ProcessingContext",
    "SourceGroup",
    "Splice",
]


@dataclass
class FlowControl:
    """Execution flow control for the current target."""

    halt: bool = False
    reason: str = ""  # short code, e.g. "no-markers"
    at_step: str = ""


@dataclass
class SourceGroup:
    """Sources sharing one resolved marker pair, in input order.

    With the default ``{{ext}}`` markers this is one group per extension.

    Attributes:
        start_marker (str): Literal start marker.
        end_marker (str): Literal end marker.
        sources (list[SourceFile]): Member sources in input order.
        scan (ScanResult | None): Marker regions located in the target.
        lines (list[str]): Formatted lines, filled by the composer.
    """

    start_marker: str
    end_marker: str
    sources: list[SourceFile] = field(default_factory=lambda: [])
    scan: ScanResult | None = None
    lines: list[str] = field(default_factory=lambda: [])


@dataclass(frozen=True)
class Splice:
    """Instruction to rewrite one marker region.

    Attributes:
        match (MarkerMatch): The located region.
        lines (tuple[str, ...]): Lines to place between the markers.
        remove (bool): Delete the whole region, markers included.
    """

    match: MarkerMatch
    lines: tuple[str, ...] = ()
    remove: bool = False


@dataclass
class ProcessingContext:
    """Mutable state of one target document flowing through the pipeline.

    Attributes:
        target (TargetDocument): The input document.
        sources (tuple[SourceFile, ...]): The complete, ordered source list.
        config (Config): Effective configuration.
        steps (list[Step]): Steps executed so far.
        formatter (TagFormatter | None): Formatter resolved from the target extension.
        marker_spec (MarkerSpec | None): Marker templates in effect.
        groups (list[SourceGroup]): Sources grouped by resolved marker pair.
        splices (list[Splice]): Region rewrites produced by the composer.
        injected (int): Number of lines placed into the target.
        updated (TargetDocument | None): Rewritten document, set by the rewriter.
        status (InjectionStatus): Per-axis status.
        flow (FlowControl): Early-termination flags.
        diagnostics (list[Diagnostic]): Soft failures recorded while processing.
    """

    target: TargetDocument
    sources: tuple[SourceFile, ...]
    config: Config
    steps: list[Step] = field(default_factory=lambda: [])
    formatter: TagFormatter | None = None
    marker_spec: MarkerSpec | None = None
    groups: list[SourceGroup] = field(default_factory=lambda: [])
    splices: list[Splice] = field(default_factory=lambda: [])
    injected: int = 0
    updated: TargetDocument | None = None
    status: InjectionStatus = field(default_factory=InjectionStatus)
    flow: FlowControl = field(default_factory=FlowControl)
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])

    @property
    def result(self) -> TargetDocument:
        """The document to emit: the rewritten one, or the input when nothing changed."""
        return self.updated if self.updated is not None else self.target

    @property
    def changed(self) -> bool:
        """Whether the rewriter changed the document content."""
        return self.status.rewrite == RewriteStatus.CHANGED

    def add_info(self, message: str) -> None:
        """Record an info diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.INFO, message))
        logger.debug("%s: %s", self.target.name, message)

    def add_warning(self, message: str) -> None:
        """Record a warning diagnostic and log it."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))
        logger.warning("%s: %s", self.target.name, message)

    def request_halt(self, reason: str, at_step: str) -> None:
        """Stop the pipeline for this target after the current step."""
        self.flow.halt = True
        self.flow.reason = reason
        self.flow.at_step = at_step
