# topmark:header:start
#
#   project      : InjectMark
#   file         : diagnostics.py
#   file_relpath : src/injectmark/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while a target document is processed.

Soft failures (a marker pair that is absent from the target, a transform that
emits nothing for a source) never abort an injection: steps record them on the
processing context and log them.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class DiagnosticLevel(Enum):
    """Diagnostic severity; ``ERROR`` is unused by the steps but kept for callers."""

    INFO = ("info", chalk.blue)
    WARNING = ("warning", chalk.yellow)
    ERROR = ("error", chalk.red_bright)

    def __init__(self, label: str, color: Callable[[str], str]) -> None:
        self.label = label
        self.color = color


@dataclass(frozen=True)
class Diagnostic:
    """One recorded message."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = False) -> str:
        """Return ``[level] message``, colored by level when asked."""
        text: str = f"[{self.level.label}] {self.message}"
        return self.level.color(text) if color else text


@dataclass(frozen=True)
class DiagnosticStats:
    """Per-level diagnostic counts of one target."""

    n_info: int = 0
    n_warning: int = 0
    n_error: int = 0

    @property
    def total(self) -> int:
        return self.n_info + self.n_warning + self.n_error


def compute_diagnostic_stats(diags: Iterable[Diagnostic]) -> DiagnosticStats:
    """Count ``diags`` by level."""
    counts: Counter[DiagnosticLevel] = Counter(d.level for d in diags)
    return DiagnosticStats(
        n_info=counts[DiagnosticLevel.INFO],
        n_warning=counts[DiagnosticLevel.WARNING],
        n_error=counts[DiagnosticLevel.ERROR],
    )
