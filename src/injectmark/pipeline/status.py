# topmark:header:start
#
#   project      : InjectMark
#   file         : status.py
#   file_relpath : src/injectmark/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for each axis of the injection pipeline.

Each step writes only the axis it owns:

    locate   LocatorStep   (formatter resolution and marker scanning)
    compose  ComposerStep  (line generation)
    rewrite  RewriterStep  (splicing)

Members carry a human-readable value and a yachalk colorizer used by the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable


class ColoredStrEnum(str, Enum):
    """`str` enum whose members also carry a colorizer (exposed as ``.color``)."""

    _value_: str
    _color: Callable[..., str]

    def __new__(cls, text: str, color: Callable[..., str]) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def color(self) -> Callable[..., str]:
        """Return the colorizer associated with this member."""
        return self._color


class LocateStatus(ColoredStrEnum):
    """Outcome of marker location for a target."""

    PENDING = ("locate pending", chalk.gray)
    FOUND = ("markers found", chalk.green)
    NOT_FOUND = ("no markers found", chalk.yellow)
    NO_SOURCES = ("nothing to inject", chalk.yellow)


class ComposeStatus(ColoredStrEnum):
    """Outcome of line generation for a target."""

    PENDING = ("compose pending", chalk.gray)
    COMPOSED = ("lines composed", chalk.green)
    REMOVAL = ("marker regions scheduled for removal", chalk.blue)


class RewriteStatus(ColoredStrEnum):
    """Outcome of splicing for a target."""

    PENDING = ("rewrite pending", chalk.gray)
    CHANGED = ("content changed", chalk.red)
    UNCHANGED = ("content unchanged", chalk.green)
    SKIPPED = ("rewrite skipped", chalk.yellow)


@dataclass
class InjectionStatus:
    """Per-axis status of one target document."""

    locate: LocateStatus = LocateStatus.PENDING
    compose: ComposeStatus = ComposeStatus.PENDING
    rewrite: RewriteStatus = RewriteStatus.PENDING
