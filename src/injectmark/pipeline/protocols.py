# topmark:header:start
#
#   project      : InjectMark
#   file         : protocols.py
#   file_relpath : src/injectmark/pipeline/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Protocols shared by the pipeline runner and its steps."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from injectmark.pipeline.context import ProcessingContext


class Step(Protocol):
    """A pipeline step: a named callable mutating and returning the context."""

    name: str

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Process ``ctx`` and return it."""
        ...
