# topmark:header:start
#
#   project      : InjectMark
#   file         : pipelines.py
#   file_relpath : src/injectmark/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The injection pipeline: locator → composer → rewriter."""

from __future__ import annotations

from typing import Final

from injectmark.pipeline.protocols import Step

from .steps import composer, locator, rewriter

INJECT_PIPELINE: Final[tuple[Step, ...]] = (
    locator.LocatorStep(),  # Resolve the formatter and find marker regions
    composer.ComposerStep(),  # Build lines (or removal instructions) per region
    rewriter.RewriterStep(),  # Splice them into the document
)
