# topmark:header:start
#
#   project      : InjectMark
#   file         : stylesheets.py
#   file_relpath : src/injectmark/formatters/stylesheets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatters for stylesheet preprocessors (Less, SCSS, Sass).

Stylesheet sources are injected as ``@import`` statements. Less and SCSS use
block comments for markers; the indented Sass syntax uses ``//`` line
comments and does not terminate statements with ``;``.
"""

from __future__ import annotations

from typing import Final

from injectmark.filetypes.kinds import SourceKind
from injectmark.filetypes.registry import register_filetype
from injectmark.formatters.base import TagFormatter

IMPORT_KINDS: Final[tuple[SourceKind, ...]] = (
    SourceKind.CSS,
    SourceKind.LESS,
    SourceKind.SCSS,
    SourceKind.SASS,
)


@register_filetype("less")
@register_filetype("scss")
class CBlockTagFormatter(TagFormatter):
    """Tag formatter for stylesheets with ``/* ... */`` comments."""

    templates = {kind: '@import "$path";' for kind in IMPORT_KINDS}

    def __init__(self) -> None:
        super().__init__(
            block_prefix="/*",
            block_suffix="*/",
        )


@register_filetype("sass")
class SassTagFormatter(TagFormatter):
    """Tag formatter for the indented Sass syntax."""

    templates = {kind: '@import "$path"' for kind in IMPORT_KINDS}

    def __init__(self) -> None:
        super().__init__(block_prefix="//")
