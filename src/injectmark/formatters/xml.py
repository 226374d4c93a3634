# topmark:header:start
#
#   project      : InjectMark
#   file         : xml.py
#   file_relpath : src/injectmark/formatters/xml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter for HTML-like documents with ``<!-- ... -->`` comments.

This is also the formatter used for target extensions that no registered
file type claims.
"""

from __future__ import annotations

from typing import Final

from injectmark.config.logging import InjectmarkLogger, get_logger
from injectmark.filetypes.kinds import SourceKind
from injectmark.filetypes.registry import register_filetype
from injectmark.formatters.base import TagFormatter

logger: InjectmarkLogger = get_logger(__name__)

HTML_TEMPLATES: Final[dict[SourceKind, str]] = {
    SourceKind.CSS: '<link rel="stylesheet" href="$path"$close',
    SourceKind.HTML: '<link rel="import" href="$path"$close',
    SourceKind.JS: '<script src="$path"></script>',
    SourceKind.JSX: '<script type="text/jsx" src="$path"></script>',
    SourceKind.COFFEE: '<script type="text/coffeescript" src="$path"></script>',
    SourceKind.IMAGE: '<img src="$path"$close',
}


@register_filetype("html")
class HtmlTagFormatter(TagFormatter):
    """Tag formatter for HTML, XHTML and HTML-hosting templates (PHP, Vue, Svelte)."""

    templates = HTML_TEMPLATES

    def __init__(self) -> None:
        super().__init__(
            block_prefix="<!--",
            block_suffix="-->",
        )
