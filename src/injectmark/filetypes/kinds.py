# topmark:header:start
#
#   project      : InjectMark
#   file         : kinds.py
#   file_relpath : src/injectmark/filetypes/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Closed set of source file kinds that line templates are keyed by."""

from __future__ import annotations

from enum import Enum
from typing import Final


class SourceKind(Enum):
    """Kind of a source file, derived from its extension.

    ``OTHER`` is the fallback arm for extensions without a dedicated template;
    formatters render it as a comment-wrapped path.
    """

    JS = "js"
    CSS = "css"
    HTML = "html"
    JSX = "jsx"
    COFFEE = "coffee"
    IMAGE = "image"
    LESS = "less"
    SASS = "sass"
    SCSS = "scss"
    JSON = "json"
    OTHER = "other"

    @classmethod
    def from_extension(cls, ext: str) -> SourceKind:
        """Return the kind for a file extension (case-insensitive, dot optional)."""
        return _EXTENSION_TO_KIND.get(ext.lstrip(".").lower(), cls.OTHER)


IMAGE_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {"png", "jpg", "jpeg", "gif", "svg", "webp", "ico", "bmp", "avif"}
)

_EXTENSION_TO_KIND: Final[dict[str, SourceKind]] = {
    "js": SourceKind.JS,
    "mjs": SourceKind.JS,
    "cjs": SourceKind.JS,
    "css": SourceKind.CSS,
    "html": SourceKind.HTML,
    "htm": SourceKind.HTML,
    "jsx": SourceKind.JSX,
    "coffee": SourceKind.COFFEE,
    "less": SourceKind.LESS,
    "sass": SourceKind.SASS,
    "scss": SourceKind.SCSS,
    "json": SourceKind.JSON,
    **{ext: SourceKind.IMAGE for ext in IMAGE_EXTENSIONS},
}
