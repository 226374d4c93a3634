# topmark:header:start
#
#   project      : InjectMark
#   file         : jsx.py
#   file_relpath : src/injectmark/formatters/jsx.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter for JSX/TSX components.

HTML comments are not valid inside JSX, so markers use the expression-comment
form ``{/* ... */}``. Void elements are always self-closed.
"""

from __future__ import annotations

from injectmark.filetypes.registry import register_filetype
from injectmark.formatters.base import TagFormatter
from injectmark.formatters.xml import HTML_TEMPLATES


@register_filetype("jsx")
class JsxTagFormatter(TagFormatter):
    """Tag formatter for JSX-style component sources."""

    templates = HTML_TEMPLATES
    always_self_close = True

    def __init__(self) -> None:
        super().__init__(
            block_prefix="{/*",
            block_suffix="*/}",
        )
