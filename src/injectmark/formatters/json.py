# topmark:header:start
#
#   project      : InjectMark
#   file         : json.py
#   file_relpath : src/injectmark/formatters/json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter for JSON documents.

JSON has no comments, so the default markers are the array opening
``"<ext>": [`` and the closing ``]``. Every source becomes a quoted array entry;
all entries but the last one of a group carry a trailing comma.
"""

from __future__ import annotations

from injectmark.constants import EXT_PLACEHOLDER
from injectmark.filetypes.kinds import SourceKind
from injectmark.filetypes.registry import register_filetype
from injectmark.formatters.base import TagFormatter


@register_filetype("json")
class JsonTagFormatter(TagFormatter):
    """Tag formatter emitting JSON array entries."""

    templates = {kind: '"$path"$comma' for kind in SourceKind}

    @property
    def start_tag(self) -> str:
        """Default start marker template: the opening of a per-extension array."""
        return f'"{EXT_PLACEHOLDER}": ['

    @property
    def end_tag(self) -> str:
        """Default end marker template: the closing bracket of the array."""
        return "]"

    def template_values(
        self,
        path: str,
        index: int,
        length: int,
        *,
        self_closing: bool,
    ) -> dict[str, str]:
        """Add the ``$comma`` separator to the base substitution values."""
        values: dict[str, str] = super().template_values(
            path, index, length, self_closing=self_closing
        )
        values["comma"] = "," if index + 1 < length else ""
        return values
