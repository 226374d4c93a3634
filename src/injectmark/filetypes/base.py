# topmark:header:start
#
#   project      : InjectMark
#   file         : base.py
#   file_relpath : src/injectmark/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Target document types recognized by InjectMark.

Defines the `FileType` class, which describes a kind of *target* document
(HTML, Jade, HAML, ...) by its filename extensions. The tag formatter bound to
a file type decides the marker syntax and the line templates used when
injecting into documents of that type.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileType:
    """Represents a target document type recognized by InjectMark.

    Attributes:
        name (str): Internal identifier of the file type (e.g. ``"html"``).
        extensions (tuple[str, ...]): Extensions without the leading dot
            (e.g. ``("jade", "pug")``).
        description (str): Human-readable description of the file type.
    """

    name: str
    extensions: tuple[str, ...]
    description: str
