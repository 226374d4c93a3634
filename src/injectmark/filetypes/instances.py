# topmark:header:start
#
#   project      : InjectMark
#   file         : instances.py
#   file_relpath : src/injectmark/filetypes/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in target file types.

Exports:
    FILETYPES (list[FileType]): Markup, component, templating-language,
        stylesheet and JSON targets.

Notes:
    - Unknown target extensions are treated as ``html`` by the formatter lookup.
    - ``jsx`` covers component sources where HTML comments are not valid.
"""

from __future__ import annotations

from functools import lru_cache

from injectmark.filetypes.base import FileType

FILETYPES: list[FileType] = [
    FileType(
        name="html",
        extensions=("html", "htm", "xhtml", "php", "vue", "svelte"),
        description="HTML-like markup (<!-- ... --> comments)",
    ),
    FileType(
        name="jsx",
        extensions=("jsx", "tsx"),
        description="JSX/TSX components ({/* ... */} comments)",
    ),
    FileType(
        name="jade",
        extensions=("jade", "pug"),
        description="Jade/Pug templates (//- comments)",
    ),
    FileType(
        name="slm",
        extensions=("slm",),
        description="Slm templates (/ comments)",
    ),
    FileType(
        name="haml",
        extensions=("haml",),
        description="Haml templates (-# comments)",
    ),
    FileType(
        name="less",
        extensions=("less",),
        description="Less stylesheets (/* ... */ comments)",
    ),
    FileType(
        name="scss",
        extensions=("scss",),
        description="Sass SCSS syntax (/* ... */ comments)",
    ),
    FileType(
        name="sass",
        extensions=("sass",),
        description="Sass indented syntax (// comments)",
    ),
    FileType(
        name="json",
        extensions=("json",),
        description="JSON documents (array entries, no comments)",
    ),
]


@lru_cache(maxsize=1)
def get_file_type_registry() -> dict[str, FileType]:
    """Return the mapping of file type names to `FileType` instances."""
    return {ft.name: ft for ft in FILETYPES}


def get_file_type_for_extension(ext: str) -> FileType | None:
    """Return the file type owning extension ``ext`` (without dot), if any."""
    needle: str = ext.lstrip(".").lower()
    for ft in get_file_type_registry().values():
        if needle in ft.extensions:
            return ft
    return None
