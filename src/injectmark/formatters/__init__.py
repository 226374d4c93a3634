# topmark:header:start
#
#   project      : InjectMark
#   file         : __init__.py
#   file_relpath : src/injectmark/formatters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Auto-import all formatter modules in the current package."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import TYPE_CHECKING

from injectmark.config.logging import get_logger
from injectmark.filetypes.instances import get_file_type_for_extension

if TYPE_CHECKING:
    from injectmark.filetypes.base import FileType
    from injectmark.formatters.base import TagFormatter

logger = get_logger(__name__)

# File type used for target extensions no registered type claims.
FALLBACK_FILE_TYPE: str = "html"


def register_all_formatters() -> None:
    """Import all formatter modules in the current package (idempotent)."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg:
            # Import the module to ensure it registers its formatter
            importlib.import_module(f"{__name__}.{module_info.name}")


def get_formatter(name: str) -> TagFormatter:
    """Return the formatter registered for file type ``name``.

    Raises:
        KeyError: If no formatter is registered under ``name``.
    """
    from injectmark.filetypes.registry import get_tag_formatter_registry

    register_all_formatters()
    return get_tag_formatter_registry()[name]


def get_formatter_for_extension(ext: str) -> TagFormatter:
    """Return the formatter for a target document extension.

    Unknown extensions fall back to the HTML formatter.

    Args:
        ext (str): Target extension without leading dot (case-insensitive).

    Returns:
        TagFormatter: The formatter bound to the matching file type.
    """
    file_type: FileType | None = get_file_type_for_extension(ext)
    if file_type is None:
        logger.debug("No file type for extension %r; using %s", ext, FALLBACK_FILE_TYPE)
        return get_formatter(FALLBACK_FILE_TYPE)
    return get_formatter(file_type.name)
