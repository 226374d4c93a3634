# topmark:header:start
#
#   project      : InjectMark
#   file         : registry.py
#   file_relpath : src/injectmark/filetypes/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of TagFormatters for InjectMark file types.

This module provides a decorator to register TagFormatter implementations
for specific file types, using the centralized file type registry.

Each TagFormatter is associated with a FileType by name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from injectmark.config.logging import get_logger
from injectmark.filetypes.instances import get_file_type_registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from injectmark.formatters.base import TagFormatter

logger = get_logger(__name__)


_registry: dict[str, TagFormatter] = {}


def register_filetype(
    name: str,
) -> Callable[[type[TagFormatter]], type[TagFormatter]]:
    """Class decorator to register a TagFormatter for a specific file type.

    Args:
        name (str): Name of the file type as defined in the file type registry.

    Returns:
        Callable[[type[TagFormatter]], type[TagFormatter]]: A decorator that
            registers the class as a TagFormatter.

    Raises:
        ValueError: If the file type name is unknown.
    """
    file_type_registry = get_file_type_registry()
    if name not in file_type_registry:
        raise ValueError(f"Unknown file type: {name}")

    file_type = file_type_registry[name]

    def decorator(cls: type[TagFormatter]) -> type[TagFormatter]:
        """Instantiate ``cls`` and bind the instance to the file type.

        Each formatter instance is bound to exactly one file type, so a class
        reused for several file types yields several instances.

        Raises:
            ValueError: If the file type already has a registered formatter.
        """
        logger.debug("Registering formatter %s for file type: %s", cls.__name__, file_type.name)
        if file_type.name in _registry:
            raise ValueError(f"File type '{file_type.name}' already has a registered formatter.")
        instance = cls()
        instance.file_type = file_type
        _registry[file_type.name] = instance
        return cls

    return decorator


def get_tag_formatter_registry() -> dict[str, TagFormatter]:
    """Return the registry of file type names to TagFormatter instances."""
    return _registry
