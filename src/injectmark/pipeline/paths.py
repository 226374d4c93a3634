# topmark:header:start
#
#   project      : InjectMark
#   file         : paths.py
#   file_relpath : src/injectmark/pipeline/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compute the path string written into an injected reference.

`transform_path` applies, in a fixed order: query-string split, ``ignore_path``
removal, relativization or root-slash handling, ``add_prefix``, query restore
and ``add_suffix``, and finally the ``versioning`` content hash. It never
raises: odd option combinations degrade to plain string concatenation.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from injectmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from injectmark.config import Config
    from injectmark.config.logging import InjectmarkLogger
    from injectmark.pipeline.types import SourceFile, TargetDocument

logger: InjectmarkLogger = get_logger(__name__)


def to_posix(path: str) -> str:
    """Return ``path`` with forward slashes only."""
    return path.replace("\\", "/")


def add_root_slash(path: str) -> str:
    """Ensure ``path`` starts with ``/``."""
    return path if path.startswith("/") else "/" + path


def remove_root_slash(path: str) -> str:
    """Strip leading ``/`` characters from ``path``."""
    return path.lstrip("/")


def remove_base_path(prefixes: Iterable[str], path: str, *, root_relative: bool = True) -> str:
    """Remove each literal prefix of ``prefixes`` from ``path`` when present.

    In root-relative mode both sides are compared with a leading slash, so
    ``"fixtures"`` and ``"/fixtures"`` strip the same prefix. Otherwise the
    prefix is compared verbatim and one following separator is dropped too.
    A prefix that does not match leaves the path unchanged.

    Args:
        prefixes (Iterable[str]): Prefixes to remove, applied in order.
        path (str): POSIX path to clean.
        root_relative (bool): Whether ``path`` is a root-relative path.

    Returns:
        str: The cleaned path.
    """
    for prefix in prefixes:
        remove: str = to_posix(prefix)
        if not remove:
            continue
        if root_relative:
            remove = add_root_slash(remove).rstrip("/") or "/"
            path = add_root_slash(path)
            if path.startswith(remove):
                path = add_root_slash(path[len(remove) :])
            else:
                logger.debug("ignore_path %r does not prefix %r", prefix, path)
        elif path.startswith(remove):
            path = path[len(remove) :]
            if path.startswith("/") and not remove.endswith("/"):
                path = path[1:]
        else:
            logger.debug("ignore_path %r does not prefix %r", prefix, path)
    return path


def is_url_prefix(prefix: str) -> bool:
    """Return True when ``prefix`` names a scheme or protocol-relative host."""
    return "://" in prefix or prefix.startswith("//")


def add_prefix(prefix: str, path: str) -> str:
    """Join ``prefix`` and ``path`` with exactly one ``/``."""
    return prefix.rstrip("/") + "/" + path.lstrip("/")


def root_relative_path(source: SourceFile) -> str:
    """Return the source path relative to its ``cwd``, as a POSIX string with a leading slash."""
    rel: str = os.path.relpath(source.absolute_path, start=source.cwd)
    return add_root_slash(to_posix(rel))


def target_relative_path(source: SourceFile, target: TargetDocument) -> str:
    """Return the POSIX path from the target document's directory to the source file."""
    target_dir: Path = target.path.parent
    if not target_dir.is_absolute():
        target_dir = source.cwd / target_dir
    return to_posix(os.path.relpath(source.absolute_path, start=target_dir))


def read_source_contents(source: SourceFile) -> bytes | None:
    """Return the source contents, reading the file when they were not provided."""
    if source.contents is not None:
        return source.contents
    try:
        return source.absolute_path.read_bytes()
    except OSError as exc:
        logger.warning("Cannot read %s for versioning: %s", source.bare_path, exc)
        return None


def transform_path(source: SourceFile, target: TargetDocument, config: Config) -> str:
    """Return the path string that references ``source`` from ``target``.

    Args:
        source (SourceFile): The file being referenced.
        target (TargetDocument): The document receiving the reference.
        config (Config): Active configuration.

    Returns:
        str: The final path, used verbatim by the line formatter.
    """
    query: str | None = source.raw_query

    path: str
    if config.relative:
        path = target_relative_path(source, target)
        path = remove_base_path(config.ignore_path, path, root_relative=False)
    else:
        path = root_relative_path(source)
        path = remove_base_path(config.ignore_path, path)
        if config.add_root_slash:
            path = add_root_slash(path)
        else:
            path = remove_root_slash(path)

    if config.add_prefix:
        path = add_prefix(config.add_prefix, path)
        if not config.relative and config.add_root_slash and not is_url_prefix(config.add_prefix):
            path = add_root_slash(path)

    if query:
        path += query
    if config.add_suffix:
        path += config.add_suffix

    if config.versioning is not None:
        contents: bytes | None = read_source_contents(source)
        if contents is not None:
            sep: str = "&" if "?" in path else "?"
            path += f"{sep}{config.versioning.param_name}={config.versioning.digest(contents)}"

    logger.trace("Path for %s in %s: %s", source.path, target.name, path)
    return path
