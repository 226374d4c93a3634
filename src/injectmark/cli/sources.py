# topmark:header:start
#
#   project      : InjectMark
#   file         : sources.py
#   file_relpath : src/injectmark/cli/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve ``--source`` patterns into an ordered list of source files.

Each pattern is either a plain path or a glob (``**`` recurses), expanded
relative to the working directory. Order matters for injection: patterns are
expanded in the order given, matches of one glob are sorted, and a file
matched twice keeps its first position. ``--exclude`` patterns use
.gitignore semantics (pathspec's ``gitwildmatch``) against the POSIX path
relative to the working directory.
"""

from __future__ import annotations

import glob
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from injectmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from injectmark.config.logging import InjectmarkLogger

logger: InjectmarkLogger = get_logger(__name__)

_GLOB_CHARS: str = "*?["


def _expand_pattern(pattern: str, cwd: Path) -> list[Path]:
    if not any(ch in pattern for ch in _GLOB_CHARS):
        candidate: Path = Path(pattern)
        full: Path = candidate if candidate.is_absolute() else cwd / candidate
        return [candidate] if full.is_file() else []
    matches: list[str] = glob.glob(pattern, root_dir=cwd, recursive=True)
    return [Path(m) for m in sorted(matches) if (cwd / m).is_file()]


def _relposix(path: Path, cwd: Path) -> str:
    if path.is_absolute():
        try:
            return path.relative_to(cwd).as_posix()
        except ValueError:
            return path.as_posix()
    return path.as_posix()


def resolve_source_paths(
    patterns: Iterable[str],
    *,
    exclude_patterns: Iterable[str] = (),
    cwd: Path | None = None,
) -> tuple[list[Path], list[str]]:
    """Expand source patterns in order, then drop excluded files.

    Args:
        patterns (Iterable[str]): Paths or globs, in injection order.
        exclude_patterns (Iterable[str]): gitwildmatch patterns of files to skip.
        cwd (Path | None): Base directory (default: the current directory).

    Returns:
        tuple[list[Path], list[str]]: The ordered, de-duplicated files and the
            patterns that matched nothing.
    """
    base: Path = cwd or Path.cwd()
    excludes: list[str] = [p for p in exclude_patterns if p.strip()]
    spec: PathSpec | None = (
        PathSpec.from_lines(GitWildMatchPattern, excludes) if excludes else None
    )

    files: list[Path] = []
    seen: set[str] = set()
    unmatched: list[str] = []
    for pattern in patterns:
        matched: list[Path] = _expand_pattern(pattern, base)
        if not matched:
            unmatched.append(pattern)
            continue
        for path in matched:
            key: str = _relposix(path, base)
            if key in seen:
                continue
            seen.add(key)
            if spec is not None and spec.match_file(key):
                logger.debug("Excluded source %s", key)
                continue
            files.append(path)
    logger.debug("Resolved %d source file(s)", len(files))
    return files, unmatched
