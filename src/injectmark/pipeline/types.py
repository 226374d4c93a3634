# topmark:header:start
#
#   project      : InjectMark
#   file         : types.py
#   file_relpath : src/injectmark/pipeline/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Records flowing through the injection pipeline.

`SourceFile` describes one file to reference; `TargetDocument` is one template
whose marker regions receive the references. Both are immutable: a rewritten
target is a new instance sharing the original path.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path, PurePosixPath


def split_query(raw: str) -> tuple[str, str | None]:
    """Split a trailing ``?query`` off a path string.

    Args:
        raw (str): Path string, possibly ending with ``?...`` (e.g. ``lib.js?abc123``).

    Returns:
        tuple[str, str | None]: The bare path and the query (including ``?``), if any.
    """
    idx: int = raw.find("?")
    if idx == -1:
        return raw, None
    return raw[:idx], raw[idx:]


def extension_of(path: str | Path) -> str:
    """Return the lower-cased extension of ``path`` without the leading dot."""
    bare, _ = split_query(str(path))
    return PurePosixPath(bare.replace("\\", "/")).suffix.lstrip(".").lower()


@dataclass(frozen=True)
class SourceFile:
    """A file whose reference is injected into targets.

    Attributes:
        path (Path): Location of the file. May carry a query string
            (``lib.js?abcdef``) for already-hashed assets.
        cwd (Path): Base directory root-relative paths are computed against.
        contents (bytes | None): Raw file contents; only needed for versioning.
    """

    path: Path
    cwd: Path = field(default_factory=Path.cwd)
    contents: bytes | None = None

    @property
    def bare_path(self) -> Path:
        """The path with any query string removed."""
        bare, _ = split_query(str(self.path))
        return Path(bare)

    @property
    def raw_query(self) -> str | None:
        """The query string already present on the path (``?...``), if any."""
        _, query = split_query(str(self.path))
        return query

    @property
    def extension(self) -> str:
        """Lower-cased extension without leading dot (``"js"``, ``"css"``, ...)."""
        return extension_of(self.path)

    @property
    def absolute_path(self) -> Path:
        """The bare path resolved against `cwd` (without touching the filesystem)."""
        bare: Path = self.bare_path
        return bare if bare.is_absolute() else self.cwd / bare


@dataclass(frozen=True)
class TargetDocument:
    """A template document with marker regions.

    Attributes:
        path (Path): Location of the document; determines its file type.
        content (str): Full text of the document.
    """

    path: Path
    content: str

    @property
    def extension(self) -> str:
        """Lower-cased extension without leading dot."""
        return extension_of(self.path)

    @property
    def name(self) -> str:
        """Base name used in log messages."""
        return self.path.name

    def with_content(self, content: str) -> TargetDocument:
        """Return a copy of this document carrying ``content``."""
        return replace(self, content=content)
