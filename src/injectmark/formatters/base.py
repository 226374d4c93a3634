# topmark:header:start
#
#   project      : InjectMark
#   file         : base.py
#   file_relpath : src/injectmark/formatters/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag formatter base module for InjectMark's injection pipeline.

This module defines the TagFormatter base class, which knows how a target
document type writes comments (its default start/end markers) and how a
reference to each kind of source file looks in that document type (one line
per source). It also defines the `LineFormatter` protocol used for
caller-supplied transforms.
"""

from __future__ import annotations

from string import Template
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from injectmark.config.logging import get_logger
from injectmark.constants import END_MARKER_WORD, EXT_PLACEHOLDER, NAME_PLACEHOLDER
from injectmark.filetypes.kinds import SourceKind
from injectmark.pipeline.markers import MarkerSpec

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from injectmark.config import Config
    from injectmark.config.logging import InjectmarkLogger
    from injectmark.filetypes.base import FileType
    from injectmark.pipeline.types import SourceFile

logger: InjectmarkLogger = get_logger(__name__)


@runtime_checkable
class LineFormatter(Protocol):
    """Caller-supplied replacement for the built-in line templates.

    ``format`` receives the transformed path, the source record, the index of
    the source within its extension group and the group length. Returning
    ``None`` emits nothing for that source.
    """

    def format(self, path: str, source: SourceFile, index: int, length: int) -> str | None:
        """Return the line to inject for ``source``, or ``None`` to skip it."""
        ...


class CallableLineFormatter:
    """Adapt a plain ``(path, source, index, length)`` callable to `LineFormatter`.

    Any non-string return value is treated as "emit nothing".
    """

    def __init__(self, func: Callable[[str, SourceFile, int, int], Any]) -> None:
        self.func = func

    def format(self, path: str, source: SourceFile, index: int, length: int) -> str | None:
        """Call the wrapped function and keep only string results."""
        result: Any = self.func(path, source, index, length)
        if isinstance(result, str):
            return result
        if result is not None:
            logger.debug("Transform returned %r for %s; skipping", type(result).__name__, path)
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.func!r})"


class TagFormatter:
    """Base class for tag formatters that handle specific target file types.

    A *tag formatter* knows, for one concrete
    :class:`~injectmark.filetypes.base.FileType`:

    - its comment syntax (``block_prefix``/``block_suffix``), from which the
      default markers ``<prefix> {{name}}:{{ext}} <suffix>`` and
      ``<prefix> endinject <suffix>`` are derived;
    - one line template per `SourceKind` (``$path`` and ``$close``
      placeholders, see `string.Template`);
    - the fallback for kinds without a template: the path wrapped in a comment.

    The registry binds a formatter instance to a file type at import time
    (``formatter.file_type = ft``).
    """

    file_type: FileType | None = None

    block_prefix: str = ""
    block_suffix: str = ""

    # Line templates keyed by source kind; subclasses provide their own mapping.
    templates: Mapping[SourceKind, str] = {}

    # JSX requires void elements to be closed, regardless of configuration.
    always_self_close: bool = False

    def __init__(self, *, block_prefix: str = "", block_suffix: str = "") -> None:
        """Initialize a TagFormatter instance.

        Args:
            block_prefix: Opening comment delimiter (e.g. ``<!--``).
            block_suffix: Closing comment delimiter (e.g. ``-->``); empty for line comments.
        """
        self.file_type = None
        self.block_prefix = block_prefix
        self.block_suffix = block_suffix

    def wrap_comment(self, text: str) -> str:
        """Wrap ``text`` in this file type's comment delimiters."""
        return " ".join(part for part in (self.block_prefix, text, self.block_suffix) if part)

    @property
    def start_tag(self) -> str:
        """Default start marker template."""
        return self.wrap_comment(f"{NAME_PLACEHOLDER}:{EXT_PLACEHOLDER}")

    @property
    def end_tag(self) -> str:
        """Default end marker template."""
        return self.wrap_comment(END_MARKER_WORD)

    def marker_spec(self, config: Config) -> MarkerSpec:
        """Return the marker templates in effect for ``config``."""
        return MarkerSpec(
            name=config.name,
            start_pattern=config.starttag or self.start_tag,
            end_pattern=config.endtag or self.end_tag,
        )

    def void_close(self, self_closing: bool) -> str:
        """Return the closing sequence of a void element (``>`` or `` />``)."""
        return " />" if (self_closing or self.always_self_close) else ">"

    def template_values(
        self,
        path: str,
        index: int,
        length: int,
        *,
        self_closing: bool,
    ) -> dict[str, str]:
        """Return the substitution values available to line templates."""
        return {"path": path, "close": self.void_close(self_closing)}

    def format_fallback(self, path: str, index: int, length: int) -> str:
        """Render a source kind without template as a comment-wrapped path."""
        return self.wrap_comment(path)

    def format_line(
        self,
        path: str,
        source: SourceFile,
        index: int = 0,
        length: int = 1,
        *,
        self_closing: bool = False,
    ) -> str:
        """Render the reference line for ``source``.

        Args:
            path (str): Transformed path of the source.
            source (SourceFile): The source record (its extension selects the template).
            index (int): Position of the source within its extension group.
            length (int): Size of the extension group.
            self_closing (bool): Close void elements with `` />``.

        Returns:
            str: One line of markup, without indentation or line break.
        """
        kind: SourceKind = SourceKind.from_extension(source.extension)
        template: str | None = self.templates.get(kind)
        if template is None:
            logger.debug(
                "No %s template for source kind %s; using fallback",
                self.file_type.name if self.file_type else self.__class__.__name__,
                kind.value,
            )
            return self.format_fallback(path, index, length)
        values: dict[str, str] = self.template_values(
            path, index, length, self_closing=self_closing
        )
        return Template(template).substitute(values)
