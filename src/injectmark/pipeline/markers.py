# topmark:header:start
#
#   project      : InjectMark
#   file         : markers.py
#   file_relpath : src/injectmark/pipeline/markers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Marker templates and the marker scanner.

A marker pair delimits an injection region::

    <!-- inject:js -->
    <script src="/lib.js"></script>
    <!-- endinject -->

`MarkerSpec` holds the start/end templates (which may embed ``{{name}}`` and
``{{ext}}``); `MarkerScanner` locates every literal pair in a document with a
small finite-state scan over character offsets. Matching is literal, with two
relaxations: a whitespace run in a marker matches zero or more whitespace
characters in the text (``<!--inject:js-->`` matches ``<!-- inject:js -->``),
and letters compare case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from injectmark.config.logging import get_logger
from injectmark.constants import DEFAULT_MARKER_NAME, EXT_PLACEHOLDER, NAME_PLACEHOLDER

logger = get_logger(__name__)


class ScanState(Enum):
    """States of the marker scanner.

    Attributes:
        SEARCHING_START: Looking for the next start marker.
        FOUND_START: A start marker matched; looking for its end marker.
        FOUND_END: At least one complete pair was found (terminal).
        NOT_FOUND: No complete pair exists in the document (terminal).
    """

    SEARCHING_START = "searching_start"
    FOUND_START = "found_start"
    FOUND_END = "found_end"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class MarkerSpec:
    """Start/end marker templates for one injection.

    Attributes:
        name (str | None): Value for ``{{name}}`` (``None`` → ``"inject"``).
        start_pattern (str): Start marker template.
        end_pattern (str): End marker template.
    """

    name: str | None
    start_pattern: str
    end_pattern: str

    def resolve(self, ext: str) -> tuple[str, str]:
        """Substitute the placeholders and return the literal ``(start, end)`` markers.

        Args:
            ext (str): Extension of the source group being injected.

        Returns:
            tuple[str, str]: Literal start and end markers.
        """
        name: str = self.name or DEFAULT_MARKER_NAME
        return (
            self.start_pattern.replace(NAME_PLACEHOLDER, name).replace(EXT_PLACEHOLDER, ext),
            self.end_pattern.replace(NAME_PLACEHOLDER, name).replace(EXT_PLACEHOLDER, ext),
        )


@dataclass(frozen=True)
class MarkerMatch:
    """Offsets of one located marker region.

    ``text[start_index:start_line_end]`` is the start marker and
    ``text[content_end:end_index]`` the end marker. The replaceable body is
    ``text[content_start:content_end]``.

    Attributes:
        start_index (int): Offset of the first character of the start marker.
        start_line_end (int): Offset just past the start marker.
        content_start (int): Offset where the replaceable body starts.
        content_end (int): Offset of the first character of the end marker.
        end_index (int): Offset just past the end marker.
        indentation (str): Whitespace placed before every generated line.
        newline (str): Line break placed before every generated line
            (empty for inline markers).
    """

    start_index: int
    start_line_end: int
    content_start: int
    content_end: int
    end_index: int
    indentation: str = ""
    newline: str = ""

    def __post_init__(self) -> None:
        if not (
            0
            <= self.start_index
            <= self.start_line_end
            <= self.content_start
            <= self.content_end
            <= self.end_index
        ):
            raise ValueError(f"Inconsistent marker offsets: {self}")

    @property
    def separator(self) -> str:
        """Text emitted before each generated line and before the end marker."""
        return self.newline + self.indentation


@dataclass
class ScanResult:
    """Outcome of scanning one document for one marker pair."""

    state: ScanState
    matches: list[MarkerMatch] = field(default_factory=lambda: [])


def match_marker_at(text: str, pos: int, marker: str) -> int | None:
    """Match ``marker`` at ``text[pos:]`` and return the offset just past the match.

    Args:
        text (str): Document text.
        pos (int): Offset where the match must start.
        marker (str): Literal marker (leading/trailing whitespace already stripped).

    Returns:
        int | None: End offset of the match, or ``None`` when the marker does not match.
    """
    i: int = pos
    j: int = 0
    n: int = len(text)
    m: int = len(marker)
    while j < m:
        ch: str = marker[j]
        if ch.isspace():
            while j < m and marker[j].isspace():
                j += 1
            while i < n and text[i].isspace():
                i += 1
            continue
        if i >= n or text[i].lower() != ch.lower():
            return None
        i += 1
        j += 1
    return i


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def find_marker(text: str, marker: str, start: int = 0) -> tuple[int, int] | None:
    """Return ``(begin, end)`` offsets of the first occurrence of ``marker`` at or after ``start``.

    Candidate positions are located with `str.find` on the marker's first
    character (both cases), then confirmed with `match_marker_at`. A marker
    ending in a word character must not run on into another word character,
    so `//- inject:js` does not match inside `//- inject:jsx`.
    """
    if not marker:
        return None
    first: str = marker[0]
    lower: str = first.lower()
    upper: str = first.upper()
    pos: int = start
    n: int = len(text)
    while pos < n:
        a: int = text.find(lower, pos)
        b: int = text.find(upper, pos) if upper != lower else -1
        candidates: list[int] = [c for c in (a, b) if c != -1]
        if not candidates:
            return None
        begin: int = min(candidates)
        end: int | None = match_marker_at(text, begin, marker)
        runs_on: bool = end is not None and end < n and _is_word_char(text[end])
        if end is not None and not (runs_on and _is_word_char(marker[-1])):
            return begin, end
        pos = begin + 1
    return None


def line_indentation(text: str, pos: int) -> str:
    """Return the blanks (spaces and tabs) that open the line containing ``pos``."""
    line_start: int = max(text.rfind("\n", 0, pos), text.rfind("\r", 0, pos)) + 1
    end: int = line_start
    while end < pos and text[end] in " \t":
        end += 1
    return text[line_start:end]


def _split_separator(text: str, start_index: int, run: str) -> tuple[str, str]:
    """Return ``(newline, indentation)`` for a region.

    ``run`` is the whitespace directly after the start marker. Its first line
    break sets the newline style; the indentation is the one of the start
    marker's line.
    """
    first_cr: int = run.find("\r")
    first_lf: int = run.find("\n")
    if first_cr == -1 and first_lf == -1:
        # Inline markers: reuse the run itself between generated items.
        return "", run
    if first_cr != -1 and (first_lf == -1 or first_cr < first_lf):
        newline: str = "\r\n" if run[first_cr : first_cr + 2] == "\r\n" else "\r"
    else:
        newline = "\n"
    return newline, line_indentation(text, start_index)


class MarkerScanner:
    """Finite-state scanner locating every ``start … end`` pair in a document.

    The scan is a single left-to-right pass: SEARCHING_START looks for the
    start marker, FOUND_START looks for the end marker after it, and each
    completed pair resumes the search after its end marker. The scan ends in
    FOUND_END if at least one pair was completed, NOT_FOUND otherwise.
    """

    def __init__(self, start_marker: str, end_marker: str) -> None:
        self.start_marker: str = start_marker.strip()
        self.end_marker: str = end_marker.strip()

    def scan(self, text: str) -> ScanResult:
        """Locate all marker pairs in ``text``.

        Args:
            text (str): Document text.

        Returns:
            ScanResult: Terminal state and the located regions in document order.
        """
        result: ScanResult = ScanResult(state=ScanState.SEARCHING_START)
        if not self.start_marker or not self.end_marker:
            logger.warning("Empty start or end marker; nothing to scan for")
            result.state = ScanState.NOT_FOUND
            return result

        pos: int = 0
        start_index: int = 0
        start_line_end: int = 0
        while result.state in (ScanState.SEARCHING_START, ScanState.FOUND_START):
            if result.state is ScanState.SEARCHING_START:
                hit: tuple[int, int] | None = find_marker(text, self.start_marker, pos)
                if hit is None:
                    result.state = ScanState.FOUND_END if result.matches else ScanState.NOT_FOUND
                    break
                start_index, start_line_end = hit
                result.state = ScanState.FOUND_START
                continue

            hit = find_marker(text, self.end_marker, start_line_end)
            if hit is None:
                logger.debug(
                    "Start marker %r at offset %d has no end marker %r",
                    self.start_marker,
                    start_index,
                    self.end_marker,
                )
                result.state = ScanState.FOUND_END if result.matches else ScanState.NOT_FOUND
                break
            content_end, end_index = hit

            ws_end: int = start_line_end
            while ws_end < content_end and text[ws_end].isspace():
                ws_end += 1
            newline, indentation = _split_separator(
                text, start_index, text[start_line_end:ws_end]
            )

            result.matches.append(
                MarkerMatch(
                    start_index=start_index,
                    start_line_end=start_line_end,
                    content_start=start_line_end,
                    content_end=content_end,
                    end_index=end_index,
                    indentation=indentation,
                    newline=newline,
                )
            )
            logger.trace(
                "Marker pair %r..%r at [%d, %d)",
                self.start_marker,
                self.end_marker,
                start_index,
                end_index,
            )
            pos = end_index
            result.state = ScanState.SEARCHING_START

        return result
