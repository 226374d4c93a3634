# topmark:header:start
#
#   project      : InjectMark
#   file         : test_injection_properties.py
#   file_relpath : tests/pipeline/test_injection_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property-based tests for whole-document injection."""

from __future__ import annotations

from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from injectmark import inject
from injectmark.pipeline.markers import MarkerScanner
from injectmark.pipeline.types import SourceFile, TargetDocument

ROOT: Path = Path("/project")
SOURCES: list[SourceFile] = [
    SourceFile(path=Path("js/a.js"), cwd=ROOT),
    SourceFile(path=Path("js/b.js"), cwd=ROOT),
]
START: str = "<!-- inject:js -->"
END: str = "<!-- endinject -->"

plain_text = st.text(alphabet="xyz \n\t;{}", max_size=40)
region_body = st.text(alphabet="ab \n\t", max_size=20)


def _run(content: str) -> str:
    (out,) = list(inject(SOURCES)([TargetDocument(path=Path("index.html"), content=content)]))
    return out.content


@settings(max_examples=60, deadline=None)
@given(text=plain_text)
def test_documents_without_markers_pass_through(text: str) -> None:
    """Text that cannot hold a marker is returned byte for byte."""
    assert _run(text) == text


@settings(max_examples=60, deadline=None)
@given(prefix=plain_text, body=region_body, suffix=plain_text)
def test_injection_is_idempotent(prefix: str, body: str, suffix: str) -> None:
    """Injecting into an already injected document changes nothing."""
    once: str = _run(prefix + START + body + END + suffix)
    assert _run(once) == once


@settings(max_examples=60, deadline=None)
@given(prefix=plain_text, body=region_body, suffix=plain_text)
def test_text_outside_the_region_is_preserved(prefix: str, body: str, suffix: str) -> None:
    """Only the bytes between the markers are replaced."""
    result: str = _run(prefix + START + body + END + suffix)
    assert result.startswith(prefix + START)
    assert result.endswith(END + suffix)
    assert result.count('<script src="/js/a.js"></script>') == 1


@settings(max_examples=60, deadline=None)
@given(bodies=st.lists(region_body, min_size=1, max_size=4), gap=plain_text)
def test_scanner_finds_every_region(bodies: list[str], gap: str) -> None:
    """Each well-formed region is reported once, in document order."""
    text: str = gap.join(START + body + END for body in bodies)
    matches = MarkerScanner(START, END).scan(text).matches
    assert len(matches) == len(bodies)
    assert [m.start_index for m in matches] == sorted(m.start_index for m in matches)
