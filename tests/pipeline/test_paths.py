# topmark:header:start
#
#   project      : InjectMark
#   file         : test_paths.py
#   file_relpath : tests/pipeline/test_paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path transformation: ignore_path, root slash, prefix/suffix, relative mode, versioning."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from injectmark.config import Config, MutableConfig
from injectmark.pipeline.paths import (
    add_prefix,
    is_url_prefix,
    remove_base_path,
    transform_path,
)
from injectmark.pipeline.types import SourceFile, TargetDocument

if TYPE_CHECKING:
    from collections.abc import Callable

ROOT: Path = Path("/project")
TARGET: TargetDocument = TargetDocument(path=Path("index.html"), content="")


def _config(**options: Any) -> Config:
    return MutableConfig.from_mapping(options).freeze()


def _path(source: str, target: TargetDocument = TARGET, **options: Any) -> str:
    return transform_path(SourceFile(path=Path(source), cwd=ROOT), target, _config(**options))


def test_default_is_root_relative_with_slash() -> None:
    """Paths are relative to the source cwd and start with '/'."""
    assert _path("fixtures/lib.js") == "/fixtures/lib.js"


def test_absolute_source_path_is_made_root_relative() -> None:
    """An absolute path under cwd is expressed relative to cwd."""
    assert _path("/project/fixtures/lib.js") == "/fixtures/lib.js"


def test_ignore_path_strips_prefix() -> None:
    """ignore_path removes the leading directory."""
    assert _path("fixtures/lib.js", ignore_path="fixtures") == "/lib.js"


def test_ignore_path_with_leading_slash_is_equivalent() -> None:
    """'/fixtures' and 'fixtures' strip the same prefix."""
    assert _path("fixtures/lib.js", ignore_path="/fixtures") == "/lib.js"


def test_ignore_path_list_applies_each_prefix() -> None:
    """Each prefix of the list is tried in order."""
    paths: list[str] = [
        _path("fixtures/lib.js", ignore_path=["fixtures", "other"]),
        _path("other/lib.js", ignore_path=["fixtures", "other"]),
    ]
    assert paths == ["/lib.js", "/lib.js"]


def test_ignore_path_not_matching_leaves_path_unchanged() -> None:
    """A non-matching prefix is lenient: no error, no change."""
    assert _path("fixtures/lib.js", ignore_path="elsewhere") == "/fixtures/lib.js"


def test_add_root_slash_false_removes_leading_slash() -> None:
    """add_root_slash=False yields a slash-less path."""
    assert _path("fixtures/lib.js", ignore_path="fixtures", add_root_slash=False) == "lib.js"


def test_prefix_and_suffix_compose() -> None:
    """Prefix joins with one slash, the suffix is appended verbatim."""
    result: str = _path(
        "fixtures/lib.js",
        ignore_path="fixtures",
        add_prefix="my-test-dir",
        add_suffix="?my-test=suffix",
    )
    assert result == "/my-test-dir/lib.js?my-test=suffix"


def test_url_prefix_keeps_scheme() -> None:
    """A URL prefix is not given a root slash."""
    assert _path("fixtures/lib.js", add_prefix="https://cdn.example.com/") == (
        "https://cdn.example.com/fixtures/lib.js"
    )


def test_prefix_without_root_slash() -> None:
    """With add_root_slash=False the prefix starts the path."""
    assert _path("fixtures/lib.js", add_prefix="static", add_root_slash=False) == (
        "static/fixtures/lib.js"
    )


def test_relative_to_target_directory() -> None:
    """relative=True computes the path from the target's directory."""
    target: TargetDocument = TargetDocument(path=Path("fixtures/template.html"), content="")
    assert _path("fixtures/lib.js", target, relative=True) == "lib.js"
    assert _path("src/lib.js", target, relative=True) == "../src/lib.js"


def test_relative_with_ignore_path() -> None:
    """In relative mode ignore_path applies to the relative path."""
    target: TargetDocument = TargetDocument(path=Path("index.html"), content="")
    assert _path("build/js/lib.js", target, relative=True, ignore_path="build") == "js/lib.js"


def test_existing_query_string_is_preserved() -> None:
    """A hash already present in the source path survives, before the suffix."""
    assert _path("fixtures/lib.js?abcdef", add_suffix="&x=1") == "/fixtures/lib.js?abcdef&x=1"


def test_versioning_appends_content_hash() -> None:
    """versioning adds ?v=<md5> computed from the contents."""
    contents: bytes = b"console.log('hi');\n"
    source: SourceFile = SourceFile(path=Path("lib.js"), cwd=ROOT, contents=contents)
    result: str = transform_path(source, TARGET, _config(versioning=True))
    assert result == f"/lib.js?v={hashlib.md5(contents).hexdigest()}"


def test_versioning_uses_ampersand_after_existing_query() -> None:
    """A second query parameter is joined with '&'."""
    source: SourceFile = SourceFile(path=Path("lib.js?abc"), cwd=ROOT, contents=b"x")
    config: Config = _config(versioning={"hash": "sha1", "paramName": "rev"})
    assert transform_path(source, TARGET, config) == (
        f"/lib.js?abc&rev={hashlib.sha1(b'x').hexdigest()}"
    )


def test_versioning_is_deterministic() -> None:
    """Same contents, same path."""
    first: str = transform_path(
        SourceFile(path=Path("a.css"), cwd=ROOT, contents=b"a{}"), TARGET, _config(versioning=True)
    )
    second: str = transform_path(
        SourceFile(path=Path("a.css"), cwd=ROOT, contents=b"a{}"), TARGET, _config(versioning=True)
    )
    assert first == second


def test_versioning_reads_file_when_contents_absent(tmp_path: Path) -> None:
    """Contents are read from disk when not provided."""
    (tmp_path / "lib.js").write_bytes(b"abc")
    source: SourceFile = SourceFile(path=Path("lib.js"), cwd=tmp_path)
    assert transform_path(source, TARGET, _config(versioning=True)).endswith(
        hashlib.md5(b"abc").hexdigest()
    )


def test_versioning_without_contents_logs_and_skips(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """An unreadable source keeps its plain path and logs a warning."""
    caplog.set_level(logging.WARNING)
    source: SourceFile = SourceFile(path=Path("missing.js"), cwd=tmp_path)
    assert transform_path(source, TARGET, _config(versioning=True)) == "/missing.js"
    assert "missing.js" in caplog.text


def test_remove_base_path_non_root_mode() -> None:
    """Verbatim prefix removal drops one following separator."""
    assert remove_base_path(["build"], "build/js/a.js", root_relative=False) == "js/a.js"
    assert remove_base_path(["build/"], "build/js/a.js", root_relative=False) == "js/a.js"


def test_add_prefix_joins_with_single_slash() -> None:
    """Extra slashes on either side collapse to one."""
    assert add_prefix("static/", "/lib.js") == "static/lib.js"


def test_is_url_prefix() -> None:
    """Schemes and protocol-relative prefixes are URLs."""
    check: Callable[[str], bool] = is_url_prefix
    assert check("https://cdn") and check("//cdn") and not check("static")
