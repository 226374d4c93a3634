# topmark:header:start
#
#   project      : InjectMark
#   file         : test_tag_formatters.py
#   file_relpath : tests/formatters/test_tag_formatters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag formatter registry: default markers per file type and line templates."""

from __future__ import annotations

from pathlib import Path

import pytest

from injectmark import default_line
from injectmark.filetypes.kinds import SourceKind
from injectmark.filetypes.registry import get_tag_formatter_registry
from injectmark.formatters import (
    get_formatter,
    get_formatter_for_extension,
    register_all_formatters,
)
from injectmark.formatters.base import CallableLineFormatter, LineFormatter, TagFormatter
from injectmark.pipeline.types import SourceFile


def _source(name: str) -> SourceFile:
    return SourceFile(path=Path(name), cwd=Path("/project"))


@pytest.mark.parametrize(
    ("file_type", "start", "end"),
    [
        ("html", "<!-- {{name}}:{{ext}} -->", "<!-- endinject -->"),
        ("jsx", "{/* {{name}}:{{ext}} */}", "{/* endinject */}"),
        ("jade", "//- {{name}}:{{ext}}", "//- endinject"),
        ("slm", "/ {{name}}:{{ext}}", "/ endinject"),
        ("haml", "-# {{name}}:{{ext}}", "-# endinject"),
        ("less", "/* {{name}}:{{ext}} */", "/* endinject */"),
        ("scss", "/* {{name}}:{{ext}} */", "/* endinject */"),
        ("sass", "// {{name}}:{{ext}}", "// endinject"),
        ("json", '"{{ext}}": [', "]"),
    ],
)
def test_default_markers(file_type: str, start: str, end: str) -> None:
    """Each file type derives its markers from its comment syntax."""
    formatter: TagFormatter = get_formatter(file_type)
    assert (formatter.start_tag, formatter.end_tag) == (start, end)


def test_every_file_type_has_a_bound_formatter() -> None:
    """Registration binds one formatter instance per file type."""
    register_all_formatters()
    registry: dict[str, TagFormatter] = get_tag_formatter_registry()
    assert set(registry) == {"html", "jsx", "jade", "slm", "haml", "less", "scss", "sass", "json"}
    assert all(f.file_type is not None and f.file_type.name == n for n, f in registry.items())


def test_registration_is_idempotent() -> None:
    """Importing the formatter modules again does not re-register them."""
    register_all_formatters()
    register_all_formatters()
    assert len(get_tag_formatter_registry()) == 9


@pytest.mark.parametrize(
    ("ext", "expected"),
    [("pug", "jade"), ("tsx", "jsx"), ("PHP", "html"), ("txt", "html"), ("", "html")],
)
def test_formatter_lookup_by_extension(ext: str, expected: str) -> None:
    """Unknown extensions fall back to html."""
    formatter: TagFormatter = get_formatter_for_extension(ext)
    assert formatter.file_type is not None and formatter.file_type.name == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("lib.js", '<script src="P"></script>'),
        ("style.css", '<link rel="stylesheet" href="P">'),
        ("component.html", '<link rel="import" href="P">'),
        ("app.jsx", '<script type="text/jsx" src="P"></script>'),
        ("app.coffee", '<script type="text/coffeescript" src="P"></script>'),
        ("logo.PNG", '<img src="P">'),
        ("data.txt", "<!-- P -->"),
    ],
)
def test_html_templates(name: str, expected: str) -> None:
    """HTML line templates per source kind, with a comment fallback."""
    assert get_formatter("html").format_line("P", _source(name)) == expected


def test_self_closing_applies_to_void_elements_only() -> None:
    """self_closing changes <link>/<img>, never <script>."""
    html: TagFormatter = get_formatter("html")
    assert html.format_line("P", _source("a.css"), self_closing=True) == (
        '<link rel="stylesheet" href="P" />'
    )
    assert html.format_line("P", _source("a.js"), self_closing=True) == (
        '<script src="P"></script>'
    )


def test_jsx_always_self_closes() -> None:
    """JSX requires closed void elements."""
    assert get_formatter("jsx").format_line("P", _source("a.gif")) == '<img src="P" />'


@pytest.mark.parametrize(
    ("file_type", "name", "expected"),
    [
        ("jade", "a.css", 'link(rel="stylesheet", href="P")'),
        ("jade", "a.js", 'script(src="P")'),
        ("jade", "a.html", "include P"),
        ("slm", "a.css", 'link rel="stylesheet" href="P"'),
        ("slm", "a.js", 'script src="P"'),
        ("haml", "a.css", '%link{rel:"stylesheet", href:"P"}'),
        ("haml", "a.js", '%script{src:"P"}'),
        ("less", "a.less", '@import "P";'),
        ("scss", "a.css", '@import "P";'),
        ("sass", "a.sass", '@import "P"'),
        ("sass", "a.js", "// P"),
    ],
)
def test_templating_and_stylesheet_templates(file_type: str, name: str, expected: str) -> None:
    """Templating languages and stylesheets use their own syntax."""
    assert get_formatter(file_type).format_line("P", _source(name)) == expected


def test_json_entries_have_commas_except_last() -> None:
    """JSON entries are separated by commas within a group."""
    json_fmt: TagFormatter = get_formatter("json")
    lines: list[str] = [json_fmt.format_line(p, _source(p), i, 3) for i, p in enumerate("abc")]
    assert lines == ['"a",', '"b",', '"c"']


def test_source_kind_from_extension() -> None:
    """The closed kind set has an OTHER arm and is case-insensitive."""
    assert SourceKind.from_extension("JS") is SourceKind.JS
    assert SourceKind.from_extension("webp") is SourceKind.IMAGE
    assert SourceKind.from_extension("xyz") is SourceKind.OTHER


def test_default_line_accepts_type_name_path_or_extension() -> None:
    """default_line resolves its formatter from several target spellings."""
    source: SourceFile = _source("a.js")
    assert default_line("P", source) == '<script src="P"></script>'
    assert default_line("P", source, target="jade") == 'script(src="P")'
    assert default_line("P", source, target=Path("views/page.haml")) == '%script{src:"P"}'
    assert default_line("P", "a.css", target="html", self_closing=True) == (
        '<link rel="stylesheet" href="P" />'
    )


def test_callable_line_formatter_keeps_only_strings() -> None:
    """Non-string results mean 'emit nothing'."""
    fmt: CallableLineFormatter = CallableLineFormatter(lambda p, s, i, n: i if i else p)
    assert isinstance(fmt, LineFormatter)
    assert fmt.format("P", _source("a.js"), 0, 2) == "P"
    assert fmt.format("P", _source("a.js"), 1, 2) is None
