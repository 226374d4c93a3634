# topmark:header:start
#
#   project      : InjectMark
#   file         : test_fail_fast.py
#   file_relpath : tests/api/test_fail_fast.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration errors are raised by `inject` before any target is read."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from injectmark import inject
from injectmark.config import Config, MutableConfig
from injectmark.core.errors import InjectConfigError, InjectError

if TYPE_CHECKING:
    from collections.abc import Callable

    from injectmark.pipeline.types import SourceFile


def test_missing_sources() -> None:
    """A call without sources cannot proceed."""
    with pytest.raises(InjectConfigError, match="Missing sources"):
        inject(None)


@pytest.mark.parametrize("legacy", ["index.html", b"index.html", Path("index.html")])
def test_single_path_sources_are_rejected(legacy: Any) -> None:
    """The legacy ``inject("path")`` form is an error."""
    with pytest.raises(InjectConfigError, match="no longer supported"):
        inject(legacy)


@pytest.mark.parametrize(
    ("options", "fragment"),
    [
        ({"sort": sorted}, "`sort` option has been removed"),
        ({"templateString": "<html>"}, "`templateString` option has been removed"),
        ({"bogus": True}, "Unknown option"),
        ({"transform": "<script>"}, "expects a callable"),
        ({"transform": 42}, "expects a callable"),
        ({"versioning": {"hash": "no-such-hash"}}, "Unsupported versioning hash"),
        ({"versioning": {"hash": "shake_128"}}, "Variable-length hash"),
        ({"versioning": "yes"}, "Invalid versioning value"),
        ({"add_prefix": 3}, "expects a string"),
        ({"ignore_path": [1]}, "expects strings"),
    ],
)
def test_invalid_options(
    make_source: Callable[..., SourceFile], options: dict[str, Any], fragment: str
) -> None:
    """Removed, unknown and ill-typed options fail fast."""
    with pytest.raises(InjectConfigError, match=fragment):
        inject([make_source("a.js")], **options)


@pytest.mark.parametrize("sources", [42, object()])
def test_non_iterable_sources(sources: object) -> None:
    """Anything that cannot be iterated is rejected as a configuration error."""
    with pytest.raises(InjectConfigError, match="Invalid sources"):
        inject(sources)  # type: ignore[arg-type]


def test_invalid_source_item() -> None:
    """Source items must be paths or `SourceFile` records."""
    with pytest.raises(InjectConfigError, match="Invalid source"):
        inject([42])  # type: ignore[list-item]


def test_config_errors_share_a_base_class() -> None:
    """Callers can catch every InjectMark failure with one except clause."""
    assert issubclass(InjectConfigError, InjectError)


def test_keyword_options_override_config(make_source: Callable[..., SourceFile]) -> None:
    """Keyword options take precedence over the ``config`` argument."""
    base: Config = MutableConfig.from_mapping({"add_prefix": "a", "relative": True}).freeze()
    injection = inject([make_source("a.js")], base, add_prefix="b")
    assert injection.config.add_prefix == "b"
    assert injection.config.relative is True


def test_mapping_config_is_validated(make_source: Callable[..., SourceFile]) -> None:
    """A plain mapping goes through the same checks as keyword options."""
    with pytest.raises(InjectConfigError):
        inject([make_source("a.js")], {"sort": True})


def test_sources_are_consumed_once(make_source: Callable[..., SourceFile]) -> None:
    """A generator of sources is drained when the injection is prepared."""
    produced: list[str] = []

    def gen():
        for name in ("a.js", "b.js"):
            produced.append(name)
            yield make_source(name)

    injection = inject(gen())
    assert produced == ["a.js", "b.js"]
    assert [s.path.name for s in injection.sources] == ["a.js", "b.js"]
