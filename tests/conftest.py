# topmark:header:start
#
#   project      : InjectMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the InjectMark test suite.

Fixtures build in-memory sources and targets so most tests never touch the
filesystem. Tests should respect the immutable/mutable configuration split:
build drafts with `injectmark.config.MutableConfig` and ``freeze()`` them, or
pass plain keyword options to `injectmark.inject`.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from injectmark import inject
from injectmark.cli.main import cli
from injectmark.config import logging
from injectmark.pipeline.types import SourceFile, TargetDocument

if TYPE_CHECKING:
    from collections.abc import Sequence

# Base directory for in-memory sources; never read from disk.
PROJECT_ROOT: Path = Path("/project")


@pytest.fixture(autouse=True)
def silence_injectmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv("INJECTMARK_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so failing tests show the scanner and step records."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def src(path: str, contents: bytes | None = None, *, cwd: Path = PROJECT_ROOT) -> SourceFile:
    """Return a source relative to ``cwd`` (the project root by default)."""
    return SourceFile(path=Path(path), cwd=cwd, contents=contents)


def doc(path: str, content: str) -> TargetDocument:
    """Return a target document."""
    return TargetDocument(path=Path(path), content=content)


def run_injection(
    sources: Sequence[SourceFile],
    target: TargetDocument,
    **options: Any,
) -> str:
    """Inject ``sources`` into a single target and return the new content."""
    (result,) = list(inject(sources, **options)([target]))
    return result.content


@pytest.fixture
def make_source() -> Callable[..., SourceFile]:
    """Factory fixture for in-memory sources."""
    return src


@pytest.fixture
def make_target() -> Callable[[str, str], TargetDocument]:
    """Factory fixture for target documents."""
    return doc


@pytest.fixture
def injected() -> Callable[..., str]:
    """Fixture exposing `run_injection`."""
    return run_injection


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a CLI test in an isolated project directory.

    The directory holds ``index.html`` with script and stylesheet regions plus
    ``js/a.js``, ``js/b.js`` and ``css/site.css``.
    """
    (tmp_path / "js").mkdir()
    (tmp_path / "css").mkdir()
    (tmp_path / "js" / "a.js").write_text("var a;\n", encoding="utf-8")
    (tmp_path / "js" / "b.js").write_text("var b;\n", encoding="utf-8")
    (tmp_path / "css" / "site.css").write_text("body {}\n", encoding="utf-8")
    (tmp_path / "index.html").write_text(
        "<html>\n"
        "<head>\n"
        "  <!-- inject:css -->\n"
        "  <!-- endinject -->\n"
        "</head>\n"
        "<body>\n"
        "  <!-- inject:js -->\n"
        "  <!-- endinject -->\n"
        "</body>\n"
        "</html>\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def run_cli() -> Callable[[Sequence[str]], Result]:
    """Invoke the Click CLI in the current working directory."""

    def _run(argv: Sequence[str]) -> Result:
        return CliRunner().invoke(cli, list(argv))

    return _run
