# topmark:header:start
#
#   project      : InjectMark
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InjectMark project automation via Nox (using uv-backed virtualenvs).

Sessions:
  - `qa`: Per-Python session that runs pytest (without the slow markers).
  - `property_test`: Property-based tests only, with more verbose output.
  - `lint`: Ruff on the source and test trees.

Common invocations:
  - `nox -s qa` (runs for all configured Python versions)
  - `nox -s qa -- -k cli` (extra arguments are passed to pytest)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

if sys.version_info >= (3, 11):
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)  # type: ignore[assignment]
else:
    import toml

    _toml_loads = cast("Callable[[str], dict[str, Any]]", toml.loads)  # type: ignore[assignment]

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"
CLASSIFIER_PREFIX: str = "Programming Language :: Python :: "


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from the `pyproject.toml` classifiers.

    Runs at noxfile import time, so it must not depend on project runtime
    dependencies.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    try:
        doc: dict[str, Any] = _toml_loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        doc = {}

    classifiers: object = doc.get("project", {}).get("classifiers")
    versions: set[str] = set()
    if isinstance(classifiers, list):
        for c in cast("list[str]", classifiers):
            if not c.startswith(CLASSIFIER_PREFIX):
                continue
            parts: list[str] = c.removeprefix(CLASSIFIER_PREFIX).strip().split(".")
            if len(parts) == 2 and all(p.isdigit() for p in parts):
                versions.add(f"{int(parts[0])}.{int(parts[1])}")

    if not versions:
        warnings.warn(
            f"No Python versions found in classifiers. Falling back to {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]
    return sorted(versions, key=lambda s: tuple(int(p) for p in s.split(".")))


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "qa"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", "not slow and not hypothesis_slow", *session.posargs)


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the property-based tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "tests/pipeline/test_injection_properties.py", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Run Ruff."""
    session.install("ruff")
    session.run("ruff", "check", "src", "tests", "noxfile.py")
