# topmark:header:start
#
#   project      : InjectMark
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML configuration discovery and loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from injectmark.config.io import discover_config_file, load_config_file, load_merged_config
from injectmark.core.errors import InjectConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from injectmark.config import Config


def test_injectmark_toml_is_discovered(tmp_path: Path) -> None:
    """Options sit at the top level of ``injectmark.toml``."""
    (tmp_path / "injectmark.toml").write_text(
        'add-prefix = "static"\nignore-path = ["dist"]\n', encoding="utf-8"
    )
    cfg: Config = load_merged_config(root=tmp_path).freeze()
    assert cfg.add_prefix == "static"
    assert cfg.ignore_path == ("dist",)
    assert cfg.config_files == (str(tmp_path / "injectmark.toml"),)


def test_pyproject_table_is_discovered(tmp_path: Path) -> None:
    """``[tool.injectmark]`` in ``pyproject.toml`` is used when no dedicated file exists."""
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.injectmark]\nselfClosingTag = true\n',
        encoding="utf-8",
    )
    cfg: Config = load_merged_config(root=tmp_path).freeze()
    assert cfg.self_closing_tag is True


def test_pyproject_without_table_is_ignored(tmp_path: Path) -> None:
    """A pyproject without an injectmark table is not a config file."""
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert discover_config_file(tmp_path) is None


def test_dedicated_file_wins_over_pyproject(tmp_path: Path) -> None:
    """``injectmark.toml`` is looked up first."""
    (tmp_path / "injectmark.toml").write_text("quiet = true\n", encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text("[tool.injectmark]\nquiet = false\n", encoding="utf-8")
    assert discover_config_file(tmp_path) == tmp_path / "injectmark.toml"


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    """``no_config`` ignores the discovered file but loads explicit ones."""
    (tmp_path / "injectmark.toml").write_text('add-prefix = "found"\n', encoding="utf-8")
    explicit: Path = tmp_path / "extra.toml"
    explicit.write_text('add-suffix = "?v"\n', encoding="utf-8")
    cfg: Config = load_merged_config(
        root=tmp_path, config_paths=[explicit], no_config=True
    ).freeze()
    assert cfg.add_prefix is None
    assert cfg.add_suffix == "?v"


def test_explicit_files_override_discovered(tmp_path: Path) -> None:
    """Explicit files are merged after the discovered one."""
    (tmp_path / "injectmark.toml").write_text('add-prefix = "found"\n', encoding="utf-8")
    explicit: Path = tmp_path / "extra.toml"
    explicit.write_text('add-prefix = "explicit"\n', encoding="utf-8")
    cfg: Config = load_merged_config(root=tmp_path, config_paths=[explicit]).freeze()
    assert cfg.add_prefix == "explicit"


def test_invalid_toml(tmp_path: Path) -> None:
    """Syntax errors surface as configuration errors."""
    bad: Path = tmp_path / "injectmark.toml"
    bad.write_text("add-prefix = \n", encoding="utf-8")
    with pytest.raises(InjectConfigError, match="Invalid TOML"):
        load_config_file(bad)


def test_missing_file(tmp_path: Path) -> None:
    """Unreadable files surface as configuration errors."""
    with pytest.raises(InjectConfigError, match="Cannot read"):
        load_config_file(tmp_path / "nope.toml")


def test_removed_option_in_file(tmp_path: Path) -> None:
    """Removed options are rejected in files too."""
    bad: Path = tmp_path / "injectmark.toml"
    bad.write_text("sort = true\n", encoding="utf-8")
    with pytest.raises(InjectConfigError, match="sort"):
        load_config_file(bad)
