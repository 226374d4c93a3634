# topmark:header:start
#
#   project      : InjectMark
#   file         : io.py
#   file_relpath : src/injectmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading InjectMark configuration from:
- a dedicated ``injectmark.toml`` file (options at the top level), and
- the ``[tool.injectmark]`` table of a ``pyproject.toml``.

Parsing is done with `tomlkit` and returned as plain `dict` structures; option
validation is left to `MutableConfig.from_mapping`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from injectmark.config.logging import get_logger
from injectmark.config.model import MutableConfig
from injectmark.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_TABLE,
)
from injectmark.core.errors import InjectConfigError

if TYPE_CHECKING:
    from injectmark.config.logging import InjectmarkLogger

logger: InjectmarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load a TOML file and return a plain Python dict.

    Args:
        path (Path): Path to the TOML file.

    Returns:
        TomlTable: The parsed document, unwrapped from tomlkit containers.

    Raises:
        InjectConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InjectConfigError(f"Cannot read configuration file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise InjectConfigError(f"Invalid TOML in {path}: {exc}") from exc
    logger.debug("Loaded TOML configuration from %s", path)
    return doc.unwrap()


def extract_injectmark_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the InjectMark options table of a parsed configuration file.

    ``pyproject.toml`` keeps the options under ``[tool.injectmark]``; any other
    file holds them at the top level.

    Args:
        path (Path): The file the data was read from (used to detect pyproject files).
        data (TomlTable): The parsed TOML document.

    Returns:
        TomlTable | None: The options table, or ``None`` if a pyproject file has no such table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: object = data.get("tool")
    if not isinstance(tool, dict):
        return None
    table: object = tool.get(PYPROJECT_TOOL_TABLE)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise InjectConfigError(f"[tool.{PYPROJECT_TOOL_TABLE}] in {path} must be a table")
    return table


def discover_config_file(root: Path) -> Path | None:
    """Find the configuration file that applies to ``root``.

    Lookup order: ``injectmark.toml``, then a ``pyproject.toml`` that carries a
    ``[tool.injectmark]`` table. Only ``root`` itself is inspected.

    Args:
        root (Path): Directory to inspect (usually the working directory).

    Returns:
        Path | None: The configuration file, or ``None`` when there is none.
    """
    candidate: Path = root / DEFAULT_TOML_CONFIG_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = root / PYPROJECT_TOML_NAME
    if pyproject.is_file():
        if extract_injectmark_table(pyproject, load_toml_dict(pyproject)) is not None:
            return pyproject
        logger.debug("%s has no [tool.%s] table", pyproject, PYPROJECT_TOOL_TABLE)
    return None


def load_config_file(path: Path) -> MutableConfig:
    """Load one configuration file into a `MutableConfig` draft.

    Args:
        path (Path): The ``injectmark.toml`` or ``pyproject.toml`` to load.

    Returns:
        MutableConfig: The validated draft, with ``config_files`` recording ``path``.

    Raises:
        InjectConfigError: On unreadable files, invalid TOML, or invalid options.
    """
    table: TomlTable | None = extract_injectmark_table(path, load_toml_dict(path))
    draft: MutableConfig = MutableConfig.from_mapping(table or {})
    draft.config_files.append(str(path))
    return draft


def load_merged_config(
    *,
    root: Path | None = None,
    config_paths: list[Path] | None = None,
    no_config: bool = False,
) -> MutableConfig:
    """Merge discovered and explicit configuration files, lowest precedence first.

    Args:
        root (Path | None): Directory used for discovery (default: CWD).
        config_paths (list[Path] | None): Explicit files, merged after the discovered one.
        no_config (bool): Skip discovery (explicit files are still loaded).

    Returns:
        MutableConfig: The merged draft (not frozen; CLI overrides are merged on top).
    """
    merged: MutableConfig = MutableConfig.from_defaults()
    if not no_config:
        found: Path | None = discover_config_file(root or Path.cwd())
        if found is not None:
            merged = merged.merge_with(load_config_file(found))
    for path in config_paths or []:
        merged = merged.merge_with(load_config_file(path))
    logger.debug("Configuration files merged: %s", merged.config_files)
    return merged
