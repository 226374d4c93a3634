# topmark:header:start
#
#   project      : InjectMark
#   file         : constants.py
#   file_relpath : src/injectmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InjectMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

INJECTMARK_VERSION: str = get_version("injectmark")

# Configuration discovery
DEFAULT_TOML_CONFIG_NAME: str = "injectmark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "injectmark"

# Marker templates
NAME_PLACEHOLDER: str = "{{name}}"
EXT_PLACEHOLDER: str = "{{ext}}"
DEFAULT_MARKER_NAME: str = "inject"
END_MARKER_WORD: str = "endinject"

# Versioning (content hash appended as a query parameter)
DEFAULT_HASH_ALGORITHM: str = "md5"
DEFAULT_VERSION_PARAM: str = "v"
