# topmark:header:start
#
#   project      : InjectMark
#   file         : __init__.py
#   file_relpath : src/injectmark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic core helpers shared by the API, the pipeline and the CLI."""

from __future__ import annotations

from injectmark.core.errors import InjectConfigError, InjectError

__all__ = ["InjectConfigError", "InjectError"]
