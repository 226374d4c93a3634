# topmark:header:start
#
#   project      : InjectMark
#   file         : __init__.py
#   file_relpath : src/injectmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public configuration surface for InjectMark.

Build drafts with `MutableConfig` (from defaults, a mapping, or TOML files),
then `freeze()` them into an immutable `Config` for processing.
"""

from __future__ import annotations

from injectmark.config.model import Config, MutableConfig, Versioning

__all__ = ["Config", "MutableConfig", "Versioning"]
