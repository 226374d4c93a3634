# topmark:header:start
#
#   project      : InjectMark
#   file         : __init__.py
#   file_relpath : src/injectmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InjectMark package.

InjectMark is a build-time reference injector. It locates start/end markers in
template documents and replaces the region between them with references
(script tags, stylesheet links, imports, ...) to a list of source files, and
exposes both a CLI and a small typed API for automation.
"""

from __future__ import annotations

from injectmark.api import Injection, default_line, inject

__all__ = ["Injection", "default_line", "inject"]
