# topmark:header:start
#
#   project      : InjectMark
#   file         : __init__.py
#   file_relpath : src/injectmark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Injection pipeline: records, marker scanning, path handling, steps and engine.

Submodules are imported explicitly by their users; this package module stays
empty so that low-level modules (`types`, `markers`, `paths`) can be imported
without pulling in the steps.
"""
