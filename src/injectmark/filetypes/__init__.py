# topmark:header:start
#
#   project      : InjectMark
#   file         : __init__.py
#   file_relpath : src/injectmark/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry and matching logic for the target document types supported by InjectMark.

This package maintains the registry of target file types, the closed set of
source kinds used to pick line templates, and the decorator binding tag
formatters to file types.
"""
