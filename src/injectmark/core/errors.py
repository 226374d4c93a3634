# topmark:header:start
#
#   project      : InjectMark
#   file         : errors.py
#   file_relpath : src/injectmark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for InjectMark.

Only the *fatal* tier raises: configuration problems are detected when an
injection is set up, before any target document is read. Soft failures
(missing markers, non-matching ``ignore_path``, a transform returning nothing)
never raise; they are logged and recorded as diagnostics on the processing
context instead.

The CLI maps these onto Click exceptions with stable exit codes
(see `injectmark.cli.errors`).
"""

from __future__ import annotations


class InjectError(Exception):
    """Base class for all InjectMark library errors."""


class InjectConfigError(InjectError, ValueError):
    """Invalid or unsupported injection configuration.

    Raised for a missing sources argument, the legacy "target path as string"
    calling form, removed options (``sort``, ``templateString``) and unknown
    option names.
    """
