# topmark:header:start
#
#   project      : InjectMark
#   file         : __main__.py
#   file_relpath : src/injectmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running InjectMark via ``python -m injectmark``.

It delegates directly to :func:`injectmark.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how InjectMark is launched.

Examples:
    Preview an injection using the module interface::

        python -m injectmark inject index.html -s "src/**/*.js"
"""

from __future__ import annotations

from injectmark.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
