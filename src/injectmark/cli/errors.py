# topmark:header:start
#
#   project      : InjectMark
#   file         : errors.py
#   file_relpath : src/injectmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the InjectMark CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. They prefer the project console when one is stored on the Click
context (see `show()`), and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from injectmark.cli.exit_codes import ExitCode


class InjectmarkError(click.ClickException):
    """Base class for all InjectMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class InjectmarkUsageError(InjectmarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class InjectmarkConfigError(InjectmarkError):
    """Error for configuration errors (invalid TOML, removed or unknown options)."""

    exit_code = ExitCode.CONFIG_ERROR


class InjectmarkFileNotFoundError(InjectmarkError):
    """Error when a target path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class InjectmarkEncodingError(InjectmarkError):
    """Error when a target cannot be decoded as UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class InjectmarkIOError(InjectmarkError):
    """Error for I/O errors reading/writing targets."""

    exit_code = ExitCode.IO_ERROR
