# topmark:header:start
#
#   project      : InjectMark
#   file         : version.py
#   file_relpath : src/injectmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InjectMark `version` command."""

from __future__ import annotations

import click

from injectmark.cli.console import ClickConsole, get_console
from injectmark.constants import INJECTMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of InjectMark.",
)
def version_command() -> None:
    """Print the InjectMark version installed in the active environment."""
    console: ClickConsole = get_console(click.get_current_context())
    console.print(console.styled(INJECTMARK_VERSION, bold=True))
