# topmark:header:start
#
#   project      : InjectMark
#   file         : main.py
#   file_relpath : src/injectmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InjectMark command-line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console from there.
"""

from __future__ import annotations

import click

from injectmark.cli.commands.filetypes import filetypes_command
from injectmark.cli.commands.inject import inject_command
from injectmark.cli.commands.version import version_command
from injectmark.cli.console import ClickConsole
from injectmark.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from injectmark.config.logging import get_logger, resolve_env_log_level, setup_logging
from injectmark.formatters import register_all_formatters

logger = get_logger(__name__)

register_all_formatters()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (logging level & color) on the Click context.

    ``INJECTMARK_LOG_LEVEL`` takes precedence over ``-v``/``-q``.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli
    setup_logging(level=ctx.obj["log_level"])

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="InjectMark: inject references to source files into template documents.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the InjectMark CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'injectmark inject TARGETS... -s PATTERN' to inject sources.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(inject_command)

cli.add_command(filetypes_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
