# topmark:header:start
#
#   project      : InjectMark
#   file         : inject.py
#   file_relpath : src/injectmark/cli/commands/inject.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InjectMark `inject` command.

Fills the marker regions of TARGETS with references to the ``--source`` files.

By default this is a dry run: each target is reported and the command exits
with ``WOULD_CHANGE`` (2) when at least one target would be rewritten. Use
``--apply`` to write the targets in place, ``--diff`` to preview a unified
diff and ``--stdout`` to print the rewritten documents.

Examples:
    injectmark inject index.html -s "js/**/*.js" -s "css/*.css"
    injectmark inject index.html -s "js/*.js" --ignore-path js --add-prefix /static --apply
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from injectmark.api import inject
from injectmark.cli.console import ClickConsole, get_console
from injectmark.cli.errors import (
    InjectmarkConfigError,
    InjectmarkEncodingError,
    InjectmarkFileNotFoundError,
    InjectmarkIOError,
)
from injectmark.cli.exit_codes import ExitCode
from injectmark.cli.options import collect_injection_overrides, config_options, injection_options
from injectmark.cli.sources import resolve_source_paths
from injectmark.config import MutableConfig
from injectmark.config.io import load_merged_config
from injectmark.config.logging import get_logger
from injectmark.core.diagnostics import compute_diagnostic_stats
from injectmark.core.errors import InjectConfigError
from injectmark.pipeline.status import RewriteStatus
from injectmark.pipeline.types import SourceFile, TargetDocument
from injectmark.utils.diff import render_patch, unified_patch

if TYPE_CHECKING:
    from injectmark.api import Injection
    from injectmark.config.logging import InjectmarkLogger
    from injectmark.core.diagnostics import DiagnosticStats
    from injectmark.pipeline.context import ProcessingContext
    from injectmark.pipeline.status import ColoredStrEnum

logger: InjectmarkLogger = get_logger(__name__)


def read_target(path: Path) -> TargetDocument:
    """Read a target document, preserving its line endings.

    Raises:
        InjectmarkFileNotFoundError: If ``path`` is missing or not a file.
        InjectmarkEncodingError: If the file is not valid UTF-8.
        InjectmarkIOError: For other read errors.
    """
    if not path.is_file():
        raise InjectmarkFileNotFoundError(f"Target not found: {path}")
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            return TargetDocument(path=path, content=fh.read())
    except UnicodeDecodeError as exc:
        raise InjectmarkEncodingError(f"Cannot decode {path} as UTF-8: {exc}") from exc
    except OSError as exc:
        raise InjectmarkIOError(f"Cannot read {path}: {exc}") from exc


def write_target(doc: TargetDocument) -> None:
    """Write a rewritten document back to its path.

    Raises:
        InjectmarkIOError: If the file cannot be written.
    """
    try:
        with doc.path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(doc.content)
    except OSError as exc:
        raise InjectmarkIOError(f"Cannot write {doc.path}: {exc}") from exc


def _summary_line(console: ClickConsole, ctx: ProcessingContext, *, apply: bool) -> str:
    status: ColoredStrEnum = ctx.status.rewrite
    if status == RewriteStatus.SKIPPED:
        status = ctx.status.locate
    label: str = status.value
    if ctx.changed and apply:
        label = "injected"
    styled: str = status.color(label) if console.enable_color else label
    line: str = f"{ctx.target.path}: {styled} ({ctx.injected} line(s))"
    stats: DiagnosticStats = compute_diagnostic_stats(ctx.diagnostics)
    if stats.n_warning:
        line += f", {stats.n_warning} warning(s)"
    return line


def _print_diagnostics(console: ClickConsole, ctx: ProcessingContext) -> None:
    for diag in ctx.diagnostics:
        console.print("  " + diag.render(color=console.enable_color))


@click.command(
    name="inject",
    help="Inject references to source files into the marker regions of TARGETS.",
)
@click.argument(
    "targets",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@click.option(
    "-s",
    "--source",
    "source_patterns",
    multiple=True,
    required=True,
    help="Source file or glob, in injection order (repeatable).",
)
@click.option(
    "--exclude",
    "exclude_patterns",
    multiple=True,
    help="Skip sources matching this .gitignore-style pattern (repeatable).",
)
@config_options
@injection_options
@click.option("--apply", is_flag=True, default=False, help="Write targets in place.")
@click.option("--diff", "show_diff", is_flag=True, default=False, help="Show a unified diff.")
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    default=False,
    help="Print the rewritten documents instead of the per-target summary.",
)
@click.pass_context
def inject_command(
    ctx: click.Context,
    *,
    targets: tuple[Path, ...],
    source_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    apply: bool,
    show_diff: bool,
    to_stdout: bool,
    **injection_flags: Any,
) -> None:
    """Run the injection over TARGETS.

    Args:
        ctx (click.Context): Click context (holds the console).
        targets (tuple[Path, ...]): Target documents, processed in order.
        source_patterns (tuple[str, ...]): Source paths or globs.
        exclude_patterns (tuple[str, ...]): gitwildmatch patterns removing sources.
        config_paths (tuple[str, ...]): Explicit TOML configuration files.
        no_config (bool): Disable configuration discovery.
        apply (bool): Write rewritten targets in place.
        show_diff (bool): Print a colored unified diff per changed target.
        to_stdout (bool): Print rewritten documents.
        **injection_flags (Any): Injection settings (see `injection_options`).
    """
    console: ClickConsole = get_console(ctx)
    show_diagnostics: bool = ctx.obj.get("log_level", logging.WARNING) <= logging.INFO
    cwd: Path = Path.cwd()

    try:
        draft: MutableConfig = load_merged_config(
            root=cwd,
            config_paths=[Path(p) for p in config_paths],
            no_config=no_config,
        )
        overrides: dict[str, Any] = collect_injection_overrides(**injection_flags)
        draft = draft.merge_with(MutableConfig.from_mapping(overrides))
    except InjectConfigError as exc:
        raise InjectmarkConfigError(str(exc)) from exc

    files, unmatched = resolve_source_paths(
        source_patterns, exclude_patterns=exclude_patterns, cwd=cwd
    )
    for pattern in unmatched:
        console.warn(f"No source matches {pattern!r}")

    try:
        injection: Injection = inject(
            [SourceFile(path=p, cwd=cwd) for p in files],
            config=draft,
        )
    except InjectConfigError as exc:
        raise InjectmarkConfigError(str(exc)) from exc

    # Fail on a missing target before anything is written.
    documents: list[TargetDocument] = [read_target(t) for t in targets]

    would_change: bool = False
    for result in injection.contexts(documents):
        if result.changed:
            would_change = True
            if show_diff:
                patch: list[str] = unified_patch(
                    result.target.content, result.result.content, str(result.target.path)
                )
                rendered: str = render_patch(patch) if console.enable_color else "".join(patch)
                console.print(rendered, nl=False)
            if apply:
                write_target(result.result)
        if to_stdout:
            console.print(result.result.content, nl=False)
        else:
            console.print(_summary_line(console, result, apply=apply))
            if show_diagnostics:
                _print_diagnostics(console, result)

    if would_change and not apply:
        ctx.exit(ExitCode.WOULD_CHANGE)
