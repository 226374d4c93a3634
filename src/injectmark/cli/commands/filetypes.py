# topmark:header:start
#
#   project      : InjectMark
#   file         : filetypes.py
#   file_relpath : src/injectmark/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""InjectMark `filetypes` command.

Lists the target document types, the extensions they claim and their default
markers. Targets with any other extension are handled as ``html``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from injectmark.cli.console import ClickConsole, get_console
from injectmark.filetypes.instances import get_file_type_registry
from injectmark.formatters import get_formatter

if TYPE_CHECKING:
    from injectmark.filetypes.base import FileType
    from injectmark.formatters.base import TagFormatter


@click.command(
    name="filetypes",
    help="List supported target file types.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Emit a JSON array instead of a table.",
)
def filetypes_command(*, as_json: bool = False) -> None:
    """List target file types with their extensions and default markers.

    Args:
        as_json (bool): Emit machine-readable JSON.
    """
    console: ClickConsole = get_console(click.get_current_context())
    file_types: dict[str, FileType] = get_file_type_registry()

    rows: list[dict[str, Any]] = []
    for name, ft in file_types.items():
        formatter: TagFormatter = get_formatter(name)
        rows.append(
            {
                "name": name,
                "extensions": list(ft.extensions),
                "starttag": formatter.start_tag,
                "endtag": formatter.end_tag,
                "description": ft.description,
            }
        )

    if as_json:
        console.print(json.dumps(rows, indent=2))
        return

    width: int = max(len(r["name"]) for r in rows)
    for r in rows:
        exts: str = ", ".join(f".{e}" for e in r["extensions"])
        console.print(f"{console.styled(r['name'].ljust(width), bold=True)}  {exts}")
        console.print(f"{' ' * width}  {r['starttag']} ... {r['endtag']}")
