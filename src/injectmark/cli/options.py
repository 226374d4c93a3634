# topmark:header:start
#
#   project      : InjectMark
#   file         : options.py
#   file_relpath : src/injectmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution logic.

Commands stay thin: verbosity and color options are shared by the group,
and the injection option set maps one-to-one onto configuration keys.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import click

from injectmark.cli.errors import InjectmarkUsageError
from injectmark.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v``/``-q`` counts.

    ``-v`` shows the per-target INFO summaries, ``-vv`` DEBUG and ``-vvv`` TRACE
    records; ``-q`` keeps only errors. The default is WARNING.

    Raises:
        InjectmarkUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise InjectmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in output.",
    )(f)


def config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config``."""
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=str),
        help="Load options from this TOML file (repeatable; later files win).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Do not discover injectmark.toml / pyproject.toml in the working directory.",
    )(f)
    return f


def injection_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add one option per injection setting.

    Boolean settings use ``--x/--no-x`` pairs that default to ``None`` so an
    unset flag does not override a configuration file.
    """
    options: list[Callable[[Callable[P, R]], Callable[P, R]]] = [
        click.option("--name", default=None, help="Marker name substituted for {{name}}."),
        click.option(
            "--starttag",
            default=None,
            help="Start marker template (may use {{name}} and {{ext}}).",
        ),
        click.option("--endtag", default=None, help="End marker template."),
        click.option(
            "--ignore-path",
            "ignore_path",
            multiple=True,
            help="Strip this prefix from source paths (repeatable).",
        ),
        click.option(
            "--relative/--no-relative",
            default=None,
            help="Emit paths relative to each target's directory.",
        ),
        click.option("--add-prefix", default=None, help="Prefix joined in front of every path."),
        click.option("--add-suffix", default=None, help="Suffix appended to every path."),
        click.option(
            "--add-root-slash/--no-add-root-slash",
            default=None,
            help="Ensure a leading '/' on root-relative paths (default: on).",
        ),
        click.option(
            "--versioning/--no-versioning",
            default=None,
            help="Append a content hash query parameter to every path.",
        ),
        click.option(
            "--hash",
            "hash_algorithm",
            default=None,
            help="Hash algorithm for --versioning (default: md5).",
        ),
        click.option(
            "--version-param",
            default=None,
            help="Query parameter name for --versioning (default: v).",
        ),
        click.option(
            "--self-closing-tag/--no-self-closing-tag",
            default=None,
            help="Close void elements with ' />'.",
        ),
        click.option(
            "--remove-tags/--no-remove-tags",
            default=None,
            help="Delete marker regions (markers included) instead of filling them.",
        ),
        click.option(
            "--no-summary",
            "no_summary",
            is_flag=True,
            default=None,
            help="Do not log the per-target injection summary.",
        ),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def collect_injection_overrides(
    *,
    name: str | None,
    starttag: str | None,
    endtag: str | None,
    ignore_path: tuple[str, ...],
    relative: bool | None,
    add_prefix: str | None,
    add_suffix: str | None,
    add_root_slash: bool | None,
    versioning: bool | None,
    hash_algorithm: str | None,
    version_param: str | None,
    self_closing_tag: bool | None,
    remove_tags: bool | None,
    no_summary: bool | None,
) -> dict[str, Any]:
    """Return the option mapping for the settings given on the command line.

    Unset options are omitted so configuration file values stay in effect.
    """
    overrides: dict[str, Any] = {
        "name": name,
        "starttag": starttag,
        "endtag": endtag,
        "ignore_path": list(ignore_path) or None,
        "relative": relative,
        "add_prefix": add_prefix,
        "add_suffix": add_suffix,
        "add_root_slash": add_root_slash,
        "self_closing_tag": self_closing_tag,
        "remove_tags": remove_tags,
        "quiet": True if no_summary else None,
    }
    if hash_algorithm is not None or version_param is not None:
        if versioning is False:
            raise InjectmarkUsageError("--hash/--version-param conflict with --no-versioning")
        settings: dict[str, str] = {}
        if hash_algorithm is not None:
            settings["hash"] = hash_algorithm
        if version_param is not None:
            settings["param_name"] = version_param
        overrides["versioning"] = settings
    elif versioning is not None:
        overrides["versioning"] = versioning
    return {k: v for k, v in overrides.items() if v is not None}
