# topmark:header:start
#
#   project      : InjectMark
#   file         : keys.py
#   file_relpath : src/injectmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option names accepted by the configuration layer.

Options are stored under their snake_case name. The camelCase spellings used by
gulp-style build scripts and the kebab-case spellings used in TOML files are
accepted as aliases and normalized by `canonical_option_name`.
"""

from __future__ import annotations

from typing import Final

OPTION_NAMES: Final[frozenset[str]] = frozenset(
    {
        "name",
        "starttag",
        "endtag",
        "ignore_path",
        "relative",
        "add_prefix",
        "add_suffix",
        "add_root_slash",
        "versioning",
        "self_closing_tag",
        "remove_tags",
        "quiet",
        "transform",
    }
)

OPTION_ALIASES: Final[dict[str, str]] = {
    "ignorePath": "ignore_path",
    "addPrefix": "add_prefix",
    "addSuffix": "add_suffix",
    "addRootSlash": "add_root_slash",
    "selfClosingTag": "self_closing_tag",
    "removeTags": "remove_tags",
    "startTag": "starttag",
    "start_tag": "starttag",
    "endTag": "endtag",
    "end_tag": "endtag",
}

# Options that used to exist and are now rejected outright, with the reason shown to the user.
REMOVED_OPTIONS: Final[dict[str, str]] = {
    "sort": "the `sort` option has been removed; sort the sources before passing them in",
    "templateString": (
        "the `templateString` option has been removed; pass the template as a target document"
    ),
    "template_string": (
        "the `template_string` option has been removed; pass the template as a target document"
    ),
}

# Keys inside a `versioning` table.
VERSIONING_HASH_KEY: Final[str] = "hash"
VERSIONING_PARAM_KEYS: Final[tuple[str, ...]] = ("param_name", "paramName", "param-name")


def canonical_option_name(key: str) -> str:
    """Return the snake_case option name for ``key``.

    Args:
        key (str): Option name as written by the caller (snake, camel or kebab case).

    Returns:
        str: The canonical option name (unknown names are returned normalized but unvalidated).
    """
    if key in OPTION_ALIASES:
        return OPTION_ALIASES[key]
    return key.replace("-", "_")
