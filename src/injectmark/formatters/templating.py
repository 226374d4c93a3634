# topmark:header:start
#
#   project      : InjectMark
#   file         : templating.py
#   file_relpath : src/injectmark/formatters/templating.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatters for indentation-based templating languages (Jade/Pug, Slm, Haml).

Each language has its own line-comment token, which is used for the default
markers so the injected region stays invisible in the rendered output:

    //- inject:js        (Jade/Pug)
    / inject:js          (Slm)
    -# inject:js         (Haml)
"""

from __future__ import annotations

from typing import Final

from injectmark.filetypes.kinds import SourceKind
from injectmark.filetypes.registry import register_filetype
from injectmark.formatters.base import TagFormatter

JADE_TEMPLATES: Final[dict[SourceKind, str]] = {
    SourceKind.CSS: 'link(rel="stylesheet", href="$path")',
    SourceKind.HTML: "include $path",
    SourceKind.JS: 'script(src="$path")',
    SourceKind.JSX: 'script(type="text/jsx", src="$path")',
    SourceKind.COFFEE: 'script(type="text/coffeescript", src="$path")',
    SourceKind.IMAGE: 'img(src="$path")',
}

SLM_TEMPLATES: Final[dict[SourceKind, str]] = {
    SourceKind.CSS: 'link rel="stylesheet" href="$path"',
    SourceKind.HTML: 'link rel="import" href="$path"',
    SourceKind.JS: 'script src="$path"',
    SourceKind.JSX: 'script type="text/jsx" src="$path"',
    SourceKind.COFFEE: 'script type="text/coffeescript" src="$path"',
    SourceKind.IMAGE: 'img src="$path"',
}

HAML_TEMPLATES: Final[dict[SourceKind, str]] = {
    SourceKind.CSS: '%link{rel:"stylesheet", href:"$path"}',
    SourceKind.HTML: '%link{rel:"import", href:"$path"}',
    SourceKind.JS: '%script{src:"$path"}',
    SourceKind.JSX: '%script{type:"text/jsx", src:"$path"}',
    SourceKind.COFFEE: '%script{type:"text/coffeescript", src:"$path"}',
    SourceKind.IMAGE: '%img{src:"$path"}',
}


@register_filetype("jade")
class JadeTagFormatter(TagFormatter):
    """Tag formatter for Jade/Pug templates."""

    templates = JADE_TEMPLATES

    def __init__(self) -> None:
        super().__init__(block_prefix="//-")


@register_filetype("slm")
class SlmTagFormatter(TagFormatter):
    """Tag formatter for Slm templates."""

    templates = SLM_TEMPLATES

    def __init__(self) -> None:
        super().__init__(block_prefix="/")


@register_filetype("haml")
class HamlTagFormatter(TagFormatter):
    """Tag formatter for Haml templates."""

    templates = HAML_TEMPLATES

    def __init__(self) -> None:
        super().__init__(block_prefix="-#")
