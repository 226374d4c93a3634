# topmark:header:start
#
#   project      : InjectMark
#   file         : api.py
#   file_relpath : src/injectmark/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public InjectMark API (stable surface).

This module exposes a **small, typed API** for integrations that want to run
injections programmatically without going through the CLI.

Usage
-----
```python
from pathlib import Path

from injectmark import inject
from injectmark.pipeline.types import SourceFile, TargetDocument

injection = inject(
    [SourceFile(Path("lib.js")), SourceFile(Path("style.css"))],
    add_prefix="https://cdn.example.com",
)
page = TargetDocument(Path("index.html"), Path("index.html").read_text())
for doc in injection([page]):
    print(doc.content)
```

Configuration contract
----------------------
- `inject` accepts either a frozen [`injectmark.config.Config`][], a
  [`injectmark.config.MutableConfig`][] draft, or a plain mapping, plus keyword
  options. Keyword options override the ``config`` argument.
- Options use snake_case; the camelCase spellings (``ignorePath``,
  ``addRootSlash``, ...) are accepted as aliases.
- Every configuration problem raises `InjectConfigError` from `inject` itself,
  before any target is read.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from injectmark.config import Config, MutableConfig
from injectmark.config.logging import get_logger
from injectmark.core.errors import InjectConfigError
from injectmark.filetypes.registry import get_tag_formatter_registry
from injectmark.formatters import (
    get_formatter,
    get_formatter_for_extension,
    register_all_formatters,
)
from injectmark.pipeline.engine import SourceCollector, run_steps_for_targets
from injectmark.pipeline.types import SourceFile, TargetDocument

if TYPE_CHECKING:
    from collections.abc import Iterator

    from injectmark.config.logging import InjectmarkLogger
    from injectmark.formatters.base import TagFormatter
    from injectmark.pipeline.context import ProcessingContext

logger: InjectmarkLogger = get_logger(__name__)

__all__: list[str] = [
    "Injection",
    "default_line",
    "inject",
]


class Injection:
    """A prepared injection: a complete source list and a frozen configuration.

    Calling the instance with an iterable of targets yields the rewritten
    targets lazily, one per input, in input order. The same instance may be
    applied to any number of target streams.
    """

    def __init__(self, collector: SourceCollector, config: Config) -> None:
        self._collector: SourceCollector = collector
        self._config: Config = config

    @property
    def config(self) -> Config:
        """The effective configuration."""
        return self._config

    @property
    def sources(self) -> tuple[SourceFile, ...]:
        """The complete source list."""
        return self._collector.sources

    def contexts(self, targets: Iterable[TargetDocument]) -> Iterator[ProcessingContext]:
        """Yield the full processing context of each target (status, diagnostics, result)."""
        return run_steps_for_targets(
            targets=_checked_targets(targets),
            collector=self._collector,
            config=self._config,
        )

    def __call__(self, targets: Iterable[TargetDocument]) -> Iterator[TargetDocument]:
        """Yield each target with its marker regions filled (or removed).

        Targets without matching markers are yielded unchanged.
        """
        for ctx in self.contexts(targets):
            yield ctx.result

    def __repr__(self) -> str:
        return f"Injection(sources={len(self._collector)}, config={self._config!r})"


def _checked_targets(targets: Iterable[TargetDocument]) -> Iterator[TargetDocument]:
    for target in targets:
        if not isinstance(target, TargetDocument):
            raise TypeError(f"Expected a TargetDocument, got {type(target).__name__}")
        yield target


def _as_source(item: object) -> SourceFile:
    if isinstance(item, SourceFile):
        return item
    if isinstance(item, (str, Path)):
        return SourceFile(path=Path(item))
    raise InjectConfigError(f"Invalid source: {item!r}")


def _resolve_config(config: Config | MutableConfig | Mapping[str, Any] | None) -> MutableConfig:
    if config is None:
        return MutableConfig.from_defaults()
    if isinstance(config, Config):
        return config.thaw()
    if isinstance(config, MutableConfig):
        return config
    if isinstance(config, Mapping):
        return MutableConfig.from_mapping(config)
    raise InjectConfigError(f"Invalid config: {config!r}")


def inject(
    sources: Iterable[SourceFile | str | Path] | None,
    config: Config | MutableConfig | Mapping[str, Any] | None = None,
    **options: Any,
) -> Injection:
    """Prepare an injection of ``sources``.

    The source iterable is consumed completely here; it is the "source list
    ready" barrier for every target processed afterwards.

    Args:
        sources (Iterable[SourceFile | str | Path] | None): Ordered source files.
            Plain paths are wrapped in `SourceFile` relative to the current directory.
        config (Config | MutableConfig | Mapping[str, Any] | None): Base configuration.
        **options (Any): Option overrides (``ignore_path``, ``relative``, ``add_prefix``,
            ``add_suffix``, ``add_root_slash``, ``versioning``, ``self_closing_tag``,
            ``remove_tags``, ``quiet``, ``starttag``, ``endtag``, ``name``, ``transform``).

    Returns:
        Injection: Callable applying the injection to target streams.

    Raises:
        InjectConfigError: If sources are missing, given in the legacy single
            path form, or if an option is removed, unknown or ill-typed.
    """
    if sources is None:
        raise InjectConfigError("Missing sources: pass an iterable of source files")
    if isinstance(sources, (str, bytes, Path)):
        raise InjectConfigError(
            "A single path as sources is no longer supported; "
            "pass the source files and apply the injection to the targets instead"
        )
    if not isinstance(sources, Iterable):
        raise InjectConfigError(f"Invalid sources: expected an iterable, got {sources!r}")

    draft: MutableConfig = _resolve_config(config).merge_with(MutableConfig.from_mapping(options))
    frozen: Config = draft.freeze()

    collector: SourceCollector = SourceCollector()
    collector.extend(_as_source(item) for item in sources)
    collector.close()
    logger.debug("Prepared injection of %d source(s)", len(collector))
    return Injection(collector, frozen)


def _formatter_for(target: str | Path | TargetDocument) -> TagFormatter:
    if isinstance(target, TargetDocument):
        return get_formatter_for_extension(target.extension)
    register_all_formatters()
    if isinstance(target, str) and target in get_tag_formatter_registry():
        return get_formatter(target)
    return get_formatter_for_extension(str(target).rsplit(".", 1)[-1])


def default_line(
    path: str,
    source: SourceFile | str | Path,
    index: int = 0,
    length: int = 1,
    *,
    target: str | Path | TargetDocument = "html",
    self_closing: bool = False,
) -> str:
    """Render ``path`` with the built-in line template.

    Custom transforms can decorate the path and delegate the markup to this
    function.

    Args:
        path (str): The path to place in the line.
        source (SourceFile | str | Path): The source; its extension selects the template.
        index (int): Position within the source group (matters for JSON targets).
        length (int): Size of the source group.
        target (str | Path | TargetDocument): File type name (``"jade"``), target
            extension, target path or document.
        self_closing (bool): Close void elements with `` />``.

    Returns:
        str: The formatted line.
    """
    formatter: TagFormatter = _formatter_for(target)
    return formatter.format_line(
        path,
        _as_source(source),
        index,
        length,
        self_closing=self_closing,
    )
