# topmark:header:start
#
#   project      : InjectMark
#   file         : model.py
#   file_relpath : src/injectmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by processing steps.
    - `MutableConfig`: a mutable builder used while merging TOML files, CLI
      flags and API keyword arguments; it can be frozen into `Config` and
      thawed back for edits.
    - `Versioning`: the resolved content-hash settings.

Immutability:
    - `Config` stores tuples and is ``frozen=True`` to prevent accidental mutation
      while targets are processed. Use `Config.thaw` → edit →
      `MutableConfig.freeze` for safe updates.

Validation:
    - `MutableConfig.from_mapping` is the single gate for option names: removed
      options (``sort``, ``templateString``) and unknown names raise
      `InjectConfigError` before any processing starts.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any, Literal

from injectmark.config.keys import (
    OPTION_NAMES,
    REMOVED_OPTIONS,
    VERSIONING_HASH_KEY,
    VERSIONING_PARAM_KEYS,
    canonical_option_name,
)
from injectmark.config.logging import get_logger
from injectmark.constants import DEFAULT_HASH_ALGORITHM, DEFAULT_VERSION_PARAM
from injectmark.core.errors import InjectConfigError

if TYPE_CHECKING:
    from injectmark.config.logging import InjectmarkLogger
    from injectmark.formatters.base import LineFormatter

logger: InjectmarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Versioning:
    """Content-hash query parameter settings.

    Attributes:
        hash (str): Name of the `hashlib` algorithm used for the digest.
        param_name (str): Query parameter carrying the digest (``?v=<digest>``).
    """

    hash: str = DEFAULT_HASH_ALGORITHM
    param_name: str = DEFAULT_VERSION_PARAM

    def __post_init__(self) -> None:
        if self.hash.lower() not in hashlib.algorithms_available:
            raise InjectConfigError(f"Unsupported versioning hash algorithm: {self.hash!r}")
        if hashlib.new(self.hash.lower()).digest_size == 0:
            raise InjectConfigError(f"Variable-length hash algorithm not supported: {self.hash!r}")
        if not self.param_name:
            raise InjectConfigError("Versioning parameter name must not be empty")

    def digest(self, contents: bytes) -> str:
        """Return the hex digest of ``contents`` using the configured algorithm."""
        hasher = hashlib.new(self.hash.lower())
        hasher.update(contents)
        return hasher.hexdigest()

    @classmethod
    def from_value(cls, value: object) -> Versioning | None:
        """Coerce the user-facing ``versioning`` value.

        Args:
            value (object): ``True``/``False``/``None``, a `Versioning`, or a mapping with
                ``hash`` and ``paramName``/``param_name`` keys.

        Returns:
            Versioning | None: Resolved settings, or ``None`` when versioning is disabled.

        Raises:
            InjectConfigError: If the value has an unsupported shape.
        """
        if value is None or value is False:
            return None
        if value is True:
            return cls()
        if isinstance(value, Versioning):
            return value
        if isinstance(value, Mapping):
            algo: object = value.get(VERSIONING_HASH_KEY, DEFAULT_HASH_ALGORITHM)
            param: object = DEFAULT_VERSION_PARAM
            for key in VERSIONING_PARAM_KEYS:
                if key in value:
                    param = value[key]
                    break
            if not isinstance(algo, str) or not isinstance(param, str):
                raise InjectConfigError(f"Invalid versioning settings: {dict(value)!r}")
            return cls(hash=algo, param_name=param)
        raise InjectConfigError(f"Invalid versioning value: {value!r}")


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for one injection.

    Attributes:
        name (str | None): Marker name substituted for ``{{name}}`` (``None`` → ``"inject"``).
        starttag (str | None): Custom start marker template (``None`` → file-type default).
        endtag (str | None): Custom end marker template (``None`` → file-type default).
        ignore_path (tuple[str, ...]): Literal prefixes stripped from source paths.
        relative (bool): Emit paths relative to the target document's directory.
        add_prefix (str | None): Prefix joined in front of every path.
        add_suffix (str | None): Literal suffix appended to every path.
        add_root_slash (bool): Ensure a leading ``/`` on root-relative paths.
        versioning (Versioning | None): Content-hash query parameter, if enabled.
        self_closing_tag (bool): Close void elements with `` />``.
        remove_tags (bool): Delete marker regions instead of filling them.
        quiet (bool): Suppress the per-target summary log line.
        transform (LineFormatter | None): Caller-supplied line formatter.
        config_files (tuple[str, ...]): Configuration files merged into this snapshot.
    """

    name: str | None = None
    starttag: str | None = None
    endtag: str | None = None
    ignore_path: tuple[str, ...] = ()
    relative: bool = False
    add_prefix: str | None = None
    add_suffix: str | None = None
    add_root_slash: bool = True
    versioning: Versioning | None = None
    self_closing_tag: bool = False
    remove_tags: bool = False
    quiet: bool = False
    transform: LineFormatter | None = None
    config_files: tuple[str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            name=self.name,
            starttag=self.starttag,
            endtag=self.endtag,
            ignore_path=list(self.ignore_path),
            relative=self.relative,
            add_prefix=self.add_prefix,
            add_suffix=self.add_suffix,
            add_root_slash=self.add_root_slash,
            versioning=self.versioning,
            self_closing_tag=self.self_closing_tag,
            remove_tags=self.remove_tags,
            quiet=self.quiet,
            transform=self.transform,
            config_files=list(self.config_files),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Scalar fields use ``None`` to mean "inherit / not set" so layers can be
    merged with `merge_with`; `freeze` resolves the remaining ``None`` values to
    their defaults.
    """

    name: str | None = None
    starttag: str | None = None
    endtag: str | None = None
    # An empty list is an explicit override that clears a lower layer's prefixes.
    ignore_path: list[str] | None = None
    relative: bool | None = None
    add_prefix: str | None = None
    add_suffix: str | None = None
    add_root_slash: bool | None = None
    # ``False`` records an explicit "disabled" so it can override a lower layer.
    versioning: Versioning | Literal[False] | None = None
    self_closing_tag: bool | None = None
    remove_tags: bool | None = None
    quiet: bool | None = None
    transform: LineFormatter | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder with every option unset (defaults apply on freeze)."""
        return cls()

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> MutableConfig:
        """Build a config draft from a plain mapping of options.

        Accepts snake_case, camelCase and kebab-case keys. This is where the
        fail-fast configuration checks live.

        Args:
            options (Mapping[str, Any]): Option mapping from the API, a TOML table or the CLI.

        Returns:
            MutableConfig: The populated builder.

        Raises:
            InjectConfigError: For removed options, unknown options or ill-typed values.
        """
        draft: MutableConfig = cls()
        for raw_key, value in options.items():
            if raw_key in REMOVED_OPTIONS:
                raise InjectConfigError(REMOVED_OPTIONS[raw_key])
            key: str = canonical_option_name(raw_key)
            if key not in OPTION_NAMES:
                raise InjectConfigError(f"Unknown option: {raw_key!r}")
            if value is None:
                continue
            draft._set_option(key, value)
        return draft

    def _set_option(self, key: str, value: Any) -> None:
        if key == "ignore_path":
            self.ignore_path = _as_str_list(key, value)
        elif key == "versioning":
            resolved: Versioning | None = Versioning.from_value(value)
            self.versioning = resolved if resolved is not None else False
        elif key == "transform":
            self.transform = _as_line_formatter(value)
        elif key in ("relative", "add_root_slash", "self_closing_tag", "remove_tags", "quiet"):
            setattr(self, key, bool(value))
        else:
            if not isinstance(value, str):
                raise InjectConfigError(f"Option {key!r} expects a string, got {value!r}")
            setattr(self, key, value)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where set values of ``other`` override this one.

        Args:
            other (MutableConfig): Higher-precedence layer (e.g. CLI over TOML).

        Returns:
            MutableConfig: The merged builder; neither input is modified.
        """
        merged: MutableConfig = MutableConfig()
        for f in fields(self):
            mine: Any = getattr(self, f.name)
            theirs: Any = getattr(other, f.name)
            if f.name == "config_files":
                setattr(merged, f.name, [*mine, *theirs])
            elif f.name == "ignore_path":
                chosen: list[str] | None = theirs if theirs is not None else mine
                setattr(merged, f.name, list(chosen) if chosen is not None else None)
            else:
                setattr(merged, f.name, theirs if theirs is not None else mine)
        return merged

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            name=self.name,
            starttag=self.starttag,
            endtag=self.endtag,
            ignore_path=tuple(p for p in self.ignore_path or () if p),
            relative=bool(self.relative),
            add_prefix=self.add_prefix or None,
            add_suffix=self.add_suffix or None,
            add_root_slash=self.add_root_slash is not False,
            versioning=self.versioning or None,
            self_closing_tag=bool(self.self_closing_tag),
            remove_tags=bool(self.remove_tags),
            quiet=bool(self.quiet),
            transform=self.transform,
            config_files=tuple(self.config_files),
        )


def _as_str_list(key: str, value: object) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, Iterable):
        items: list[str] = []
        for item in value:
            if not isinstance(item, str):
                raise InjectConfigError(f"Option {key!r} expects strings, got {item!r}")
            items.append(item)
        return items
    raise InjectConfigError(f"Option {key!r} expects a string or a list of strings")


def _as_line_formatter(value: object) -> LineFormatter:
    # Imported here: formatters import the config package.
    from injectmark.formatters.base import CallableLineFormatter, LineFormatter

    # `str` has a `format` method and would satisfy the protocol check.
    if isinstance(value, str):
        raise InjectConfigError("Option 'transform' expects a callable, not a string")
    if isinstance(value, LineFormatter):
        return value
    if callable(value):
        return CallableLineFormatter(value)
    raise InjectConfigError(f"Option 'transform' expects a callable, got {value!r}")
