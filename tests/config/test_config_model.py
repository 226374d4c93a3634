# topmark:header:start
#
#   project      : InjectMark
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model: aliases, merge policy and freeze/thaw."""

from __future__ import annotations

import pytest

from injectmark.config import Config, MutableConfig, Versioning
from injectmark.config.keys import canonical_option_name
from injectmark.core.errors import InjectConfigError


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("ignorePath", "ignore_path"),
        ("addRootSlash", "add_root_slash"),
        ("selfClosingTag", "self_closing_tag"),
        ("remove-tags", "remove_tags"),
        ("startTag", "starttag"),
        ("quiet", "quiet"),
    ],
)
def test_canonical_option_name(raw: str, expected: str) -> None:
    """camelCase and kebab-case spellings normalize to snake_case."""
    assert canonical_option_name(raw) == expected


def test_defaults() -> None:
    """An empty draft freezes to the documented defaults."""
    cfg: Config = MutableConfig.from_defaults().freeze()
    assert cfg.name is None
    assert cfg.ignore_path == ()
    assert cfg.relative is False
    assert cfg.add_root_slash is True
    assert cfg.versioning is None
    assert cfg.self_closing_tag is False
    assert cfg.remove_tags is False
    assert cfg.quiet is False
    assert cfg.transform is None


def test_ignore_path_accepts_a_single_string() -> None:
    """A single ignore path is wrapped into a list."""
    cfg: Config = MutableConfig.from_mapping({"ignorePath": "dist"}).freeze()
    assert cfg.ignore_path == ("dist",)


def test_none_values_mean_unset() -> None:
    """``None`` leaves the option at its default."""
    cfg: Config = MutableConfig.from_mapping({"add_root_slash": None}).freeze()
    assert cfg.add_root_slash is True


def test_merge_prefers_the_higher_layer() -> None:
    """Set values of the later layer win; unset values inherit."""
    low: MutableConfig = MutableConfig.from_mapping(
        {"add_prefix": "low", "relative": True, "ignore_path": ["a"]}
    )
    high: MutableConfig = MutableConfig.from_mapping({"add_prefix": "high"})
    cfg: Config = low.merge_with(high).freeze()
    assert cfg.add_prefix == "high"
    assert cfg.relative is True
    assert cfg.ignore_path == ("a",)


def test_empty_ignore_path_clears_the_lower_layer() -> None:
    """An explicit empty list overrides inherited prefixes, an unset one does not."""
    low: MutableConfig = MutableConfig.from_mapping({"ignore_path": ["dist"]})
    cleared: MutableConfig = low.merge_with(MutableConfig.from_mapping({"ignore_path": []}))
    assert cleared.freeze().ignore_path == ()
    assert low.merge_with(MutableConfig()).freeze().ignore_path == ("dist",)


def test_merge_can_switch_booleans_off() -> None:
    """An explicit ``False`` overrides a lower ``True``."""
    low: MutableConfig = MutableConfig.from_mapping({"add_root_slash": True, "relative": True})
    high: MutableConfig = MutableConfig.from_mapping({"addRootSlash": False, "relative": False})
    cfg: Config = low.merge_with(high).freeze()
    assert cfg.add_root_slash is False
    assert cfg.relative is False


def test_versioning_can_be_disabled_by_a_higher_layer() -> None:
    """``versioning = false`` overrides versioning enabled below it."""
    low: MutableConfig = MutableConfig.from_mapping({"versioning": True})
    high: MutableConfig = MutableConfig.from_mapping({"versioning": False})
    assert low.freeze().versioning == Versioning()
    assert low.merge_with(high).freeze().versioning is None


def test_versioning_mapping() -> None:
    """Both spellings of the parameter name are accepted."""
    cfg: Config = MutableConfig.from_mapping(
        {"versioning": {"hash": "sha1", "paramName": "rev"}}
    ).freeze()
    assert cfg.versioning == Versioning(hash="sha1", param_name="rev")


def test_versioning_digest() -> None:
    """The digest is the hex digest of the configured algorithm."""
    assert Versioning(hash="md5").digest(b"") == "d41d8cd98f00b204e9800998ecf8427e"


def test_empty_param_name_is_rejected() -> None:
    """A versioning parameter needs a name."""
    with pytest.raises(InjectConfigError):
        Versioning(param_name="")


def test_freeze_thaw_round_trip() -> None:
    """Thawing and refreezing keeps every value."""
    cfg: Config = MutableConfig.from_mapping(
        {"name": "head", "ignore_path": ["x", "y"], "quiet": True, "versioning": True}
    ).freeze()
    assert cfg.thaw().freeze() == cfg


def test_frozen_config_is_immutable() -> None:
    """Frozen snapshots reject attribute assignment."""
    cfg: Config = MutableConfig.from_defaults().freeze()
    with pytest.raises(AttributeError):
        cfg.quiet = True  # type: ignore[misc]


def test_callable_transform_is_wrapped() -> None:
    """Plain callables satisfy the line formatter protocol after wrapping."""
    cfg: Config = MutableConfig.from_mapping({"transform": lambda p, s, i, n: p}).freeze()
    assert cfg.transform is not None
    assert hasattr(cfg.transform, "format")


@pytest.mark.parametrize("algo", ["shake_128", "SHAKE_256"])
def test_variable_length_hash_is_rejected(algo: str) -> None:
    """Extendable-output algorithms have no fixed digest to append."""
    with pytest.raises(InjectConfigError, match="Variable-length"):
        Versioning(hash=algo)
