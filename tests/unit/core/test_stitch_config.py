"""Unit tests for rendering configuration."""

import dataclasses

import pytest

from sqlstitch import StitchConfig, get_default_config, quote_scalar, set_default_config, set_escaper
from sqlstitch.core.config import DEFAULT_DIALECT, reset_default_config
from sqlstitch.exceptions import ImproperConfigurationError, InvalidEscapeArgumentError


def test_default_config() -> None:
    config = get_default_config()
    assert config.escaper is None
    assert config.dialect == DEFAULT_DIALECT == "mysql"
    assert config.union_brackets is True


def test_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        StitchConfig().dialect = "postgres"  # type: ignore[misc]


def test_config_rejects_non_callable_escaper() -> None:
    with pytest.raises(InvalidEscapeArgumentError):
        StitchConfig(escaper="nope")  # type: ignore[arg-type]


def test_config_rejects_unknown_dialect() -> None:
    with pytest.raises(ImproperConfigurationError):
        StitchConfig(dialect="not-a-dialect")


def test_config_replace() -> None:
    config = StitchConfig().replace(union_brackets=False)
    assert config.union_brackets is False
    assert config.dialect == "mysql"


def test_set_escaper_last_call_wins() -> None:
    set_escaper(lambda value: "first")
    set_escaper(lambda value: "second")
    assert quote_scalar("x") == "'second'"


def test_set_escaper_none_restores_identity() -> None:
    set_escaper(lambda value: "changed")
    set_escaper(None)
    assert quote_scalar("x") == "'x'"


def test_set_escaper_rejects_non_callable() -> None:
    with pytest.raises(InvalidEscapeArgumentError):
        set_escaper(42)  # type: ignore[arg-type]


def test_set_and_reset_default_config() -> None:
    config = StitchConfig(dialect="postgres")
    set_default_config(config)
    assert get_default_config() is config
    reset_default_config()
    assert get_default_config().dialect == "mysql"


def test_set_escaper_keeps_other_settings() -> None:
    set_default_config(StitchConfig(dialect="postgres", union_brackets=False))
    set_escaper(str.upper)
    config = get_default_config()
    assert config.escaper is str.upper
    assert config.dialect == "postgres"
    assert config.union_brackets is False
