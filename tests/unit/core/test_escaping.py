"""Unit tests for the escaping and quoting primitives."""

from decimal import Decimal

import pytest

from sqlstitch import Expression, StitchConfig
from sqlstitch.core.config import get_default_config
from sqlstitch.core.escaping import (
    Escaper,
    escape,
    like_escape,
    listify,
    literal,
    quote_identifier,
    quote_scalar,
)
from sqlstitch.exceptions import InvalidEscapeArgumentError


def test_escape_is_identity_by_default() -> None:
    assert escape("it's") == "it's"
    assert escape(5) == 5


def test_escape_none_returns_null_expression() -> None:
    result = escape(None)
    assert isinstance(result, Expression)
    assert str(result) == "NULL"


def test_escape_converts_booleans_to_integers() -> None:
    assert escape(True) == 1
    assert escape(False) == 0


def test_escape_with_callable_installs_escaper() -> None:
    assert escape(lambda value: f"<{value}>") is None
    assert escape("x") == "<x>"
    assert get_default_config().escaper is not None


def test_escape_rejects_non_scalar() -> None:
    with pytest.raises(InvalidEscapeArgumentError):
        escape(object())


def test_escaper_rejects_collections() -> None:
    with pytest.raises(InvalidEscapeArgumentError):
        Escaper().escape(["a"])


def test_quote_scalar_wraps_in_single_quotes() -> None:
    assert quote_scalar("abc") == "'abc'"
    assert quote_scalar(5) == "'5'"
    assert quote_scalar(Decimal("1.50")) == "'1.50'"


def test_quote_scalar_null_and_lists() -> None:
    assert quote_scalar(None) == "NULL"
    assert quote_scalar([1, "b", None]) == "'1', 'b', NULL"
    assert listify(("x", "y")) == "'x', 'y'"


def test_quote_scalar_leaves_expressions_unquoted() -> None:
    assert quote_scalar(Expression.raw("NOW()")) == "NOW()"


@pytest.mark.usefixtures("quote_doubling_escaper")
def test_quote_scalar_uses_installed_escaper() -> None:
    assert quote_scalar("it's") == "'it''s'"


def test_quoting_clean_value_twice_is_stable() -> None:
    first = quote_scalar("plain value")
    second = quote_scalar("plain value")
    assert first == second == "'plain value'"


def test_literal_leaves_numbers_bare() -> None:
    assert literal(1) == "1"
    assert literal(2.5) == "2.5"
    assert literal("1") == "'1'"
    assert literal(True) == "'1'"
    assert literal(None) == "NULL"


def test_quote_identifier_splits_on_dots() -> None:
    assert quote_identifier("users") == "`users`"
    assert quote_identifier("db.users") == "`db`.`users`"
    assert quote_identifier(" db . users ") == "`db`.`users`"


def test_quote_identifier_keeps_star() -> None:
    assert quote_identifier("*") == "*"
    assert quote_identifier("u.*") == "`u`.*"


def test_quote_identifier_follows_configured_dialect() -> None:
    escaper = Escaper(StitchConfig(dialect="postgres"))
    assert escaper.quote_identifier("public.users") == '"public"."users"'


def test_like_escape_escapes_wildcards() -> None:
    assert like_escape("50%_off") == "50\\%\\_off"
    assert like_escape("plain") == "plain"


def test_bound_escaper_ignores_default_config() -> None:
    escaper = Escaper(StitchConfig(escaper=lambda value: str(value).upper()))
    assert escaper.quote_scalar("abc") == "'ABC'"
    assert quote_scalar("abc") == "'abc'"


def test_bytes_are_decoded_before_quoting() -> None:
    assert quote_scalar(b"abc") == "'abc'"
    assert escape(b"abc") == "abc"


def test_escaper_receives_decoded_bytes() -> None:
    seen = []
    escaper = Escaper(StitchConfig(escaper=lambda value: seen.append(value) or value))
    escaper.quote_scalar(b"x")
    assert seen == ["x"]
