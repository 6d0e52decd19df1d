"""Unit tests for ``{:name}`` placeholder substitution."""

from sqlstitch import Expression
from sqlstitch.core.placeholders import has_placeholder, substitute


def test_substitute_replaces_named_token() -> None:
    assert substitute("{:x}", {"x": "v"}) == "v"


def test_substitute_drops_unmatched_tokens_by_default() -> None:
    assert substitute("{:x}", {}) == ""


def test_substitute_keeps_unmatched_tokens_when_asked() -> None:
    assert substitute("{:x}", {}, drop_unmatched=False) == "{:x}"


def test_substitute_quotes_scalars_when_asked() -> None:
    assert substitute("a = {:a} AND b IN ({:b})", {"a": 1, "b": [2, 3]}, quote_scalars=True) == (
        "a = '1' AND b IN ('2', '3')"
    )


def test_substitute_never_quotes_expressions() -> None:
    result = substitute("{:col} = {:val}", {"col": Expression.identifiers("u.id"), "val": 1}, quote_scalars=True)
    assert result == "`u`.`id` = '1'"


def test_substitute_is_case_insensitive_and_accepts_dashes() -> None:
    assert substitute("{:Name}-{:with-dash}", {"Name": "a", "with-dash": "b"}) == "a-b"


def test_substitute_does_not_rescan_substituted_text() -> None:
    assert substitute("{:a}", {"a": "{:b}", "b": "nope"}) == "{:b}"


def test_substitute_matches_integer_keys() -> None:
    assert substitute("{:0}/{:1}", {0: "a", 1: "b"}) == "a/b"


def test_substitute_none_binding() -> None:
    assert substitute("[{:a}]", {"a": None}) == "[]"
    assert substitute("[{:a}]", {"a": None}, quote_scalars=True) == "[NULL]"


def test_has_placeholder() -> None:
    assert has_placeholder("id = {:id}")
    assert not has_placeholder("id = :id")
    assert not has_placeholder(5)
