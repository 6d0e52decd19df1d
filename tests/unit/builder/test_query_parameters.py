"""Unit tests for the parameter store and clause reset."""

import pytest

from sqlstitch import Clause, Query
from sqlstitch.exceptions import InvalidClauseSpecificationError


def test_parameter_store_item_access() -> None:
    q = Query()
    q["user"] = 5
    assert q["user"] == 5
    assert "user" in q
    assert q["missing"] is None
    del q["user"]
    assert "user" not in q


def test_appending_parameters_uses_next_integer_key() -> None:
    q = Query()
    q[None] = "a"
    q[None] = "b"
    assert q.add_parameter("c") == 2
    assert q.parameters() == {0: "a", 1: "b", 2: "c"}


def test_parameters_merge_new_values_win() -> None:
    q = Query()
    q["a"] = 1
    assert q.parameters({"a": 2, "b": 3}) is q
    assert q.parameters() == {"a": 2, "b": 3}


def test_parameters_returns_copy() -> None:
    q = Query()
    q.parameters()["a"] = 1
    assert "a" not in q


def test_clear_single_clause() -> None:
    q = Query("t").where("a", 1).limit(5)
    assert q.clear("where").render() == "SELECT * FROM `t` LIMIT 0, 5"
    assert q.clear(Clause.LIMIT).render() == "SELECT * FROM `t` "


def test_clear_everything() -> None:
    q = Query("t").select("a").where("a", 1).order("a")
    assert q.clear().render() == "SELECT * "


def test_clear_keeps_parameters() -> None:
    q = Query("t")
    q["a"] = 1
    q.clear()
    assert q["a"] == 1


def test_clear_unknown_clause_raises() -> None:
    with pytest.raises(InvalidClauseSpecificationError):
        Query().clear("bogus")
