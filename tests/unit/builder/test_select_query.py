"""Unit tests for SELECT statements."""

import pytest

from sqlstitch import Expression, Query, StatementKind, StitchConfig, query, set_escaper


def test_select_all_from_table() -> None:
    assert Query("users").render() == "SELECT * FROM `users` "


def test_select_where_renders_quoted_value() -> None:
    assert Query("users").where("id", 5).render() == "SELECT * FROM `users` WHERE `id` = '5' "


def test_query_factory() -> None:
    assert query("users").kind is StatementKind.SELECT
    assert str(query("users")) == "SELECT * FROM `users` "


def test_select_columns_and_aliases() -> None:
    sql = Query("users").select(["id", "name"]).select({"mail": "email"}).render()
    assert sql == "SELECT `id`, `name`, `email` AS `mail` FROM `users` "


def test_select_alias_is_replaced() -> None:
    sql = Query("t").select({"x": "a"}).select({"x": "b"}).render()
    assert sql == "SELECT `b` AS `x` FROM `t` "


def test_select_expression_is_bracketed() -> None:
    sql = Query("t").select({"total": Expression.raw("COUNT(*)")}).render()
    assert sql == "SELECT (COUNT(*)) AS `total` FROM `t` "


def test_select_without_table() -> None:
    assert Query().select(Expression.raw("1")).render() == "SELECT (1) "


def test_from_aliased_tables_and_subquery() -> None:
    sql = Query({"u": "db.users", "s": Query("sessions")}).render()
    assert sql == "SELECT * FROM `db`.`users` AS `u`, (SELECT * FROM `sessions`) AS `s` "


def test_where_conditions_accumulate() -> None:
    sql = Query("t").where("a", 1).where({"b": 2}).where("c > {:min}", {"min": 3}).render()
    assert sql == "SELECT * FROM `t` WHERE `a` = '1' AND `b` = '2' AND (c > '3') "


def test_where_or_group() -> None:
    sql = Query("t").where(["OR", ("a", 1), ("b", 2)]).render()
    assert sql == "SELECT * FROM `t` WHERE `a` = '1' OR `b` = '2' "


def test_where_like_expression() -> None:
    sql = Query("users").where(Expression.starts_like("jo", "name")).render()
    assert sql == "SELECT * FROM `users` WHERE (`name` LIKE 'jo%') "


def test_where_callback_reads_parameters() -> None:
    q = Query("t").where(lambda context: f"owner_id = {context['owner']}")
    q["owner"] = 9
    assert q.render() == "SELECT * FROM `t` WHERE (owner_id = 9) "


def test_group_having_order_limit() -> None:
    sql = (
        Query("t")
        .select("a")
        .select({"n": Expression.raw("COUNT(*)")})
        .group("a")
        .having("n > {:min}", {"min": 1})
        .order("a", "desc")
        .order("b", collate="utf8mb4_bin")
        .limit(10, 20)
        .render()
    )
    assert sql == (
        "SELECT `a`, (COUNT(*)) AS `n` FROM `t` GROUP BY a HAVING (n > '1') "
        "ORDER BY a DESC, b COLLATE utf8mb4_bin LIMIT 20, 10"
    )


def test_order_ignores_unknown_direction() -> None:
    assert Query("t").order("a", "sideways").render() == "SELECT * FROM `t` ORDER BY a "


def test_limit_without_offset_and_removal() -> None:
    q = Query("t").limit(5)
    assert q.render() == "SELECT * FROM `t` LIMIT 0, 5"
    assert q.limit().render() == "SELECT * FROM `t` "


def test_last_kind_wins() -> None:
    assert Query("t").delete().select().render() == "SELECT * FROM `t` "


def test_builder_config_escaper() -> None:
    q = Query("t", config=StitchConfig(escaper=lambda value: str(value).upper()))
    assert q.where("name", "bob").render() == "SELECT * FROM `t` WHERE `name` = 'BOB' "


def test_default_escaper_applies_at_render_time() -> None:
    q = Query("t").where("name", "o'neil")
    set_escaper(lambda value: str(value).replace("'", "\\'"))
    assert q.render() == "SELECT * FROM `t` WHERE `name` = 'o\\'neil' "


def test_unused_clauses_are_not_rendered() -> None:
    calls = []
    q = Query("t").set("a", Expression.callback(lambda context: calls.append(1) or "x"))
    q.render()
    assert calls == []


def test_repr() -> None:
    assert repr(Query("t")) == "Query(SELECT)"


@pytest.mark.parametrize("value", ["", None])
def test_empty_table_leaves_from_clause_out(value: object) -> None:
    assert Query(value).render() == "SELECT * "


def test_where_tuple_values_keep_column() -> None:
    sql = Query("users").where({"name": ("alice", "bob")}).render()
    assert sql == "SELECT * FROM `users` WHERE (`name` = 'alice' AND `name` = 'bob') "
