"""Unit tests for condition tree assembly and rendering."""

from sqlstitch import Combinator, ConditionTree, Expression, Query, add_condition, render_condition_tree


def _render(*args: object) -> str:
    return render_condition_tree(add_condition(ConditionTree(), *args))


def test_combinator_parse() -> None:
    assert Combinator.parse("and") is Combinator.AND
    assert Combinator.parse("&&") is Combinator.AND
    assert Combinator.parse("||") is Combinator.OR
    assert Combinator.parse(" xor ") is Combinator.XOR
    assert Combinator.parse("NOT") is None
    assert Combinator.parse(1) is None


def test_column_value_condition() -> None:
    assert _render("id", 5) == "`id` = '5' "


def test_mapping_condition_joins_with_and() -> None:
    assert _render({"id": 5, "status": "active"}) == "`id` = '5' AND `status` = 'active' "


def test_combinator_led_group() -> None:
    assert _render(["OR", ("a", 1), ("b", 2)]) == "`a` = '1' OR `b` = '2' "


def test_nested_group_is_bracketed() -> None:
    assert _render([["OR", ("a", 1), ("b", 2)]]) == "(`a` = '1' OR `b` = '2') "


def test_keyed_list_inherits_column() -> None:
    assert _render({"status": ["OR", "new", "open"]}) == "(`status` = 'new' OR `status` = 'open') "


def test_placeholder_condition_with_mapping() -> None:
    assert _render("age > {:min}", {"min": 18}) == "(age > '18') "


def test_placeholder_condition_with_positional_values() -> None:
    assert _render("age BETWEEN {:0} AND {:1}", 18, 65) == "(age BETWEEN '18' AND '65') "


def test_expression_values() -> None:
    assert _render(Expression.raw("deleted_at IS NULL")) == "(deleted_at IS NULL) "
    assert _render({"created": Expression.raw("NOW()")}) == "`created` = (NOW()) "


def test_callable_receives_context() -> None:
    tree = add_condition(ConditionTree(), lambda context: f"owner = {context['owner']}")
    query = Query()
    query["owner"] = 3
    assert render_condition_tree(tree, query) == "(owner = 3) "


def test_none_value_renders_null() -> None:
    assert _render("deleted_at", None) == "`deleted_at` = NULL "


def test_unkeyed_scalar_renders_bare_value() -> None:
    assert _render(5) == "'5' "


def test_empty_tree_renders_nothing() -> None:
    assert render_condition_tree(ConditionTree()) == ""
    assert _render([]) == ""


def test_keyed_entries_overwrite_in_place() -> None:
    tree = add_condition(ConditionTree(), {"a": 1, "b": 2})
    tree = add_condition(tree, "a", 3)
    assert tree.entries == [("a", 3), ("b", 2)]


def test_unkeyed_entries_append() -> None:
    tree = add_condition(ConditionTree(), "x = 1")
    tree = add_condition(tree, "x = 1")
    assert len(tree) == 2


def test_add_condition_leaves_input_unchanged() -> None:
    tree = add_condition(ConditionTree(), "a", 1)
    updated = add_condition(tree, "b", 2)
    assert len(tree) == 1
    assert len(updated) == 2


def test_group_merged_into_non_empty_tree_is_nested() -> None:
    tree = add_condition(ConditionTree(), "a", 1)
    tree = add_condition(tree, ["OR", ("b", 1), ("c", 2)])
    assert render_condition_tree(tree) == "`a` = '1' AND (`b` = '1' OR `c` = '2') "


def test_group_combinator_adopted_by_empty_tree() -> None:
    tree = add_condition(ConditionTree(), ["xor", ("a", 1), ("b", 2)])
    assert tree.combinator is Combinator.XOR
    assert render_condition_tree(tree) == "`a` = '1' XOR `b` = '2' "


def test_root_key_applies_to_unkeyed_scalars() -> None:
    assert render_condition_tree(["OR", 1, 2], root_key="id", root=False) == "(`id` = '1' OR `id` = '2')"


def test_nested_query_value() -> None:
    subquery = Query("banned").select("user_id")
    assert _render("id", subquery) == "`id` = (SELECT `user_id` FROM `banned`) "


def test_tuple_value_under_column_is_a_value_group() -> None:
    assert _render({"name": ("alice", "bob")}) == "(`name` = 'alice' AND `name` = 'bob') "
    assert _render("name", ("alice", "bob")) == "(`name` = 'alice' AND `name` = 'bob') "


def test_tuple_value_group_with_combinator() -> None:
    assert _render({"id": ("OR", 1, 2)}) == "(`id` = '1' OR `id` = '2') "


def test_inner_key_wins_over_enclosing_column() -> None:
    assert _render({"a": {"b": 1}}) == "(`b` = '1') "


def test_symbolic_combinators_render_as_keywords() -> None:
    assert _render(["&&", ("a", 1), ("b", 2)]) == "`a` = '1' AND `b` = '2' "
    assert _render(["||", ("a", 1), ("b", 2)]) == "`a` = '1' OR `b` = '2' "
    assert _render([["||", ("a", 1), ("b", 2)]]) == "(`a` = '1' OR `b` = '2') "
