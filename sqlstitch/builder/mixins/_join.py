from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._aliasing import aliased_fragment
from sqlstitch.core.conditions import ConditionTree, add_condition, render_condition_tree
from sqlstitch.core.escaping import render_nested
from sqlstitch.exceptions import InvalidClauseSpecificationError
from sqlstitch.utils.logging import get_logger
from sqlstitch.utils.type_guards import is_condition_group, is_condition_pair, is_expression_like

if TYPE_CHECKING:
    from sqlstitch.core.escaping import Escaper

__all__ = ("JoinClauseMixin", "JoinCondition", "JoinType")

logger = get_logger("builder.join")


class JoinType(str, Enum):
    """Every join MySQL accepts, named by its hyphenated keyword spelling."""

    JOIN = "join"
    INNER = "inner"
    CROSS = "cross"
    LEFT = "left"
    LEFT_OUTER = "left-outer"
    RIGHT = "right"
    RIGHT_OUTER = "right-outer"
    NATURAL = "natural"
    NATURAL_LEFT = "natural-left"
    NATURAL_LEFT_OUTER = "natural-left-outer"
    NATURAL_RIGHT = "natural-right"
    NATURAL_RIGHT_OUTER = "natural-right-outer"
    STRAIGHT = "straight"

    @property
    def keyword(self) -> str:
        if self is JoinType.STRAIGHT:
            return "STRAIGHT_JOIN"
        if self is JoinType.JOIN:
            return "JOIN"
        return f"{self.value.replace('-', ' ').upper()} JOIN"

    @classmethod
    def resolve(cls, value: "JoinType | str") -> "JoinType":
        """Look a join type up by member or spelling (``"left-outer"``, ``"LEFT OUTER"``, ``"join-left"``).

        Raises:
            InvalidClauseSpecificationError: If ``value`` names no join type.
        """
        if isinstance(value, JoinType):
            return value
        normalized = "-".join(str(value).strip().lower().replace("_", "-").split())
        if normalized.startswith("join-"):
            normalized = normalized[len("join-") :]
        if normalized.endswith("-join"):
            normalized = normalized[: -len("-join")]
        try:
            return cls(normalized)
        except ValueError as exc:
            msg = f"Invalid join type {value!r}."
            raise InvalidClauseSpecificationError(msg) from exc


class JoinCondition(str, Enum):
    ON = "ON"
    USING = "USING"


@trait
class JoinClauseMixin:
    """Mixin providing JOIN clauses.

    Join fragments are rendered when the join is added. Every helper accepts the
    table followed by the join condition:

    * one string is bracketed as is: ``left_join("b", "a.id = b.a_id")``,
    * one mapping or list is rendered as a condition tree,
    * several arguments are folded like ``where()``: ``join("b", "a.id", Expression.identifiers("b.a_id"))``.
    """

    __slots__ = ()

    _escaper: "Escaper"
    _join: "list[str]"

    def join(
        self,
        table: Any,
        *conditions: Any,
        join_type: "JoinType | str" = JoinType.JOIN,
        using: bool = False,
    ) -> Self:
        """Add a join.

        Args:
            table: Table name, ``{alias: table}``, an expression or a nested query.
            *conditions: Join condition, see the class documentation.
            join_type: The kind of join.
            using: Emit ``USING`` instead of ``ON``.

        Raises:
            InvalidClauseSpecificationError: For an unknown join type or a missing table.

        Returns:
            The current builder instance for method chaining.
        """
        kind = JoinType.resolve(join_type)
        fragment = f"{kind.keyword} {self._render_join_table(table)}"
        if conditions:
            keyword = JoinCondition.USING if using else JoinCondition.ON
            fragment = f"{fragment} {keyword.value} {self._render_join_conditions(conditions)}"
        self._join.append(fragment)
        logger.debug("Added join", extra={"extra_fields": {"join_type": kind.value}})
        return self

    def inner_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.INNER, using=using)

    def cross_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.CROSS, using=using)

    def left_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.LEFT, using=using)

    def left_outer_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.LEFT_OUTER, using=using)

    def right_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.RIGHT, using=using)

    def right_outer_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.RIGHT_OUTER, using=using)

    def natural_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.NATURAL, using=using)

    def natural_left_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.NATURAL_LEFT, using=using)

    def natural_left_outer_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.NATURAL_LEFT_OUTER, using=using)

    def natural_right_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.NATURAL_RIGHT, using=using)

    def natural_right_outer_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.NATURAL_RIGHT_OUTER, using=using)

    def straight_join(self, table: Any, *conditions: Any, using: bool = False) -> Self:
        return self.join(table, *conditions, join_type=JoinType.STRAIGHT, using=using)

    def _render_join(self) -> str:
        return f"{' '.join(self._join)} " if self._join else ""

    def _render_join_table(self, table: Any) -> str:
        if table is None:
            msg = "Join requires a table."
            raise InvalidClauseSpecificationError(msg)
        if isinstance(table, Mapping):
            if not table:
                msg = "Join requires a table."
                raise InvalidClauseSpecificationError(msg)
            alias, value = next(iter(table.items()))
            return aliased_fragment(value, alias if isinstance(alias, str) else None, self._escaper, self)
        return aliased_fragment(table, None, self._escaper, self)

    def _render_join_conditions(self, conditions: "tuple[Any, ...]") -> str:
        if len(conditions) > 1:
            tree = add_condition(ConditionTree(), *conditions)
            return render_condition_tree(tree, self, escaper=self._escaper).strip()
        condition = conditions[0]
        if is_expression_like(condition):
            return f"({render_nested(condition, self, self._escaper.config)})"
        nested = isinstance(condition, (Mapping, ConditionTree)) or is_condition_group(condition)
        if nested or is_condition_pair(condition):
            tree = add_condition(ConditionTree(), condition)
            return f"({render_condition_tree(tree, self, escaper=self._escaper).strip()})"
        if callable(condition):
            return f"({condition(self)})"
        return f"({condition})"
