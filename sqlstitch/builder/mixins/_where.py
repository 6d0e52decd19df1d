from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.core.conditions import ConditionTree, add_condition, render_condition_tree

if TYPE_CHECKING:
    from sqlstitch.core.escaping import Escaper
    from sqlstitch.typing import ConditionSpec

__all__ = ("HavingClauseMixin", "WhereClauseMixin")


@trait
class WhereClauseMixin:
    """Mixin providing the WHERE clause for SELECT, UPDATE and DELETE statements."""

    __slots__ = ()

    _escaper: "Escaper"
    _where: ConditionTree

    def where(self, *condition: "ConditionSpec") -> Self:
        """Add a condition to the WHERE clause. Conditions accumulate and are never replaced.

        Accepted shapes::

            q.where("id", 5)                          # `id` = '5'
            q.where({"id": 5, "status": "active"})    # `id` = '5' AND `status` = 'active'
            q.where(["OR", ("a", 1), ("b", 2)])       # combinator for this level
            q.where({"status": ["OR", "new", "open"]})
            q.where("age > {:min}", {"min": 18})      # parametrized template
            q.where("age BETWEEN {:0} AND {:1}", 18, 65)
            q.where(Expression.raw("deleted_at IS NULL"))
            q.where(lambda query: "1 = 1")

        Returns:
            The current builder instance for method chaining.
        """
        self._where = add_condition(self._where, *condition)
        return self

    def _render_where(self) -> str:
        where = render_condition_tree(self._where, self, escaper=self._escaper)
        return f"WHERE {where}" if where else ""


@trait
class HavingClauseMixin:
    """Mixin providing the HAVING clause. Accepts the same shapes as ``where()``."""

    __slots__ = ()

    _escaper: "Escaper"
    _having: ConditionTree

    def having(self, *condition: "ConditionSpec") -> Self:
        self._having = add_condition(self._having, *condition)
        return self

    def _render_having(self) -> str:
        having = render_condition_tree(self._having, self, escaper=self._escaper)
        return f"HAVING {having}" if having else ""
