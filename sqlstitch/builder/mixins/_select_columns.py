from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._aliasing import aliased_fragment, iter_aliased, merge_aliased
from sqlstitch.builder._kinds import StatementKind

if TYPE_CHECKING:
    from sqlstitch.core.escaping import Escaper

__all__ = ("SelectColumnsMixin",)


@trait
class SelectColumnsMixin:
    """Mixin providing the SELECT column list."""

    __slots__ = ()

    _kind: StatementKind
    _escaper: "Escaper"
    _select: "list[tuple[str | None, Any]]"

    def select(self, columns: Any = "*") -> Self:
        """Switch to a SELECT statement and add columns.

        Args:
            columns: A column name, a list of them, or ``{alias: column}``. Expressions
                and nested queries are bracketed instead of quoted.

        Returns:
            The current builder instance for method chaining.
        """
        self._kind = StatementKind.SELECT
        merge_aliased(self._select, iter_aliased(columns))
        return self

    def _render_select(self) -> str:
        if not self._select:
            return "* "
        columns = [aliased_fragment(value, alias, self._escaper, self) for alias, value in self._select]
        return f"{', '.join(columns)} "
