from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._aliasing import aliased_fragment, iter_aliased, merge_aliased

if TYPE_CHECKING:
    from sqlstitch.core.escaping import Escaper

__all__ = ("FromClauseMixin",)


@trait
class FromClauseMixin:
    """Mixin providing the FROM clause for SELECT and DELETE statements."""

    __slots__ = ()

    _escaper: "Escaper"
    _from: "list[tuple[str | None, Any]]"

    def from_(self, tables: Any) -> Self:
        """Add source tables.

        Args:
            tables: A table name, a list of them, or ``{alias: table}``. Nested queries are
                bracketed; expressions are inserted as they render.

        Returns:
            The current builder instance for method chaining.
        """
        merge_aliased(self._from, iter_aliased(tables))
        return self

    def _render_from(self) -> str:
        if not self._from:
            return ""
        tables = [
            aliased_fragment(value, alias, self._escaper, self, bracket_expressions=False)
            for alias, value in self._from
        ]
        return f"FROM {', '.join(tables)} "
