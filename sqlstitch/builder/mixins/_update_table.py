from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._aliasing import aliased_fragment, iter_aliased
from sqlstitch.builder._kinds import StatementKind

if TYPE_CHECKING:
    from sqlstitch.core.escaping import Escaper

__all__ = ("UpdateTableClauseMixin",)


@trait
class UpdateTableClauseMixin:
    """Mixin providing the UPDATE table list."""

    __slots__ = ()

    _kind: StatementKind
    _escaper: "Escaper"
    _update: "list[tuple[str | None, Any]]"

    def update(self, tables: Any) -> Self:
        """Switch to an UPDATE statement on ``tables``, replacing earlier targets.

        Args:
            tables: A table name, a list of them, or ``{alias: table}``.

        Returns:
            The current builder instance for method chaining.
        """
        self._kind = StatementKind.UPDATE
        self._update = iter_aliased(tables)
        return self

    def _render_update(self) -> str:
        tables = [
            aliased_fragment(value, alias, self._escaper, self, bracket_expressions=False)
            for alias, value in self._update
        ]
        return f"{', '.join(tables)} "
