from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._aliasing import aliased_fragment, iter_aliased
from sqlstitch.builder._kinds import StatementKind

if TYPE_CHECKING:
    from sqlstitch.core.escaping import Escaper

__all__ = ("DeleteFromClauseMixin",)


@trait
class DeleteFromClauseMixin:
    """Mixin providing DELETE targets."""

    __slots__ = ()

    _kind: StatementKind
    _escaper: "Escaper"
    _delete: "list[Any]"

    def delete(self, targets: Any = ()) -> Self:
        """Switch to a DELETE statement, optionally naming the tables rows are deleted from.

        Targets are only needed for multi-table deletes (``DELETE t1 FROM t1 JOIN t2 ...``).
        """
        self._kind = StatementKind.DELETE
        self._delete.extend(value for _, value in iter_aliased(targets))
        return self

    def _render_delete(self) -> str:
        if not self._delete:
            return ""
        targets = [
            aliased_fragment(value, None, self._escaper, self, bracket_expressions=False) for value in self._delete
        ]
        return f"{', '.join(targets)} "
