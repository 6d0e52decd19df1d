from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

if TYPE_CHECKING:
    from sqlstitch.core.escaping import Escaper

__all__ = ("UpdateSetClauseMixin",)


@trait
class UpdateSetClauseMixin:
    """Mixin providing the SET clause of UPDATE statements."""

    __slots__ = ()

    _escaper: "Escaper"
    _set: "dict[str, Any]"

    def set(self, assignments: Any, *args: Any) -> Self:
        """Assign new column values.

        Args:
            assignments: ``{column: value}`` or a column name followed by its value.
            *args: The value when ``assignments`` is a column name.

        Returns:
            The current builder instance for method chaining.
        """
        if isinstance(assignments, Mapping):
            self._set.update(assignments)
        elif args:
            self._set[assignments] = args[0]
        return self

    def _render_set(self) -> str:
        if not self._set:
            return ""
        assignments = [
            f"{self._escaper.quote_identifier(column)} = {self._escaper.quote_scalar(value, self)}"
            for column, value in self._set.items()
        ]
        return f"SET {', '.join(assignments)} "
