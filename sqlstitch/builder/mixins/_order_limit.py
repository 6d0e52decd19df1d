import re
from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.core.escaping import render_nested
from sqlstitch.utils.type_guards import is_expression_like

if TYPE_CHECKING:
    from sqlstitch.core.escaping import Escaper

__all__ = ("GroupByClauseMixin", "LimitClauseMixin", "OrderByClauseMixin")

_DIRECTION_RE = re.compile(r"^(ASC|DESC)$", re.IGNORECASE)


@trait
class GroupByClauseMixin:
    """Mixin providing GROUP BY. Items are inserted verbatim so they may hold SQL functions."""

    __slots__ = ()

    _escaper: "Escaper"
    _group: "list[Any]"

    def group(self, columns: Any) -> Self:
        if isinstance(columns, (list, tuple)):
            self._group.extend(columns)
        else:
            self._group.append(columns)
        return self

    def _render_group(self) -> str:
        if not self._group:
            return ""
        items = [
            render_nested(item, self, self._escaper.config) if is_expression_like(item) else str(item)
            for item in self._group
        ]
        return f"GROUP BY {', '.join(items)} "


@trait
class OrderByClauseMixin:
    """Mixin providing ORDER BY."""

    __slots__ = ()

    _escaper: "Escaper"
    _order: "list[tuple[Any, str | None, str | None]]"

    def order(self, column: Any, direction: "str | None" = None, collate: "str | None" = None) -> Self:
        """Add a sort key.

        Args:
            column: Column or SQL expression, inserted verbatim.
            direction: ``ASC`` or ``DESC``, any case. Other values are ignored.
            collate: Optional collation, e.g. ``utf8mb4_unicode_ci``.

        Returns:
            The current builder instance for method chaining.
        """
        if direction is not None and not _DIRECTION_RE.match(direction):
            direction = None
        self._order.append((column, direction.upper() if direction else None, collate or None))
        return self

    def _render_order(self) -> str:
        if not self._order:
            return ""
        items = []
        for column, direction, collate in self._order:
            text = render_nested(column, self, self._escaper.config) if is_expression_like(column) else str(column)
            parts = [text]
            if collate:
                parts.append(f"COLLATE {collate}")
            if direction:
                parts.append(direction)
            items.append(" ".join(parts))
        return f"ORDER BY {', '.join(items)} "


@trait
class LimitClauseMixin:
    """Mixin providing MySQL's ``LIMIT offset, count``."""

    __slots__ = ()

    _limit: "tuple[int, int] | None"

    def limit(self, row_count: "int | None" = None, offset: "int | None" = None) -> Self:
        """Set the row limit. ``limit()`` or ``limit(None)`` removes it."""
        if row_count is None:
            self._limit = None
        else:
            self._limit = (int(offset or 0), int(row_count))
        return self

    def _render_limit(self) -> str:
        if self._limit is None:
            return ""
        offset, row_count = self._limit
        return f"LIMIT {offset}, {row_count}"
