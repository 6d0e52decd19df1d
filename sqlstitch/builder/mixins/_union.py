from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.core.escaping import render_nested
from sqlstitch.exceptions import InvalidClauseSpecificationError
from sqlstitch.utils.logging import get_logger
from sqlstitch.utils.type_guards import is_query

if TYPE_CHECKING:
    from sqlstitch.builder._query import Query

__all__ = ("UnionClauseMixin", "UnionType")

logger = get_logger("builder.union")


class UnionType(str, Enum):
    DEFAULT = ""
    ALL = "ALL"
    DISTINCT = "DISTINCT"


@trait
class UnionClauseMixin:
    """Mixin providing UNION for SELECT statements."""

    __slots__ = ()

    _unions: "list[tuple[UnionType, Query, bool]]"
    _union_brackets: bool

    def union(self, *queries: Any, union_type: "UnionType | str" = UnionType.DEFAULT) -> Self:
        """Append SELECT statements to union with this one.

        Args:
            *queries: :class:`Query` instances, or iterables of them.
            union_type: ``UNION``, ``UNION ALL`` or ``UNION DISTINCT``.

        Raises:
            InvalidClauseSpecificationError: If no query is given or an argument is not a query.

        Returns:
            The current builder instance for method chaining.
        """
        try:
            kind = UnionType(union_type.upper() if isinstance(union_type, str) else union_type)
        except ValueError as exc:
            msg = f"Invalid union type {union_type!r}."
            raise InvalidClauseSpecificationError(msg) from exc
        selects: "list[Any]" = []
        for item in queries:
            if not is_query(item) and isinstance(item, Iterable) and not isinstance(item, (str, bytes)):
                selects.extend(item)
            else:
                selects.append(item)
        if not selects:
            msg = "Union requires at least one query."
            raise InvalidClauseSpecificationError(msg)
        for select in selects:
            if not is_query(select):
                msg = f"Invalid union query of type {type(select).__name__}."
                raise InvalidClauseSpecificationError(msg)
            self._unions.append((kind, select, self._union_brackets))
        logger.debug("Added union", extra={"extra_fields": {"union_type": kind.value, "count": len(selects)}})
        return self

    def union_all(self, *queries: Any) -> Self:
        return self.union(*queries, union_type=UnionType.ALL)

    def union_distinct(self, *queries: Any) -> Self:
        return self.union(*queries, union_type=UnionType.DISTINCT)

    def union_brackets(self, brackets: bool = True) -> Self:
        """Set whether union members added from now on are wrapped in brackets.

        Raises:
            InvalidClauseSpecificationError: If ``brackets`` is not a boolean.
        """
        if not isinstance(brackets, bool):
            msg = f"Union bracket mode must be a boolean, got {type(brackets).__name__}."
            raise InvalidClauseSpecificationError(msg)
        self._union_brackets = brackets
        return self

    def _render_union(self) -> str:
        if not self._unions:
            return ""
        parts = []
        for kind, select, brackets in self._unions:
            keyword = f"UNION {kind.value}" if kind.value else "UNION"
            text = render_nested(select)
            parts.append(f"{keyword} ({text})" if brackets else f"{keyword} {text}")
        return f"{' '.join(parts)} "
