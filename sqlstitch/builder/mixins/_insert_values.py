from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mypy_extensions import trait
from typing_extensions import Self

from sqlstitch.builder._kinds import StatementKind
from sqlstitch.core.escaping import render_nested
from sqlstitch.core.expression import Expression
from sqlstitch.utils.type_guards import is_expression_like, is_query

if TYPE_CHECKING:
    from sqlstitch.builder._query import Query
    from sqlstitch.core.escaping import Escaper

__all__ = ("InsertValuesMixin",)


def _is_row(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


@trait
class InsertValuesMixin:
    """Mixin providing INSERT INTO, the inserted rows and ON DUPLICATE KEY UPDATE."""

    __slots__ = ()

    _kind: StatementKind
    _escaper: "Escaper"
    _into: Any
    _columns: "list[str]"
    _insert: "list[Any] | Query"
    _ignore: bool
    _supplement: "bool | dict[str, Any]"

    def into(self, table: Any, columns: Any = ()) -> Self:
        """Switch to an INSERT statement into ``table``, replacing the previous target.

        Args:
            table: Target table name or expression.
            columns: Column name or list of column names. When empty, columns are
                deduced from the keys of mapping rows.

        Returns:
            The current builder instance for method chaining.
        """
        self._kind = StatementKind.INSERT
        self._into = table
        self._columns = [columns] if isinstance(columns, str) else list(columns)
        return self

    def insert(self, rows: Any) -> Self:
        """Add rows to insert, or insert the result of a nested query.

        Args:
            rows: A single row (mapping or sequence of values), a list of rows, or a
                :class:`Query` whose result is inserted.

        Returns:
            The current builder instance for method chaining.
        """
        if is_query(rows):
            self._insert = rows
            return self
        if isinstance(rows, (list, tuple)) and not rows:
            return self
        if isinstance(rows, Mapping):
            new_rows = [rows]
        elif not isinstance(rows, (list, tuple)):
            new_rows = [[rows]]
        else:
            items = list(rows)
            new_rows = items if items and all(_is_row(item) for item in items) else [items]
        if is_query(self._insert):
            self._insert = new_rows
        else:
            self._insert.extend(new_rows)
        return self

    def ignore(self, ignore: bool = True) -> Self:
        """Toggle ``INSERT IGNORE``."""
        self._ignore = bool(ignore)
        return self

    def supplement(self, supplement: Any = True, *args: Any) -> Self:
        """Configure the ``ON DUPLICATE KEY UPDATE`` part of an INSERT.

        * ``supplement()`` / ``supplement(False)`` toggles updating every inserted column
          with its proposed value,
        * ``supplement({"hits": Expression.raw("hits + 1")})`` sets explicit assignments,
        * ``supplement(["a", "b"])`` or ``supplement("a")`` assigns ``VALUES(col)`` to the named columns,
        * ``supplement("a", 1)`` assigns one value.

        Returns:
            The current builder instance for method chaining.
        """
        if isinstance(supplement, bool):
            self._supplement = supplement
            return self
        if not isinstance(self._supplement, dict):
            self._supplement = {}
        if isinstance(supplement, Mapping):
            self._supplement.update(supplement)
        elif isinstance(supplement, (list, tuple)):
            for column in supplement:
                self._supplement[column] = Expression.values(column)
        elif args:
            self._supplement[supplement] = args[0]
        else:
            self._supplement[supplement] = Expression.values(supplement)
        return self

    def _insert_columns(self) -> "list[Any]":
        if self._columns:
            return list(self._columns)
        if is_query(self._insert) or not self._insert:
            return []
        if not all(isinstance(row, Mapping) for row in self._insert):
            return []
        keys: "set[Any]" = set()
        for row in self._insert:
            keys.update(row)
        return sorted(keys, key=str)

    def _render_into(self) -> str:
        if is_expression_like(self._into):
            return f"{render_nested(self._into, self, self._escaper.config)} "
        return f"{self._escaper.quote_identifier(self._into)} "

    def _render_ignore(self) -> str:
        return "IGNORE " if self._ignore else ""

    def _render_columns(self) -> str:
        columns = self._insert_columns()
        if not columns:
            return ""
        return f"({', '.join(self._escaper.quote_identifier(column) for column in columns)}) "

    def _render_insert(self) -> str:
        if is_query(self._insert):
            return render_nested(self._insert)
        columns = self._insert_columns()
        rows = []
        for row in self._insert:
            if isinstance(row, Mapping) and columns:
                values = [row.get(column) for column in columns]
            elif isinstance(row, Mapping):
                values = [row[key] for key in sorted(row, key=str)]
            else:
                values = list(row)
            rows.append(f"({', '.join(self._escaper.literal(value, self) for value in values)})")
        return f"VALUES {', '.join(rows)}" if rows else ""

    def _render_supplement(self) -> str:
        assignments = []
        if isinstance(self._supplement, dict):
            for column, value in self._supplement.items():
                quoted = self._escaper.quote_identifier(column)
                assignments.append(f"{quoted} = {self._escaper.quote_scalar(value, self)}")
        elif self._supplement:
            for column in self._insert_columns():
                quoted = self._escaper.quote_identifier(column)
                assignments.append(f"{quoted} = VALUES({quoted})")
        return f" ON DUPLICATE KEY UPDATE {', '.join(assignments)}" if assignments else ""
