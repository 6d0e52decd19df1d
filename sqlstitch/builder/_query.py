"""The fluent MySQL statement builder.

A :class:`Query` accumulates clause pieces and renders them into one of four
statement templates. Nothing is validated against a schema and nothing is
executed; the result is statement text.
"""

from collections.abc import Callable, Mapping
from typing import Any

from typing_extensions import Self

from sqlstitch.builder._kinds import Clause, StatementKind
from sqlstitch.builder.mixins import (
    DeleteFromClauseMixin,
    FromClauseMixin,
    GroupByClauseMixin,
    HavingClauseMixin,
    InsertValuesMixin,
    JoinClauseMixin,
    LimitClauseMixin,
    OrderByClauseMixin,
    SelectColumnsMixin,
    UnionClauseMixin,
    UpdateSetClauseMixin,
    UpdateTableClauseMixin,
    WhereClauseMixin,
)
from sqlstitch.core.conditions import ConditionTree
from sqlstitch.core.config import StitchConfig, get_default_config
from sqlstitch.core.escaping import Escaper
from sqlstitch.core.placeholders import PLACEHOLDER_PATTERN, substitute
from sqlstitch.utils.logging import get_logger

__all__ = ("Query", "query")

logger = get_logger("builder.query")

_TEMPLATES: "dict[StatementKind, str]" = {
    StatementKind.SELECT: "SELECT {:select}{:from}{:join}{:where}{:group}{:having}{:order}{:limit}",
    StatementKind.DELETE: "DELETE {:delete}{:from}{:join}{:where}{:group}{:having}{:order}{:limit}",
    StatementKind.UPDATE: "UPDATE {:update}{:join}{:set}{:where}{:group}{:having}{:order}{:limit}",
    StatementKind.INSERT: "INSERT {:ignore}INTO {:into}{:columns}{:insert}{:supplement}",
}
_UNION_TEMPLATE = "{:unionLeft}{:body}{:unionRight}{:union}"

_CLAUSE_DEFAULTS: "dict[Clause, tuple[str, Callable[[], Any]]]" = {
    Clause.SELECT: ("_select", list),
    Clause.DELETE: ("_delete", list),
    Clause.UPDATE: ("_update", list),
    Clause.INTO: ("_into", str),
    Clause.COLUMNS: ("_columns", list),
    Clause.INSERT: ("_insert", list),
    Clause.SET: ("_set", dict),
    Clause.FROM: ("_from", list),
    Clause.JOIN: ("_join", list),
    Clause.WHERE: ("_where", ConditionTree),
    Clause.HAVING: ("_having", ConditionTree),
    Clause.GROUP: ("_group", list),
    Clause.ORDER: ("_order", list),
    Clause.LIMIT: ("_limit", lambda: None),
    Clause.SUPPLEMENT: ("_supplement", bool),
    Clause.IGNORE: ("_ignore", bool),
    Clause.UNIONS: ("_unions", list),
}


class Query(
    SelectColumnsMixin,
    DeleteFromClauseMixin,
    UpdateTableClauseMixin,
    InsertValuesMixin,
    FromClauseMixin,
    JoinClauseMixin,
    WhereClauseMixin,
    HavingClauseMixin,
    GroupByClauseMixin,
    OrderByClauseMixin,
    LimitClauseMixin,
    UpdateSetClauseMixin,
    UnionClauseMixin,
):
    """Fluent builder for SELECT, DELETE, UPDATE and INSERT statements.

    Example::

        Query("users").where("id", 5).render()
        # SELECT * FROM `users` WHERE `id` = '5'

    The builder also works as a small parameter store (``q["user_id"] = 5``) that
    condition callbacks can read while the statement renders.
    """

    __slots__ = (
        "_columns",
        "_delete",
        "_escaper",
        "_from",
        "_group",
        "_having",
        "_ignore",
        "_insert",
        "_into",
        "_join",
        "_kind",
        "_limit",
        "_order",
        "_parameters",
        "_select",
        "_set",
        "_supplement",
        "_union_brackets",
        "_unions",
        "_update",
        "_where",
    )

    def __init__(self, table: Any = None, *, config: "StitchConfig | None" = None) -> None:
        """Create a SELECT builder.

        Args:
            table: Optional table(s) for the FROM clause.
            config: Configuration for this builder. Defaults to the process-wide one,
                read at render time.
        """
        self._escaper = Escaper(config)
        self._kind = StatementKind.SELECT
        self._parameters: "dict[int | str, Any]" = {}
        self._union_brackets = (config or get_default_config()).union_brackets
        for clause in Clause:
            self._reset(clause)
        if table:
            self.from_(table)

    @property
    def config(self) -> StitchConfig:
        return self._escaper.config

    @property
    def kind(self) -> StatementKind:
        return self._kind

    def _reset(self, clause: Clause) -> None:
        attribute, factory = _CLAUSE_DEFAULTS[clause]
        setattr(self, attribute, factory())

    def clear(self, clause: "Clause | str | None" = None) -> Self:
        """Reset one clause accumulator, or all of them.

        Args:
            clause: The clause to reset, by member or name (``"where"``). ``None`` resets every clause.

        Raises:
            InvalidClauseSpecificationError: If ``clause`` names no clause.

        Returns:
            The current builder instance for method chaining.
        """
        if clause is None:
            for member in Clause:
                self._reset(member)
        else:
            self._reset(Clause.resolve(clause))
        return self

    def render(self, context: Any = None) -> str:
        """Render the statement text.

        Only the clauses used by the current statement kind are rendered, so
        callbacks stored in unused clauses are not invoked.

        Args:
            context: Unused; accepted so a query renders like an expression when nested.

        Returns:
            The SQL statement.
        """
        template = _TEMPLATES[self._kind]
        fragments = {name: _FRAGMENT_RENDERERS[name](self) for name in PLACEHOLDER_PATTERN.findall(template)}
        text = substitute(template, fragments, escaper=self._escaper, context=self)
        if self._kind is StatementKind.SELECT and self._unions:
            text = substitute(
                _UNION_TEMPLATE,
                {
                    "unionLeft": "(" if self._union_brackets else "",
                    "body": text.rstrip(),
                    "unionRight": ") " if self._union_brackets else " ",
                    "union": self._render_union(),
                },
                escaper=self._escaper,
            )
        logger.debug("Rendered statement", extra={"extra_fields": {"kind": self._kind.value}})
        return text

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._kind.value})"

    def parameters(self, parameters: "Mapping[int | str, Any] | None" = None) -> Any:
        """Read the parameter store, or merge ``parameters`` into it.

        Args:
            parameters: Values to merge. New values win over stored ones.

        Returns:
            A copy of the store when called without arguments, otherwise the builder.
        """
        if not parameters:
            return dict(self._parameters)
        self._parameters.update(parameters)
        return self

    def add_parameter(self, value: Any) -> int:
        """Store ``value`` under the next free integer key and return that key."""
        keys = [key for key in self._parameters if isinstance(key, int)]
        key = max(keys) + 1 if keys else 0
        self._parameters[key] = value
        return key

    def __getitem__(self, key: "int | str") -> Any:
        return self._parameters.get(key)

    def __setitem__(self, key: "int | str | None", value: Any) -> None:
        if key is None:
            self.add_parameter(value)
        else:
            self._parameters[key] = value

    def __delitem__(self, key: "int | str") -> None:
        self._parameters.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._parameters


_FRAGMENT_RENDERERS: "dict[str, Callable[[Query], str]]" = {
    "select": Query._render_select,
    "delete": Query._render_delete,
    "update": Query._render_update,
    "into": Query._render_into,
    "ignore": Query._render_ignore,
    "columns": Query._render_columns,
    "insert": Query._render_insert,
    "supplement": Query._render_supplement,
    "set": Query._render_set,
    "from": Query._render_from,
    "join": Query._render_join,
    "where": Query._render_where,
    "group": Query._render_group,
    "having": Query._render_having,
    "order": Query._render_order,
    "limit": Query._render_limit,
}


def query(table: Any = None, *, config: "StitchConfig | None" = None) -> Query:
    """Create a :class:`Query`, optionally selecting from ``table``."""
    return Query(table, config=config)
