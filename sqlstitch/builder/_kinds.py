from enum import Enum

from sqlstitch.exceptions import InvalidClauseSpecificationError

__all__ = ("Clause", "StatementKind")


class StatementKind(Enum):
    """Statement shape a builder renders. The last kind-establishing call wins."""

    SELECT = "SELECT"
    DELETE = "DELETE"
    UPDATE = "UPDATE"
    INSERT = "INSERT"


class Clause(str, Enum):
    """Clause accumulators that :meth:`Query.clear` can reset."""

    SELECT = "select"
    DELETE = "delete"
    UPDATE = "update"
    INTO = "into"
    COLUMNS = "columns"
    INSERT = "insert"
    SET = "set"
    FROM = "from"
    JOIN = "join"
    WHERE = "where"
    HAVING = "having"
    GROUP = "group"
    ORDER = "order"
    LIMIT = "limit"
    SUPPLEMENT = "supplement"
    IGNORE = "ignore"
    UNIONS = "unions"

    @classmethod
    def resolve(cls, value: "Clause | str") -> "Clause":
        """Look a clause up by member or case-insensitive name.

        Raises:
            InvalidClauseSpecificationError: If ``value`` names no clause.
        """
        if isinstance(value, Clause):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            msg = f"Unknown clause {value!r}."
            raise InvalidClauseSpecificationError(msg) from exc
