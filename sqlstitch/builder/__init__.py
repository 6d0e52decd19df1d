"""Fluent MySQL statement builders."""

from sqlstitch.builder._kinds import Clause, StatementKind
from sqlstitch.builder._query import Query, query
from sqlstitch.builder.mixins import JoinCondition, JoinType, UnionType

__all__ = (
    "Clause",
    "JoinCondition",
    "JoinType",
    "Query",
    "StatementKind",
    "UnionType",
    "query",
)
