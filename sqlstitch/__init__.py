"""sqlstitch: fluent MySQL statement text assembly."""

from sqlstitch import builder, core, exceptions, typing, utils
from sqlstitch.__metadata__ import __version__
from sqlstitch.builder import Clause, JoinCondition, JoinType, Query, StatementKind, UnionType, query
from sqlstitch.core import (
    Combinator,
    ConditionTree,
    Escaper,
    Expression,
    ExpressionKind,
    StitchConfig,
    add_condition,
    escape,
    get_default_config,
    like_escape,
    quote_identifier,
    quote_scalar,
    render_condition_tree,
    set_default_config,
    set_escaper,
    substitute,
)
from sqlstitch.exceptions import (
    ImproperConfigurationError,
    InvalidClauseSpecificationError,
    InvalidEscapeArgumentError,
    SQLStitchError,
    UnknownExpressionKindError,
)

__all__ = (
    "Clause",
    "Combinator",
    "ConditionTree",
    "Escaper",
    "Expression",
    "ExpressionKind",
    "ImproperConfigurationError",
    "InvalidClauseSpecificationError",
    "InvalidEscapeArgumentError",
    "JoinCondition",
    "JoinType",
    "Query",
    "SQLStitchError",
    "StatementKind",
    "StitchConfig",
    "UnionType",
    "UnknownExpressionKindError",
    "__version__",
    "add_condition",
    "builder",
    "core",
    "escape",
    "exceptions",
    "get_default_config",
    "like_escape",
    "query",
    "quote_identifier",
    "quote_scalar",
    "render_condition_tree",
    "set_default_config",
    "set_escaper",
    "substitute",
    "typing",
    "utils",
)
