"""Type guard functions for runtime type checking in sqlstitch.

These replace ad-hoc ``isinstance`` chains in the renderers and let the type
checker narrow condition specification values.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlstitch.typing import SCALAR_TYPES

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

    from sqlstitch.builder import Query
    from sqlstitch.core.conditions import ConditionTree
    from sqlstitch.core.expression import Expression

__all__ = (
    "is_combinator_token",
    "is_condition_group",
    "is_condition_pair",
    "is_condition_tree",
    "is_expression",
    "is_expression_like",
    "is_mapping",
    "is_query",
    "is_scalar",
)

_COMBINATOR_TOKENS = frozenset({"AND", "OR", "XOR", "&&", "||"})


def is_scalar(obj: Any) -> bool:
    """Check if an object is a scalar the escaper accepts.

    Args:
        obj: The object to check

    Returns:
        True for strings, bytes, numbers and booleans
    """
    return isinstance(obj, SCALAR_TYPES)


def is_expression(obj: Any) -> "TypeGuard[Expression]":
    from sqlstitch.core.expression import Expression

    return isinstance(obj, Expression)


def is_query(obj: Any) -> "TypeGuard[Query]":
    from sqlstitch.builder._query import Query

    return isinstance(obj, Query)


def is_expression_like(obj: Any) -> bool:
    """Check if an object renders itself, i.e. is an expression or a nested statement.

    Args:
        obj: The object to check

    Returns:
        True if the object is an :class:`Expression` or a :class:`Query`
    """
    return is_expression(obj) or is_query(obj)


def is_condition_tree(obj: Any) -> "TypeGuard[ConditionTree]":
    from sqlstitch.core.conditions import ConditionTree

    return isinstance(obj, ConditionTree)


def is_mapping(obj: Any) -> "TypeGuard[Mapping[Any, Any]]":
    return isinstance(obj, Mapping)


def is_combinator_token(obj: Any) -> bool:
    """Check if an object is a condition combinator token (``AND``, ``OR``, ``XOR``, ``&&``, ``||``).

    Args:
        obj: The object to check

    Returns:
        True if the object is a recognized combinator, compared case-insensitively
    """
    return isinstance(obj, str) and obj.strip().upper() in _COMBINATOR_TOKENS


def is_condition_pair(obj: Any) -> "TypeGuard[tuple[str, Any]]":
    """Check if an object is a ``(column, value)`` pair.

    A pair is a two-item tuple whose first item is a column name. Tuples that
    start with a combinator token are groups, not pairs.

    Args:
        obj: The object to check

    Returns:
        True if the object is a column/value pair
    """
    return (
        isinstance(obj, tuple)
        and len(obj) == 2
        and isinstance(obj[0], str)
        and not is_combinator_token(obj[0])
    )


def is_condition_group(obj: Any) -> bool:
    """Check if an object is a positional condition group (a list or non-pair tuple).

    Args:
        obj: The object to check

    Returns:
        True for lists and tuples that are not column/value pairs
    """
    if isinstance(obj, list):
        return True
    return isinstance(obj, tuple) and not is_condition_pair(obj)
