"""Helpers for clause lists whose items may carry an alias."""

from collections.abc import Mapping
from typing import Any

from sqlstitch.core.escaping import Escaper, render_nested
from sqlstitch.utils.type_guards import is_expression, is_query

__all__ = ("aliased_fragment", "iter_aliased", "merge_aliased")


def iter_aliased(items: Any) -> "list[tuple[str | None, Any]]":
    """Split a clause argument into ``(alias, value)`` pairs.

    Mappings read as ``{alias: value}``; lists, tuples and sets as unaliased values;
    anything else as one unaliased value.
    """
    if isinstance(items, Mapping):
        return [(key if isinstance(key, str) else None, value) for key, value in items.items()]
    if isinstance(items, (list, tuple, set, frozenset)):
        return [(None, value) for value in items]
    return [(None, items)]


def merge_aliased(target: "list[tuple[str | None, Any]]", items: "list[tuple[str | None, Any]]") -> None:
    """Append ``items`` to ``target``; an alias already present is replaced in place."""
    for alias, value in items:
        if alias is not None:
            for index, (existing, _) in enumerate(target):
                if existing == alias:
                    target[index] = (alias, value)
                    break
            else:
                target.append((alias, value))
        else:
            target.append((None, value))


def aliased_fragment(
    value: Any,
    alias: "str | None",
    escaper: Escaper,
    context: Any = None,
    bracket_expressions: bool = True,
) -> str:
    """Render ``value AS alias``.

    Plain names are quoted as identifiers. Nested statements are always bracketed,
    expressions only when ``bracket_expressions`` is set.
    """
    if is_query(value):
        text = f"({render_nested(value)})"
    elif is_expression(value):
        text = render_nested(value, context, escaper.config)
        if bracket_expressions:
            text = f"({text})"
    else:
        text = escaper.quote_identifier(value)
    if alias:
        return f"{text} AS {escaper.quote_identifier(alias)}"
    return text
