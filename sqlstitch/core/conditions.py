"""Condition trees for WHERE, HAVING and join conditions.

A condition specification is folded into a :class:`ConditionTree` by
:func:`add_condition` and serialized by :func:`render_condition_tree`. Each
tree level holds an optional combinator and ordered ``(key, value)`` entries,
where ``key`` is a column name or ``None``. Values are rendered by type:

* expressions and nested statements render themselves in brackets,
* callables receive the owning statement and their result is bracketed,
* mappings, lists and nested trees recurse one level down,
* scalars become ``column = 'value'`` (or a bare quoted value when no column is known).
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlstitch.core.escaping import Escaper, render_nested
from sqlstitch.core.expression import Expression
from sqlstitch.core.placeholders import has_placeholder
from sqlstitch.utils.type_guards import (
    is_combinator_token,
    is_condition_group,
    is_condition_pair,
    is_condition_tree,
    is_expression_like,
    is_mapping,
)

if TYPE_CHECKING:
    from sqlstitch.typing import ConditionSpec

__all__ = ("Combinator", "ConditionTree", "add_condition", "render_condition_tree")


class Combinator(str, Enum):
    """Boolean operator joining sibling entries of one tree level."""

    AND = "AND"
    OR = "OR"
    XOR = "XOR"

    @classmethod
    def parse(cls, token: Any) -> "Combinator | None":
        """Resolve a combinator token, accepting ``&&`` and ``||`` as ``AND`` and ``OR``.

        Returns:
            The combinator, or ``None`` if ``token`` is not a combinator.
        """
        if not is_combinator_token(token):
            return None
        normalized = token.strip().upper()
        if normalized == "&&":
            return cls.AND
        if normalized == "||":
            return cls.OR
        return cls(normalized)


def _is_nested(value: Any) -> bool:
    return is_mapping(value) or is_condition_tree(value) or is_condition_pair(value) or is_condition_group(value)


@dataclass
class ConditionTree:
    """One level of a condition tree.

    Keyed entries are unique: setting an existing key replaces its value in place.
    Unkeyed entries are appended in order.
    """

    combinator: "Combinator | None" = None
    entries: "list[tuple[str | None, Any]]" = field(default_factory=list)

    @classmethod
    def coerce(cls, spec: Any) -> "ConditionTree":
        """Convert any condition specification into a tree level.

        Args:
            spec: A tree, mapping, list or tuple group, ``(column, value)`` pair, or single value.

        Returns:
            The tree level. Trees are returned as is.
        """
        if spec is None:
            return cls()
        if is_condition_tree(spec):
            return spec
        if is_mapping(spec):
            tree = cls()
            for key, value in spec.items():
                if isinstance(key, str):
                    tree.set(key, value)
                else:
                    tree.append(value)
            return tree
        if is_condition_pair(spec):
            return cls(entries=[(spec[0], spec[1])])
        if is_condition_group(spec):
            items = list(spec)
            combinator = Combinator.parse(items[0]) if items else None
            if combinator is not None:
                items = items[1:]
            entries: "list[tuple[str | None, Any]]" = []
            for item in items:
                if is_condition_pair(item):
                    entries.append((item[0], item[1]))
                else:
                    entries.append((None, item))
            return cls(combinator=combinator, entries=entries)
        return cls(entries=[(None, spec)])

    def copy(self) -> "ConditionTree":
        return ConditionTree(combinator=self.combinator, entries=list(self.entries))

    def set(self, key: str, value: Any) -> None:
        for index, (existing, _) in enumerate(self.entries):
            if existing == key:
                self.entries[index] = (key, value)
                return
        self.entries.append((key, value))

    def append(self, value: Any) -> None:
        self.entries.append((None, value))

    def merge(self, other: "ConditionTree") -> None:
        """Fold ``other`` into this level.

        The incoming combinator is adopted only while this level is still empty.
        Otherwise a combinator-led group is kept whole as a nested group.
        """
        if self.entries or self.combinator is not None:
            if other.combinator is not None:
                self.append(other)
                return
        else:
            self.combinator = other.combinator
        for key, value in other.entries:
            if key is None:
                self.append(value)
            else:
                self.set(key, value)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __iter__(self) -> "Iterator[tuple[str | None, Any]]":
        return iter(self.entries)


def add_condition(tree: Any, *args: "ConditionSpec") -> ConditionTree:
    """Return a new tree with a condition specification folded into ``tree``.

    The call shapes mirror ``where()``:

    * ``add_condition(tree, {"a": 1})`` or ``add_condition(tree, ["OR", ...])`` merge a group,
    * ``add_condition(tree, "a", 1)`` or ``add_condition(tree, ("a", 1))`` set a column,
    * ``add_condition(tree, "a > {:min}", {"min": 1})`` or
      ``add_condition(tree, "a BETWEEN {:0} AND {:1}", 1, 5)`` append a parametrized template,
    * ``add_condition(tree, value)`` appends a single unkeyed value.

    Args:
        tree: The existing tree or specification. Left unchanged.
        *args: The new specification.

    Returns:
        The updated tree.
    """
    result = ConditionTree.coerce(tree).copy()
    if not args:
        return result
    first = args[0]
    if len(args) == 1:
        if is_condition_pair(first):
            result.set(first[0], first[1])
        elif _is_nested(first):
            result.merge(ConditionTree.coerce(first))
        else:
            result.append(first)
        return result
    if len(args) >= 3 or has_placeholder(first):
        bindings: Any = list(args[1:])
        if len(args) == 2 and is_mapping(args[1]) and any(isinstance(key, str) for key in args[1]):
            bindings = args[1]
        result.append(Expression.params(first, bindings))
        return result
    result.set(str(first), args[1])
    return result


def render_condition_tree(
    tree: Any,
    context: Any = None,
    root_key: "str | None" = None,
    root: bool = True,
    escaper: "Escaper | None" = None,
) -> str:
    """Serialize a condition tree to a boolean SQL expression.

    A tuple stored under a column is a group of values for that column, never a
    ``(column, value)`` pair. An entry's own key wins over the enclosing column.
    Unkeyed nested groups keep comparing against the enclosing column, so
    ``{"id": [1, [2, 3]]}`` renders the inner scalars as ```id` = ...`` too
    rather than as bare values.

    Args:
        tree: The tree or any condition specification.
        context: The statement passed to callbacks and expressions.
        root_key: Column compared against unkeyed scalars of this level.
        root: The outermost level ends with a space; inner levels are wrapped in brackets.
        escaper: Escaper used for quoting. Defaults to one bound to ``context``'s config.

    Returns:
        The rendered condition, or empty text if the tree renders nothing.
    """
    if escaper is None:
        escaper = Escaper(context.config if context is not None else None)
    level = ConditionTree.coerce(tree)
    combinator = level.combinator or Combinator.AND

    fragments: "list[str]" = []
    for key, value in level:
        if key is not None and isinstance(value, tuple):
            value = list(value)
        column = key if key is not None else root_key
        if is_expression_like(value):
            fragment = f"({render_nested(value, context, escaper.config)})"
            if key is not None:
                fragment = f"{escaper.quote_identifier(key)} = {fragment}"
        elif callable(value):
            fragment = f"({value(context)})"
        elif _is_nested(value):
            fragment = render_condition_tree(value, context, column, False, escaper)
        elif column is None:
            fragment = escaper.quote_scalar(value, context)
        else:
            fragment = f"{escaper.quote_identifier(column)} = {escaper.quote_scalar(value, context)}"
        if fragment:
            fragments.append(fragment)

    if not fragments:
        return ""
    joined = f" {combinator.value} ".join(fragments)
    return f"{joined} " if root else f"({joined})"
