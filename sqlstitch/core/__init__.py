"""Condition and expression assembly engine."""

from sqlstitch.core.conditions import Combinator, ConditionTree, add_condition, render_condition_tree
from sqlstitch.core.config import (
    StitchConfig,
    get_default_config,
    reset_default_config,
    set_default_config,
    set_escaper,
)
from sqlstitch.core.escaping import (
    Escaper,
    escape,
    like_escape,
    listify,
    literal,
    quote_identifier,
    quote_scalar,
)
from sqlstitch.core.expression import Expression, ExpressionKind
from sqlstitch.core.placeholders import PLACEHOLDER_PATTERN, has_placeholder, substitute

__all__ = (
    "PLACEHOLDER_PATTERN",
    "Combinator",
    "ConditionTree",
    "Escaper",
    "Expression",
    "ExpressionKind",
    "StitchConfig",
    "add_condition",
    "escape",
    "get_default_config",
    "has_placeholder",
    "like_escape",
    "listify",
    "literal",
    "quote_identifier",
    "quote_scalar",
    "render_condition_tree",
    "reset_default_config",
    "set_default_config",
    "set_escaper",
    "substitute",
)
