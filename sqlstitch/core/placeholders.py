"""``{:name}`` placeholder substitution.

Statement templates and parametrized conditions are both assembled here. The
replacement is a single regex pass, so text coming from a binding is never
scanned for further placeholders.
"""

import re
from collections.abc import Mapping
from typing import Any

from sqlstitch.core.escaping import Escaper, render_nested
from sqlstitch.utils.type_guards import is_expression_like

__all__ = ("PLACEHOLDER_PATTERN", "has_placeholder", "substitute")

PLACEHOLDER_PATTERN = re.compile(r"\{:([a-z0-9_-]+)\}", re.IGNORECASE)

_MISSING = object()


def has_placeholder(text: Any) -> bool:
    """Return True if ``text`` is a string containing at least one ``{:name}`` token."""
    return isinstance(text, str) and PLACEHOLDER_PATTERN.search(text) is not None


def _lookup(bindings: "Mapping[Any, Any]", name: str) -> Any:
    if name in bindings:
        return bindings[name]
    if name.isdigit() and int(name) in bindings:
        return bindings[int(name)]
    return _MISSING


def substitute(
    template: str,
    bindings: "Mapping[Any, Any]",
    quote_scalars: bool = False,
    drop_unmatched: bool = True,
    *,
    escaper: "Escaper | None" = None,
    context: Any = None,
) -> str:
    """Replace ``{:name}`` tokens in ``template`` with values from ``bindings``.

    Args:
        template: Text containing placeholder tokens.
        bindings: Mapping of placeholder name to value. Integer keys match their string form.
        quote_scalars: Quote and escape bound values that are not expressions.
        drop_unmatched: Replace tokens without a binding by empty text instead of leaving them untouched.
        escaper: Escaper used for quoting. Defaults to one bound to the process-wide config.
        context: Statement passed to expressions rendered as bindings.

    Returns:
        The template with every token replaced.
    """
    escaper = escaper if escaper is not None else Escaper()

    def _replace(match: "re.Match[str]") -> str:
        value = _lookup(bindings, match.group(1))
        if value is _MISSING:
            return "" if drop_unmatched else match.group(0)
        if is_expression_like(value):
            return render_nested(value, context, escaper.config)
        if quote_scalars:
            return escaper.quote_scalar(value, context)
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template)
