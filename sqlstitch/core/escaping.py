"""Escaping and quoting primitives.

Every string literal rendered by sqlstitch passes through an :class:`Escaper`.
The escaper function itself is pluggable (normally a driver's escaping
routine); quoting and identifier handling are fixed.
"""

from collections.abc import Mapping
from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from sqlglot import exp

from sqlstitch.core.config import StitchConfig, get_default_config, set_escaper
from sqlstitch.exceptions import InvalidEscapeArgumentError
from sqlstitch.utils.type_guards import is_expression, is_query, is_scalar

if TYPE_CHECKING:
    from sqlstitch.core.expression import Expression

__all__ = (
    "Escaper",
    "escape",
    "like_escape",
    "listify",
    "literal",
    "quote_identifier",
    "quote_scalar",
    "render_nested",
)

_NULL = "NULL"


@lru_cache(maxsize=1024)
def _quote_identifier(name: str, dialect: str) -> str:
    parts = []
    for part in name.split("."):
        part = part.strip()
        if part == "*":
            parts.append(part)
        else:
            parts.append(exp.to_identifier(part, quoted=True).sql(dialect=dialect))
    return ".".join(parts)


def render_nested(value: Any, context: Any = None, config: "StitchConfig | None" = None) -> str:
    """Render an expression or nested statement to text.

    Nested statements are rendered with their own configuration and lose their
    trailing whitespace so they can be embedded in brackets.

    Args:
        value: An :class:`Expression` or :class:`Query`.
        context: The statement that owns the fragment being rendered.
        config: Configuration used for expressions.

    Returns:
        The rendered text.
    """
    if is_query(value):
        return value.render().rstrip()
    return value.render(context, config)


class Escaper:
    """Quoting primitives bound to one :class:`StitchConfig`.

    An escaper created without a config reads the process default each time it
    is used, so a late :func:`set_escaper` call still applies to it.
    """

    __slots__ = ("_config",)

    def __init__(self, config: "StitchConfig | None" = None) -> None:
        self._config = config

    @property
    def config(self) -> StitchConfig:
        return self._config if self._config is not None else get_default_config()

    def escape(self, value: Any) -> Any:
        """Escape a scalar with the configured escaper.

        Args:
            value: The scalar to escape.

        Raises:
            InvalidEscapeArgumentError: If ``value`` is not a scalar.

        Returns:
            The escaped value, or a raw ``NULL`` expression for ``None``.
        """
        if value is None:
            from sqlstitch.core.expression import Expression

            return Expression.raw(_NULL)
        if not is_scalar(value):
            msg = f"Cannot escape value of type {type(value).__name__}."
            raise InvalidEscapeArgumentError(msg)
        if isinstance(value, bytes):
            value = value.decode()
        if isinstance(value, bool):
            value = int(value)
        escaper = self.config.escaper
        return escaper(value) if escaper is not None else value

    def quote_scalar(self, value: Any, context: Any = None) -> str:
        """Escape a value and wrap it in single quotes.

        ``None`` renders as ``NULL``, sequences as a comma separated list of quoted
        items, expressions and nested statements as their own text.
        """
        if value is None:
            return _NULL
        if is_expression(value):
            return render_nested(value, context, self.config)
        if is_query(value):
            return f"({render_nested(value)})"
        if isinstance(value, (list, tuple, set, frozenset, Mapping)):
            return self.listify(value, context)
        return f"'{self.escape(value)}'"

    def listify(self, values: Any, context: Any = None) -> str:
        """Quote every item of ``values`` and join them with commas."""
        if isinstance(values, Mapping):
            values = values.values()
        return ", ".join(self.quote_scalar(value, context) for value in values)

    def literal(self, value: Any, context: Any = None) -> str:
        """Render a value literal, leaving numbers unquoted."""
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return str(self.escape(value))
        return self.quote_scalar(value, context)

    def quote_identifier(self, name: Any) -> str:
        """Quote a possibly dotted identifier, e.g. ``db.table`` becomes ```db`.`table```.

        Segments are trimmed and ``*`` is left bare. No other validation happens.
        """
        return _quote_identifier(str(name), self.config.dialect)

    def like_escape(self, value: Any) -> str:
        """Escape a value and additionally escape the ``%`` and ``_`` wildcards."""
        return str(self.escape(value)).replace("%", "\\%").replace("_", "\\_")


def escape(value: Any) -> "Any | Expression":
    """Escape a scalar with the process-wide escaper, or install a new escaper.

    Args:
        value: A scalar to escape, ``None``, or a callable to install as the escaper.

    Raises:
        InvalidEscapeArgumentError: If ``value`` is neither a scalar nor a callable.

    Returns:
        The escaped scalar, a ``NULL`` expression for ``None``, or ``None`` after installing an escaper.
    """
    if value is not None and not is_scalar(value) and callable(value):
        set_escaper(value)
        return None
    return Escaper().escape(value)


def quote_scalar(value: Any) -> str:
    return Escaper().quote_scalar(value)


def listify(values: Any) -> str:
    return Escaper().listify(values)


def literal(value: Any) -> str:
    return Escaper().literal(value)


def quote_identifier(name: Any) -> str:
    return Escaper().quote_identifier(name)


def like_escape(value: Any) -> str:
    return Escaper().like_escape(value)
