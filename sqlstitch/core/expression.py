"""Deferred, typed SQL fragments.

An :class:`Expression` stores a kind and its arguments and produces text only
when rendered. Values wrapped in an expression are never quoted by the
builders, which makes expressions the way to embed raw SQL, identifiers or
callbacks in places that normally take escaped scalars.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlstitch.core.escaping import Escaper
from sqlstitch.core.placeholders import substitute
from sqlstitch.exceptions import UnknownExpressionKindError
from sqlstitch.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlstitch.core.config import StitchConfig
    from sqlstitch.protocols import QueryProtocol
    from sqlstitch.typing import Bindings, ConditionCallback

__all__ = ("Expression", "ExpressionKind")

logger = get_logger("core.expression")


class ExpressionKind(str, Enum):
    """Every kind of fragment an :class:`Expression` can render."""

    RAW = "raw"
    PARAMS = "params"
    SPRINTF = "sprintf"
    IDENTIFIERS = "identifiers"
    VALUE_LIST = "values"
    LIKE = "like"
    STARTS_LIKE = "starts_like"
    ENDS_LIKE = "ends_like"
    CALLBACK = "callback"


def _normalize_bindings(bindings: Any) -> "Mapping[Any, Any]":
    if bindings is None:
        return {}
    if isinstance(bindings, Mapping):
        return bindings
    if isinstance(bindings, (list, tuple)):
        return {str(index): value for index, value in enumerate(bindings)}
    return {"0": bindings}


def _render_raw(args: "tuple[Any, ...]", context: Any, escaper: Escaper) -> str:
    return str(args[0])


def _render_params(args: "tuple[Any, ...]", context: Any, escaper: Escaper) -> str:
    template = args[0]
    bindings = _normalize_bindings(args[1] if len(args) > 1 else None)
    quote = args[2] if len(args) > 2 else True
    return substitute(template, bindings, quote_scalars=quote, escaper=escaper, context=context)


def _render_sprintf(args: "tuple[Any, ...]", context: Any, escaper: Escaper) -> str:
    return str(args[0]) % args[1:]


def _render_identifiers(args: "tuple[Any, ...]", context: Any, escaper: Escaper) -> str:
    return escaper.quote_identifier(args[0])


def _render_value_list(args: "tuple[Any, ...]", context: Any, escaper: Escaper) -> str:
    return f"VALUES({escaper.quote_identifier(args[0])})"


def _like_renderer(prefix: str, suffix: str) -> "Callable[[tuple[Any, ...], Any, Escaper], str]":
    def _render(args: "tuple[Any, ...]", context: Any, escaper: Escaper) -> str:
        pattern = f"'{prefix}{escaper.like_escape(args[0])}{suffix}'"
        column = args[1] if len(args) > 1 else None
        if column is None:
            return pattern
        return f"{escaper.quote_identifier(column)} LIKE {pattern}"

    return _render


def _render_callback(args: "tuple[Any, ...]", context: Any, escaper: Escaper) -> str:
    callback = args[0]
    if context is None or not callable(callback):
        logger.debug("Callback expression rendered without a statement context; emitting empty text")
        return ""
    return str(callback(context))


_RENDERERS: "dict[ExpressionKind, Callable[[tuple[Any, ...], Any, Escaper], str]]" = {
    ExpressionKind.RAW: _render_raw,
    ExpressionKind.PARAMS: _render_params,
    ExpressionKind.SPRINTF: _render_sprintf,
    ExpressionKind.IDENTIFIERS: _render_identifiers,
    ExpressionKind.VALUE_LIST: _render_value_list,
    ExpressionKind.LIKE: _like_renderer("%", "%"),
    ExpressionKind.STARTS_LIKE: _like_renderer("", "%"),
    ExpressionKind.ENDS_LIKE: _like_renderer("%", ""),
    ExpressionKind.CALLBACK: _render_callback,
}


class Expression:
    """A deferred SQL fragment of a given :class:`ExpressionKind`.

    Expressions are immutable and can be rendered any number of times.
    """

    __slots__ = ("_args", "_kind")

    def __init__(self, kind: "ExpressionKind | str", *args: Any) -> None:
        try:
            resolved = ExpressionKind(kind.lower() if isinstance(kind, str) else kind)
        except ValueError as exc:
            raise UnknownExpressionKindError(kind) from exc
        if not args:
            msg = f"Expression kind {resolved.value!r} requires at least one argument."
            raise TypeError(msg)
        object.__setattr__(self, "_kind", resolved)
        object.__setattr__(self, "_args", args)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @property
    def kind(self) -> ExpressionKind:
        return self._kind

    @property
    def args(self) -> "tuple[Any, ...]":
        return self._args

    @classmethod
    def make(cls, kind: "ExpressionKind | str", *args: Any) -> "Expression":
        """Build an expression from a kind and its arguments.

        Raises:
            UnknownExpressionKindError: If ``kind`` is not an :class:`ExpressionKind`.
        """
        return cls(kind, *args)

    @classmethod
    def raw(cls, text: str) -> "Expression":
        return cls(ExpressionKind.RAW, text)

    @classmethod
    def params(cls, template: str, bindings: "Bindings" = None, quote: bool = True) -> "Expression":
        """Template with ``{:name}`` placeholders filled from ``bindings`` at render time.

        Args:
            template: Text containing placeholder tokens.
            bindings: Mapping of names to values, a list bound by position (``{:0}``, ``{:1}``)
                or a single value bound to ``{:0}``.
            quote: Quote and escape bound scalars.
        """
        return cls(ExpressionKind.PARAMS, template, bindings, quote)

    @classmethod
    def sprintf(cls, fmt: str, *args: Any) -> "Expression":
        return cls(ExpressionKind.SPRINTF, fmt, *args)

    @classmethod
    def identifiers(cls, name: str) -> "Expression":
        return cls(ExpressionKind.IDENTIFIERS, name)

    @classmethod
    def values(cls, name: str) -> "Expression":
        """``VALUES(`name`)``, the proposed row value inside ``ON DUPLICATE KEY UPDATE``."""
        return cls(ExpressionKind.VALUE_LIST, name)

    @classmethod
    def like(cls, pattern: Any, column: "str | None" = None) -> "Expression":
        return cls(ExpressionKind.LIKE, pattern, column)

    @classmethod
    def starts_like(cls, pattern: Any, column: "str | None" = None) -> "Expression":
        return cls(ExpressionKind.STARTS_LIKE, pattern, column)

    @classmethod
    def ends_like(cls, pattern: Any, column: "str | None" = None) -> "Expression":
        return cls(ExpressionKind.ENDS_LIKE, pattern, column)

    @classmethod
    def callback(cls, callback: "ConditionCallback") -> "Expression":
        return cls(ExpressionKind.CALLBACK, callback)

    def render(self, context: "QueryProtocol | None" = None, config: "StitchConfig | None" = None) -> str:
        """Render the expression to SQL text.

        Args:
            context: The statement that owns this expression. Required for callbacks.
            config: Configuration to escape with. Defaults to the context's config,
                then to the process-wide default.

        Returns:
            The SQL fragment.
        """
        if config is None and context is not None:
            config = context.config
        return _RENDERERS[self._kind](self._args, context, Escaper(config))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        args = ", ".join(repr(arg) for arg in self._args)
        return f"Expression({self._kind.value!r}, {args})"
