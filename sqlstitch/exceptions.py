from typing import Any

__all__ = (
    "ImproperConfigurationError",
    "InvalidClauseSpecificationError",
    "InvalidEscapeArgumentError",
    "SQLStitchError",
    "UnknownExpressionKindError",
)


class SQLStitchError(Exception):
    """Base exception class from which all sqlstitch exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLStitchError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLStitchError):
    """Improper Configuration error.

    Raised when a :class:`~sqlstitch.core.config.StitchConfig` is built with values
    that cannot be used, such as an unknown dialect.
    """


class UnknownExpressionKindError(SQLStitchError):
    """An expression was requested for a kind that is not registered."""

    kind: Any

    def __init__(self, kind: Any) -> None:
        super().__init__(f"Unknown expression kind {kind!r}.")
        self.kind = kind


class InvalidEscapeArgumentError(SQLStitchError):
    """A value handed to the escaper is neither a scalar nor a callable."""

    def __init__(self, message: "str | None" = None) -> None:
        if message is None:
            message = "Given argument is neither callable nor scalar."
        super().__init__(message)


class InvalidClauseSpecificationError(SQLStitchError):
    """A join, union or clear call was given an unsupported keyword or argument."""

    def __init__(self, message: "str | None" = None) -> None:
        if message is None:
            message = "Invalid clause specification."
        super().__init__(message)
