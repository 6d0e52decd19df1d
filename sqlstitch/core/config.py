"""Configuration for escaping and rendering.

A :class:`StitchConfig` bundles the escaper function, the target dialect used
for identifier quoting and the default union bracket mode. Builders accept a
config at construction time; those created without one fall back to the
process-wide default, which is swapped atomically.
"""

import threading
from dataclasses import dataclass, replace
from typing import Any

from sqlglot import Dialect

from sqlstitch.exceptions import ImproperConfigurationError, InvalidEscapeArgumentError
from sqlstitch.typing import EscaperCallable
from sqlstitch.utils.logging import get_logger

__all__ = (
    "DEFAULT_DIALECT",
    "StitchConfig",
    "get_default_config",
    "reset_default_config",
    "set_default_config",
    "set_escaper",
)

logger = get_logger("core.config")

DEFAULT_DIALECT = "mysql"


@dataclass(frozen=True)
class StitchConfig:
    """Rendering configuration shared by expressions and statement builders.

    Attributes:
        escaper: Function applied to every scalar before it is quoted. ``None`` means identity.
        dialect: sqlglot dialect name whose identifier quote character is used.
        union_brackets: Whether new builders wrap union members in brackets.
    """

    escaper: "EscaperCallable | None" = None
    dialect: str = DEFAULT_DIALECT
    union_brackets: bool = True

    def __post_init__(self) -> None:
        if self.escaper is not None and not callable(self.escaper):
            msg = f"Escaper must be callable, got {type(self.escaper).__name__}."
            raise InvalidEscapeArgumentError(msg)
        try:
            Dialect.get_or_raise(self.dialect)
        except ValueError as exc:
            msg = f"Unknown dialect {self.dialect!r}."
            raise ImproperConfigurationError(msg) from exc

    def replace(self, **changes: Any) -> "StitchConfig":
        """Return a copy of this config with ``changes`` applied."""
        return replace(self, **changes)


_default_config = StitchConfig()
_config_lock = threading.Lock()


def get_default_config() -> StitchConfig:
    """Return the process-wide default configuration."""
    return _default_config


def set_default_config(config: StitchConfig) -> None:
    """Install ``config`` as the process-wide default.

    Args:
        config: The configuration used by builders and expressions that were not given one.
    """
    global _default_config  # noqa: PLW0603
    with _config_lock:
        _default_config = config
    logger.debug("Default configuration replaced", extra={"extra_fields": {"dialect": config.dialect}})


def reset_default_config() -> None:
    """Restore the stock default configuration (identity escaper, MySQL quoting)."""
    set_default_config(StitchConfig())


def set_escaper(escaper: "EscaperCallable | None") -> None:
    """Install the process-wide scalar escaper. The last call wins.

    Args:
        escaper: Callable mapping a scalar to its escaped form, or ``None`` for identity.

    Raises:
        InvalidEscapeArgumentError: If ``escaper`` is not callable.
    """
    if escaper is not None and not callable(escaper):
        msg = f"Escaper must be callable, got {type(escaper).__name__}."
        raise InvalidEscapeArgumentError(msg)
    global _default_config  # noqa: PLW0603
    with _config_lock:
        _default_config = _default_config.replace(escaper=escaper)
    logger.debug("Escaper installed", extra={"extra_fields": {"identity": escaper is None}})
