"""Protocols describing what renderers may read from a statement builder."""

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from sqlstitch.core.config import StitchConfig

__all__ = ("QueryProtocol",)


class QueryProtocol(Protocol):
    """Read surface of :class:`~sqlstitch.builder.Query` handed to callbacks and expressions."""

    @property
    def config(self) -> "StitchConfig": ...

    def render(self, context: Any = None) -> str: ...

    def parameters(self, parameters: "dict[Any, Any] | None" = None) -> Any: ...

    def __getitem__(self, key: "int | str") -> Any: ...

    def __contains__(self, key: object) -> bool: ...
