from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Union

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from sqlstitch.core.conditions import ConditionTree
    from sqlstitch.core.expression import Expression
    from sqlstitch.protocols import QueryProtocol

__all__ = (
    "SCALAR_TYPES",
    "Bindings",
    "ConditionCallback",
    "ConditionSpec",
    "EscaperCallable",
    "Scalar",
)

SCALAR_TYPES: "tuple[type, ...]" = (str, bytes, int, float, Decimal, bool)
"""Types treated as SQL scalars by the escaper."""

Scalar: TypeAlias = Union[str, bytes, int, float, Decimal, bool, None]
EscaperCallable: TypeAlias = Callable[[Any], Any]
ConditionCallback: TypeAlias = "Callable[[QueryProtocol], str]"
Bindings: TypeAlias = Union[Mapping[Any, Any], Sequence[Any], Scalar]
ConditionSpec: TypeAlias = Union[
    Scalar,
    "Expression",
    "QueryProtocol",
    "ConditionTree",
    Mapping[str, Any],
    Sequence[Any],
    "ConditionCallback",
]
