"""Statement builder mixins, one per clause."""

from sqlstitch.builder.mixins._delete_from import DeleteFromClauseMixin
from sqlstitch.builder.mixins._from import FromClauseMixin
from sqlstitch.builder.mixins._insert_values import InsertValuesMixin
from sqlstitch.builder.mixins._join import JoinClauseMixin, JoinCondition, JoinType
from sqlstitch.builder.mixins._order_limit import GroupByClauseMixin, LimitClauseMixin, OrderByClauseMixin
from sqlstitch.builder.mixins._select_columns import SelectColumnsMixin
from sqlstitch.builder.mixins._union import UnionClauseMixin, UnionType
from sqlstitch.builder.mixins._update_set import UpdateSetClauseMixin
from sqlstitch.builder.mixins._update_table import UpdateTableClauseMixin
from sqlstitch.builder.mixins._where import HavingClauseMixin, WhereClauseMixin

__all__ = (
    "DeleteFromClauseMixin",
    "FromClauseMixin",
    "GroupByClauseMixin",
    "HavingClauseMixin",
    "InsertValuesMixin",
    "JoinClauseMixin",
    "JoinCondition",
    "JoinType",
    "LimitClauseMixin",
    "OrderByClauseMixin",
    "SelectColumnsMixin",
    "UnionClauseMixin",
    "UnionType",
    "UpdateSetClauseMixin",
    "UpdateTableClauseMixin",
    "WhereClauseMixin",
)
