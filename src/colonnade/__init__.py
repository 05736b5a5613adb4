"""colonnade: lay out text in columns within a fixed-width viewport."""

from colonnade.column import Column
from colonnade.composer import flatten
from colonnade.config import ColumnConfig, TableConfig, load_config
from colonnade.errors import (
    ColonnadeError,
    InconsistentColumns,
    InsufficientColumns,
    InsufficientSpace,
    MinGreaterThanMax,
    OutOfBounds,
)
from colonnade.table import Colonnade
from colonnade.types import LOWEST_PRIORITY, Alignment, Fragment, Line, VerticalAlignment

__all__ = [
    "LOWEST_PRIORITY",
    "Alignment",
    "Colonnade",
    "ColonnadeError",
    "Column",
    "ColumnConfig",
    "Fragment",
    "InconsistentColumns",
    "InsufficientColumns",
    "InsufficientSpace",
    "Line",
    "MinGreaterThanMax",
    "OutOfBounds",
    "TableConfig",
    "VerticalAlignment",
    "flatten",
    "load_config",
]
