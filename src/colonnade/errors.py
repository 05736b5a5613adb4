"""Exceptions raised while configuring or laying out a table."""

from __future__ import annotations


class ColonnadeError(Exception):
    """Base class for every layout and configuration failure."""


class InsufficientColumns(ColonnadeError):
    """The table was asked to hold zero columns."""

    def __init__(self) -> None:
        super().__init__("a table needs at least one column")


class InsufficientSpace(ColonnadeError):
    """The viewport cannot hold the columns' minimum widths and margins."""

    def __init__(self, required: int | None = None, available: int | None = None) -> None:
        self.required = required
        self.available = available
        if required is None or available is None:
            message = "insufficient space in viewport"
        else:
            message = f"table needs {required} characters but the viewport has {available}"
        super().__init__(message)


class InconsistentColumns(ColonnadeError):
    """A data row does not have one cell per column."""

    def __init__(self, row: int, actual: int, expected: int) -> None:
        self.row = row
        self.actual = actual
        self.expected = expected
        super().__init__(f"row {row} has {actual} cells; expected {expected}")


class MinGreaterThanMax(ColonnadeError):
    """A column's minimum width would exceed its maximum width."""

    def __init__(self, column: int) -> None:
        self.column = column
        super().__init__(f"column {column}: minimum width greater than maximum width")


class OutOfBounds(ColonnadeError, IndexError):
    """A configuration call named a column that does not exist."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"no column at index {index}")
