"""The table object: column configuration, cached layout and output."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from colonnade import composer, resolver
from colonnade.column import Column
from colonnade.config import TableConfig, apply_column_config
from colonnade.errors import (
    InconsistentColumns,
    InsufficientColumns,
    InsufficientSpace,
    MinGreaterThanMax,
    OutOfBounds,
)
from colonnade.types import Alignment, Line, VerticalAlignment

logger = logging.getLogger(__name__)


class Colonnade:
    """Lays out rows of text as columns inside a fixed-width viewport.

    Column widths are worked out from the first batch of data and then
    reused for every later batch, so a table printed in chunks keeps a
    stable layout.  Call :meth:`reset` (or :meth:`resolve`) to fit the
    columns to new data instead.

    Example::

        table = Colonnade(3, 80)
        table.set_alignment("right", index=2).set_spaces_between_rows(1)
        for line in table.tabulate(rows):
            print(line)
    """

    def __init__(
        self,
        columns: int,
        width: int,
        *,
        spaces_between_rows: int = 0,
        pad_short_rows: bool = True,
        keep_nbsp: bool = False,
    ) -> None:
        if columns <= 0:
            raise InsufficientColumns()
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        self.columns: list[Column] = [
            Column(i, left_margin=0 if i == 0 else 1) for i in range(columns)
        ]
        self.width = width
        self.spaces_between_rows = spaces_between_rows
        self.pad_short_rows = pad_short_rows
        self.keep_nbsp = keep_nbsp
        self._check_space()

    @classmethod
    def from_config(cls, config: TableConfig) -> Colonnade:
        """Build a table from a validated :class:`~colonnade.config.TableConfig`."""
        table = cls(
            len(config.columns),
            config.width,
            spaces_between_rows=config.spaces_between_rows,
            pad_short_rows=config.pad_short_rows,
            keep_nbsp=config.keep_nbsp,
        )
        for column, column_config in zip(table.columns, config.columns):
            if config.defaults is not None:
                apply_column_config(column, config.defaults)
            apply_column_config(column, column_config)
        table._check_space()
        return table

    def __len__(self) -> int:
        return len(self.columns)

    def __getitem__(self, index: int) -> Column:
        return self.columns[self._check_index(index)]

    def __repr__(self) -> str:
        return (
            f"Colonnade(columns={len(self.columns)}, width={self.width}, "
            f"adjusted={self.adjusted})"
        )

    # ------------------------------------------------------------------
    # Layout state
    # ------------------------------------------------------------------

    @property
    def adjusted(self) -> bool:
        """True when the cached widths are still valid for the configuration."""
        return all(column.adjusted for column in self.columns)

    @property
    def current_width(self) -> int | None:
        """Viewport characters in use, or None before the table is laid out."""
        if not self.adjusted:
            return None
        return resolver.required_width(self.columns)

    @property
    def minimal_width(self) -> int:
        return resolver.minimal_width(self.columns)

    def reset(self) -> None:
        """Forget the cached widths; the next use lays the table out afresh."""
        for column in self.columns:
            column.width = 0
            column.adjusted = False
        logger.debug("layout reset")

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def resolve(self, rows: Iterable[Sequence[Any]]) -> None:
        """Recompute column widths for *rows* without producing output.

        Widths start from scratch, so narrower data gives narrower columns.
        On failure the widths in place before the call are restored.
        """
        self._resolve(self._normalize(rows), refit=True)

    def compose(self, rows: Iterable[Sequence[Any]]) -> list[list[Line]]:
        """Lay out *rows* as ``(margin, content)`` fragments.

        The result is indexed by row, then physical line, then column.  Use
        this instead of :meth:`tabulate` to decorate cells (with colour
        codes, say) before joining them.
        """
        table = self._normalize(rows)
        if not self.adjusted:
            self._resolve(table)
        last = len(table) - 1
        return [
            composer.compose_row(
                self.columns,
                row,
                last_row=i == last,
                spaces_between_rows=self.spaces_between_rows,
                keep_nbsp=self.keep_nbsp,
            )
            for i, row in enumerate(table)
        ]

    def tabulate(self, rows: Iterable[Sequence[Any]]) -> list[str]:
        """Lay out *rows* as plain lines of text.

        Separator lines between rows are empty strings rather than
        full-width runs of spaces.
        """
        return [
            line
            for row_lines in self.compose(rows)
            for line in composer.flatten(row_lines)
        ]

    def _resolve(self, table: list[list[str]], refit: bool = False) -> None:
        if not table:
            # nothing to measure; keep the current layout
            return
        snapshot = [column.width for column in self.columns]
        if refit:
            for column in self.columns:
                column.width = 0
        try:
            resolver.resolve(self.columns, table, self.width, self.keep_nbsp)
        except InsufficientSpace:
            for column, width in zip(self.columns, snapshot):
                column.width = width
            raise

    def _normalize(self, rows: Iterable[Sequence[Any]]) -> list[list[str]]:
        expected = len(self.columns)
        table: list[list[str]] = []
        for i, row in enumerate(rows):
            cells = [str(cell) for cell in row]
            if self.pad_short_rows and len(cells) < expected:
                cells.extend([""] * (expected - len(cells)))
            if len(cells) != expected:
                raise InconsistentColumns(i, len(cells), expected)
            table.append(cells)
        return table

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_spaces_between_rows(self, count: int) -> Colonnade:
        """Insert *count* blank lines between rows (never after the last)."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self.spaces_between_rows = count
        return self

    def set_priority(self, priority: int, index: int | None = None) -> Colonnade:
        """Lower numbers are more important: they give up space last."""
        self._each(index, lambda c: c.set_priority(priority))
        return self

    def set_min_width(self, min_width: int, index: int | None = None) -> Colonnade:
        selected = self._select(index)
        for column in selected:
            if column.max_width is not None and column.max_width < min_width:
                raise MinGreaterThanMax(column.index)
        for column in selected:
            column.set_min_width(min_width)
        return self._check_space()

    def set_max_width(self, max_width: int, index: int | None = None) -> Colonnade:
        selected = self._select(index)
        for column in selected:
            if column.min_width is not None and column.min_width > max_width:
                raise MinGreaterThanMax(column.index)
        for column in selected:
            column.set_max_width(max_width)
        return self

    def set_fixed_width(self, width: int, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.set_fixed_width(width))
        return self._check_space()

    def clear_limits(self, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.clear_limits())
        return self

    def set_alignment(self, alignment: Alignment, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.set_alignment(alignment))
        return self

    def set_vertical_alignment(
        self, vertical_alignment: VerticalAlignment, index: int | None = None
    ) -> Colonnade:
        self._each(index, lambda c: c.set_vertical_alignment(vertical_alignment))
        return self

    def set_left_margin(self, left_margin: int, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.set_left_margin(left_margin))
        return self._check_space()

    def set_padding(self, padding: int, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.set_padding(padding))
        return self._check_space()

    def set_padding_horizontal(self, padding: int, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.set_padding_horizontal(padding))
        return self._check_space()

    def set_padding_vertical(self, padding: int, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.set_padding_vertical(padding))
        return self

    def set_padding_left(self, padding: int, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.set_padding_left(padding))
        return self._check_space()

    def set_padding_right(self, padding: int, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.set_padding_right(padding))
        return self._check_space()

    def set_padding_top(self, padding: int, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.set_padding_top(padding))
        return self

    def set_padding_bottom(self, padding: int, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.set_padding_bottom(padding))
        return self

    def set_hyphenate(self, hyphenate: bool, index: int | None = None) -> Colonnade:
        self._each(index, lambda c: c.set_hyphenate(hyphenate))
        return self

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self.columns):
            raise OutOfBounds(index)
        return index

    def _select(self, index: int | None) -> list[Column]:
        if index is None:
            return list(self.columns)
        return [self.columns[self._check_index(index)]]

    def _each(self, index: int | None, apply: Callable[[Column], Column]) -> None:
        for column in self._select(index):
            apply(column)

    def _check_space(self) -> Colonnade:
        """Raise if the columns' minimum widths and margins overflow the viewport.

        Settings already applied stay in place.
        """
        needed = self.minimal_width
        if needed > self.width:
            raise InsufficientSpace(needed, self.width)
        return self
