"""Per-column configuration and the width primitives used by the resolver."""

from __future__ import annotations

from colonnade.errors import MinGreaterThanMax
from colonnade.types import (
    ALIGNMENTS,
    LOWEST_PRIORITY,
    VERTICAL_ALIGNMENTS,
    Alignment,
    VerticalAlignment,
)


def _check_count(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


class Column:
    """One vertical slot of a table.

    ``width`` is the resolved content width, excluding the left margin.  It
    is only meaningful while ``adjusted`` is true; configuration changes that
    can move column boundaries clear ``adjusted`` so the owning table lays
    itself out again on next use.

    Setters return the column so calls can be chained::

        table.columns[1].set_alignment("center").set_left_margin(4)

    Unlike the table-level setters, these never check that the table still
    fits its viewport.  A margin or padding that is too wide only surfaces as
    :class:`~colonnade.errors.InsufficientSpace` when the table is next laid
    out.
    """

    def __init__(self, index: int, left_margin: int = 1) -> None:
        self.index = index
        self.alignment: Alignment = "left"
        self.vertical_alignment: VerticalAlignment = "top"
        self.left_margin = left_margin
        self.width = 0
        self.priority = LOWEST_PRIORITY
        self.min_width: int | None = None
        self.max_width: int | None = None
        self.padding_left = 0
        self.padding_right = 0
        self.padding_top = 0
        self.padding_bottom = 0
        self.hyphenate = True
        self.adjusted = False

    def __repr__(self) -> str:
        return (
            f"Column(index={self.index}, width={self.width}, "
            f"min_width={self.min_width}, max_width={self.max_width}, "
            f"priority={self.priority}, adjusted={self.adjusted})"
        )

    # ------------------------------------------------------------------
    # Derived widths
    # ------------------------------------------------------------------

    @property
    def horizontal_padding(self) -> int:
        return self.padding_left + self.padding_right

    @property
    def vertical_padding(self) -> int:
        return self.padding_top + self.padding_bottom

    @property
    def minimum_width(self) -> int:
        padding = self.horizontal_padding
        if self.min_width is None:
            return padding
        return max(self.min_width, padding)

    @property
    def effective_width(self) -> int:
        """The width clamped to the column's bounds."""
        width = self.width
        if self.max_width is not None and self.max_width < width:
            width = self.max_width
        return max(self.minimum_width, width)

    @property
    def outer_width(self) -> int:
        return self.left_margin + self.effective_width

    @property
    def content_floor(self) -> int:
        """Narrowest width that still leaves one character for content."""
        return max(self.minimum_width, self.horizontal_padding + 1)

    @property
    def is_shrinkable(self) -> bool:
        return self.minimum_width < self.width

    @property
    def is_expandable(self) -> bool:
        return self.max_width is None or self.max_width > self.width

    def blank_line(self) -> str:
        return " " * self.effective_width

    def margin(self) -> str:
        return " " * self.left_margin

    # ------------------------------------------------------------------
    # Width primitives
    # ------------------------------------------------------------------

    def shrink(self, target: int) -> None:
        """Shrink as close to *target* as the minimum width allows."""
        self.width = max(self.minimum_width, target)

    def shrink_by(self, amount: int) -> bool:
        """Shrink by *amount*, keeping at least one character inside the padding.

        Returns whether the width changed.
        """
        if not self.is_shrinkable:
            return False
        target = max(self.width - amount, self.content_floor)
        before = self.width
        self.shrink(target)
        return before != self.width

    def expand(self, target: int) -> bool:
        """Grow toward *target*, capped by the maximum width.

        Growth also lifts the width to the minimum width when the target
        falls short of it.  Returns whether the width changed.
        """
        if target <= self.width:
            return False
        if self.max_width is not None and self.max_width < target:
            change = self.max_width
        elif self.minimum_width > target:
            change = self.minimum_width
        else:
            change = target
        changed = self.width != change
        self.width = change
        return changed

    def expand_by(self, amount: int) -> bool:
        return self.expand(self.width + amount)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_priority(self, priority: int) -> Column:
        """Lower numbers are more important; 0 is the highest priority."""
        self.priority = _check_count("priority", priority)
        self.adjusted = False
        return self

    def set_min_width(self, min_width: int) -> Column:
        _check_count("min_width", min_width)
        if self.max_width is not None and self.max_width < min_width:
            raise MinGreaterThanMax(self.index)
        self.min_width = min_width
        self.width = min_width
        self.adjusted = False
        return self

    def set_max_width(self, max_width: int) -> Column:
        _check_count("max_width", max_width)
        if self.min_width is not None and self.min_width > max_width:
            raise MinGreaterThanMax(self.index)
        self.max_width = max_width
        self.adjusted = False
        return self

    def set_fixed_width(self, width: int) -> Column:
        """Set both bounds to *width*."""
        _check_count("width", width)
        self.clear_limits()
        self.set_min_width(width)
        return self.set_max_width(width)

    def clear_limits(self) -> Column:
        self.min_width = None
        self.max_width = None
        self.adjusted = False
        return self

    def set_alignment(self, alignment: Alignment) -> Column:
        if alignment not in ALIGNMENTS:
            raise ValueError(f"unknown alignment {alignment!r}")
        self.alignment = alignment
        return self

    def set_vertical_alignment(self, vertical_alignment: VerticalAlignment) -> Column:
        if vertical_alignment not in VERTICAL_ALIGNMENTS:
            raise ValueError(f"unknown vertical alignment {vertical_alignment!r}")
        self.vertical_alignment = vertical_alignment
        return self

    def set_left_margin(self, left_margin: int) -> Column:
        self.left_margin = _check_count("left_margin", left_margin)
        self.adjusted = False
        return self

    def set_padding(self, padding: int) -> Column:
        """Pad all four sides of the cell by *padding*."""
        self.set_padding_horizontal(padding)
        return self.set_padding_vertical(padding)

    def set_padding_horizontal(self, padding: int) -> Column:
        self.set_padding_left(padding)
        return self.set_padding_right(padding)

    def set_padding_vertical(self, padding: int) -> Column:
        self.set_padding_top(padding)
        return self.set_padding_bottom(padding)

    def set_padding_left(self, padding: int) -> Column:
        self.padding_left = _check_count("padding", padding)
        self.adjusted = False
        return self

    def set_padding_right(self, padding: int) -> Column:
        self.padding_right = _check_count("padding", padding)
        self.adjusted = False
        return self

    def set_padding_top(self, padding: int) -> Column:
        self.padding_top = _check_count("padding", padding)
        return self

    def set_padding_bottom(self, padding: int) -> Column:
        self.padding_bottom = _check_count("padding", padding)
        return self

    def set_hyphenate(self, hyphenate: bool) -> Column:
        self.hyphenate = hyphenate
        return self
