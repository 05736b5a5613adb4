"""Tests for colonnade.column.Column -- per-column state and width primitives."""

from __future__ import annotations

import pytest

from colonnade.column import Column
from colonnade.errors import MinGreaterThanMax
from colonnade.types import LOWEST_PRIORITY


def make_column(width: int = 0) -> Column:
    column = Column(0, left_margin=0)
    column.width = width
    return column


class TestColumnDefaults:
    """A fresh column is unconstrained and unresolved."""

    def test_defaults(self) -> None:
        column = Column(2)
        assert column.index == 2
        assert column.alignment == "left"
        assert column.vertical_alignment == "top"
        assert column.left_margin == 1
        assert column.width == 0
        assert column.priority == LOWEST_PRIORITY
        assert column.min_width is None
        assert column.max_width is None
        assert column.hyphenate is True
        assert column.adjusted is False


class TestDerivedWidths:
    """Effective, minimum and outer widths."""

    def test_effective_width_clamped_to_max(self) -> None:
        column = make_column(10)
        column.max_width = 6
        assert column.effective_width == 6

    def test_effective_width_lifted_to_min(self) -> None:
        column = make_column(1)
        column.min_width = 3
        assert column.effective_width == 3

    def test_minimum_width_includes_padding(self) -> None:
        column = make_column()
        column.set_padding_horizontal(2)
        assert column.minimum_width == 4
        column.min_width = 3
        assert column.minimum_width == 4
        column.min_width = 6
        assert column.minimum_width == 6

    def test_outer_width_adds_margin(self) -> None:
        column = make_column(5)
        column.left_margin = 3
        assert column.outer_width == 8

    def test_shrinkable_and_expandable(self) -> None:
        column = make_column(5)
        assert column.is_shrinkable
        assert column.is_expandable
        column.max_width = 5
        assert not column.is_expandable
        column.min_width = 5
        assert not column.is_shrinkable

    def test_blank_line_and_margin(self) -> None:
        column = make_column(4)
        column.left_margin = 2
        assert column.blank_line() == "    "
        assert column.margin() == "  "


class TestShrink:
    """Shrinking never goes below the minimum or to zero."""

    def test_shrink_to_target(self) -> None:
        column = make_column(10)
        column.shrink(4)
        assert column.width == 4

    def test_shrink_stops_at_minimum(self) -> None:
        column = make_column(10)
        column.min_width = 6
        column.shrink(0)
        assert column.width == 6

    def test_shrink_by(self) -> None:
        column = make_column(10)
        assert column.shrink_by(3) is True
        assert column.width == 7

    def test_shrink_by_whole_width_leaves_one(self) -> None:
        column = make_column(10)
        assert column.shrink_by(10) is True
        assert column.width == 1

    def test_shrink_by_keeps_room_inside_padding(self) -> None:
        column = make_column(10)
        column.set_padding_horizontal(1)
        assert column.content_floor == 3
        column.shrink_by(20)
        assert column.width == 3
        assert column.shrink_by(1) is False

    def test_content_floor_honours_min_width(self) -> None:
        column = make_column(10)
        column.min_width = 6
        assert column.content_floor == 6

    def test_shrink_by_respects_minimum(self) -> None:
        column = make_column(10)
        column.min_width = 3
        column.shrink_by(20)
        assert column.width == 3

    def test_shrink_by_unshrinkable_is_noop(self) -> None:
        column = make_column(3)
        column.min_width = 3
        assert column.shrink_by(1) is False
        assert column.width == 3

    def test_shrink_by_reports_no_change_at_one(self) -> None:
        column = make_column(1)
        assert column.shrink_by(5) is False
        assert column.width == 1


class TestExpand:
    """Expanding is capped by the maximum and lifted to the minimum."""

    def test_expand_to_target(self) -> None:
        column = make_column(2)
        assert column.expand(7) is True
        assert column.width == 7

    def test_expand_ignores_smaller_target(self) -> None:
        column = make_column(5)
        assert column.expand(3) is False
        assert column.expand(5) is False
        assert column.width == 5

    def test_expand_capped_by_max(self) -> None:
        column = make_column(2)
        column.max_width = 5
        column.expand(8)
        assert column.width == 5

    def test_expand_lifts_to_minimum(self) -> None:
        column = make_column(0)
        column.set_padding_horizontal(2)
        assert column.expand(2) is True
        assert column.width == 4

    def test_expand_by(self) -> None:
        column = make_column(4)
        assert column.expand_by(3) is True
        assert column.width == 7


class TestColumnConfiguration:
    """Fluent setters and their constraints."""

    def test_setters_chain(self) -> None:
        column = Column(1)
        result = column.set_alignment("center").set_left_margin(4).set_priority(2)
        assert result is column
        assert column.alignment == "center"
        assert column.left_margin == 4
        assert column.priority == 2

    def test_min_width_sets_width(self) -> None:
        column = make_column()
        column.set_min_width(5)
        assert column.min_width == 5
        assert column.width == 5

    def test_min_above_max_rejected_without_change(self) -> None:
        column = make_column(2)
        column.set_max_width(3)
        with pytest.raises(MinGreaterThanMax) as excinfo:
            column.set_min_width(5)
        assert excinfo.value.column == 0
        assert column.min_width is None
        assert column.width == 2

    def test_max_below_min_rejected_without_change(self) -> None:
        column = Column(3)
        column.set_min_width(5)
        with pytest.raises(MinGreaterThanMax) as excinfo:
            column.set_max_width(4)
        assert excinfo.value.column == 3
        assert column.max_width is None

    def test_fixed_width_replaces_old_bounds(self) -> None:
        column = make_column()
        column.set_min_width(8)
        column.set_fixed_width(4)
        assert column.min_width == 4
        assert column.max_width == 4

    def test_clear_limits(self) -> None:
        column = make_column()
        column.set_fixed_width(4)
        column.clear_limits()
        assert column.min_width is None
        assert column.max_width is None

    def test_padding_setters(self) -> None:
        column = make_column()
        column.set_padding(1)
        assert (column.padding_left, column.padding_right) == (1, 1)
        assert (column.padding_top, column.padding_bottom) == (1, 1)
        column.set_padding_vertical(2)
        assert column.vertical_padding == 4
        assert column.horizontal_padding == 2

    def test_horizontal_changes_clear_adjusted(self) -> None:
        column = make_column()
        for change in (
            lambda c: c.set_priority(1),
            lambda c: c.set_min_width(1),
            lambda c: c.set_max_width(9),
            lambda c: c.clear_limits(),
            lambda c: c.set_left_margin(2),
            lambda c: c.set_padding_left(1),
            lambda c: c.set_padding_right(1),
        ):
            column.adjusted = True
            change(column)
            assert column.adjusted is False

    def test_vertical_changes_keep_adjusted(self) -> None:
        column = make_column()
        column.adjusted = True
        column.set_alignment("right").set_vertical_alignment("bottom")
        column.set_padding_top(1).set_padding_bottom(1).set_hyphenate(False)
        assert column.adjusted is True

    def test_negative_values_rejected(self) -> None:
        column = make_column()
        with pytest.raises(ValueError):
            column.set_left_margin(-1)
        with pytest.raises(ValueError):
            column.set_min_width(-2)

    def test_unknown_alignment_rejected(self) -> None:
        column = make_column()
        with pytest.raises(ValueError, match="alignment"):
            column.set_alignment("diagonal")  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="vertical alignment"):
            column.set_vertical_alignment("left")  # type: ignore[arg-type]
