"""Column-width allocation.

Given normalized rows (one string per column) and the current column
configuration, :func:`resolve` chooses widths that fit the viewport:

1. Natural fit: every column grows to its widest cell.
2. Priority shrink: least important columns fall back to their longest word.
3. Forced truncation: shrinkable columns give up an equal share of the excess.
4. Give-back: columns shrunk in pass 2 reclaim unused viewport space,
   most important first.

Columns are addressed by index throughout, so each pass can mutate widths
while iterating over index sets computed fresh for that pass.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from colonnade.column import Column
from colonnade.errors import InsufficientSpace
from colonnade.text import longest_word, normalized_width

logger = logging.getLogger(__name__)


def required_width(columns: Sequence[Column]) -> int:
    """Characters needed to display the table with the current widths."""
    return sum(column.outer_width for column in columns)


def minimal_width(columns: Sequence[Column]) -> int:
    """Smallest width any table with these columns could occupy.

    Every column keeps room for one character of content inside its padding.
    """
    return sum(column.left_margin + column.content_floor for column in columns)


def priorities(columns: Sequence[Column], indices: Sequence[int] | None = None) -> list[int]:
    """Distinct priorities, least important (largest number) first."""
    if indices is None:
        indices = range(len(columns))
    return sorted({columns[i].priority for i in indices}, reverse=True)


def resolve(
    columns: Sequence[Column],
    rows: Sequence[Sequence[str]],
    viewport_width: int,
    keep_nbsp: bool = False,
) -> None:
    """Fit *columns* to *rows* within *viewport_width*, mutating their widths.

    Raises :class:`~colonnade.errors.InsufficientSpace` when even forced
    truncation cannot make the table fit.  Marks every column adjusted on
    success.
    """
    _natural_fit(columns, rows, keep_nbsp)
    required = required_width(columns)
    if required <= viewport_width:
        logger.debug("natural widths fit: %d of %d", required, viewport_width)
        _mark_adjusted(columns)
        return

    modified = _shrink_to_words(columns, rows, viewport_width, keep_nbsp)
    required = required_width(columns)
    if required > viewport_width:
        _truncate(columns, viewport_width)
        required = required_width(columns)
        if required > viewport_width:
            logger.debug("cannot fit %d characters into %d", required, viewport_width)
            raise InsufficientSpace(required, viewport_width)
    elif required < viewport_width:
        _give_back(columns, modified, viewport_width)

    logger.debug(
        "resolved widths %s using %d of %d",
        [column.width for column in columns],
        required_width(columns),
        viewport_width,
    )
    _mark_adjusted(columns)


def _mark_adjusted(columns: Sequence[Column]) -> None:
    for column in columns:
        column.adjusted = True


# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------


def _natural_fit(
    columns: Sequence[Column], rows: Sequence[Sequence[str]], keep_nbsp: bool
) -> None:
    for row in rows:
        for column, cell in zip(columns, row):
            needed = normalized_width(cell, keep_nbsp) + column.horizontal_padding
            if needed >= column.width:
                column.expand(needed)


def _shrink_to_words(
    columns: Sequence[Column],
    rows: Sequence[Sequence[str]],
    viewport_width: int,
    keep_nbsp: bool,
) -> list[int]:
    """Wrap columns down to their longest word, least important first.

    Returns the indices of the columns touched, in the order touched.
    """
    modified: list[int] = []
    for priority in priorities(columns):
        for i, column in enumerate(columns):
            if column.priority != priority or not column.is_shrinkable:
                continue
            modified.append(i)
            column.shrink(0)
            for row in rows:
                needed = longest_word(row[i], keep_nbsp) + column.horizontal_padding
                if needed > column.width:
                    column.expand(needed)
        if required_width(columns) <= viewport_width:
            logger.debug("fit after wrapping priority %d", priority)
            break
    return modified


def _truncate(columns: Sequence[Column], viewport_width: int) -> None:
    """Split words in shrinkable columns until the excess is gone."""
    truncatable = [i for i, column in enumerate(columns) if column.is_shrinkable]
    for priority in priorities(columns, truncatable):
        candidates = [i for i in truncatable if columns[i].priority == priority]
        while candidates:
            excess = required_width(columns) - viewport_width
            if excess <= 0:
                return
            if excess <= len(candidates):
                survivors = []
                for i in candidates:
                    if excess > 0:
                        if not columns[i].shrink_by(1):
                            continue
                        excess = required_width(columns) - viewport_width
                    survivors.append(i)
                candidates = survivors
            else:
                share = excess // len(candidates)
                candidates = [i for i in candidates if columns[i].shrink_by(share)]
        logger.debug("truncated priority %d", priority)


def _give_back(columns: Sequence[Column], modified: list[int], viewport_width: int) -> None:
    """Return unused viewport space to wrapped columns, most important first."""
    modified = [i for i in modified if columns[i].is_expandable]
    while modified and required_width(columns) < viewport_width:
        priority = min(columns[i].priority for i in modified)
        winners = [i for i in modified if columns[i].priority == priority]
        surplus = viewport_width - required_width(columns)
        if surplus <= len(winners):
            # one unit each to as many winners as the surplus allows
            for i in winners[:surplus]:
                columns[i].width += 1
            break
        while True:
            surplus = viewport_width - required_width(columns)
            if surplus <= 0:
                break
            winners = [i for i in winners if columns[i].is_expandable]
            if not winners:
                break
            if surplus <= len(winners):
                for i in winners[:surplus]:
                    columns[i].width += 1
                break
            share = surplus // len(winners)
            changed = False
            for i in winners:
                changed = columns[i].expand_by(share) or changed
            if not changed:
                break
        modified = [i for i in modified if columns[i].priority != priority]
