"""Turn rows of cell text into wrapped, aligned, padded physical lines.

Every physical line is a list of ``(margin, content)`` fragments, one per
column.  A separator line between rows is a single fragment whose margin
spans the whole table and whose content is empty.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from colonnade.column import Column
from colonnade.text import is_blank, justify_words, split_word, split_words
from colonnade.types import Line


@dataclass
class _CellCursor:
    """Words and padding lines a column still has to emit for one row."""

    top: int
    words: deque[str] = field(default_factory=deque)
    bottom: int = 0

    @property
    def exhausted(self) -> bool:
        return self.top == 0 and self.bottom == 0 and not self.words


def separator_line(width: int) -> Line:
    return [(" " * width, "")]


def compose_row(
    columns: Sequence[Column],
    cells: Sequence[str],
    *,
    last_row: bool,
    spaces_between_rows: int = 0,
    keep_nbsp: bool = False,
) -> list[Line]:
    """Lay out one logical row as one or more physical lines."""
    cursors = [
        _CellCursor(
            top=column.padding_top,
            words=deque(split_words(cell, keep_nbsp)),
            bottom=column.padding_bottom,
        )
        for column, cell in zip(columns, cells)
    ]
    lines: list[Line] = []

    if all(not cursor.words for cursor in cursors):
        height = max(1, max(column.vertical_padding for column in columns))
        for _ in range(height):
            lines.append([(column.margin(), column.blank_line()) for column in columns])
    else:
        while not all(cursor.exhausted for cursor in cursors):
            lines.append(
                [
                    (column.margin(), _next_content(column, cursor))
                    for column, cursor in zip(columns, cursors)
                ]
            )
        for i, column in enumerate(columns):
            _align_vertically(lines, i, column)

    if not last_row and spaces_between_rows:
        width = sum(column.outer_width for column in columns)
        lines.extend(separator_line(width) for _ in range(spaces_between_rows))
    return lines


def flatten(lines: Sequence[Line]) -> list[str]:
    """Join each line's fragments; separator lines become empty strings."""
    result: list[str] = []
    for line in lines:
        if len(line) == 1 and not line[0][1]:
            result.append("")
        else:
            result.append("".join(margin + content for margin, content in line))
    return result


# ---------------------------------------------------------------------------
# Horizontal layout
# ---------------------------------------------------------------------------


def _next_content(column: Column, cursor: _CellCursor) -> str:
    if cursor.top > 0:
        cursor.top -= 1
        return column.blank_line()
    if not cursor.words:
        if cursor.bottom > 0:
            cursor.bottom -= 1
        return column.blank_line()
    words = _pack(column, cursor.words)
    return _align(column, words, last_line=not cursor.words)


def _pack(column: Column, queue: deque[str]) -> list[str]:
    """Pop as many words from *queue* as fit on one line of *column*.

    A first word too long for the line is split and its remainder pushed
    back onto the queue.
    """
    width = column.effective_width
    available = width - column.horizontal_padding
    length = column.padding_left
    words: list[str] = []
    while queue:
        word = queue.popleft()
        if not words:
            if len(word) == available:
                words.append(word)
                break
            if len(word) > available:
                head, rest = split_word(word, available, column.hyphenate)
                if rest:
                    queue.appendleft(rest)
                words.append(head)
                break
        new_length = length + len(word) + (1 if words else 0)
        if new_length + column.padding_right > width:
            queue.appendleft(word)
            break
        words.append(word)
        length = new_length
    return words


def _align(column: Column, words: list[str], last_line: bool) -> str:
    """Pad the packed *words* out to the column width."""
    width = column.effective_width
    left = " " * column.padding_left
    if column.alignment == "justify" and not last_line and len(words) > 1:
        inner = width - column.horizontal_padding
        return left + justify_words(words, inner) + " " * column.padding_right

    phrase = left + " ".join(words)
    surplus = width - len(phrase)
    if surplus <= 0:
        return phrase
    if column.alignment == "right":
        # keep the right padding after the text
        trailing = min(column.padding_right, surplus)
        return " " * (surplus - trailing) + phrase + " " * trailing
    if column.alignment == "center":
        before = surplus // 2
        return " " * before + phrase + " " * (surplus - before)
    return phrase + " " * surplus


# ---------------------------------------------------------------------------
# Vertical layout
# ---------------------------------------------------------------------------


def _align_vertically(lines: list[Line], index: int, column: Column) -> None:
    """Shift a column's content down inside its padding for middle/bottom."""
    if column.vertical_alignment == "top":
        return
    start = column.padding_top
    end = len(lines) - column.padding_bottom
    if end - start < 2:
        return
    fragments = [lines[n][index] for n in range(start, end)]
    movable = 0
    for _, content in reversed(fragments):
        if not is_blank(content):
            break
        movable += 1
    if movable == len(fragments):
        return
    shift = movable // 2 if column.vertical_alignment == "middle" else movable
    if shift == 0:
        return
    rotated = fragments[-shift:] + fragments[:-shift]
    for n, fragment in zip(range(start, end), rotated):
        lines[n][index] = fragment
