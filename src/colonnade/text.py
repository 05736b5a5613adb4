"""Cell text utilities: word splitting, width measurement, word slicing.

Widths are counted in Unicode code points (``len()``), not terminal columns.
Wide characters therefore occupy one unit here even if a terminal draws them
two cells wide.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Word splitting
# ---------------------------------------------------------------------------

# Non-breaking spaces: NO-BREAK SPACE, FIGURE SPACE, NARROW NO-BREAK SPACE
NBSP_CHARS = "\u00a0\u2007\u202f"

# Whitespace runs that may break a line when non-breaking spaces are kept
_BREAKING_WS_RE = re.compile("[^\\S" + NBSP_CHARS + "]+")


def split_words(text: str, keep_nbsp: bool = False) -> list[str]:
    """Split *text* into words on runs of whitespace.

    Leading and trailing whitespace is dropped.  With *keep_nbsp* the
    non-breaking spaces in :data:`NBSP_CHARS` count as word characters.
    """
    if not keep_nbsp:
        return text.split()
    return [word for word in _BREAKING_WS_RE.split(text) if word]


def normalized_width(text: str, keep_nbsp: bool = False) -> int:
    """Width of *text* after trimming and collapsing whitespace runs to one space."""
    words = split_words(text, keep_nbsp)
    if not words:
        return 0
    return sum(len(word) for word in words) + len(words) - 1


def longest_word(text: str, keep_nbsp: bool = False) -> int:
    """Length of the longest run of non-whitespace in *text* (0 if blank)."""
    return max((len(word) for word in split_words(text, keep_nbsp)), default=0)


def is_blank(text: str) -> bool:
    return not text or text.isspace()


# ---------------------------------------------------------------------------
# Word slicing
# ---------------------------------------------------------------------------


def split_word(word: str, available: int, hyphenate: bool = True) -> tuple[str, str]:
    """Break an over-long *word* so the head fits in *available* characters.

    Returns ``(head, rest)``.  The head ends with ``-`` when hyphenating and
    there is room for at least one other character.  A column one character
    wide (or narrower) always takes exactly one character without a hyphen,
    so every call makes progress.
    """
    if available <= 1:
        return word[:1], word[1:]
    if hyphenate:
        cut = available - 1
        return word[:cut] + "-", word[cut:]
    return word[:available], word[available:]


def justify_words(words: list[str], width: int) -> str:
    """Join *words* with spaces widened so the result is *width* long.

    The surplus is spread evenly over the gaps; leftover units go to the
    leftmost gaps.  A single word is returned unchanged.
    """
    if len(words) < 2:
        return "".join(words)
    gaps = len(words) - 1
    surplus = width - sum(len(word) for word in words)
    if surplus < gaps:
        return " ".join(words)
    share, extra = divmod(surplus, gaps)
    parts: list[str] = []
    for i, word in enumerate(words):
        parts.append(word)
        if i < gaps:
            parts.append(" " * (share + (1 if i < extra else 0)))
    return "".join(parts)
