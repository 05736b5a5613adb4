"""Core type aliases for colonnade."""

from __future__ import annotations

import sys
from typing import Literal

Alignment = Literal["left", "right", "center", "justify"]

VerticalAlignment = Literal["top", "middle", "bottom"]

# (margin, content) pair for one column on one physical line
Fragment = tuple[str, str]

Line = list[Fragment]

# Columns start at the lowest priority, so they give up space first
LOWEST_PRIORITY = sys.maxsize

ALIGNMENTS: tuple[str, ...] = ("left", "right", "center", "justify")

VERTICAL_ALIGNMENTS: tuple[str, ...] = ("top", "middle", "bottom")
