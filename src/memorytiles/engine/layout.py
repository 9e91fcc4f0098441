"""Grid hints for renderers. Pure functions, no state."""

from __future__ import annotations

import math


def columns_for(total_count: int) -> int:
    if total_count <= 16:
        return 4
    if total_count == 20:
        return 5
    if total_count == 24:
        return 6
    if total_count == 28:
        return 7
    return 8


def rows_for(total_count: int) -> int:
    if total_count <= 0:
        return 0
    return math.ceil(total_count / columns_for(total_count))


def format_elapsed(seconds: int) -> str:
    """Render whole seconds as MM:SS; minutes keep counting past 59."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"
