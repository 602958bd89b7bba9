from __future__ import annotations

import re
from typing import Iterator

from contracts.schematic import RawMatch

from .grid import Grid


def locate(pattern: re.Pattern[str], row: str, row_index: int = 0) -> Iterator[RawMatch]:
    """
    Non-overlapping, leftmost-first matches of `pattern` on one row.

    Each call starts a fresh scan; the returned iterator holds no state shared
    with other calls.
    """

    for m in pattern.finditer(row):
        yield RawMatch(row_index=row_index, start=m.start(), end=m.end(), row=row)


def locate_in_grid(pattern: re.Pattern[str], grid: Grid) -> Iterator[RawMatch]:
    # Row-major: top-to-bottom, then left-to-right within a row.
    for row_index, row in enumerate(grid.rows):
        yield from locate(pattern, row, row_index)
