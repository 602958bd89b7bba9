from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import EmptyInputError, InvalidPatternError, IrregularGridError


@dataclass(frozen=True, slots=True)
class Grid:
    """
    Rectangular character grid.

    Invariants (checked by `load_grid`):
    - height > 0 and width > 0
    - every row has exactly `width` characters
    """

    rows: tuple[str, ...]
    width: int

    @property
    def height(self) -> int:
        return len(self.rows)

    def row(self, row_index: int) -> str:
        return self.rows[row_index]


def split_rows(content: str) -> list[str]:
    # Line semantics: "\n" separates rows, a trailing "\r" belongs to the line
    # ending, and a final newline does not open another row.
    if content == "":
        return []
    rows = content.split("\n")
    if rows[-1] == "":
        rows.pop()
    return [r[:-1] if r.endswith("\r") else r for r in rows]


def load_grid(content: str) -> Grid:
    rows = split_rows(content)

    if not rows or rows[0] == "":
        raise EmptyInputError("input must not be empty", detail={"rows": len(rows)})

    width = len(rows[0])
    for row_index, row in enumerate(rows):
        if len(row) != width:
            raise IrregularGridError(
                "rows in input do not have equal length",
                detail={"row_index": row_index, "expected_width": width, "actual_width": len(row)},
            )

    return Grid(rows=tuple(rows), width=width)


def compile_pattern(name: str, pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(
            f"invalid {name}",
            detail={"name": name, "pattern": pattern, "reason": str(e)},
        ) from e


def build(
    content: str,
    token_pattern: str | re.Pattern[str],
    symbol_pattern: str | re.Pattern[str],
) -> tuple[Grid, re.Pattern[str], re.Pattern[str]]:
    """
    Validate `content` and both patterns, all-or-nothing.

    Check order: empty input, irregular rows, token pattern, symbol pattern.
    """

    grid = load_grid(content)
    token_re = compile_pattern("token_pattern", token_pattern)
    symbol_re = compile_pattern("symbol_pattern", symbol_pattern)
    return grid, token_re, symbol_re
