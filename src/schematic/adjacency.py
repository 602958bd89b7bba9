from __future__ import annotations

import re

from contracts.schematic import PartNumber, RawMatch, Span

from .grid import Grid


def expanded_window(span: Span, grid_width: int) -> Span:
    return span.expand(grid_width)


def _cell_has_symbol(row: str, col: int, symbol_re: re.Pattern[str]) -> bool:
    return symbol_re.search(row, col, col + 1) is not None


def _window_has_symbol(row: str, window: Span, symbol_re: re.Pattern[str]) -> bool:
    # pos/endpos bound the search to the window without slicing the row.
    return symbol_re.search(row, window.start, window.end) is not None


def same_row_has_symbol(token: Span, grid: Grid, symbol_re: re.Pattern[str]) -> bool:
    # Only the two flanking cells: the token itself fills the middle of the window.
    row = grid.row(token.row_index)
    before = token.start > 0 and _cell_has_symbol(row, token.start - 1, symbol_re)
    after = token.end < grid.width and _cell_has_symbol(row, token.end, symbol_re)
    return before or after


def row_above_has_symbol(token: Span, grid: Grid, symbol_re: re.Pattern[str]) -> bool:
    if token.row_index == 0:
        return False
    window = expanded_window(token, grid.width)
    return _window_has_symbol(grid.row(token.row_index - 1), window, symbol_re)


def row_below_has_symbol(token: Span, grid: Grid, symbol_re: re.Pattern[str]) -> bool:
    if token.row_index == grid.height - 1:
        return False
    window = expanded_window(token, grid.width)
    return _window_has_symbol(grid.row(token.row_index + 1), window, symbol_re)


def is_adjacent(token: RawMatch | PartNumber | Span, grid: Grid, symbol_re: re.Pattern[str]) -> bool:
    """
    True when any of the 8 neighbours of the token's cells holds a symbol.

    Checks the same row (left/right flank), then the row above and the row
    below across the token's expanded window, which covers the diagonals.
    Tokens on the first/last row or column only consult in-bounds cells.
    """

    span = token if isinstance(token, Span) else token.span
    return (
        same_row_has_symbol(span, grid, symbol_re)
        or row_above_has_symbol(span, grid, symbol_re)
        or row_below_has_symbol(span, grid, symbol_re)
    )
