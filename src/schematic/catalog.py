from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor, as_completed

from contracts.schematic import PartNumber

from .adjacency import is_adjacent
from .grid import Grid
from .locate import locate

PartCatalog = list[list[PartNumber]]


def catalog_row(
    grid: Grid,
    row_index: int,
    token_re: re.Pattern[str],
    symbol_re: re.Pattern[str],
) -> list[PartNumber]:
    # Reads this row and at most its two neighbours; discovery order is kept.
    return [
        PartNumber.from_match(m)
        for m in locate(token_re, grid.row(row_index), row_index)
        if is_adjacent(m, grid, symbol_re)
    ]


def build_catalog(
    grid: Grid,
    token_re: re.Pattern[str],
    symbol_re: re.Pattern[str],
    *,
    workers: int = 1,
) -> PartCatalog:
    """
    Part numbers grouped by row: one bucket per grid row, empty rows included,
    so `catalog[row_index]` is a direct lookup.

    With `workers > 1` rows are classified concurrently; every task writes only
    its own slot, so the result is identical to the sequential build.
    """

    if workers <= 1 or grid.height == 1:
        return [catalog_row(grid, i, token_re, symbol_re) for i in range(grid.height)]

    slots: list[list[PartNumber] | None] = [None] * grid.height
    with ThreadPoolExecutor(max_workers=workers) as ex:
        futures = {
            ex.submit(catalog_row, grid, i, token_re, symbol_re): i for i in range(grid.height)
        }
        for fut in as_completed(futures):
            slots[futures[fut]] = fut.result()

    return [row if row is not None else [] for row in slots]


def iter_part_numbers(catalog: PartCatalog):
    for row in catalog:
        yield from row


def part_number_texts(catalog: PartCatalog) -> list[str]:
    return [p.text for p in iter_part_numbers(catalog)]
