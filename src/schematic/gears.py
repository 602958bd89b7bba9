from __future__ import annotations

import re
from typing import Iterator

from contracts.schematic import GearCandidate, GearPair, PartNumber

from .catalog import PartCatalog
from .grid import Grid
from .locate import locate


def locate_gear_candidates(
    grid: Grid, row_index: int, gear_re: re.Pattern[str]
) -> Iterator[GearCandidate]:
    for m in locate(gear_re, grid.row(row_index), row_index):
        yield GearCandidate(row_index=m.row_index, start=m.start, end=m.end)


def row_band(row_index: int, height: int) -> range:
    # Symbol row +/- 1, clipped to the grid.
    return range(max(0, row_index - 1), min(height - 1, row_index + 1) + 1)


def is_adjacent_to_gear(part: PartNumber, gear: GearCandidate, grid_width: int) -> bool:
    if part.span.row_distance(gear.span) > 1:
        return False
    return part.span.expand(grid_width).contains(gear.span)


def adjacent_parts(
    gear: GearCandidate, grid: Grid, catalog: PartCatalog
) -> list[PartNumber]:
    found: list[PartNumber] = []
    for row_index in row_band(gear.row_index, grid.height):
        for part in catalog[row_index]:
            # Parts are ordered by start within a row; the rest of this row
            # starts past the gear. Later rows in the band are still scanned.
            if part.start > gear.end:
                break
            if is_adjacent_to_gear(part, gear, grid.width):
                found.append(part)
    return found


def pair_for_gear(gear: GearCandidate, grid: Grid, catalog: PartCatalog) -> GearPair | None:
    parts = adjacent_parts(gear, grid, catalog)
    if len(parts) != 2:
        return None
    return GearPair(gear=gear, first=parts[0], second=parts[1])


def find_pairs(
    grid: Grid, catalog: PartCatalog, gear_re: re.Pattern[str]
) -> list[list[GearPair]]:
    """
    Gear pairs grouped by the row of their pairing symbol.

    A symbol yields a pair only when exactly two catalog entries are adjacent
    to it; any other count yields nothing. Rows are top-to-bottom and symbols
    left-to-right within a row.
    """

    out: list[list[GearPair]] = []
    for row_index in range(grid.height):
        row_pairs: list[GearPair] = []
        for gear in locate_gear_candidates(grid, row_index, gear_re):
            pair = pair_for_gear(gear, grid, catalog)
            if pair is not None:
                row_pairs.append(pair)
        out.append(row_pairs)
    return out


def iter_gear_pairs(pairs: list[list[GearPair]]) -> Iterator[GearPair]:
    for row in pairs:
        yield from row
