from __future__ import annotations

from contracts.schematic import GearPair

from .catalog import PartCatalog, iter_part_numbers
from .gears import iter_gear_pairs


def sum_part_numbers(catalog: PartCatalog) -> int:
    return sum(p.value() for p in iter_part_numbers(catalog))


def sum_gear_ratios(pairs: list[list[GearPair]]) -> int:
    return sum(g.ratio() for g in iter_gear_pairs(pairs))
