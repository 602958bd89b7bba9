"""
Engine schematic analysis.

Reads a rectangular character grid and derives:
- part numbers: numeric tokens with a symbol among their 8 neighbours
- gear pairs: pairing symbols adjacent to exactly two part numbers

The grid is validated once at build time; every later query works on
immutable state and cannot fail.
"""

from .catalog import PartCatalog, build_catalog
from .config import SchematicConfig
from .engine import EngineSchematic, run_schematic
from .errors import EmptyInputError, InvalidPatternError, IrregularGridError, SchematicBuildError
from .gears import find_pairs
from .grid import Grid, load_grid
from .report import sum_gear_ratios, sum_part_numbers

__all__ = [
    "EmptyInputError",
    "EngineSchematic",
    "Grid",
    "InvalidPatternError",
    "IrregularGridError",
    "PartCatalog",
    "SchematicBuildError",
    "SchematicConfig",
    "build_catalog",
    "find_pairs",
    "load_grid",
    "run_schematic",
    "sum_gear_ratios",
    "sum_part_numbers",
]
