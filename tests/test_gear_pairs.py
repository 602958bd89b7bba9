from __future__ import annotations

import re
import unittest

from contracts.schematic import GearCandidate
from schematic.catalog import build_catalog, part_number_texts
from schematic.engine import EngineSchematic
from schematic.gears import adjacent_parts, find_pairs, is_adjacent_to_gear, iter_gear_pairs, row_band
from schematic.grid import load_grid
from schematic.report import sum_gear_ratios

# Companion grid: seven gears on the middle row, each touching exactly two
# part numbers, plus decoys (one neighbour, three neighbours, a non-gear
# symbol with two neighbours, a gear with none).
GEARS = (
    "994.............................1.2.....471.................509...............................999...707.787.................................\n"
    "...*........12*.......517*107....*.........*........41#52......*160.............661*...................*...............................495*.\n"
    "....248..........................3..........853............................*........181...................................................70"
)

EXPECTED_PAIRS = [
    ("994", "248"),
    ("517", "107"),
    ("471", "853"),
    ("509", "160"),
    ("661", "181"),
    ("707", "787"),
    ("495", "70"),
]

TOKEN = re.compile(r"\d+")
SYMBOL = re.compile(r"[^\.^\d]")
GEAR = re.compile(r"\*")


class TestGearPairs(unittest.TestCase):
    def test_companion_grid_pairs_in_row_major_order(self) -> None:
        engine = EngineSchematic.build(GEARS, r"\d+", r"[^\.^\d]", r"\*")
        pairs = engine.gear_pairs()

        self.assertEqual([g.texts() for g in iter_gear_pairs(pairs)], EXPECTED_PAIRS)
        # Grouped by the gear's row: one bucket per grid row.
        self.assertEqual([len(row) for row in pairs], [0, 7, 0])

    def test_companion_grid_part_numbers(self) -> None:
        engine = EngineSchematic.build(GEARS, TOKEN, SYMBOL)
        self.assertEqual(
            part_number_texts(engine.part_numbers()),
            ["994", "1", "2", "471", "509", "707", "787",
             "12", "517", "107", "41", "52", "160", "661", "495",
             "248", "3", "853", "181", "70"],
        )

    def test_pair_members_are_the_only_adjacent_parts(self) -> None:
        grid = load_grid(GEARS)
        catalog = build_catalog(grid, TOKEN, SYMBOL)
        all_parts = [p for row in catalog for p in row]
        for pair in iter_gear_pairs(find_pairs(grid, catalog, GEAR)):
            touching = [p for p in all_parts if is_adjacent_to_gear(p, pair.gear, grid.width)]
            self.assertEqual(touching, [pair.first, pair.second])

    def test_three_neighbours_yield_no_pair(self) -> None:
        grid = load_grid("1.2\n.*.\n.3.")
        catalog = build_catalog(grid, TOKEN, SYMBOL)
        gear = GearCandidate(row_index=1, start=1, end=2)
        self.assertEqual(len(adjacent_parts(gear, grid, catalog)), 3)
        self.assertEqual(find_pairs(grid, catalog, GEAR), [[], [], []])

    def test_one_neighbour_yields_no_pair(self) -> None:
        grid = load_grid("12*..\n.....")
        catalog = build_catalog(grid, TOKEN, SYMBOL)
        self.assertEqual(find_pairs(grid, catalog, GEAR), [[], []])

    def test_other_symbols_do_not_pair(self) -> None:
        grid = load_grid("41#52")
        catalog = build_catalog(grid, TOKEN, SYMBOL)
        self.assertEqual(part_number_texts(catalog), ["41", "52"])
        self.assertEqual(find_pairs(grid, catalog, GEAR), [[]])

    def test_early_exit_only_ends_the_current_row(self) -> None:
        # "99" in the top row starts past the gear, but the bottom row must
        # still be scanned.
        grid = load_grid("1....99\n.*...+.\n2......")
        catalog = build_catalog(grid, TOKEN, SYMBOL)
        self.assertEqual(part_number_texts(catalog), ["1", "99", "2"])

        pairs = find_pairs(grid, catalog, GEAR)
        self.assertEqual([g.texts() for g in iter_gear_pairs(pairs)], [("1", "2")])

    def test_gears_on_grid_edges(self) -> None:
        grid = load_grid("*3\n4.")
        catalog = build_catalog(grid, TOKEN, SYMBOL)
        (pair,) = list(iter_gear_pairs(find_pairs(grid, catalog, GEAR)))
        self.assertEqual(pair.texts(), ("3", "4"))
        self.assertEqual((pair.gear.row_index, pair.gear.start, pair.gear.end), (0, 0, 1))

    def test_row_band_is_clipped(self) -> None:
        self.assertEqual(list(row_band(0, 3)), [0, 1])
        self.assertEqual(list(row_band(1, 3)), [0, 1, 2])
        self.assertEqual(list(row_band(2, 3)), [1, 2])
        self.assertEqual(list(row_band(0, 1)), [0])

    def test_pairs_are_idempotent(self) -> None:
        engine = EngineSchematic.build(GEARS, TOKEN, SYMBOL, GEAR)
        self.assertEqual(engine.gear_pairs(), engine.gear_pairs())
        self.assertEqual(engine.gear_pairs(GEAR), engine.gear_pairs())

    def test_gear_ratio_totals(self) -> None:
        engine = EngineSchematic.build("467..114..\n...*......\n..35..633.", TOKEN, SYMBOL, GEAR)
        pairs = engine.gear_pairs()
        (pair,) = list(iter_gear_pairs(pairs))
        self.assertEqual(pair.ratio(), 467 * 35)
        self.assertEqual(sum_gear_ratios(pairs), 16345)

    def test_missing_gear_pattern(self) -> None:
        engine = EngineSchematic.build("1*2", TOKEN, SYMBOL)
        with self.assertRaises(ValueError):
            engine.gear_pairs()
        self.assertEqual([g.texts() for g in iter_gear_pairs(engine.gear_pairs(GEAR))], [("1", "2")])


if __name__ == "__main__":
    unittest.main()
