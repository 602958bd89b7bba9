from __future__ import annotations

import argparse
from pathlib import Path

from contracts.schematic import GearPair, PartNumber

from .config import SchematicConfig
from .data_access import read_schematic_text
from .engine import EngineSchematic


def _span_str(p: PartNumber) -> str:
    return f"[{p.start},{p.end})"


def _pair_str(g: GearPair) -> str:
    return f"gear@{g.gear.start} {g.first.text}*{g.second.text}={g.ratio()}"


def render_rows(engine: EngineSchematic, *, max_rows: int = 0) -> list[str]:
    catalog = engine.part_numbers()
    pairs = engine.gear_pairs() if engine.gear_re is not None else None

    out: list[str] = []
    for i, row in enumerate(engine.grid.rows):
        if max_rows and i >= max_rows:
            out.append(f"... (truncated at {max_rows})")
            break

        out.append(f"r{i:04d} {row}")
        for p in catalog[i]:
            out.append(f"  - part {p.text!r} {_span_str(p)}")
        if pairs is not None:
            for g in pairs[i]:
                out.append(f"  * {_pair_str(g)}")
    return out


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="schematic-debug-print")
    ap.add_argument("--input", required=True, type=Path, help="Schematic text file.")
    ap.add_argument("--max-rows", type=int, default=0, help="If >0, truncate after N rows.")
    args = ap.parse_args(argv)

    cfg = SchematicConfig()
    engine = EngineSchematic.from_config(read_schematic_text(args.input), cfg)

    print(f"rows={engine.grid.height} width={engine.grid.width}")
    for line in render_rows(engine, max_rows=args.max_rows):
        print(line)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
