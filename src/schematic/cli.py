from __future__ import annotations

import argparse
import json
from pathlib import Path

from contracts.schematic import SchematicError, SchematicResult

from .artifacts import serialize_schematic_result, write_schematic_json_artifact
from .config import SchematicConfig
from .data_access import DataAccessError, read_schematic_text, sha256_file
from .engine import run_schematic


def build_arg_parser() -> argparse.ArgumentParser:
    defaults = SchematicConfig()
    p = argparse.ArgumentParser(
        prog="schematic",
        description="Engine schematic analysis: part numbers adjacent to symbols, and gear pairs.",
    )
    p.add_argument("--input", required=True, type=Path, help="Path to the schematic text file.")
    p.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path to write the JSON result artifact (printed to stdout when omitted).",
    )
    p.add_argument(
        "--mode",
        choices=("parts", "gears"),
        default="gears",
        help="'parts' skips gear pairing; 'gears' reports part numbers and gear pairs.",
    )
    p.add_argument("--token-pattern", default=defaults.token_pattern)
    p.add_argument("--symbol-pattern", default=defaults.symbol_pattern)
    p.add_argument("--gear-symbol-pattern", default=defaults.gear_symbol_pattern)
    p.add_argument(
        "--workers",
        type=int,
        default=defaults.workers,
        help="Rows classified concurrently when > 1.",
    )
    p.add_argument(
        "--compute-source-sha256",
        action="store_true",
        default=False,
        help="Record the SHA-256 of the input file in result meta.",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    cfg = SchematicConfig(
        token_pattern=args.token_pattern,
        symbol_pattern=args.symbol_pattern,
        gear_symbol_pattern=args.gear_symbol_pattern,
        workers=args.workers,
        include_gear_pairs=(args.mode == "gears"),
        compute_source_sha256=args.compute_source_sha256,
    )

    try:
        content = read_schematic_text(args.input)
    except DataAccessError as e:
        result = SchematicResult(
            ok=False,
            errors=[
                SchematicError(
                    code="SCHEMATIC_INPUT_UNREADABLE",
                    message=str(e),
                    detail={"input": str(args.input)},
                )
            ],
            meta={"stage": "schematic", "version": "schematic_v1", "config": cfg.to_dict()},
            part_numbers=[],
            gear_pairs=None,
            source_relpath=str(args.input),
        )
    else:
        extra_meta = None
        if cfg.compute_source_sha256:
            extra_meta = {"source_sha256": sha256_file(args.input)}
        result = run_schematic(content, cfg, source_relpath=str(args.input), extra_meta=extra_meta)

    if args.output is None:
        print(serialize_schematic_result(result), end="")
        return 0 if result.ok else 2

    write_schematic_json_artifact(result=result, out_file=args.output)

    counts = result.meta.get("counts") or {}
    summary = {
        "ok": result.ok,
        "errors": [e.code for e in result.errors],
        "rows": counts.get("rows", 0),
        "part_numbers": counts.get("part_numbers", 0),
        "gear_pairs": counts.get("gear_pairs", 0),
        **(result.meta.get("totals") or {}),
    }
    print(json.dumps(summary, sort_keys=True, separators=(",", ":"), ensure_ascii=False))

    return 0 if result.ok else 2


if __name__ == "__main__":
    raise SystemExit(main())
