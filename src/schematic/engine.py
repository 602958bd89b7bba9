from __future__ import annotations

import re
from typing import Any

from contracts.schematic import GearPair, SchematicError, SchematicResult

from .catalog import PartCatalog, build_catalog
from .config import SchematicConfig
from .errors import SchematicBuildError
from .gears import find_pairs
from .grid import Grid, build as build_grid, compile_pattern
from .locate import locate_in_grid
from .report import sum_gear_ratios, sum_part_numbers


class EngineSchematic:
    """
    Validated grid plus compiled patterns.

    Built once via `build()`; the part catalog is computed on first use and
    reused for the rest of the analysis. Queries cannot fail once built.
    """

    def __init__(
        self,
        grid: Grid,
        token_re: re.Pattern[str],
        symbol_re: re.Pattern[str],
        gear_re: re.Pattern[str] | None = None,
        *,
        workers: int = 1,
    ) -> None:
        self.grid = grid
        self.token_re = token_re
        self.symbol_re = symbol_re
        self.gear_re = gear_re
        self.workers = workers
        self._catalog: PartCatalog | None = None

    @classmethod
    def build(
        cls,
        content: str,
        token_pattern: str | re.Pattern[str],
        symbol_pattern: str | re.Pattern[str],
        gear_symbol_pattern: str | re.Pattern[str] | None = None,
        *,
        workers: int = 1,
    ) -> "EngineSchematic":
        grid, token_re, symbol_re = build_grid(content, token_pattern, symbol_pattern)
        gear_re = (
            None
            if gear_symbol_pattern is None
            else compile_pattern("gear_symbol_pattern", gear_symbol_pattern)
        )
        return cls(grid, token_re, symbol_re, gear_re, workers=workers)

    @classmethod
    def from_config(cls, content: str, config: SchematicConfig) -> "EngineSchematic":
        config.validate()
        return cls.build(
            content,
            config.token_pattern,
            config.symbol_pattern,
            config.gear_symbol_pattern if config.include_gear_pairs else None,
            workers=config.workers,
        )

    def part_numbers(self) -> PartCatalog:
        if self._catalog is None:
            self._catalog = build_catalog(
                self.grid, self.token_re, self.symbol_re, workers=self.workers
            )
        return self._catalog

    def gear_pairs(self, gear_re: re.Pattern[str] | None = None) -> list[list[GearPair]]:
        pattern = gear_re if gear_re is not None else self.gear_re
        if pattern is None:
            raise ValueError("no gear symbol pattern given at build time or call time")
        return find_pairs(self.grid, self.part_numbers(), pattern)

    def candidate_count(self) -> int:
        return sum(1 for _ in locate_in_grid(self.token_re, self.grid))


def _failed_result(
    errors: list[SchematicError], meta: dict[str, Any], source_relpath: str | None
) -> SchematicResult:
    return SchematicResult(
        ok=False,
        errors=errors,
        meta=meta,
        part_numbers=[],
        gear_pairs=None,
        source_relpath=source_relpath,
    )


def _canonicalize_meta(meta: dict[str, Any]) -> None:
    warnings = meta.get("warnings")
    if isinstance(warnings, list):
        meta["warnings"] = sorted(warnings, key=lambda w: (str(w.get("code", "")), str(w.get("message", ""))))


def run_schematic(
    content: str,
    config: SchematicConfig,
    *,
    source_relpath: str | None = None,
    extra_meta: dict[str, Any] | None = None,
) -> SchematicResult:
    config.validate()

    meta: dict[str, Any] = {
        "stage": "schematic",
        "version": "schematic_v1",
        "config": config.to_dict(),
        "counts": {},
        "totals": {},
        "warnings": [],
    }
    if extra_meta:
        meta.update(extra_meta)

    try:
        engine = EngineSchematic.from_config(content, config)
    except SchematicBuildError as e:
        return _failed_result([e.to_error()], meta, source_relpath)

    catalog = engine.part_numbers()
    pairs = engine.gear_pairs() if config.include_gear_pairs else None

    candidates = engine.candidate_count()
    part_count = sum(len(row) for row in catalog)
    meta["counts"] = {
        "rows": engine.grid.height,
        "width": engine.grid.width,
        "candidates": candidates,
        "part_numbers": part_count,
        "rejected_candidates": candidates - part_count,
        "gear_candidates": (
            0
            if engine.gear_re is None
            else sum(1 for _ in locate_in_grid(engine.gear_re, engine.grid))
        ),
        "gear_pairs": 0 if pairs is None else sum(len(row) for row in pairs),
    }

    if part_count == 0:
        meta["warnings"].append(
            {
                "code": "SCHEMATIC_NO_PART_NUMBERS",
                "message": "No token is adjacent to a symbol.",
                "detail": {"candidates": candidates},
            }
        )

    try:
        meta["totals"]["part_numbers_sum"] = sum_part_numbers(catalog)
        if pairs is not None:
            meta["totals"]["gear_ratios_sum"] = sum_gear_ratios(pairs)
    except ValueError as e:
        # Custom token patterns may match non-integer text.
        meta["totals"] = {}
        meta["warnings"].append(
            {
                "code": "SCHEMATIC_TOTALS_SKIPPED",
                "message": "Part number text is not an integer; totals were not computed.",
                "detail": {"reason": str(e)},
            }
        )

    _canonicalize_meta(meta)

    return SchematicResult(
        ok=True,
        errors=[],
        meta=meta,
        part_numbers=catalog,
        gear_pairs=pairs,
        source_relpath=source_relpath,
    )
