from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SchematicConfig:
    """
    Engine schematic analysis parameters.

    Defaults are explicit constants. The symbol pattern matches any character
    that is neither a digit nor the `.` filler.
    """

    token_pattern: str = r"\d+"
    symbol_pattern: str = r"[^\.^\d]"
    gear_symbol_pattern: str = r"\*"

    # Row-parallel catalog build; 1 keeps the build on the calling thread.
    workers: int = 1

    include_gear_pairs: bool = True
    compute_source_sha256: bool = False  # optional audit metadata

    def validate(self) -> None:
        if not self.token_pattern:
            raise ValueError("token_pattern must be a non-empty pattern")
        if not self.symbol_pattern:
            raise ValueError("symbol_pattern must be a non-empty pattern")
        if self.include_gear_pairs and not self.gear_symbol_pattern:
            raise ValueError("gear_symbol_pattern must be a non-empty pattern")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")

    def to_dict(self) -> dict[str, Any]:
        return {
            "token_pattern": self.token_pattern,
            "symbol_pattern": self.symbol_pattern,
            "gear_symbol_pattern": self.gear_symbol_pattern,
            "workers": self.workers,
            "include_gear_pairs": self.include_gear_pairs,
            "compute_source_sha256": self.compute_source_sha256,
        }
