"""
Canonical schematic analysis contracts.

These models are the schema boundary between the engine and its callers
(CLI, artifacts, tests). Code should consume/produce these contract objects,
not ad-hoc dicts.
"""

from .schematic import (
    GearCandidate,
    GearPair,
    PartNumber,
    RawMatch,
    SchematicError,
    SchematicResult,
    Span,
)

__all__ = [
    "Span",
    "RawMatch",
    "PartNumber",
    "GearCandidate",
    "GearPair",
    "SchematicError",
    "SchematicResult",
]
