from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Span:
    """
    Column span on a single grid row (inclusive-exclusive):
    - `start` is the first column covered
    - `end` is one past the last column covered
    """

    row_index: int
    start: int
    end: int

    def width(self) -> int:
        return int(self.end - self.start)

    def expand(self, grid_width: int) -> "Span":
        # One column wider on each side, clipped to [0, grid_width).
        return Span(
            row_index=self.row_index,
            start=max(0, self.start - 1),
            end=min(grid_width, self.end + 1),
        )

    def contains(self, other: "Span") -> bool:
        return self.start <= other.start and other.end <= self.end

    def row_distance(self, other: "Span") -> int:
        return abs(self.row_index - other.row_index)

    def to_dict(self) -> dict[str, Any]:
        return {"row_index": self.row_index, "start": self.start, "end": self.end}


@dataclass(frozen=True, slots=True)
class RawMatch:
    """
    One pattern match on one row.

    The matched text is not stored; it is resolved on access from the row the
    match was found in.
    """

    row_index: int
    start: int
    end: int
    row: str = field(repr=False)

    @property
    def text(self) -> str:
        return self.row[self.start : self.end]

    @property
    def span(self) -> Span:
        return Span(row_index=self.row_index, start=self.start, end=self.end)


@dataclass(frozen=True, slots=True)
class PartNumber:
    row_index: int
    start: int
    end: int
    row: str = field(repr=False)

    @property
    def text(self) -> str:
        return self.row[self.start : self.end]

    @property
    def span(self) -> Span:
        return Span(row_index=self.row_index, start=self.start, end=self.end)

    def value(self) -> int:
        return int(self.text)

    @staticmethod
    def from_match(m: RawMatch) -> "PartNumber":
        return PartNumber(row_index=m.row_index, start=m.start, end=m.end, row=m.row)

    def to_dict(self) -> dict[str, Any]:
        return {
            "row_index": self.row_index,
            "start": self.start,
            "end": self.end,
            "text": self.text,
        }


@dataclass(frozen=True, slots=True)
class GearCandidate:
    # Pairing symbol occurrence; a single character, so end == start + 1.
    row_index: int
    start: int
    end: int

    @property
    def span(self) -> Span:
        return Span(row_index=self.row_index, start=self.start, end=self.end)

    def to_dict(self) -> dict[str, Any]:
        return {"row_index": self.row_index, "start": self.start, "end": self.end}


@dataclass(frozen=True, slots=True)
class GearPair:
    """
    Exactly two part numbers adjacent to the same pairing symbol.

    `first` is the one met first when scanning the symbol's row band
    top-to-bottom, left-to-right.
    """

    gear: GearCandidate
    first: PartNumber
    second: PartNumber

    @property
    def parts(self) -> tuple[PartNumber, PartNumber]:
        return (self.first, self.second)

    def texts(self) -> tuple[str, str]:
        return (self.first.text, self.second.text)

    def ratio(self) -> int:
        return self.first.value() * self.second.value()

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.gear.to_dict(),
            "parts": [self.first.to_dict(), self.second.to_dict()],
        }


@dataclass(frozen=True, slots=True)
class SchematicError:
    code: str
    message: str
    detail: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "detail": self.detail}


@dataclass(frozen=True, slots=True)
class SchematicResult:
    """
    Machine-readable, auditable output of one analysis pass.

    On failure, `ok` is False and both row-grouped collections are empty.
    `gear_pairs` is None when gear pairing was not requested.
    """

    ok: bool
    errors: list[SchematicError]
    meta: dict[str, Any]
    part_numbers: list[list[PartNumber]]
    gear_pairs: list[list[GearPair]] | None
    source_relpath: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "errors": [e.to_dict() for e in self.errors],
            "meta": dict(self.meta),
            "part_numbers": [[p.to_dict() for p in row] for row in self.part_numbers],
            "gear_pairs": (
                None
                if self.gear_pairs is None
                else [[g.to_dict() for g in row] for row in self.gear_pairs]
            ),
            "source_relpath": self.source_relpath,
        }
