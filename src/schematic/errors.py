from __future__ import annotations

from typing import Any

from contracts.schematic import SchematicError


class SchematicBuildError(Exception):
    """
    Raised while constructing a grid or engine.

    Construction is all-or-nothing: when this is raised no partially built
    grid or engine is returned.
    """

    code = "SCHEMATIC_BUILD_FAILED"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_error(self) -> SchematicError:
        return SchematicError(code=self.code, message=self.message, detail=self.detail)


class EmptyInputError(SchematicBuildError):
    code = "SCHEMATIC_EMPTY_INPUT"


class IrregularGridError(SchematicBuildError):
    code = "SCHEMATIC_IRREGULAR_GRID"


class InvalidPatternError(SchematicBuildError):
    code = "SCHEMATIC_INVALID_PATTERN"
