from __future__ import annotations

import hashlib
from pathlib import Path


class DataAccessError(Exception):
    pass


def read_schematic_text(path: Path) -> str:
    """
    Read the schematic input as UTF-8 text.

    The path is used exactly as given; this module does not read environment
    variables or assume where data lives.
    """

    if not path.exists():
        raise DataAccessError(f"Input file does not exist: {str(path)!r}")
    if not path.is_file():
        raise DataAccessError(f"Input path is not a regular file: {str(path)!r}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DataAccessError(f"Input file is not valid UTF-8: {str(path)!r}") from e


def sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b""):
            h.update(chunk)
    return h.hexdigest()
