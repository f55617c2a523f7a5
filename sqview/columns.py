"""Column descriptions and SQLite type-affinity rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+", re.ASCII)
_REAL_TEXT = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


class ColAffinity(Enum):
    """The storage affinity SQLite derives from a declared column type."""

    INTEGER = "integer"
    TEXT = "text"
    BLOB = "blob"
    REAL = "real"
    NUMERIC = "numeric"


@dataclass(frozen=True)
class Column:
    """One column of a table as reported by the schema."""

    cid: int
    name: str
    col_type: str
    not_null: bool = False
    default_value: str | None = None
    is_pk: bool = False


def affinity(col_type: str) -> ColAffinity:
    """Apply SQLite's affinity rules to a declared column type."""
    upper = col_type.upper()
    if "INT" in upper:
        return ColAffinity.INTEGER
    if any(part in upper for part in ("CHAR", "CLOB", "TEXT")):
        return ColAffinity.TEXT
    if "BLOB" in upper or not upper.strip():
        return ColAffinity.BLOB
    if any(part in upper for part in ("REAL", "FLOA", "DOUB")):
        return ColAffinity.REAL
    return ColAffinity.NUMERIC


def _parse_i64(text: str) -> int | None:
    """Parse a signed 64-bit integer written without spaces or separators."""
    if _INTEGER_TEXT.fullmatch(text) is None:
        return None
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        return None
    return value


def _parse_f64(text: str) -> float | None:
    """Parse a floating-point number written without spaces or separators."""
    if _REAL_TEXT.fullmatch(text) is None:
        return None
    return float(text)