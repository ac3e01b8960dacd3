from __future__ import annotations

from enum import Enum


class SortDirection(str, Enum):
    """Sort order accepted by list/search endpoints."""

    ASC = "asc"
    DESC = "desc"


class CsvMode(str, Enum):
    """How CSV rows are mapped onto employee fields on import.

    HEADER maps columns by header name (case-insensitive, any order).
    FIXED assumes the legacy transfer column order and ignores the header.
    """

    HEADER = "header"
    FIXED = "fixed"
