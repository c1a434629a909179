"""
Grid access: the read-only cell lookup every detector works against.

Detection only needs two things from a parsed sheet: its declared
rectangular extent and a sparse ``(row, col) → value`` lookup.  Both are
captured by the ``CellGrid`` protocol so the detectors can run against an
openpyxl worksheet (``WorksheetGrid``) or a plain mapping (``DictGrid``).

All addressing here is 0-based; row numbers exposed by the detectors are
1-based.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, NamedTuple, Optional, Protocol, Tuple, Union

from openpyxl.utils import column_index_from_string, get_column_letter
from openpyxl.utils.cell import coordinate_to_tuple, range_boundaries
from openpyxl.worksheet.worksheet import Worksheet

logger = logging.getLogger(__name__)

ColumnRef = Union[str, int]


# ------------------------------------------------------------------
# Coordinate helpers
# ------------------------------------------------------------------

def coord(col: int, row: int) -> str:
    """Return an A1-style coordinate from 0-based col/row indices."""
    return f"{get_column_letter(col + 1)}{row + 1}"


def column_index(column: ColumnRef) -> int:
    """Normalise a column letter (``"A"``, ``"ab"``) or 0-based index to an index."""
    if isinstance(column, int):
        if column < 0:
            raise ValueError(f"Column index must be >= 0, got {column}")
        return column
    return column_index_from_string(column.strip().upper()) - 1


def is_occupied(value: Any) -> bool:
    return value is not None and value != ""


# ------------------------------------------------------------------
# Protocol
# ------------------------------------------------------------------

class GridExtent(NamedTuple):
    """Declared size of a grid, counted from row 1 / column A."""

    max_row: int
    max_col: int


class CellGrid(Protocol):
    """Sparse, read-only cell lookup plus a declared extent."""

    @property
    def extent(self) -> GridExtent:
        ...

    def cell_value(self, row: int, col: int) -> Any:
        """Raw value at the 0-based address, or ``None`` if absent."""
        ...


# ------------------------------------------------------------------
# Implementations
# ------------------------------------------------------------------

class WorksheetGrid:
    """
    ``CellGrid`` over an openpyxl worksheet.

    Cell values are snapshotted once at construction; reads afterwards
    never call ``ws.cell()``, which would create cells and grow the sheet.
    """

    def __init__(self, ws: Worksheet) -> None:
        self.title: str = ws.title
        self._extent = GridExtent(max_row=ws.max_row or 1, max_col=ws.max_column or 1)
        self._values: Dict[Tuple[int, int], Any] = {}

        for r, row in enumerate(
            ws.iter_rows(
                min_row=1,
                min_col=1,
                max_row=self._extent.max_row,
                max_col=self._extent.max_col,
                values_only=True,
            )
        ):
            for c, value in enumerate(row):
                if value is not None:
                    self._values[(r, c)] = value

        logger.debug(
            "Snapshotted sheet '%s': %d value(s) in %s",
            self.title,
            len(self._values),
            self._extent,
        )

    @property
    def extent(self) -> GridExtent:
        return self._extent

    def cell_value(self, row: int, col: int) -> Any:
        return self._values.get((row, col))


class DictGrid:
    """
    ``CellGrid`` over an A1-keyed mapping, e.g. ``{"A1": "Title", "B2": 3}``.

    ``ref`` is the declared reference range (``"A1:D10"``).  When omitted
    the grid declares a single-cell range ``A1``, so cells outside it are
    never visited by a scan.
    """

    def __init__(self, cells: Mapping[str, Any], ref: Optional[str] = None) -> None:
        self.ref = ref or "A1"
        _, _, max_col, max_row = range_boundaries(self.ref)
        self._extent = GridExtent(max_row=max_row, max_col=max_col)
        self._values: Dict[Tuple[int, int], Any] = {}
        for key, value in cells.items():
            row, col = coordinate_to_tuple(key.upper())
            self._values[(row - 1, col - 1)] = value

    @classmethod
    def from_rows(cls, rows: list) -> "DictGrid":
        """Build a grid from a list of row lists; ``None`` / ``""`` are left out."""
        cells: Dict[str, Any] = {}
        width = 0
        for r, row in enumerate(rows):
            width = max(width, len(row))
            for c, value in enumerate(row):
                if is_occupied(value):
                    cells[coord(c, r)] = value
        if not rows or width == 0:
            return cls(cells)
        return cls(cells, ref=f"A1:{coord(width - 1, len(rows) - 1)}")

    @property
    def extent(self) -> GridExtent:
        return self._extent

    def cell_value(self, row: int, col: int) -> Any:
        return self._values.get((row, col))
