"""
Row analysis: per-row occupancy and label extraction.
"""

from __future__ import annotations

from typing import Any, Optional

from tableblocks.dto.blocks import BlockRow
from tableblocks.grid import CellGrid, ColumnRef, column_index, is_occupied


def label_text(value: Any) -> Optional[str]:
    """Stringify a label cell: stripped when textual, ``str()`` otherwise."""
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip()
    return str(value)


def analyze_row(
    grid: CellGrid,
    row: int,
    max_col: int,
    label_column: ColumnRef,
) -> BlockRow:
    """
    Count the occupied columns of 1-based *row* across ``[0, max_col)`` and
    read its label column value.
    """
    r = row - 1
    column_count = sum(1 for c in range(max_col) if is_occupied(grid.cell_value(r, c)))
    label_value = label_text(grid.cell_value(r, column_index(label_column)))
    return BlockRow(row=row, column_count=column_count, label_value=label_value)
