"""
Extracts a block's cell values as a dense, rectangular string grid.
"""

from __future__ import annotations

from typing import List

from tableblocks.dto.blocks import TableBlock
from tableblocks.grid import CellGrid


def extract_block_data(grid: CellGrid, block: TableBlock) -> List[List[str]]:
    """
    Return ``row_count × max_column_count`` strings for *block*.

    Cells are re-read by absolute address; missing cells (including the
    trailing cells of narrower rows) come back as ``""``.
    """
    data: List[List[str]] = []
    for row in range(block.start_row, block.end_row + 1):
        row_data: List[str] = []
        for col in range(block.max_column_count):
            value = grid.cell_value(row - 1, col)
            row_data.append(str(value) if value is not None else "")
        data.append(row_data)
    return data
