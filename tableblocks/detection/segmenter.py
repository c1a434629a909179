"""
Block segmentation: split a grid into runs of non-empty rows.

Fully empty rows are the only delimiter.  Each run becomes an immutable
``TableBlock``; a grid with no occupied rows yields no blocks.
"""

from __future__ import annotations

import logging
from typing import List

from tableblocks.constants import DEFAULT_LABEL_COLUMN
from tableblocks.detection.rows import analyze_row
from tableblocks.dto.blocks import BlockRow, TableBlock
from tableblocks.grid import CellGrid, ColumnRef, column_index

logger = logging.getLogger(__name__)


def _create_block(rows: List[BlockRow], start_row: int) -> TableBlock:
    return TableBlock(
        start_row=start_row,
        end_row=rows[-1].row,
        rows=list(rows),
        max_column_count=max(r.column_count for r in rows),
    )


def detect_table_blocks(
    grid: CellGrid,
    label_column: ColumnRef = DEFAULT_LABEL_COLUMN,
) -> List[TableBlock]:
    """
    Scan rows ``1..max_row`` of the grid's declared extent and return the
    blocks separated by empty rows, in row order.
    """
    column_index(label_column)  # fail fast on a malformed column reference
    max_row, max_col = grid.extent

    blocks: List[TableBlock] = []
    current: List[BlockRow] = []
    start_row = -1

    for row in range(1, max_row + 1):
        info = analyze_row(grid, row, max_col, label_column)

        if info.column_count == 0:
            # Empty row closes the current block
            if current:
                blocks.append(_create_block(current, start_row))
                current = []
                start_row = -1
            continue

        if start_row == -1:
            start_row = row
        current.append(info)

    # Grid not terminated by a blank row
    if current:
        blocks.append(_create_block(current, start_row))

    logger.debug(
        "Detected %d block(s) in %d row(s) x %d column(s)",
        len(blocks),
        max_row,
        max_col,
    )
    return blocks
