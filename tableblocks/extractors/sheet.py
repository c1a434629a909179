"""
SheetExtractor: the per-sheet orchestrator.

Responsibilities:
  1. Segment the grid into table blocks on empty rows.
  2. Classify each block into title / header / data rows.
  3. Extract the block's cell values and slice them by that partition.
  4. Render each block as an HTML table.
  5. Return ``BlockResult`` objects in row order.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from tableblocks.constants import DEFAULT_LABEL_COLUMN
from tableblocks.detection import analyze_block_structure, detect_table_blocks
from tableblocks.dto.blocks import TableBlock
from tableblocks.dto.options import HeaderDetectionOptions
from tableblocks.dto.output import BlockResult
from tableblocks.extractors.block_data import extract_block_data
from tableblocks.grid import CellGrid, ColumnRef
from tableblocks.utils.html import render_block_html

logger = logging.getLogger(__name__)


class SheetExtractor:
    """
    Extracts all table blocks from a single grid.

    Usage::

        extractor = SheetExtractor(HeaderDetectionOptions(header_pattern="^ID$"))
        results = extractor.extract(grid)
    """

    def __init__(
        self,
        options: Optional[HeaderDetectionOptions] = None,
        label_column: ColumnRef = DEFAULT_LABEL_COLUMN,
    ) -> None:
        self.options = options or HeaderDetectionOptions()
        self.label_column = label_column

    def _build_result(self, grid: CellGrid, block: TableBlock) -> BlockResult:
        structure = analyze_block_structure(block, self.options)
        data = extract_block_data(grid, block)

        def _row(row_number: int) -> List[str]:
            return data[row_number - block.start_row]

        title = structure.title_row.label_value if structure.title_row else None
        header = _row(structure.header_row.row) if structure.header_row else []
        body = [_row(r.row) for r in structure.data_rows]

        return BlockResult(
            start_row=block.start_row,
            end_row=block.end_row,
            ref=block.ref,
            max_column_count=block.max_column_count,
            title=title,
            header=header,
            data=body,
            html=render_block_html(title=title, header=header, data=body),
        )

    def extract(self, grid: CellGrid) -> List[BlockResult]:
        blocks = detect_table_blocks(grid, self.label_column)
        results: List[BlockResult] = []
        for i, block in enumerate(blocks):
            result = self._build_result(grid, block)
            logger.debug(
                "  block %d %s: title=%r, header=%d col(s), %d data row(s)",
                i,
                result.ref,
                result.title,
                len(result.header),
                len(result.data),
            )
            results.append(result)
        return results
