"""
Block structure classification.

Heuristic rules:
  - **Title**: the block's first row, when it occupies fewer columns than
    the widest row of the block (a lone or merged label above the table).
    A single-row block never has a title.
  - **Header**: the first non-title row whose label matches the caller's
    ``header_pattern``; otherwise the first non-title row.  ``no_header``
    disables header detection entirely.
  - **Data**: every remaining row, in original order.

The rules are content-agnostic: a title that spans as many columns as the
data is not recognised as a title.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from tableblocks.dto.blocks import BlockRow, BlockStructure, TableBlock
from tableblocks.dto.options import HeaderDetectionOptions

logger = logging.getLogger(__name__)


def _resolve_options(options: Optional[HeaderDetectionOptions]) -> HeaderDetectionOptions:
    return options if options is not None else HeaderDetectionOptions()


def detect_title_row(block: TableBlock) -> Optional[BlockRow]:
    """Return the block's title row, or ``None``."""
    first_row = block.rows[0]
    if first_row.column_count < block.max_column_count:
        return first_row
    return None


def detect_header_row(
    block: TableBlock,
    options: Optional[HeaderDetectionOptions] = None,
) -> Optional[BlockRow]:
    """Return the block's header row, or ``None``."""
    opts = _resolve_options(options)
    if opts.no_header:
        return None

    title_row = detect_title_row(block)
    candidates: List[BlockRow] = block.rows[1:] if title_row else block.rows
    if not candidates:
        return None

    if opts.header_pattern is not None:
        for r in candidates:
            if r.label_value and opts.header_pattern.search(r.label_value):
                return r
        logger.debug(
            "Header pattern %r matched nothing in rows %d-%d; using first row",
            opts.header_pattern.pattern,
            block.start_row,
            block.end_row,
        )

    return candidates[0]


def analyze_block_structure(
    block: TableBlock,
    options: Optional[HeaderDetectionOptions] = None,
) -> BlockStructure:
    """Split a block into title, header and data rows."""
    title_row = detect_title_row(block)
    header_row = detect_header_row(block, options)

    excluded = {r.row for r in (title_row, header_row) if r is not None}
    data_rows = [r for r in block.rows if r.row not in excluded]

    return BlockStructure(
        title_row=title_row,
        header_row=header_row,
        data_rows=data_rows,
    )
