"""
tableblocks: detect and classify table-like blocks in spreadsheet and CSV
grids.

Usage::

    from tableblocks import load_sheet, detect_table_blocks, analyze_block_structure

    grid = load_sheet(data, "array")
    for block in detect_table_blocks(grid):
        structure = analyze_block_structure(block)
"""

from tableblocks.detection import (
    analyze_block_structure,
    analyze_row,
    detect_header_row,
    detect_table_blocks,
    detect_title_row,
)
from tableblocks.dto import (
    BlockResult,
    BlockRow,
    BlockStructure,
    HeaderDetectionOptions,
    SheetResult,
    TableBlock,
    WorkbookResult,
)
from tableblocks.errors import NoSheetsError, TableBlocksError, UnsupportedInputError
from tableblocks.extractors import SheetExtractor, extract_block_data
from tableblocks.grid import CellGrid, DictGrid, GridExtent, WorksheetGrid
from tableblocks.loader import load_sheet, load_workbook

__all__ = [
    "analyze_block_structure",
    "analyze_row",
    "detect_header_row",
    "detect_table_blocks",
    "detect_title_row",
    "extract_block_data",
    "load_sheet",
    "load_workbook",
    "BlockResult",
    "BlockRow",
    "BlockStructure",
    "HeaderDetectionOptions",
    "SheetResult",
    "TableBlock",
    "WorkbookResult",
    "CellGrid",
    "DictGrid",
    "GridExtent",
    "WorksheetGrid",
    "SheetExtractor",
    "NoSheetsError",
    "TableBlocksError",
    "UnsupportedInputError",
]
