from tableblocks.dto.blocks import BlockRow, BlockStructure, TableBlock
from tableblocks.dto.options import HeaderDetectionOptions
from tableblocks.dto.output import BlockResult, SheetResult, WorkbookResult

__all__ = [
    "BlockRow",
    "BlockStructure",
    "TableBlock",
    "HeaderDetectionOptions",
    "BlockResult",
    "SheetResult",
    "WorkbookResult",
]
