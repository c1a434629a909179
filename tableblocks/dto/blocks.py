"""
Block DTOs produced by the segmenter and the structure classifier.

A ``TableBlock`` is a pure row-number range plus summary metadata; it keeps
no reference to the grid it was detected in.  Cell values are re-resolved
against the grid when a block is extracted.
"""

from __future__ import annotations

from typing import List, Optional

from openpyxl.utils import get_column_letter
from pydantic import BaseModel


class BlockRow(BaseModel):
    """Summary of a single scanned row."""

    model_config = {"frozen": True}

    # 1-based row number
    row: int
    # Occupied columns across the grid's column extent
    column_count: int
    # Label column value (stripped when textual); None if the cell is empty
    label_value: Optional[str] = None


class TableBlock(BaseModel):
    """A maximal run of non-empty rows, bounded by blank rows or grid edges."""

    model_config = {"frozen": True}

    start_row: int
    end_row: int
    rows: List[BlockRow]
    max_column_count: int

    @property
    def row_count(self) -> int:
        return self.end_row - self.start_row + 1

    @property
    def ref(self) -> str:
        """A1-style range covering the block, e.g. ``"A1:D6"``."""
        last_col = get_column_letter(max(self.max_column_count, 1))
        return f"A{self.start_row}:{last_col}{self.end_row}"


class BlockStructure(BaseModel):
    """Title / header / data partition of one block.

    Derived on every call; never cached on the block because it depends on
    the caller's ``HeaderDetectionOptions``.
    """

    model_config = {"frozen": True}

    title_row: Optional[BlockRow] = None
    header_row: Optional[BlockRow] = None
    data_rows: List[BlockRow] = []
