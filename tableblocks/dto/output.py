"""
Top-level output DTOs for the serialised JSON document.

    WorkbookResult
      └─ sheets: List[SheetResult]
           └─ blocks: List[BlockResult]
                title / header / data of one detected table
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class BlockResult(BaseModel):
    """One classified and extracted table block."""

    start_row: int
    end_row: int
    ref: str
    max_column_count: int
    title: Optional[str] = None
    header: List[str] = []
    data: List[List[str]] = []
    html: str = ""


class SheetResult(BaseModel):
    """Structured output for a single worksheet."""

    sheet_name: str
    blocks: List[BlockResult] = []


class WorkbookResult(BaseModel):
    """Top-level output for an entire workbook or CSV file."""

    file_name: str
    sheets: List[SheetResult] = []
