"""Shared test fixtures for tableblocks tests.

Provides the multi-table fixture CSV (as a path, raw bytes and a loaded
grid), its detected blocks, and small in-memory grid builders so the
detectors can be exercised without a spreadsheet parser.
"""

from __future__ import annotations

import io
import pathlib
from typing import Any, List, Optional

import openpyxl
import pytest

from tableblocks.detection import detect_table_blocks
from tableblocks.dto.blocks import BlockRow, TableBlock
from tableblocks.grid import DictGrid, WorksheetGrid
from tableblocks.loader import load_sheet

FIXTURES_DIR = pathlib.Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Fixture CSV
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def sample_csv_path() -> pathlib.Path:
    """Five blank-row-separated tables with and without titles / headers."""
    return FIXTURES_DIR / "sample-tables.csv"


@pytest.fixture(scope="session")
def sample_csv_text(sample_csv_path: pathlib.Path) -> str:
    return sample_csv_path.read_text(encoding="utf-8")


@pytest.fixture()
def sample_grid(sample_csv_text: str) -> WorksheetGrid:
    return load_sheet(sample_csv_text, "string")


@pytest.fixture()
def sample_blocks(sample_grid: WorksheetGrid) -> List[TableBlock]:
    return detect_table_blocks(sample_grid)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def make_block(
    *column_counts: int,
    start_row: int = 1,
    labels: Optional[List[Any]] = None,
) -> TableBlock:
    """Build a TableBlock directly from per-row column counts."""
    labels = labels or [f"row{i}" for i in range(len(column_counts))]
    rows = [
        BlockRow(row=start_row + i, column_count=count, label_value=labels[i])
        for i, count in enumerate(column_counts)
    ]
    return TableBlock(
        start_row=start_row,
        end_row=start_row + len(rows) - 1,
        rows=rows,
        max_column_count=max(column_counts),
    )


@pytest.fixture()
def block_factory():
    """Factory: ``block_factory(1, 4, 4)`` → TableBlock with those column counts."""
    return make_block


@pytest.fixture()
def grid_from_rows():
    """Factory: ``grid_from_rows([[...], [...]])`` → DictGrid."""
    return DictGrid.from_rows


@pytest.fixture()
def xlsx_bytes() -> bytes:
    """A two-sheet .xlsx with a titled table on the first sheet."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Report"
    ws.append(["Quarterly Report"])
    ws.append(["Quarter", "Units", "Revenue"])
    ws.append(["Q1", 10, 1500.5])
    ws.append(["Q2", 12, 1800])
    ws.append([])
    ws.append(["Approved", True])

    other = wb.create_sheet("Empty")
    other["A1"] = None

    buf = io.BytesIO()
    wb.save(buf)
    wb.close()
    return buf.getvalue()
