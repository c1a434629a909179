"""Tests for workbook loading from bytes, buffers and CSV text."""

from __future__ import annotations

import io

import openpyxl
import pytest

from tableblocks.detection import analyze_block_structure, detect_table_blocks
from tableblocks.errors import NoSheetsError, TableBlocksError, UnsupportedInputError
from tableblocks.extractors.block_data import extract_block_data
from tableblocks.grid import GridExtent, WorksheetGrid
from tableblocks.loader import load_sheet, load_workbook


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------


class TestCsv:
    def test_string_input(self) -> None:
        grid = load_sheet("A,B,C\n1,2,3", "string")
        assert isinstance(grid, WorksheetGrid)
        assert grid.extent == GridExtent(max_row=2, max_col=3)
        assert grid.cell_value(1, 2) == "3"

    def test_values_stay_strings(self) -> None:
        grid = load_sheet("007,2.50,TRUE", "string")
        assert [grid.cell_value(0, c) for c in range(3)] == ["007", "2.50", "TRUE"]

    def test_empty_fields_are_unoccupied(self) -> None:
        grid = load_sheet("a,,c\n,,\nd,e,f", "string")
        assert grid.cell_value(0, 1) is None
        blocks = detect_table_blocks(grid)
        assert [(b.start_row, b.end_row) for b in blocks] == [(1, 1), (3, 3)]

    def test_quoted_fields(self) -> None:
        grid = load_sheet('"Sales, FY2024",x\n"multi\nline",y', "string")
        assert grid.cell_value(0, 0) == "Sales, FY2024"
        assert grid.cell_value(1, 0) == "multi\nline"

    def test_bytes_input(self) -> None:
        grid = load_sheet(b"h1,h2\nv1,v2", "array")
        assert grid.cell_value(1, 1) == "v2"

    def test_utf8_bom_is_stripped(self) -> None:
        grid = load_sheet("\ufeffName,Age".encode("utf-8"), "array")
        assert grid.cell_value(0, 0) == "Name"

    def test_legacy_encoding_fallback(self) -> None:
        grid = load_sheet("Café,1".encode("cp1252"), "buffer")
        assert grid.cell_value(0, 0) == "Café"

    def test_string_type_accepts_bytes(self) -> None:
        grid = load_sheet(b"a,b", "string")
        assert grid.cell_value(0, 1) == "b"

    def test_custom_delimiter(self, monkeypatch) -> None:
        monkeypatch.setattr("tableblocks.loader.CSV_DELIMITER", ";")
        grid = load_sheet("a;b;c", "string")
        assert grid.extent.max_col == 3

    def test_empty_text(self) -> None:
        grid = load_sheet("", "string")
        assert detect_table_blocks(grid) == []

    def test_fixture_file_bytes(self, sample_csv_path) -> None:
        grid = load_sheet(sample_csv_path.read_bytes())
        assert len(detect_table_blocks(grid)) == 5


# ---------------------------------------------------------------------------
# XLSX
# ---------------------------------------------------------------------------


class TestXlsx:
    def test_first_sheet_is_returned(self, xlsx_bytes) -> None:
        grid = load_sheet(xlsx_bytes, "array")
        assert grid.title == "Report"

    def test_blocks_and_structure(self, xlsx_bytes) -> None:
        grid = load_sheet(xlsx_bytes)
        blocks = detect_table_blocks(grid)
        assert [(b.start_row, b.end_row) for b in blocks] == [(1, 4), (6, 6)]

        structure = analyze_block_structure(blocks[0])
        assert structure.title_row.label_value == "Quarterly Report"
        assert structure.header_row.label_value == "Quarter"
        assert [r.label_value for r in structure.data_rows] == ["Q1", "Q2"]

    def test_typed_values_are_stringified(self, xlsx_bytes) -> None:
        grid = load_sheet(xlsx_bytes)
        blocks = detect_table_blocks(grid)
        assert extract_block_data(grid, blocks[0])[2] == ["Q1", "10", "1500.5"]
        assert extract_block_data(grid, blocks[1]) == [["Approved", "True"]]

    def test_binary_buffer(self, xlsx_bytes) -> None:
        grid = load_sheet(io.BytesIO(xlsx_bytes), "buffer")
        assert grid.title == "Report"

    def test_memoryview(self, xlsx_bytes) -> None:
        grid = load_sheet(memoryview(xlsx_bytes), "array")
        assert grid.title == "Report"

    def test_load_workbook_keeps_all_sheets(self, xlsx_bytes) -> None:
        wb = load_workbook(xlsx_bytes)
        assert wb.sheetnames == ["Report", "Empty"]

    def test_formulas_kept_without_data_only(self) -> None:
        wb = openpyxl.Workbook()
        wb.active["A1"] = 2
        wb.active["B1"] = "=A1*10"
        buf = io.BytesIO()
        wb.save(buf)

        loaded = load_workbook(buf.getvalue(), data_only=False)
        assert loaded.active["B1"].value == "=A1*10"
        # No cached result in a file openpyxl wrote
        assert load_workbook(buf.getvalue()).active["B1"].value is None


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_unknown_type_tag(self) -> None:
        with pytest.raises(UnsupportedInputError):
            load_sheet(b"a,b", "binary")

    def test_text_for_binary_tag(self) -> None:
        with pytest.raises(UnsupportedInputError):
            load_sheet("a,b", "array")

    def test_unsupported_data(self) -> None:
        with pytest.raises(ValueError):
            load_sheet(123, "array")

    def test_no_sheets(self, monkeypatch) -> None:
        empty = openpyxl.Workbook()
        empty.remove(empty.active)
        monkeypatch.setattr("tableblocks.loader.load_workbook", lambda data, data_type: empty)

        with pytest.raises(NoSheetsError, match="no sheets"):
            load_sheet(b"ignored")

    def test_error_hierarchy(self) -> None:
        assert issubclass(NoSheetsError, TableBlocksError)
        assert issubclass(UnsupportedInputError, TableBlocksError)
        assert issubclass(UnsupportedInputError, ValueError)
