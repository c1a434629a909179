"""
Workbook loading: the only place that parses raw file contents.

``.xlsx`` data (ZIP container) is read with openpyxl; anything else is
treated as CSV text and appended row by row into a fresh openpyxl
workbook, so both formats reach the detectors through the same
``WorksheetGrid`` adapter.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Literal, Union

import openpyxl
from openpyxl import Workbook

from tableblocks.constants import CSV_DELIMITER
from tableblocks.errors import NoSheetsError, UnsupportedInputError
from tableblocks.grid import WorksheetGrid

logger = logging.getLogger(__name__)

DataType = Literal["array", "string", "buffer"]
SheetData = Union[bytes, bytearray, memoryview, str, io.IOBase]

_XLSX_MAGIC = b"PK\x03\x04"

_TEXT_ENCODINGS = ("utf-8-sig", "utf-8", "cp1252", "latin-1")


# ------------------------------------------------------------------
# Input normalisation
# ------------------------------------------------------------------

def _decode_text(raw: bytes) -> str:
    for encoding in _TEXT_ENCODINGS:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    # latin-1 decodes any byte sequence
    raise UnsupportedInputError("Could not decode CSV data")


def _to_bytes(data: SheetData, data_type: DataType) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if data_type == "buffer" and hasattr(data, "read"):
        raw = data.read()
        if isinstance(raw, str):
            return raw.encode("utf-8")
        return bytes(raw)
    raise UnsupportedInputError(
        f"Expected bytes-like data for type {data_type!r}, got {type(data).__name__}"
    )


# ------------------------------------------------------------------
# Parsers
# ------------------------------------------------------------------

def _read_csv(text: str) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = "Sheet1"
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=CSV_DELIMITER)
    for row in reader:
        # Empty fields stay unoccupied, as in a spreadsheet
        ws.append([value if value != "" else None for value in row])
    return wb


def _read_xlsx(raw: bytes, data_only: bool) -> Workbook:
    return openpyxl.load_workbook(io.BytesIO(raw), data_only=data_only)


def load_workbook(
    data: SheetData,
    data_type: DataType = "array",
    data_only: bool = True,
) -> Workbook:
    """
    Parse *data* into an openpyxl ``Workbook``.

    *data_type* is ``"array"`` / ``"buffer"`` for binary data (``"buffer"`` also
    accepts a binary file-like object) or ``"string"`` for CSV text.

    With *data_only* (the default) formula cells of an ``.xlsx`` hold their
    cached results; pass ``False`` to keep the formulas themselves.
    """
    if data_type not in ("array", "string", "buffer"):
        raise UnsupportedInputError(f"Unknown data type: {data_type!r}")

    if data_type == "string" and isinstance(data, str):
        logger.debug("Parsing %d character(s) of CSV text", len(data))
        return _read_csv(data)

    raw = _to_bytes(data, data_type)
    if raw.startswith(_XLSX_MAGIC):
        logger.debug("Parsing %d byte(s) as an .xlsx workbook", len(raw))
        return _read_xlsx(raw, data_only)

    logger.debug("Parsing %d byte(s) as CSV", len(raw))
    return _read_csv(_decode_text(raw))


def load_sheet(data: SheetData, data_type: DataType = "array") -> WorksheetGrid:
    """
    Load a workbook and return its first sheet as a ``WorksheetGrid``.

    Raises ``NoSheetsError`` if the workbook contains no sheets.
    """
    workbook = load_workbook(data, data_type)
    if not workbook.sheetnames:
        raise NoSheetsError()
    return WorksheetGrid(workbook[workbook.sheetnames[0]])
