"""
Exceptions raised at the loading boundary.

Detection, classification and extraction never raise for missing data:
"no title", "no header" and "no blocks" are ``None`` / ``[]`` results.
"""

from __future__ import annotations


class TableBlocksError(Exception):
    """Base class for every error raised by this package."""


class NoSheetsError(TableBlocksError):
    """The parsed workbook declares zero sheets."""

    def __init__(self, message: str = "Workbook contains no sheets") -> None:
        super().__init__(message)


class UnsupportedInputError(TableBlocksError, ValueError):
    """Unknown data type tag, or data that does not fit the given tag."""
