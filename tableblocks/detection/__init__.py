"""
Table-block detection.

The canonical pipeline is:
  1. ``detect_table_blocks``      segments the grid on empty rows
  2. ``analyze_block_structure``  splits each block into title / header / data

``detect_title_row`` and ``detect_header_row`` are exposed for callers
that only need part of the classification.
"""

from tableblocks.detection.rows import analyze_row
from tableblocks.detection.segmenter import detect_table_blocks
from tableblocks.detection.structure import (
    analyze_block_structure,
    detect_header_row,
    detect_title_row,
)

__all__ = [
    "analyze_row",
    "detect_table_blocks",
    "detect_title_row",
    "detect_header_row",
    "analyze_block_structure",
]
