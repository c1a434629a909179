"""
Block Visualizer: writes a copy of a workbook (or CSV) with the cells of
every detected table block colored by block, title and header rows in
bold, and a legend sheet listing each block.

Usage:
    tableblocks-visualize <input.xlsx|input.csv> [-o <output.xlsx>]
                          [--label-column A] [--header-pattern REGEX] [--no-header]
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

import dotenv
from openpyxl import Workbook
from openpyxl.cell.cell import MergedCell
from openpyxl.comments import Comment
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from tableblocks.constants import DEFAULT_LABEL_COLUMN, LOG_LEVEL
from tableblocks.detection import analyze_block_structure, detect_table_blocks
from tableblocks.dto.blocks import TableBlock
from tableblocks.dto.options import HeaderDetectionOptions
from tableblocks.grid import ColumnRef, WorksheetGrid
from tableblocks.loader import load_workbook
from tableblocks.parser import add_detection_arguments, detection_settings

dotenv.load_dotenv()

logger = logging.getLogger(__name__)

LEGEND_SHEET = "_Block Legend"

# ── Distinct pastel colors (ARGB hex, no leading #) ─────────────────
_BLOCK_COLORS = [
    "FFB3E5FC",  # light blue
    "FFC8E6C9",  # light green
    "FFFFF9C4",  # light yellow
    "FFFFCCBC",  # light orange
    "FFE1BEE7",  # light purple
    "FFB2DFDB",  # light teal
    "FFF8BBD0",  # light pink
    "FFD7CCC8",  # light brown
]

_BORDER_COLORS = [
    "FF0288D1",  # blue
    "FF388E3C",  # green
    "FFF9A825",  # yellow
    "FFE64A19",  # orange
    "FF7B1FA2",  # purple
    "FF00796B",  # teal
    "FFC2185B",  # pink
    "FF5D4037",  # brown
]

_LABEL_FONT = Font(bold=True, size=9, color="FF000000")


# ── Helpers ──────────────────────────────────────────────────────────


def _make_border(color: str, style: str = "thin") -> Border:
    """Create a border with the given ARGB color on all four sides."""
    side = Side(style=style, color=color)
    return Border(left=side, right=side, top=side, bottom=side)


def _paint_block(
    ws,
    block: TableBlock,
    block_id: str,
    color_idx: int,
    options: HeaderDetectionOptions,
) -> Dict[str, str]:
    """Color one block's cells and return its legend entry."""
    structure = analyze_block_structure(block, options)

    fill_argb = _BLOCK_COLORS[color_idx % len(_BLOCK_COLORS)]
    border_argb = _BORDER_COLORS[color_idx % len(_BORDER_COLORS)]
    fill = PatternFill(start_color=fill_argb, end_color=fill_argb, fill_type="solid")
    border = _make_border(border_argb)
    header_border = _make_border(border_argb, style="medium")

    title_row = structure.title_row.row if structure.title_row else None
    header_row = structure.header_row.row if structure.header_row else None

    for r in range(block.start_row, block.end_row + 1):
        for c in range(1, block.max_column_count + 1):
            cell = ws.cell(row=r, column=c)
            if isinstance(cell, MergedCell):
                continue  # skip non-master merged cells
            cell.fill = fill
            cell.border = header_border if r == header_row else border
            if r in (title_row, header_row):
                cell.font = Font(bold=True, size=cell.font.size or 10)

    first_cell = ws.cell(row=block.start_row, column=1)
    if not isinstance(first_cell, MergedCell):
        first_cell.comment = Comment(f"{block_id} | {block.ref}", "block-visualizer")

    title = structure.title_row.label_value if structure.title_row else ""
    logger.info(
        "  %s: %s  title=%r  header=%s  → color #%d",
        block_id,
        block.ref,
        title,
        header_row,
        color_idx,
    )
    return {
        "block_id": block_id,
        "ref": block.ref,
        "sheet": ws.title,
        "title": title or "",
        "fill_argb": fill_argb,
    }


def _add_legend(wb: Workbook, legend_entries: List[Dict[str, str]]) -> None:
    ws_legend = wb.create_sheet(LEGEND_SHEET)

    headers = ["Block ID", "Range", "Sheet", "Title", "Color"]
    col_widths = [14, 14, 18, 30, 10]
    for i, (header, width) in enumerate(zip(headers, col_widths), start=1):
        cell = ws_legend.cell(row=1, column=i, value=header)
        cell.font = _LABEL_FONT
        ws_legend.column_dimensions[get_column_letter(i)].width = width

    for row_idx, entry in enumerate(legend_entries, start=2):
        ws_legend.cell(row=row_idx, column=1, value=entry["block_id"])
        ws_legend.cell(row=row_idx, column=2, value=entry["ref"])
        ws_legend.cell(row=row_idx, column=3, value=entry["sheet"])
        ws_legend.cell(row=row_idx, column=4, value=entry["title"])
        ws_legend.cell(row=row_idx, column=5, value="").fill = PatternFill(
            start_color=entry["fill_argb"],
            end_color=entry["fill_argb"],
            fill_type="solid",
        )


# ── Core logic ───────────────────────────────────────────────────────


def visualize(
    input_path: str,
    output_path: str,
    options: Optional[HeaderDetectionOptions] = None,
    label_column: ColumnRef = DEFAULT_LABEL_COLUMN,
) -> List[Dict[str, str]]:
    """
    Detect blocks on every sheet of *input_path*, color them, add a legend
    sheet, and save the result to *output_path*.  The input is not modified.

    Returns the legend entries.
    """
    options = options or HeaderDetectionOptions()

    logger.info("Loading source workbook: %s", input_path)
    raw = Path(input_path).read_bytes()
    # Detect on cached values; paint and save the copy that keeps formulas
    values_wb = load_workbook(raw, "array")
    wb = load_workbook(raw, "array", data_only=False)

    legend_entries: List[Dict[str, str]] = []
    for sheet_name in list(wb.sheetnames):
        ws = wb[sheet_name]
        blocks = detect_table_blocks(WorksheetGrid(values_wb[sheet_name]), label_column)
        if not blocks:
            logger.info("Sheet '%s' has no blocks, skipping", sheet_name)
            continue

        logger.info("Processing sheet '%s': %d block(s)", sheet_name, len(blocks))
        for block in blocks:
            color_idx = len(legend_entries)  # continue color sequence across sheets
            legend_entries.append(
                _paint_block(ws, block, f"block{color_idx}", color_idx, options)
            )

    _add_legend(wb, legend_entries)
    wb.save(output_path)
    logger.info("Annotated workbook saved to: %s", output_path)
    return legend_entries


# ── CLI ──────────────────────────────────────────────────────────────


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s  %(levelname)-8s  %(message)s",
    )

    parser = argparse.ArgumentParser(
        description=(
            "Visualize detected table blocks by coloring cells in a copy "
            "of the workbook."
        ),
    )
    parser.add_argument(
        "input_file",
        help="Path to the .xlsx or .csv file",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output .xlsx path (default: <input>_visualized.xlsx)",
    )
    add_detection_arguments(parser)
    args = parser.parse_args(argv)

    if not os.path.isfile(args.input_file):
        logger.error("File not found: %s", args.input_file)
        sys.exit(1)

    output_path = args.output or f"{Path(args.input_file).stem}_visualized.xlsx"
    options, label_column = detection_settings(parser, args)
    visualize(args.input_file, output_path, options=options, label_column=label_column)


if __name__ == "__main__":
    main()
