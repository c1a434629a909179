"""
Table-block parser: CLI entry point.

Usage:
    tableblocks <input.xlsx|input.csv> [--output <output.json>] [--sheet <sheet_name>]
                [--label-column A] [--header-pattern REGEX] [--no-header]

Loads a workbook or CSV file, detects the table blocks on every sheet,
classifies each block into title / header / data rows, and writes the
result as a single JSON file.

If --sheet is provided, only that worksheet is processed.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import dotenv
from pydantic import ValidationError

from tableblocks.constants import DEFAULT_LABEL_COLUMN, LOG_LEVEL
from tableblocks.dto.options import HeaderDetectionOptions
from tableblocks.dto.output import SheetResult, WorkbookResult
from tableblocks.errors import NoSheetsError
from tableblocks.extractors.sheet import SheetExtractor
from tableblocks.grid import ColumnRef, WorksheetGrid
from tableblocks.loader import load_workbook

dotenv.load_dotenv()

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Main pipeline
# -------------------------------------------------------------------


def parse_workbook(
    file_path: str,
    sheet_name_filter: Optional[str] = None,
    options: Optional[HeaderDetectionOptions] = None,
    label_column: ColumnRef = DEFAULT_LABEL_COLUMN,
) -> WorkbookResult:
    """
    Parse a workbook or CSV file and return a structured ``WorkbookResult``.

    If *sheet_name_filter* is provided, only that worksheet is processed.
    """
    logger.info("Loading workbook: %s", file_path)

    data = Path(file_path).read_bytes()
    workbook = load_workbook(data, "array")
    if not workbook.sheetnames:
        raise NoSheetsError()

    if sheet_name_filter and sheet_name_filter not in workbook.sheetnames:
        logger.error(
            "Worksheet '%s' not found. Available sheets: %s",
            sheet_name_filter,
            workbook.sheetnames,
        )
        raise ValueError(
            f"Worksheet '{sheet_name_filter}' not found in workbook"
        )

    extractor = SheetExtractor(options=options, label_column=label_column)
    sheet_results: list[SheetResult] = []

    sheets_to_process = (
        [sheet_name_filter] if sheet_name_filter else workbook.sheetnames
    )

    for sheet_name in sheets_to_process:
        logger.info("Processing sheet: %s", sheet_name)

        try:
            grid = WorksheetGrid(workbook[sheet_name])
            blocks = extractor.extract(grid)
            sheet_results.append(SheetResult(sheet_name=sheet_name, blocks=blocks))
            logger.info("  -> %d block(s)", len(blocks))
        except Exception:
            logger.exception(
                "Failed to process sheet '%s', adding empty result", sheet_name
            )
            sheet_results.append(SheetResult(sheet_name=sheet_name))

    return WorkbookResult(
        file_name=Path(file_path).name,
        sheets=sheet_results,
    )


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def add_detection_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by the parser and the visualizer."""
    parser.add_argument(
        "--label-column",
        default=None,
        help=f"Column holding row labels (default: {DEFAULT_LABEL_COLUMN})",
    )
    parser.add_argument(
        "--header-pattern",
        default=None,
        help="Regex matched against row labels to locate the header row",
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Treat every block as having no header row",
    )


def detection_settings(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> tuple[HeaderDetectionOptions, str]:
    """Build detection options from parsed args; a bad regex exits via ``parser.error``."""
    try:
        options = HeaderDetectionOptions(
            header_pattern=args.header_pattern,
            no_header=args.no_header,
        )
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        parser.error(f"invalid --header-pattern {args.header_pattern!r}: {reason}")
    label_column = (args.label_column or DEFAULT_LABEL_COLUMN).upper()
    return options, label_column


def main(argv: Optional[list[str]] = None) -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Detect table blocks in a workbook or CSV file and write them as JSON.",
    )
    parser.add_argument(
        "input_file",
        help="Path to the .xlsx or .csv file to parse",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON file path (default: <input_name>_blocks.json)",
    )
    parser.add_argument(
        "-s",
        "--sheet",
        default=None,
        help="Name of a single worksheet to process (default: all sheets)",
    )
    add_detection_arguments(parser)
    args = parser.parse_args(argv)

    input_path = args.input_file
    if not os.path.isfile(input_path):
        logger.error("File not found: %s", input_path)
        sys.exit(1)

    # Determine output path
    if args.output:
        output_path = args.output
    else:
        stem = Path(input_path).stem
        output_path = f"{stem}_blocks.json"

    options, label_column = detection_settings(parser, args)

    # Run pipeline
    result = parse_workbook(
        input_path,
        sheet_name_filter=args.sheet,
        options=options,
        label_column=label_column,
    )

    # Serialize to JSON
    json_str = result.model_dump_json(indent=2, exclude_none=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(json_str)

    logger.info("Output written to %s", output_path)


if __name__ == "__main__":
    main()
