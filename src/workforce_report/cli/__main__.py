"""
Unified CLI entry point for Workforce Report.

Usage:
    python -m workforce_report.cli <command> [options]

Available commands:
    build        - Build the utilisation report rows from a source document

Examples:
    # Print the report as a table (source path from WFR_SOURCE_DATA_PATH)
    python -m workforce_report.cli build

    # Export CSV for a spreadsheet
    python -m workforce_report.cli build --source data/source-data.json \\
        --format csv --output out/utilisation.csv
"""

import argparse
import sys
from typing import List, Optional

from workforce_report.config import get_settings
from workforce_report.domain.workforce_utilisation.service import build_rows
from workforce_report.io.exporters.table_export import (
    rows_to_frame,
    rows_to_json,
    write_rows_csv,
)
from workforce_report.io.readers.json_reader import (
    SourceDataError,
    read_source_records,
)
from workforce_report.utils.logging import bind_context


def _run_build(args: argparse.Namespace) -> int:
    settings = get_settings()
    source = args.source or settings.source_data_path
    output_format = args.format or settings.output_format

    logger = bind_context(command="build", source=str(source))

    try:
        records = read_source_records(source)
    except SourceDataError as e:
        logger.error("source_read_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    rows = build_rows(records)

    if output_format == "csv":
        if args.output:
            write_rows_csv(rows, args.output)
        else:
            rows_to_frame(rows).to_csv(sys.stdout, index=False)
    elif output_format == "json":
        text = rows_to_json(rows)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as fh:
                fh.write(text + "\n")
        else:
            print(text)
    else:
        if rows:
            print(rows_to_frame(rows).to_string(index=False))
        else:
            print("No active persons in source data.")

    externals = sum(1 for row in rows if row.is_external)
    logger.info(
        "report_built",
        rows=len(rows),
        employees=len(rows) - externals,
        externals=externals,
        format=output_format,
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        prog="workforce_report.cli",
        description="Workforce Report CLI - utilisation report rows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
        help="Command to execute",
    )

    build_parser = subparsers.add_parser(
        "build",
        help="Build report rows from a source document",
        description="Read personnel records and print or export report rows",
    )
    build_parser.add_argument(
        "--source",
        help="Path to the JSON source document (default: WFR_SOURCE_DATA_PATH)",
    )
    build_parser.add_argument(
        "--format",
        choices=["table", "csv", "json"],
        help="Output format (default: WFR_OUTPUT_FORMAT or 'table')",
    )
    build_parser.add_argument(
        "--output",
        help="Write csv/json output to this file instead of stdout",
    )

    args = parser.parse_args(argv)

    if args.command == "build":
        return _run_build(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
