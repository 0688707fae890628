#!/usr/bin/env python3
"""
Main entry point for the schedule converter.
Takes a schedule PDF exported from project-management software and writes
the activity table as CSV (or JSON) for spreadsheet import.
"""
import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from schedule_converter.config import load_band_config, resolve_grouping
from schedule_converter.exceptions import ScheduleProcessingError
from schedule_converter.services import ConversionServiceFactory
from schedule_converter.utils import generate_output_filename, save_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Convert construction schedule PDFs to CSV',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert with the built-in column bands
  schedx schedule.pdf
  schedx schedule.pdf -o schedule.csv

  # Re-tuned column bands for a different report layout
  schedx schedule.pdf --bands bands.json

  # JSON output with the section of every activity
  schedx schedule.pdf --format json

  # Or if not installed:
  python main.py schedule.pdf

Environment:
  SCHEDX_BANDS            default for --bands
  SCHEDX_LINE_GROUPING    default for --grouping
        """
    )
    parser.add_argument('input', type=str, help='Input PDF file path (required)')
    parser.add_argument('-o', '--output', type=str, default=None,
                        help='Output file path (optional, auto-generated if not provided)')
    parser.add_argument('--bands', type=str, default=None,
                        help='JSON file mapping fields to [start, end] column bands')
    parser.add_argument('--grouping', type=str, choices=['round', 'delta'], default=None,
                        help='Line grouping policy (default: round)')
    parser.add_argument('--tolerance', type=float, default=5.0,
                        help='Vertical tolerance for --grouping delta (default: 5)')
    parser.add_argument('--format', dest='output_format', choices=['csv', 'json'], default='csv',
                        help='Output format (default: csv)')
    parser.add_argument('--with-section', action='store_true',
                        help='Add a Section column to CSV output')
    parser.add_argument('--preview', action='store_true',
                        help='Print the converted output after saving')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log classification and parsing decisions')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    # Validate input file exists
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {args.input}")
        return 1

    try:
        service = ConversionServiceFactory.create_schedule_service(
            bands=load_band_config(args.bands),
            grouping=resolve_grouping(args.grouping),
            tolerance=args.tolerance,
            output_format=args.output_format,
            include_section=args.with_section,
        )
    except (OSError, ValueError) as e:
        # ValidationError is a ValueError; show pydantic's per-field detail
        detail = e if isinstance(e, ValidationError) else str(e)
        print(f"Error: Invalid configuration: {detail}")
        return 1

    if args.output is None:
        args.output = generate_output_filename(args.input, service.serializer.file_suffix)

    print(f"📄 Processing: {args.input}", flush=True)
    print("🔄 Step 1/3: Reading pages and rebuilding schedule lines...", flush=True)

    try:
        result = service.convert(input_path, show_progress=True)
    except ScheduleProcessingError as e:
        print(f"\n❌ Error: {e}")
        if e.__cause__ is not None:
            print(f"   Cause: {e.__cause__}")
        return 1

    print("🔄 Step 2/3: Rendering output...", end="", flush=True)
    text = service.render(result)
    print(" ✓", flush=True)

    print("🔄 Step 3/3: Saving results...", end="", flush=True)
    save_text(text, args.output)
    print(" ✓", flush=True)
    print(f"\n✅ Done! Results saved to: {args.output}")

    summary = result.summary
    print(f"\n📊 Conversion Summary:")
    print(f"  - Activities: {summary.total_activities}")
    print(f"  - Sections: {len(summary.sections)}")
    print(f"  - Noise lines skipped: {summary.noise_lines}")
    print(f"  - Rows rejected (totals/footers): {summary.rejected_rows}")
    print(f"  - Pages processed: {summary.pages_processed}")

    if args.preview:
        print(f"\n{text}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
