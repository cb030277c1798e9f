#!/usr/bin/env python
"""
Erg Planner - Command Line Interface

This script converts the workout sheets of an Excel workbook into ERG
files for indoor trainers and prints a one-line summary per workout.
"""

import sys
import argparse
import logging

from ergplanner.constants import VERSION
from ergplanner.convert import convert_workbook, report
from ergplanner.exceptions import ErgPlannerError
from ergplanner.sample import create_sample_workbook


def parse_args(argv):
    """
    Parse command line arguments.

    Args:
        argv: Command line arguments

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog='erg-planner',
        description='Erg Planner - Convert workout sheets of an Excel workbook to ERG files')

    parser.add_argument('workbook',
                        help='Excel workbook holding one workout per sheet')
    parser.add_argument('--output-dir', required=False, default=None,
                        help='Directory the ERG files are written to (default: current directory)')
    parser.add_argument('--create-sample', action='store_true', default=False,
                        help='Create a sample workbook at the given path instead of converting')
    parser.add_argument('--log-level', required=False,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO',
                        help='Set log level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')

    return parser.parse_args(argv)


def setup_logging(log_level):
    """
    Set up logging with the specified level.

    Args:
        log_level: Logging level (e.g., 'INFO', 'DEBUG')
    """
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)-15s %(levelname)s %(message)s'
    )


def main(argv=None):
    """Main entry point for the script."""
    args = parse_args(sys.argv[1:] if argv is None else argv)

    # Set up logging
    setup_logging(args.log_level)

    if args.create_sample:
        try:
            create_sample_workbook(args.workbook)
        except OSError as e:
            logging.error(f"Failed to create sample workbook {args.workbook}: {e}")
            return 1
        return 0

    try:
        results = convert_workbook(args.workbook, output_dir=args.output_dir)
    except KeyboardInterrupt:
        logging.info("Operation canceled by user.")
        return 130  # Standard exit code for Ctrl+C
    except ErgPlannerError as e:
        logging.error(f"Error converting workbook: {e}")
        import traceback
        logging.debug(traceback.format_exc())
        return 1

    report(results)

    failed = [result for result in results if not result.ok]
    if failed:
        logging.error(f"{len(failed)} of {len(results)} sheets failed: "
                      f"{', '.join(result.sheet_name for result in failed)}")
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
