"""
Command line entrypoint for the marine fish cleaning pipeline.

Usage:
    python run_pipeline.py --input data/marine_fish_data.csv
    python run_pipeline.py --help
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import MarineFishError, PipelineStageError
from .pipeline import run_pipeline

logger = logging.getLogger(__name__)

DEFAULT_INPUT = 'data/marine_fish_data.csv'
DEFAULT_OUTPUT_DIR = 'outputs'


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Marine Fish Data Cleaning Pipeline',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python run_pipeline.py --input data/marine_fish_data.csv
    python run_pipeline.py --input fish.csv --output-dir ./reports
    python run_pipeline.py --input fish.csv --no-output -v
        """
    )

    parser.add_argument(
        '--input',
        type=str,
        default=DEFAULT_INPUT,
        help=f'CSV file with the marine fish dataset (default: {DEFAULT_INPUT})'
    )

    parser.add_argument(
        '--output-dir',
        type=str,
        default=DEFAULT_OUTPUT_DIR,
        help=f'Directory to save cleaned data and reports (default: ./{DEFAULT_OUTPUT_DIR})'
    )

    parser.add_argument(
        '--no-output',
        action='store_true',
        help='Run the pipeline without writing any files'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose debug logging'
    )

    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        0 on success, 1 on a fatal error
    """
    args = parse_args(argv)
    configure_logging(args.verbose)

    output_dir = None if args.no_output else args.output_dir

    try:
        result = run_pipeline(args.input, output_dir)
    except PipelineStageError as e:
        completed = e.partial_result.completed_stages if e.partial_result else []
        logger.exception(f"Pipeline aborted: {e}")
        logger.error(f"Completed stages before failure: {', '.join(completed) or 'none'}")
        return 1
    except MarineFishError as e:
        logger.error(f"Pipeline failed: {e}")
        return 1

    if result.has_findings:
        logger.warning("Data quality findings recorded; review the diagnostic outputs")
    else:
        logger.info("No data quality findings")

    return 0


if __name__ == '__main__':
    sys.exit(main())
