#!/usr/bin/env python
"""
Marine Fish Data Cleaning Pipeline
==================================
CLI entrypoint for running the complete cleaning and reporting pipeline.

Usage:
    python run_pipeline.py --input data/marine_fish_data.csv
    python run_pipeline.py --help
"""

import sys

from marine_fish.cli import main


if __name__ == '__main__':
    sys.exit(main())
