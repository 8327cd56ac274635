#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Script to compute the dashboard statistics from a sleep tracker export.

Usage:
    python scripts/run_sleep_analysis.py [--data PATH] [--year Y --month M]
                                         [--output stats.json] [--config PATH] [--verbose]
"""

import argparse
import logging
import os
import sys

# Add the repository root to the path
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from sleep_dashboard.config.config_manager import ConfigManager
from sleep_dashboard.core.reporting.report_generator import (
    format_report_text,
    generate_json_output,
    save_json_output,
)
from sleep_dashboard.core.repositories.data_repository import SleepDataRepository
from sleep_dashboard.core.services.sleep_service import SleepStatsService
from sleep_dashboard.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_parser():
    """Create and return the argument parser for CLI."""
    parser = argparse.ArgumentParser(
        description='Compute sleep dashboard statistics from a sleep tracker CSV export.'
    )
    parser.add_argument('--config', type=str, default=None,
                        help='Path to YAML config (default: config/config.yaml if present)')
    parser.add_argument('--data', type=str, default=None,
                        help='Path to the sleep CSV export (default: data.path from config)')
    parser.add_argument('--year', type=int, default=None, help='Year of the monthly view')
    parser.add_argument('--month', type=int, default=None, help='Month of the monthly view (1-12)')
    parser.add_argument('--output', type=str, default=None, help='Write the statistics as JSON to this path')
    parser.add_argument('--verbose', action='store_true', help='Print weekday and weekend splits too')
    return parser


def main(argv=None):
    """Run the sleep statistics on the export"""
    args = create_parser().parse_args(argv)

    try:
        config = ConfigManager(args.config)
        analysis_config = config.analysis_config()
    except (FileNotFoundError, ValueError) as e:
        print(f"\nConfig Error: {e}\n", flush=True)
        return 1

    setup_logging(config.get('logging.level', 'INFO'), config.get('logging.file'))

    if (args.year is None) != (args.month is None):
        print("\nBoth --year and --month are required for the monthly view.\n", flush=True)
        return 1

    data_path = args.data or config.get('data.path')
    repository = SleepDataRepository(data_path)
    service = SleepStatsService(repository, analysis_config)

    try:
        dashboard = service.get_dashboard_stats()
    except FileNotFoundError as e:
        print(f"\nFile Error: {e}", flush=True)
        print("   Check that the data file exists and the path is correct.\n", flush=True)
        return 1

    print(format_report_text(dashboard.overall))
    if args.verbose:
        for split in (dashboard.weekday, dashboard.weekend):
            if split is not None:
                print(format_report_text(split))

    monthly = None
    if args.year is not None:
        monthly = service.get_monthly_stats(args.year, args.month)
        print(format_report_text(monthly))
    elif args.verbose:
        for year, months in service.get_selector_options().items():
            print(f"  {year}: months {', '.join(str(m) for m in months)}")

    if args.verbose:
        print("\nCORRELATIONS")
        print(service.get_correlation_frame(args.year, args.month).round(2).to_string())

    if args.output:
        save_json_output(generate_json_output(dashboard, monthly), args.output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
