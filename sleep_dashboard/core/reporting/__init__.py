"""
Reporting module for sleep statistics.

This module contains functions for turning computed statistics into
display strings and JSON exports.
"""

from sleep_dashboard.core.reporting.report_generator import (
    format_stats_for_display,
    generate_json_output,
    save_json_output,
)

__all__ = ['format_stats_for_display', 'generate_json_output', 'save_json_output']
