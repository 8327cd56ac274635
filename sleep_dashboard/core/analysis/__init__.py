"""
Analysis module for sleep data statistics.

This module contains the functions that turn parsed sleep records into
aggregate statistics for the dashboard.
"""

from sleep_dashboard.core.analysis.sleep_metrics import calculate_sleep_metrics
from sleep_dashboard.core.analysis.correlation import pearson, calculate_correlations
from sleep_dashboard.core.analysis.circular_time import circular_mean_time, target_delta

__all__ = [
    'calculate_sleep_metrics',
    'pearson',
    'calculate_correlations',
    'circular_mean_time',
    'target_delta',
]
