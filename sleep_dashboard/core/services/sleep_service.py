# sleep_dashboard/core/services/sleep_service.py
import logging
from typing import Dict, List, Optional

import pandas as pd

from sleep_dashboard.core.analysis.correlation import calculate_correlations, correlation_frame
from sleep_dashboard.core.analysis.sleep_metrics import calculate_dashboard_stats, calculate_sleep_metrics
from sleep_dashboard.core.analysis.sleep_timing import (
    bed_time_consistency,
    nightly_target_delta,
    wake_time_consistency,
)
from sleep_dashboard.core.data_processing.filters import months_by_year
from sleep_dashboard.core.models.output_models import (
    AggregateStats,
    DashboardStats,
    NightlyTargetDelta,
    TimingConsistency,
)
from sleep_dashboard.utils.constants import default_values

logger = logging.getLogger(__name__)


class SleepStatsService:
    """Statistics queries backing the dashboard views"""

    def __init__(self, repository, config=None):
        self.repository = repository
        self.config = config or {}

    def get_overall_stats(self) -> AggregateStats:
        return calculate_sleep_metrics(self.repository.get_sleep_data(), 'All', self.config)

    def get_weekday_stats(self) -> AggregateStats:
        return calculate_sleep_metrics(self.repository.get_weekday_data(), 'Weekday', self.config)

    def get_weekend_stats(self) -> AggregateStats:
        return calculate_sleep_metrics(self.repository.get_weekend_data(), 'Weekend', self.config)

    def get_monthly_stats(self, year: int, month: int) -> AggregateStats:
        """Statistics for one calendar month (zeros when the month has no data)"""
        month_data = self.repository.get_sleep_data(year, month)
        if not month_data:
            logger.info(f"No sleep data for {year}-{month}")
        return calculate_sleep_metrics(month_data, f"{year}-{month}", self.config)

    def get_dashboard_stats(self) -> DashboardStats:
        """Overall tab: all nights plus weekday and weekend splits"""
        return calculate_dashboard_stats(self.repository.get_sleep_data(), self.config)

    def get_available_years(self) -> List[int]:
        return self.repository.get_available_years()

    def get_available_months(self, year: int) -> List[int]:
        return self.repository.get_available_months(year)

    def get_selector_options(self) -> Dict[int, List[int]]:
        """Year -> months with data, for the month picker"""
        return months_by_year(self.repository.get_sleep_data())

    def get_timing_consistency(self, year: int, month: int) -> Dict[str, TimingConsistency]:
        month_data = self.repository.get_sleep_data(year, month)
        return {
            'bed_time': bed_time_consistency(month_data),
            'wake_time': wake_time_consistency(month_data),
        }

    def get_nightly_deltas(self) -> List[NightlyTargetDelta]:
        """Calendar tooltip deltas for every night, in data order"""
        return [nightly_target_delta(r, self.config) for r in self.repository.get_sleep_data()]

    def get_correlation_frame(self, year: Optional[int] = None, month: Optional[int] = None) -> pd.DataFrame:
        """9x9 correlation table for all nights, or for one month when year and month are given"""
        records = self.repository.get_sleep_data(year, month)
        limit = self.config.get('top_correlation_count', default_values['top_correlation_count'])
        return correlation_frame(calculate_correlations(records, limit))
