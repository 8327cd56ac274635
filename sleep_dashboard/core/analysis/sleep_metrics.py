"""
Module for calculating aggregate sleep statistics for a subset of nights.
"""

import logging
from typing import List, Optional

import numpy as np

from sleep_dashboard.core.analysis.circular_time import (
    circular_mean_minutes,
    clock_angles,
    format_clock,
    target_delta,
)
from sleep_dashboard.core.analysis.correlation import calculate_correlations
from sleep_dashboard.core.data_processing.filters import select_weekday, select_weekend
from sleep_dashboard.core.models.data_models import SleepRecord
from sleep_dashboard.core.models.output_models import AggregateStats, DashboardStats
from sleep_dashboard.core.scoring.score_buckets import score_distribution
from sleep_dashboard.utils.constants import MS_PER_MINUTE, default_values
from sleep_dashboard.utils.rounding import round_half_up

logger = logging.getLogger(__name__)


def _mean(values) -> float:
    """Arithmetic mean, 0 for no values"""
    values = np.asarray(values, dtype=float)
    return float(values.mean()) if len(values) else 0.0


def format_duration(minutes: int) -> str:
    """'7h 25min', or '45min' under an hour"""
    hours, mins = divmod(int(minutes), 60)
    if hours == 0:
        return f"{mins}min"
    return f"{hours}h {mins}min"


def calculate_sleep_metrics(sleep_data: List[SleepRecord], label: str = 'All',
                            config: Optional[dict] = None) -> AggregateStats:
    """
    Calculate aggregate statistics for a subset of nights.

    Args:
        sleep_data: Sleep records of the subset (may be empty)
        label: Name of the subset, e.g. 'Weekday' or '2025-5'
        config: Optional overrides for 'target_bed_time', 'target_wake_time'
            and 'top_correlation_count'

    Returns:
        AggregateStats: Averages, circular-mean times, target deltas,
        score distribution and correlations. Empty subsets give zeros
        and '--:--' placeholders.
    """
    config = dict(config or {})
    config.setdefault('target_bed_time', default_values['target_bed_time'])
    config.setdefault('target_wake_time', default_values['target_wake_time'])
    config.setdefault('top_correlation_count', default_values['top_correlation_count'])

    data = list(sleep_data)
    logger.debug(f"[{label}] Calculating statistics for {len(data)} nights")

    avg_score = round_half_up(_mean([d.score for d in data]))
    avg_duration = round_half_up(_mean([d.duration_minutes for d in data]))

    # Zero latency and efficiency mean 'not measured'
    avg_latency_ms = _mean([d.latency_ms for d in data if d.has_latency])
    avg_latency = round_half_up(avg_latency_ms / MS_PER_MINUTE)
    avg_efficiency = round_half_up(_mean([d.efficiency_percent for d in data if d.has_efficiency]))

    avg_deep_sleep = round_half_up(_mean([d.rem_minutes for d in data]))
    avg_light_sleep = round_half_up(_mean([d.light_minutes for d in data]))

    bed_minutes = circular_mean_minutes([d.bed_time for d in data])
    wake_minutes = circular_mean_minutes([d.wake_time for d in data])

    return AggregateStats(
        label=label,
        total_days=len(data),
        best_score=max((d.score for d in data), default=0),
        avg_score=avg_score,
        avg_duration_minutes=avg_duration,
        avg_duration=format_duration(avg_duration),
        avg_latency_minutes=avg_latency,
        avg_efficiency=avg_efficiency,
        avg_deep_sleep_minutes=avg_deep_sleep,
        avg_light_sleep_minutes=avg_light_sleep,
        avg_deep_sleep_hours=round_half_up(avg_deep_sleep / 60, 1),
        avg_light_sleep_hours=round_half_up(avg_light_sleep / 60, 1),
        avg_bed_time=format_clock(bed_minutes),
        avg_wake_time=format_clock(wake_minutes),
        bed_time_delta=target_delta(bed_minutes, config['target_bed_time']),
        wake_time_delta=target_delta(wake_minutes, config['target_wake_time']),
        bed_clock=clock_angles(bed_minutes),
        wake_clock=clock_angles(wake_minutes),
        score_distribution=score_distribution(data),
        correlations=calculate_correlations(data, config['top_correlation_count']),
    )


def calculate_dashboard_stats(sleep_data: List[SleepRecord], config: Optional[dict] = None) -> DashboardStats:
    """
    Overall statistics plus weekday and weekend splits.

    A split is None when the data has no nights of that kind.
    """
    weekday_data = select_weekday(sleep_data)
    weekend_data = select_weekend(sleep_data)

    return DashboardStats(
        overall=calculate_sleep_metrics(sleep_data, 'All', config),
        weekday=calculate_sleep_metrics(weekday_data, 'Weekday', config) if weekday_data else None,
        weekend=calculate_sleep_metrics(weekend_data, 'Weekend', config) if weekend_data else None,
    )
