"""
Module for formatting sleep statistics for display and export.
"""

import json
import logging
import os
from datetime import datetime

logger = logging.getLogger(__name__)


def format_stats_for_display(stats):
    """
    Format aggregate statistics as display strings.

    Args:
        stats: AggregateStats for one subset

    Returns:
        dict: Metric name -> display string
    """
    formatted = {
        'nights': f"{stats.total_days}",
        'avg_score': f"{stats.avg_score}/100",
        'best_score': f"{stats.best_score}/100",
        'avg_duration': stats.avg_duration,
        'avg_latency': f"{stats.avg_latency_minutes} min",
        'avg_efficiency': f"{stats.avg_efficiency}%",
        'avg_deep_sleep': f"{stats.avg_deep_sleep_hours:.1f} hours",
        'avg_light_sleep': f"{stats.avg_light_sleep_hours:.1f} hours",
        'avg_bed_time': f"{stats.avg_bed_time} ({stats.bed_time_delta.text})",
        'avg_wake_time': f"{stats.avg_wake_time} ({stats.wake_time_delta.text})",
    }

    formatted['score_distribution'] = ', '.join(
        f"{bucket.name}: {bucket.count}" for bucket in stats.score_distribution
    )

    if stats.correlations.score_correlations:
        formatted['top_score_factors'] = ', '.join(
            f"{item.name.value} ({item.correlation:+.2f})" for item in stats.correlations.score_correlations
        )
    if stats.correlations.efficiency_correlations:
        formatted['top_efficiency_factors'] = ', '.join(
            f"{item.name.value} ({item.correlation:+.2f})" for item in stats.correlations.efficiency_correlations
        )

    return formatted


def format_report_text(stats):
    """Multi-line console summary for one subset"""
    lines = ["=" * 70, f"SLEEP STATISTICS: {stats.label}", "=" * 70]
    for key, value in format_stats_for_display(stats).items():
        lines.append(f"  {key.replace('_', ' ').title():<24} {value}")
    return '\n'.join(lines)


def generate_json_output(dashboard, monthly=None):
    """
    Build a JSON-serializable export of the computed statistics.

    Args:
        dashboard: DashboardStats for the whole dataset
        monthly: Optional AggregateStats for a selected month
    """
    output = {
        'metadata': {
            'generated_at': datetime.now().isoformat(),
            'total_days': dashboard.overall.total_days,
        },
        'overall': dashboard.overall.model_dump(mode='json'),
        'weekday': dashboard.weekday.model_dump(mode='json') if dashboard.weekday else None,
        'weekend': dashboard.weekend.model_dump(mode='json') if dashboard.weekend else None,
    }
    if monthly is not None:
        output['monthly'] = monthly.model_dump(mode='json')
    return output


def save_json_output(output, filepath='sleep_stats.json'):
    """Save the statistics export to a JSON file."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(output, f, indent=2)
    logger.info(f"JSON output saved to: {filepath}")
    return filepath
