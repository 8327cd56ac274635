import datetime

import pytest

from sleep_dashboard.core.analysis.sleep_metrics import (
    calculate_dashboard_stats,
    calculate_sleep_metrics,
    format_duration,
)
from sleep_dashboard.core.data_processing.preprocessing import parse_sleep_csv
from tests.conftest import make_record


def test_empty_subset_returns_defined_values():
    stats = calculate_sleep_metrics([])

    assert stats.total_days == 0
    assert stats.avg_score == 0
    assert stats.best_score == 0
    assert stats.avg_duration == '0min'
    assert stats.avg_latency_minutes == 0
    assert stats.avg_efficiency == 0
    assert stats.avg_bed_time == '--:--'
    assert stats.avg_wake_time == '--:--'
    assert stats.bed_time_delta.text == '--'
    assert [b.count for b in stats.score_distribution] == [0, 0, 0, 0]
    assert len(stats.correlations.matrix) == 81


def test_single_record_subset():
    stats = calculate_sleep_metrics([make_record(bed='22:30', wake='6:50', score=81)])

    assert stats.total_days == 1
    assert stats.avg_score == 81
    assert stats.best_score == 81
    assert stats.avg_bed_time == '22:30'
    assert stats.avg_wake_time == '6:50'
    assert stats.bed_time_delta.minutes == -30
    assert stats.wake_time_delta.minutes == 30
    assert all(cell.value == 0.0 for cell in stats.correlations.matrix)


def test_averages_round_half_up():
    records = [
        make_record(datetime.date(2025, 3, 10), score=70, duration_minutes=421),
        make_record(datetime.date(2025, 3, 11), score=71, duration_minutes=424),
    ]
    stats = calculate_sleep_metrics(records)
    assert stats.avg_score == 71  # 70.5
    assert stats.avg_duration_minutes == 423  # 422.5
    assert stats.avg_duration == '7h 3min'


def test_unknown_latency_and_efficiency_are_excluded():
    records = [
        make_record(datetime.date(2025, 3, 10), latency_ms=600000, efficiency_percent=90.0),
        make_record(datetime.date(2025, 3, 11), latency_ms=0, efficiency_percent=0.0),
        make_record(datetime.date(2025, 3, 12), latency_ms=1200000, efficiency_percent=86.0),
    ]
    stats = calculate_sleep_metrics(records)
    assert stats.avg_latency_minutes == 15
    assert stats.avg_efficiency == 88


def test_all_unknown_latency_gives_zero():
    stats = calculate_sleep_metrics([make_record(latency_ms=0, efficiency_percent=0.0)])
    assert stats.avg_latency_minutes == 0
    assert stats.avg_efficiency == 0


def test_deep_and_light_sleep_averages():
    records = [
        make_record(datetime.date(2025, 3, 10), rem_minutes=90, light_minutes=250),
        make_record(datetime.date(2025, 3, 11), rem_minutes=100, light_minutes=262),
    ]
    stats = calculate_sleep_metrics(records)
    assert stats.avg_deep_sleep_minutes == 95
    assert stats.avg_light_sleep_minutes == 256
    assert stats.avg_deep_sleep_hours == pytest.approx(1.6)
    assert stats.avg_light_sleep_hours == pytest.approx(4.3)


def test_bed_times_across_midnight_end_to_end():
    records = [
        make_record(datetime.date(2025, 3, 10), bed='22:00'),
        make_record(datetime.date(2025, 3, 11), bed='23:30'),
        make_record(datetime.date(2025, 3, 12), bed='0:15'),
    ]
    stats = calculate_sleep_metrics(records)

    hours, minutes = (int(p) for p in stats.avg_bed_time.split(':'))
    assert hours in (22, 23, 0)
    assert abs(stats.bed_time_delta.minutes) < 30
    assert stats.bed_time_delta.text.endswith(('later', 'earlier'))


def test_custom_targets():
    stats = calculate_sleep_metrics(
        [make_record(bed='22:30', wake='7:00')],
        config={'target_bed_time': '22:00', 'target_wake_time': '7:30'},
    )
    assert stats.bed_time_delta.text == '+30min later'
    assert stats.wake_time_delta.text == '-30min earlier'


def test_top_correlation_count_config():
    records = [make_record(datetime.date(2025, 3, 10 + i), score=60 + i) for i in range(3)]
    stats = calculate_sleep_metrics(records, config={'top_correlation_count': 3})
    assert len(stats.correlations.score_correlations) == 3


def test_dashboard_splits(sample_csv):
    dashboard = calculate_dashboard_stats(parse_sleep_csv(sample_csv))

    assert dashboard.overall.total_days == 4
    assert dashboard.weekday.total_days == 3
    assert dashboard.weekend.total_days == 1
    assert dashboard.weekend.label == 'Weekend'
    assert dashboard.weekend.avg_bed_time == '0:35'


def test_dashboard_missing_split_is_none():
    dashboard = calculate_dashboard_stats([make_record(datetime.date(2025, 3, 12))])
    assert dashboard.weekday is not None
    assert dashboard.weekend is None


def test_stats_are_json_serializable(sample_csv):
    dumped = calculate_sleep_metrics(parse_sleep_csv(sample_csv)).model_dump(mode='json')
    assert dumped['correlations']['feature_names'][0] == 'Duration'
    assert dumped['score_distribution'][0]['bucket'] == 'Poor'


@pytest.mark.parametrize('minutes, text', [(0, '0min'), (45, '45min'), (60, '1h 0min'), (445, '7h 25min')])
def test_format_duration(minutes, text):
    assert format_duration(minutes) == text
