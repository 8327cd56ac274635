import datetime

from sleep_dashboard.core.data_processing.feature_engineering import (
    FEATURE_ORDER,
    FRAME_COLUMNS,
    build_feature_frame,
    extract_features,
    feature_vectors,
)
from sleep_dashboard.core.models.data_models import FeatureName
from tests.conftest import make_record


def test_feature_names_are_stable():
    assert [f.value for f in FEATURE_ORDER] == [
        'Duration', 'Deep Sleep', 'Light Sleep', 'Latency', 'Score',
        'Physical Recovery', 'Awakening', 'Efficiency', 'Mental Recovery',
    ]


def test_extract_features():
    features = extract_features(make_record(
        duration_minutes=430, rem_minutes=95, light_minutes=260, latency_ms=90000,
        score=81, physical_recovery=85, awakening_percent=9, efficiency_percent=91.5, mental_recovery=83,
    ))
    assert list(features) == FEATURE_ORDER
    assert features[FeatureName.DEEP_SLEEP] == 95
    assert features[FeatureName.LATENCY] == 1.5
    assert features[FeatureName.EFFICIENCY] == 91.5


def test_feature_vectors_align_with_records():
    records = [make_record(datetime.date(2025, 3, 10 + i), score=70 + i) for i in range(3)]
    vectors = feature_vectors(records)
    assert list(vectors[FeatureName.SCORE]) == [70.0, 71.0, 72.0]
    assert all(len(v) == 3 for v in vectors.values())


def test_build_feature_frame():
    frame = build_feature_frame([
        make_record(datetime.date(2025, 3, 14), duration_minutes=430),
        make_record(datetime.date(2025, 3, 15), duration_minutes=480),
    ])
    assert list(frame.columns) == FRAME_COLUMNS
    assert list(frame['is_weekend']) == [False, True]
    assert list(frame['duration_hours']) == [7.2, 8.0]
    assert list(frame['Duration']) == [430.0, 480.0]


def test_build_feature_frame_empty():
    frame = build_feature_frame([])
    assert frame.empty
    assert list(frame.columns) == FRAME_COLUMNS
