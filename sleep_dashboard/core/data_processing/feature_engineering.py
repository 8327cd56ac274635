from typing import Dict, List

import numpy as np
import pandas as pd

from sleep_dashboard.core.models.data_models import FeatureName, SleepRecord

# Canonical order of the correlation features
FEATURE_ORDER: List[FeatureName] = list(FeatureName)

FRAME_COLUMNS = ['date', 'is_weekend', 'duration_hours'] + [f.value for f in FEATURE_ORDER]


def extract_features(record: SleepRecord) -> Dict[FeatureName, float]:
    """Nine correlation features for one night, in canonical order"""
    return {
        FeatureName.DURATION: float(record.duration_minutes),
        FeatureName.DEEP_SLEEP: float(record.rem_minutes),
        FeatureName.LIGHT_SLEEP: float(record.light_minutes),
        FeatureName.LATENCY: record.latency_minutes,
        FeatureName.SCORE: float(record.score),
        FeatureName.PHYSICAL_RECOVERY: float(record.physical_recovery),
        FeatureName.AWAKENING: float(record.awakening_percent),
        FeatureName.EFFICIENCY: float(record.efficiency_percent),
        FeatureName.MENTAL_RECOVERY: float(record.mental_recovery),
    }


def feature_vectors(records: List[SleepRecord]) -> Dict[FeatureName, np.ndarray]:
    """
    Column vectors of every feature over a subset of nights.

    Args:
        records: Ordered sleep records

    Returns:
        dict: FeatureName -> float array, one value per record
    """
    frame = build_feature_frame(records)
    return {
        feature: pd.to_numeric(frame[feature.value], errors='coerce').fillna(0.0).to_numpy(dtype=float)
        for feature in FEATURE_ORDER
    }


def build_feature_frame(records: List[SleepRecord]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per night and one column per feature.

    Columns are 'date', 'is_weekend', 'duration_hours' followed by the
    nine canonical feature names. An empty subset gives an empty frame
    with the same columns.
    """
    if not records:
        return pd.DataFrame(columns=FRAME_COLUMNS)

    data = []
    for record in records:
        row = {
            'date': pd.Timestamp(record.date),
            'is_weekend': record.is_weekend,
            'duration_hours': record.duration_hours,
        }
        row.update({feature.value: value for feature, value in extract_features(record).items()})
        data.append(row)

    return pd.DataFrame(data, columns=FRAME_COLUMNS)
