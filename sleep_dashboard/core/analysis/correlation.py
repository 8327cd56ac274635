"""
Pearson correlations between the nine sleep features.
"""

import math
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from sleep_dashboard.core.data_processing.feature_engineering import FEATURE_ORDER, feature_vectors
from sleep_dashboard.core.models.data_models import FeatureName, SleepRecord
from sleep_dashboard.core.models.output_models import (
    CorrelationCell,
    CorrelationSummary,
    FeatureCorrelation,
)
from sleep_dashboard.utils.constants import default_values


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Pearson correlation coefficient using the sum-based formula.

        r = (n*Sxy - Sx*Sy) / sqrt((n*Sxx - Sx^2) * (n*Syy - Sy^2))

    Fewer than two values, or no variance in either sequence, gives 0.0
    instead of NaN.

    Raises:
        ValueError: If the sequences differ in length
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape:
        raise ValueError(f"Sequences must have equal length, got {len(x)} and {len(y)}")

    n = len(x)
    # Constant float series can leave a tiny positive denominator after cancellation
    if n < 2 or np.ptp(x) == 0 or np.ptp(y) == 0:
        return 0.0

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_x2 = (x * x).sum()
    sum_y2 = (y * y).sum()

    numerator = n * sum_xy - sum_x * sum_y
    denominator_sq = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)

    if not denominator_sq > 0 or not math.isfinite(denominator_sq):
        return 0.0
    return float(numerator / math.sqrt(denominator_sq))


def correlation_matrix(features: Dict[FeatureName, np.ndarray]) -> List[CorrelationCell]:
    """
    Coefficient for every ordered feature pair, row-major in canonical order.

    The diagonal is 1 only for features with variance; a constant feature
    correlates 0 with itself.
    """
    names = [f for f in FEATURE_ORDER if f in features]
    return [
        CorrelationCell(x=a, y=b, value=pearson(features[a], features[b]))
        for a in names
        for b in names
    ]


def top_correlations(features: Dict[FeatureName, np.ndarray], target: FeatureName,
                     limit: int = default_values['top_correlation_count']) -> List[FeatureCorrelation]:
    """
    Features most correlated with a target, by absolute value.

    The target itself is excluded; ties keep canonical feature order.
    """
    ranked = [
        FeatureCorrelation(name=name, correlation=pearson(values, features[target]))
        for name, values in features.items()
        if name != target
    ]
    ranked.sort(key=lambda item: abs(item.correlation), reverse=True)
    return ranked[:limit]


def calculate_correlations(records: List[SleepRecord],
                           limit: int = default_values['top_correlation_count']) -> CorrelationSummary:
    """
    Full correlation summary for a subset of nights.

    Args:
        records: Sleep records of the subset
        limit: Number of entries in each top-correlation list

    Returns:
        CorrelationSummary: matrix plus top features for Score and Efficiency
    """
    features = feature_vectors(records)
    return CorrelationSummary(
        feature_names=list(FEATURE_ORDER),
        matrix=correlation_matrix(features),
        score_correlations=top_correlations(features, FeatureName.SCORE, limit),
        efficiency_correlations=top_correlations(features, FeatureName.EFFICIENCY, limit),
    )


def correlation_frame(summary: CorrelationSummary) -> pd.DataFrame:
    """Square DataFrame view of the matrix, indexed and labelled by feature name"""
    labels = [f.value for f in summary.feature_names]
    frame = pd.DataFrame(0.0, index=labels, columns=labels)
    for cell in summary.matrix:
        frame.loc[cell.x.value, cell.y.value] = cell.value
    return frame
