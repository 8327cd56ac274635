"""
Sleep score bucketing for the score distribution chart.
"""

import logging
from typing import List

from sleep_dashboard.core.models.data_models import ScoreBucket, SleepRecord
from sleep_dashboard.core.models.output_models import ScoreBucketCount
from sleep_dashboard.utils.constants import score_bucket_colors, score_buckets

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100


def clamp_score(score: int) -> int:
    """Clamp a score into 0-100, logging values outside the tracker's range"""
    if score < MIN_SCORE or score > MAX_SCORE:
        logger.warning(f"Sleep score {score} outside {MIN_SCORE}-{MAX_SCORE}, clamping")
        return max(MIN_SCORE, min(MAX_SCORE, score))
    return score


def classify_score(score: int) -> ScoreBucket:
    """Bucket for a score; bounds are inclusive and out-of-range scores are clamped"""
    score = clamp_score(score)
    for name, lower, upper in score_buckets:
        if lower <= score <= upper:
            return ScoreBucket(name)
    # score_buckets covers 0-100 without gaps
    raise ValueError(f"No bucket for score {score}")


def score_category(score: int) -> str:
    """Display label for a single night's score, e.g. 'Good (51-75)'"""
    bucket = classify_score(score)
    bounds = {name: (lower, upper) for name, lower, upper in score_buckets}
    lower, upper = bounds[bucket.value]
    return f"{bucket.value} ({lower}-{upper})"


def score_distribution(records: List[SleepRecord]) -> List[ScoreBucketCount]:
    """
    Count nights per score bucket.

    Args:
        records: Sleep records of the subset

    Returns:
        list: One ScoreBucketCount per bucket, in bucket order; counts sum to len(records)
    """
    counts = {ScoreBucket(name): 0 for name, _, _ in score_buckets}
    for record in records:
        counts[classify_score(record.score)] += 1

    return [
        ScoreBucketCount(
            bucket=ScoreBucket(name),
            name=f"{name} ({lower}-{upper})",
            lower=lower,
            upper=upper,
            count=counts[ScoreBucket(name)],
            color=score_bucket_colors[name],
        )
        for name, lower, upper in score_buckets
    ]
