# sleep_dashboard/core/models/output_models.py

from typing import List, Optional

from pydantic import BaseModel, Field

from sleep_dashboard.core.models.data_models import FeatureName, ScoreBucket
from sleep_dashboard.utils.constants import DELTA_PLACEHOLDER, TIME_PLACEHOLDER


class TimeDelta(BaseModel):
    """Signed distance of an average time from its target, positive = later"""
    minutes: int = 0
    text: str = DELTA_PLACEHOLDER
    direction: Optional[str] = None  # 'later', 'earlier', 'on_target' or None when undefined


class ClockAngles(BaseModel):
    """Analog clock hand angles in degrees, 12 o'clock at -90"""
    hour_angle: float = 0.0
    minute_angle: float = 0.0


class ScoreBucketCount(BaseModel):
    bucket: ScoreBucket
    name: str
    lower: int
    upper: int
    count: int = Field(0, ge=0)
    color: str


class CorrelationCell(BaseModel):
    x: FeatureName
    y: FeatureName
    value: float


class FeatureCorrelation(BaseModel):
    name: FeatureName
    correlation: float


class CorrelationSummary(BaseModel):
    feature_names: List[FeatureName]
    matrix: List[CorrelationCell] = []
    score_correlations: List[FeatureCorrelation] = []
    efficiency_correlations: List[FeatureCorrelation] = []


class AggregateStats(BaseModel):
    """Statistics for one subset of nights"""
    label: str = 'All'
    total_days: int = 0
    best_score: int = 0
    avg_score: int = 0
    avg_duration_minutes: int = 0
    avg_duration: str = '0min'
    avg_latency_minutes: int = 0
    avg_efficiency: int = 0
    avg_deep_sleep_minutes: int = 0
    avg_light_sleep_minutes: int = 0
    avg_deep_sleep_hours: float = 0.0
    avg_light_sleep_hours: float = 0.0
    avg_bed_time: str = TIME_PLACEHOLDER
    avg_wake_time: str = TIME_PLACEHOLDER
    bed_time_delta: TimeDelta = Field(default_factory=TimeDelta)
    wake_time_delta: TimeDelta = Field(default_factory=TimeDelta)
    bed_clock: ClockAngles = Field(default_factory=ClockAngles)
    wake_clock: ClockAngles = Field(default_factory=ClockAngles)
    score_distribution: List[ScoreBucketCount] = []
    correlations: CorrelationSummary


class DashboardStats(BaseModel):
    """Overall tab statistics with weekday/weekend splits"""
    overall: AggregateStats
    weekday: Optional[AggregateStats] = None  # None when the subset is empty
    weekend: Optional[AggregateStats] = None


class NightlyTargetDelta(BaseModel):
    """Per-night distance from target times, as shown in the calendar tooltip"""
    date: str
    is_weekend: bool
    bed_delta_minutes: Optional[int] = None
    wake_delta_minutes: Optional[int] = None


class TimingPoint(BaseModel):
    date: str
    hours: float
    label: str


class TimingConsistency(BaseModel):
    """Bed or wake time series for the monthly consistency charts"""
    points: List[TimingPoint] = []
    average: Optional[float] = None
    range_min: Optional[float] = None
    range_max: Optional[float] = None
