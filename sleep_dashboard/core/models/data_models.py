# sleep_dashboard/core/models/data_models.py

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from sleep_dashboard.utils.constants import MS_PER_MINUTE
from sleep_dashboard.utils.rounding import round_half_up


# Enum types for stable identifiers
class FeatureName(str, Enum):
    """Canonical feature names, used as correlation matrix axis labels"""
    DURATION = "Duration"
    DEEP_SLEEP = "Deep Sleep"
    LIGHT_SLEEP = "Light Sleep"
    LATENCY = "Latency"
    SCORE = "Score"
    PHYSICAL_RECOVERY = "Physical Recovery"
    AWAKENING = "Awakening"
    EFFICIENCY = "Efficiency"
    MENTAL_RECOVERY = "Mental Recovery"


class ScoreBucket(str, Enum):
    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


# Sleep Data Models
class SleepRecord(BaseModel):
    """One parsed night from the sleep tracker export"""
    model_config = ConfigDict(frozen=True)

    date: datetime.date  # bed date, even when waking up the next day
    bed_time: datetime.time
    wake_time: datetime.time
    duration_minutes: int = Field(0, ge=0)
    rem_minutes: int = Field(0, ge=0)
    light_minutes: int = Field(0, ge=0)
    latency_ms: int = 0  # 0 means unknown
    score: int = 0
    physical_recovery: int = 0
    awakening_percent: int = 0
    efficiency_percent: float = 0.0  # 0 means unknown
    mental_recovery: int = 0

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day_of_week(self) -> int:
        """Monday=0 ... Sunday=6"""
        return self.date.weekday()

    @property
    def is_weekend(self) -> bool:
        return self.day_of_week >= 5

    @property
    def date_label(self) -> str:
        """Calendar key without the year, e.g. '3.12'"""
        return f"{self.date.month}.{self.date.day}"

    @property
    def duration_hours(self) -> float:
        return round_half_up(self.duration_minutes / 60, 1)

    @property
    def latency_minutes(self) -> float:
        return self.latency_ms / MS_PER_MINUTE

    @property
    def has_latency(self) -> bool:
        return self.latency_ms > 0

    @property
    def has_efficiency(self) -> bool:
        return self.efficiency_percent > 0
