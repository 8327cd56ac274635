# sleep_dashboard/core/repositories/data_repository.py
import logging
import os
from typing import List, Optional

from sleep_dashboard.core.data_processing.filters import (
    available_months,
    available_years,
    select_month,
    select_weekday,
    select_weekend,
)
from sleep_dashboard.core.data_processing.preprocessing import Preprocessor
from sleep_dashboard.core.models.data_models import SleepRecord
from sleep_dashboard.utils.constants import default_values

logger = logging.getLogger(__name__)


class SleepDataRepository:
    """Read-only data access layer for the sleep tracker export"""

    def __init__(self, data_path=None, text=None, preprocessor=None):
        self.data_path = data_path or default_values['data_path']
        self.preprocessor = preprocessor or Preprocessor()
        self.text = text
        self.cache = {}

    @classmethod
    def from_text(cls, text, preprocessor=None):
        """Repository over CSV text that is already in memory"""
        return cls(text=text, preprocessor=preprocessor)

    def _load_records(self) -> List[SleepRecord]:
        if self.text is not None:
            return self.preprocessor.parse(self.text)

        if not os.path.exists(self.data_path):
            raise FileNotFoundError(f"Sleep data file not found: {self.data_path}")

        with open(self.data_path, 'r', encoding='utf-8-sig') as f:
            text = f.read()

        logger.info(f"Loaded sleep data from {self.data_path}")
        return self.preprocessor.parse(text)

    def get_sleep_data(self, year: Optional[int] = None, month: Optional[int] = None) -> List[SleepRecord]:
        """Get sleep records, optionally filtered to a year and month"""
        if 'records' not in self.cache:
            self.cache['records'] = self._load_records()

        records = self.cache['records']
        if year is not None and month is not None:
            return select_month(records, year, month)
        if year is not None:
            return [r for r in records if r.year == year]
        return list(records)

    def get_weekday_data(self) -> List[SleepRecord]:
        return select_weekday(self.get_sleep_data())

    def get_weekend_data(self) -> List[SleepRecord]:
        return select_weekend(self.get_sleep_data())

    def get_available_years(self) -> List[int]:
        return available_years(self.get_sleep_data())

    def get_available_months(self, year: int) -> List[int]:
        return available_months(self.get_sleep_data(), year)

    def clear_cache(self):
        self.cache = {}
