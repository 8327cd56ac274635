"""
Subset selection over parsed sleep records.
"""

from typing import Dict, List

from sleep_dashboard.core.models.data_models import SleepRecord


def select_weekday(records: List[SleepRecord]) -> List[SleepRecord]:
    return [r for r in records if not r.is_weekend]


def select_weekend(records: List[SleepRecord]) -> List[SleepRecord]:
    return [r for r in records if r.is_weekend]


def select_month(records: List[SleepRecord], year: int, month: int) -> List[SleepRecord]:
    return [r for r in records if r.year == year and r.month == month]


def available_years(records: List[SleepRecord]) -> List[int]:
    """Distinct years present in the data, ascending"""
    return sorted({r.year for r in records})


def available_months(records: List[SleepRecord], year: int) -> List[int]:
    """Distinct months present for a year, ascending"""
    return sorted({r.month for r in records if r.year == year})


def months_by_year(records: List[SleepRecord]) -> Dict[int, List[int]]:
    """Year -> available months, for populating the month selector"""
    return {year: available_months(records, year) for year in available_years(records)}
