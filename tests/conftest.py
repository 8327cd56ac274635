import datetime

import pytest

from sleep_dashboard.core.models.data_models import SleepRecord
from sleep_dashboard.utils.constants import csv_columns

HEADER = ','.join(csv_columns)

SAMPLE_ROWS = [
    # Wednesday
    '2025.3.12 22:17,2025.3.13 6:20,423,92,251,540000,78,82,12,91,80',
    # Friday, starts before midnight and ends the next day
    '2025.3.14 23:50,2025.3.15 7:00,430,95,260,0,81,85,9,0,83',
    # Saturday
    '2025.3.15 0:35,2025.3.16 9:02,480,110,275,1200000,79,80,14,87,81',
    # Monday
    '2025.4.7 23:02,2025.4.8 6:22,412,90,250,480000,45,77,13,90,74',
]


def make_record(day=datetime.date(2025, 3, 12), bed='23:00', wake='6:20', **values):
    """SleepRecord with sensible defaults for the fields a test does not care about"""
    bed_h, bed_m = (int(p) for p in bed.split(':'))
    wake_h, wake_m = (int(p) for p in wake.split(':'))
    fields = {
        'duration_minutes': 420,
        'rem_minutes': 90,
        'light_minutes': 250,
        'latency_ms': 600000,
        'score': 75,
        'physical_recovery': 80,
        'awakening_percent': 12,
        'efficiency_percent': 90.0,
        'mental_recovery': 78,
    }
    fields.update(values)
    return SleepRecord(
        date=day,
        bed_time=datetime.time(bed_h, bed_m),
        wake_time=datetime.time(wake_h, wake_m),
        **fields,
    )


@pytest.fixture
def sample_csv():
    return '\n'.join([HEADER] + SAMPLE_ROWS) + '\n'


@pytest.fixture
def sample_csv_file(tmp_path, sample_csv):
    path = tmp_path / 'sleep_data.csv'
    path.write_text(sample_csv)
    return str(path)
