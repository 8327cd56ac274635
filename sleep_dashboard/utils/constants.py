"""
Constants used throughout the Sleep Dashboard.
This includes the CSV layout, target times, score buckets and default values.
"""

# Column order of the sleep tracker export (after the header line)
csv_columns = [
    'original_bed_time',
    'original_wake_up_time',
    'total_sleep_duration',
    'total_rem_duration',
    'total_light_duration',
    'sleep_latency',
    'sleep_score',
    'physical_recovery',
    'movement_awakening',
    'efficiency',
    'mental_recovery',
]

EXPECTED_FIELD_COUNT = len(csv_columns)

MINUTES_PER_DAY = 1440
MS_PER_MINUTE = 60000

# Numeric fields beyond this magnitude are treated as malformed
MAX_FIELD_MAGNITUDE = 10 ** 12

# Placeholder shown when an average time cannot be computed
TIME_PLACEHOLDER = '--:--'
DELTA_PLACEHOLDER = '--'

# Score buckets: (name, lower bound, upper bound), bounds inclusive
score_buckets = [
    ('Poor', 0, 25),
    ('Fair', 26, 50),
    ('Good', 51, 75),
    ('Excellent', 76, 100),
]

# Colors the dashboard uses for the score distribution pie chart
score_bucket_colors = {
    'Poor': '#ff6b6b',
    'Fair': '#ffa500',
    'Good': '#ffd93d',
    'Excellent': '#51cf66',
}

# Default values for analysis
default_values = {
    'target_bed_time': '23:00',
    'target_wake_time': '6:20',
    'top_correlation_count': 5,
    'late_bed_cutoff_hour': 20,  # bed times before this hour plot after midnight
    'after_midnight_hour': 12,  # nightly bed times before noon count as after midnight
    'data_path': 'data/sleep_data.csv',
    'log_level': 'INFO',
}
