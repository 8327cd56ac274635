"""
Parsing of the sleep tracker CSV export.

This module handles:
- Splitting the export into rows (header discarded, blank lines skipped)
- Parsing the loosely formatted 'YYYY.M.D H:MM' timestamps
- Best-effort numeric parsing, defaulting bad fields to 0
- Dropping rows whose timestamps cannot be parsed
"""

import datetime
import logging
import math
import re

from pydantic import ValidationError

from sleep_dashboard.core.models.data_models import SleepRecord
from sleep_dashboard.utils.constants import EXPECTED_FIELD_COUNT, MAX_FIELD_MAGNITUDE, csv_columns

logger = logging.getLogger(__name__)

TIMESTAMP_PATTERN = re.compile(r'^\s*(\d{4})\.(\d{1,2})\.(\d{1,2})\s+(\d{1,2}):(\d{1,2})\s*$')
INT_PATTERN = re.compile(r'^\s*([+-]?\d+)')
FLOAT_PATTERN = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')

# Record field -> (column index, parser kind)
NUMERIC_FIELDS = {
    'duration_minutes': (2, 'int'),
    'rem_minutes': (3, 'int'),
    'light_minutes': (4, 'int'),
    'latency_ms': (5, 'int'),
    'score': (6, 'int'),
    'physical_recovery': (7, 'int'),
    'awakening_percent': (8, 'int'),
    'efficiency_percent': (9, 'float'),
    'mental_recovery': (10, 'int'),
}

NON_NEGATIVE_FIELDS = {'duration_minutes', 'rem_minutes', 'light_minutes'}


def parse_timestamp(value):
    """
    Parse a 'YYYY.M.D H:MM' timestamp.

    Args:
        value: Timestamp string such as '2025.3.12 22:17'

    Returns:
        tuple: (datetime.date, datetime.time)

    Raises:
        ValueError: If the string is not a valid timestamp
    """
    match = TIMESTAMP_PATTERN.match(value or '')
    if not match:
        raise ValueError(f"Invalid timestamp format: {value!r}")

    year, month, day, hour, minute = (int(part) for part in match.groups())
    # date() and time() reject impossible values such as 2025.2.30 or 24:00
    return datetime.date(year, month, day), datetime.time(hour, minute)


def parse_int(value):
    """Leading-integer parse: '42' -> 42, '42abc' -> 42, '7.5' -> 7, 'abc' -> None"""
    match = INT_PATTERN.match(value or '')
    if not match:
        return None
    parsed = int(match.group(1))
    return parsed if abs(parsed) <= MAX_FIELD_MAGNITUDE else None


def parse_float(value):
    """Leading-number parse: '91.5' -> 91.5, '91.5%' -> 91.5, '' -> None, '1e999' -> None"""
    match = FLOAT_PATTERN.match(value or '')
    if not match:
        return None
    parsed = float(match.group(1))
    if not math.isfinite(parsed) or abs(parsed) > MAX_FIELD_MAGNITUDE:
        return None
    return parsed


class Preprocessor:
    def __init__(self, config=None):
        """Initialize the CSV preprocessor"""
        self.config = config or {}

        # Set defaults for missing config values
        self.config.setdefault('skip_header', True)
        self.config.setdefault('delimiter', ',')

    def parse(self, text):
        """
        Parse the raw export into an ordered list of SleepRecord.

        Never raises: a total failure is logged and yields an empty list.
        """
        try:
            lines = text.split('\n')
        except (AttributeError, TypeError) as e:
            logger.error(f"Error loading sleep data: {e}")
            return []

        if self.config['skip_header']:
            lines = lines[1:]

        records = []
        skipped = []
        for line_number, line in enumerate(lines, start=2 if self.config['skip_header'] else 1):
            if not line.strip():
                continue
            try:
                records.append(self.parse_row(line))
            except ValueError as e:
                skipped.append((line_number, str(e)))

        if skipped:
            logger.warning(f"Skipped {len(skipped)} invalid sleep row(s)")
            for line_number, error in skipped:
                logger.warning(f"  - Line {line_number}: {error}")

        logger.info(f"Parsed {len(records)} sleep records")
        return records

    def parse_row(self, line):
        """
        Parse one data line into a SleepRecord.

        Raises:
            ValueError: If the bed or wake timestamp is missing or unparsable
        """
        cols = line.rstrip('\r').split(self.config['delimiter'])

        if len(cols) < 2:
            raise ValueError(f"Expected {EXPECTED_FIELD_COUNT} fields, got {len(cols)}")
        if len(cols) != EXPECTED_FIELD_COUNT:
            logger.warning(
                f"Row has {len(cols)} fields instead of {EXPECTED_FIELD_COUNT}; "
                f"missing numeric fields default to 0"
            )

        bed_date, bed_time = parse_timestamp(cols[0])
        # The wake date is discarded; the night belongs to the bed date
        _, wake_time = parse_timestamp(cols[1])

        values = {}
        for field, (index, kind) in NUMERIC_FIELDS.items():
            raw = cols[index] if index < len(cols) else None
            parsed = parse_float(raw) if kind == 'float' else parse_int(raw)
            if parsed is None:
                logger.debug(f"Unparsable {csv_columns[index]} value {raw!r}, using 0")
                parsed = 0
            if field in NON_NEGATIVE_FIELDS and parsed < 0:
                logger.warning(f"Negative {csv_columns[index]} value {parsed}, using 0")
                parsed = 0
            values[field] = parsed

        try:
            return SleepRecord(date=bed_date, bed_time=bed_time, wake_time=wake_time, **values)
        except ValidationError as e:
            raise ValueError(f"Invalid record values: {e}")


def parse_sleep_csv(text, config=None):
    """Parse the raw export text into an ordered list of SleepRecord."""
    return Preprocessor(config).parse(text)
