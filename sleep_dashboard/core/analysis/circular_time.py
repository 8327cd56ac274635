"""
Circular statistics for clock times.

Averaging clock times arithmetically breaks across midnight (23:50 and
00:10 average to 12:00). Times are mapped onto the unit circle instead,
averaged as vectors, and mapped back to minutes of the day.
"""

import datetime
import logging
from typing import Iterable, Optional, Union

import numpy as np

from sleep_dashboard.core.models.output_models import ClockAngles, TimeDelta
from sleep_dashboard.utils.constants import MINUTES_PER_DAY, TIME_PLACEHOLDER
from sleep_dashboard.utils.rounding import round_half_up

logger = logging.getLogger(__name__)

ClockTime = Union[datetime.time, str]


def to_minutes(value: ClockTime) -> int:
    """
    Minutes since midnight for a datetime.time or an 'H:MM' string.

    Raises:
        ValueError: If the string is not a valid clock time
    """
    if isinstance(value, datetime.time):
        return value.hour * 60 + value.minute

    try:
        hours, minutes = (int(part) for part in str(value).strip().split(':'))
    except ValueError:
        raise ValueError(f"Invalid clock time: {value!r}")
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValueError(f"Clock time out of range: {value!r}")
    return hours * 60 + minutes


def time_to_angle(minutes: float) -> float:
    """Angle in radians, a full day being one turn"""
    return minutes / MINUTES_PER_DAY * 2 * np.pi


def circular_mean_minutes(times: Iterable[ClockTime]) -> Optional[float]:
    """
    Circular mean of clock times in minutes, within [0, 1440).

    Returns None for an empty set, where the mean is undefined.
    """
    minutes = [to_minutes(t) for t in times]
    if not minutes:
        return None

    angles = time_to_angle(np.array(minutes, dtype=float))
    mean_sin = np.sin(angles).sum() / len(minutes)
    mean_cos = np.cos(angles).sum() / len(minutes)
    mean_angle = np.arctan2(mean_sin, mean_cos)

    return float(((mean_angle / (2 * np.pi)) * MINUTES_PER_DAY + MINUTES_PER_DAY) % MINUTES_PER_DAY)


def round_minutes(minutes: float) -> int:
    """Nearest whole minute, wrapped into the day"""
    return round_half_up(minutes) % MINUTES_PER_DAY


def format_clock(minutes: Optional[float]) -> str:
    """'H:MM' with an unpadded hour, or the placeholder when undefined"""
    if minutes is None:
        return TIME_PLACEHOLDER
    total = round_minutes(minutes)
    return f"{total // 60}:{total % 60:02d}"


def circular_mean_time(times: Iterable[ClockTime]) -> str:
    """Circular mean of clock times rendered as 'H:MM' ('--:--' when empty)"""
    return format_clock(circular_mean_minutes(times))


def format_delta(delta_minutes: int) -> str:
    """'+1h 5min later', '-20min earlier', '0min on target'"""
    if delta_minutes == 0:
        return '0min on target'

    hours, mins = divmod(abs(delta_minutes), 60)
    sign, word = ('+', 'later') if delta_minutes > 0 else ('-', 'earlier')
    if hours > 0:
        return f"{sign}{hours}h {mins}min {word}"
    return f"{sign}{mins}min {word}"


def target_delta(mean_minutes: Optional[float], target: ClockTime) -> TimeDelta:
    """
    Signed distance from a target time along the shorter arc of the clock.

    Positive minutes mean later than the target. The result lies in
    [-720, 720); an undefined mean gives a zero placeholder delta.
    """
    if mean_minutes is None:
        return TimeDelta()

    diff = round_minutes(mean_minutes) - to_minutes(target)
    diff = (diff + MINUTES_PER_DAY // 2) % MINUTES_PER_DAY - MINUTES_PER_DAY // 2

    if diff > 0:
        direction = 'later'
    elif diff < 0:
        direction = 'earlier'
    else:
        direction = 'on_target'
    return TimeDelta(minutes=diff, text=format_delta(diff), direction=direction)


def clock_angles(minutes: Optional[float]) -> ClockAngles:
    """Hour and minute hand angles in degrees for an analog clock face"""
    if minutes is None:
        return ClockAngles()

    total = round_minutes(minutes)
    hours, mins = divmod(total, 60)
    return ClockAngles(
        hour_angle=(hours % 12) * 30 + mins * 0.5 - 90,
        minute_angle=mins * 6 - 90,
    )
