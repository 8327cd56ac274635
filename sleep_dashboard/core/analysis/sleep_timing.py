"""
Per-night bed and wake timing: calendar target deltas and the monthly
consistency series.
"""

from typing import List, Optional

from sleep_dashboard.core.analysis.circular_time import format_clock, to_minutes
from sleep_dashboard.core.models.data_models import SleepRecord
from sleep_dashboard.core.models.output_models import NightlyTargetDelta, TimingConsistency, TimingPoint
from sleep_dashboard.utils.constants import default_values


def nightly_target_delta(record: SleepRecord, config: Optional[dict] = None) -> NightlyTargetDelta:
    """
    Minutes a single night's bed and wake times sit from the targets.

    Targets only apply on weekdays; weekend nights carry no deltas.
    Bed times before noon are counted as after midnight, so 0:30 is
    90 minutes past a 23:00 target rather than 22.5 hours early.
    """
    config = dict(config or {})
    config.setdefault('target_bed_time', default_values['target_bed_time'])
    config.setdefault('target_wake_time', default_values['target_wake_time'])

    if record.is_weekend:
        return NightlyTargetDelta(date=record.date_label, is_weekend=True)

    bed_minutes = to_minutes(record.bed_time)
    if record.bed_time.hour < default_values['after_midnight_hour']:
        bed_minutes += 24 * 60

    return NightlyTargetDelta(
        date=record.date_label,
        is_weekend=False,
        bed_delta_minutes=bed_minutes - to_minutes(config['target_bed_time']),
        wake_delta_minutes=to_minutes(record.wake_time) - to_minutes(config['target_wake_time']),
    )


def _summarise(points: List[TimingPoint]) -> TimingConsistency:
    if not points:
        return TimingConsistency()
    hours = [p.hours for p in points]
    return TimingConsistency(
        points=points,
        average=sum(hours) / len(hours),
        range_min=min(hours),
        range_max=max(hours),
    )


def bed_time_consistency(records: List[SleepRecord]) -> TimingConsistency:
    """
    Bed times in hours on an evening-anchored axis.

    Times from 20:00 keep their hour; earlier times are placed after
    midnight (1:30 -> 25.5) so a night's series stays continuous.
    """
    points = []
    for record in records:
        hours = record.bed_time.hour + record.bed_time.minute / 60
        if record.bed_time.hour < default_values['late_bed_cutoff_hour']:
            hours += 24
        points.append(TimingPoint(
            date=record.date_label,
            hours=hours,
            label=format_clock(to_minutes(record.bed_time)),
        ))
    return _summarise(points)


def wake_time_consistency(records: List[SleepRecord]) -> TimingConsistency:
    """Wake times in hours since midnight"""
    points = [
        TimingPoint(
            date=record.date_label,
            hours=record.wake_time.hour + record.wake_time.minute / 60,
            label=format_clock(to_minutes(record.wake_time)),
        )
        for record in records
    ]
    return _summarise(points)
