"""
Accrual schedule helpers.

Dates handled here are unadjusted: no business day rolling is applied, the
caller supplies resolved calendar dates.
"""

import logging
from dataclasses import replace
from datetime import date
from typing import List, Optional, Sequence, Union

import numpy as np

from daycountlib.conventions.daycount import DayCountConvention
from daycountlib.conventions.registry import get_day_count
from daycountlib.conventions.schedule_info import ScheduleInfo, StandardScheduleInfo
from daycountlib.utils.date import DateLike, to_date

from .adjustments import add_months
from .core import SchedulePeriod

logger = logging.getLogger(__name__)

DayCountLike = Union[DayCountConvention, str]


def _resolve_day_count(day_count: DayCountLike) -> DayCountConvention:
    if isinstance(day_count, str):
        return get_day_count(day_count)
    return day_count


def schedule_dates(
    start_date: DateLike,
    end_date: DateLike,
    months: int,
    end_of_month: bool = True,
) -> List[date]:
    """Generate unadjusted dates rolling forward from start, ending with a short final stub."""
    start = to_date(start_date)
    end = to_date(end_date)
    if months <= 0:
        raise ValueError("months must be positive")
    if end <= start:
        raise ValueError("end_date must be after start_date")

    dates = [start]
    step = 1
    current = add_months(start, months, end_of_month)
    while current < end:
        dates.append(current)
        step += 1
        current = add_months(start, months * step, end_of_month)
    dates.append(end)
    return dates


def accrual_periods(
    dates: Sequence[DateLike],
    day_count: DayCountLike,
    end_of_month: bool = True,
) -> List[SchedulePeriod]:
    """
    Build accrual periods between consecutive schedule dates.

    The last date is treated as the schedule end date when the day count
    convention asks for it.

    Args:
        dates: Strictly increasing schedule dates, at least two
        day_count: Convention, or its canonical name
        end_of_month: Whether the schedule follows the end-of-month rule

    Returns:
        List of schedule periods
    """
    resolved = [to_date(d) for d in dates]
    if len(resolved) < 2:
        raise ValueError("Need at least 2 dates to build accrual periods")
    for previous, current in zip(resolved, resolved[1:]):
        if current <= previous:
            raise ValueError(f"Schedule dates must be strictly increasing: {previous}, {current}")

    convention = _resolve_day_count(day_count)
    schedule_info = StandardScheduleInfo(end_of_month=end_of_month, end_date=resolved[-1])

    periods = []
    for start, end in zip(resolved, resolved[1:]):
        periods.append(
            SchedulePeriod(
                start_date=start,
                end_date=end,
                year_fraction=convention.year_fraction(start, end, schedule_info),
            )
        )
    logger.debug("Built %s accrual periods with %s", len(periods), convention.name)
    return periods


def generate_schedule(
    start_date: DateLike,
    end_date: DateLike,
    months: int,
    day_count: DayCountLike,
    end_of_month: bool = True,
) -> List[SchedulePeriod]:
    """Generate a regular accrual schedule with a short final stub where needed."""
    dates = schedule_dates(start_date, end_date, months, end_of_month)
    periods = accrual_periods(dates, day_count, end_of_month)

    start = dates[0]
    regular_end = add_months(start, months * len(periods), end_of_month)
    if regular_end != dates[-1]:
        periods[-1] = replace(periods[-1], is_stub=True)
    return periods


def year_fractions(
    day_count: DayCountLike,
    first_dates: Sequence[DateLike],
    second_dates: Sequence[DateLike],
    schedule_info: Optional[ScheduleInfo] = None,
) -> np.ndarray:
    """Year fractions for paired sequences of dates."""
    if len(first_dates) != len(second_dates):
        raise ValueError("first_dates and second_dates must have same length")
    convention = _resolve_day_count(day_count)
    return np.array(
        [
            convention.year_fraction(first, second, schedule_info)
            for first, second in zip(first_dates, second_dates)
        ],
        dtype=float,
    )
