"""
Day count convention implementations.

Each built-in convention is a DayCount tagged with a DayCountType. All of the
arithmetic lives in a single dispatch function with one branch per type, so
the formulas can be read side by side.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol, runtime_checkable

from daycountlib.errors import InvalidDateOrderError
from daycountlib.utils.date import (
    DateLike,
    actual_days,
    contains_leap_day,
    count_leap_days,
    day_of_year,
    is_last_day_of_february,
    length_of_year,
    to_date,
)

from .defaults import get_default_schedule_info
from .schedule_info import ScheduleInfo
from .types import DayCountType


@runtime_checkable
class DayCountConvention(Protocol):
    """
    Protocol for named day count conventions.

    Implementations must be stateless: the year fraction depends only on the
    two dates and the schedule info.
    """

    name: str

    def year_fraction(
        self,
        first_date: DateLike,
        second_date: DateLike,
        schedule_info: Optional[ScheduleInfo] = None,
    ) -> float:
        ...


@dataclass(frozen=True)
class DayCount:
    """A built-in day count convention."""

    kind: DayCountType

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self.kind]

    def year_fraction(
        self,
        first_date: DateLike,
        second_date: DateLike,
        schedule_info: Optional[ScheduleInfo] = None,
    ) -> float:
        """
        Calculate the year fraction between two dates.

        Args:
            first_date: Start of the period
            second_date: End of the period, on or after first_date
            schedule_info: Schedule context; the library default is used if omitted

        Returns:
            Year fraction for the period

        Raises:
            InvalidDateOrderError: If second_date is before first_date
        """
        if schedule_info is None:
            schedule_info = get_default_schedule_info()
        return _year_fraction(
            self.kind, to_date(first_date), to_date(second_date), schedule_info
        )

    @classmethod
    def of(cls, name: str) -> "DayCountConvention":
        """Look up a convention by its canonical name."""
        from .registry import get_day_count

        return get_day_count(name)

    def __str__(self) -> str:
        return self.name


def _check_order(first: date, second: date) -> None:
    if second < first:
        raise InvalidDateOrderError(first, second)


def _thirty_360(y1: int, m1: int, d1: int, y2: int, m2: int, d2: int) -> float:
    """Standard 30/360 formula, applied after day-of-month adjustments."""
    return (360 * (y2 - y1) + 30 * (m2 - m1) + (d2 - d1)) / 360.0


def _year_fraction(
    kind: DayCountType, first: date, second: date, schedule_info: ScheduleInfo
) -> float:
    if kind == DayCountType.ONE_ONE:
        _check_order(first, second)
        return 1.0

    elif kind == DayCountType.ACT_ACT_ISDA:
        _check_order(first, second)
        first_year_length = length_of_year(first)
        if first.year == second.year:
            return (day_of_year(second) - day_of_year(first)) / first_year_length
        first_remainder = first_year_length - day_of_year(first) + 1
        second_remainder = day_of_year(second) - 1
        return (
            first_remainder / first_year_length
            + second_remainder / length_of_year(second)
            + (second.year - first.year - 1)
        )

    elif kind == DayCountType.ACT_365_ACTUAL:
        days = actual_days(first, second)
        return days / (366.0 if contains_leap_day(first, second) else 365.0)

    elif kind == DayCountType.ACT_360:
        return actual_days(first, second) / 360.0

    elif kind == DayCountType.ACT_364:
        return actual_days(first, second) / 364.0

    elif kind == DayCountType.ACT_365:
        return actual_days(first, second) / 365.0

    elif kind == DayCountType.ACT_365_25:
        return actual_days(first, second) / 365.25

    elif kind == DayCountType.NL_365:
        days = actual_days(first, second)
        return (days - count_leap_days(first, second)) / 365.0

    # 30/360 family
    _check_order(first, second)
    d1 = first.day
    d2 = second.day
    m2 = second.month

    if kind == DayCountType.THIRTY_360_ISDA:
        if d1 == 31:
            d1 = 30
        if d2 == 31 and d1 == 30:
            d2 = 30

    elif kind == DayCountType.THIRTY_U_360:
        if schedule_info.is_end_of_month_convention() and is_last_day_of_february(first):
            if is_last_day_of_february(second):
                d2 = 30
            d1 = 30
        if d1 == 31:
            d1 = 30
        if d2 == 31 and d1 == 30:
            d2 = 30

    elif kind == DayCountType.THIRTY_E_360_ISDA:
        if d1 == 31 or is_last_day_of_february(first):
            d1 = 30
        if d2 == 31 or (
            is_last_day_of_february(second)
            and not schedule_info.is_schedule_end_date(second)
        ):
            d2 = 30

    elif kind == DayCountType.THIRTY_E_360:
        if d1 == 31:
            d1 = 30
        if d2 == 31:
            d2 = 30

    elif kind == DayCountType.THIRTY_EPLUS_360:
        if d1 == 31:
            d1 = 30
        if d2 == 31:
            # December rolls to month 13, which the formula handles as January
            d2 = 1
            m2 += 1

    else:
        raise ValueError(f"Unknown day count type: {kind}")

    return _thirty_360(first.year, first.month, d1, second.year, m2, d2)


_DESCRIPTIONS = {
    DayCountType.ONE_ONE: "Always one, regardless of the period length",
    DayCountType.ACT_ACT_ISDA: "Actual days in each calendar year divided by that year's length",
    DayCountType.ACT_365_ACTUAL: "Actual days / 366 if the period contains Feb 29, else / 365",
    DayCountType.ACT_360: "Actual days / 360",
    DayCountType.ACT_364: "Actual days / 364",
    DayCountType.ACT_365: "Actual days / 365 (fixed)",
    DayCountType.ACT_365_25: "Actual days / 365.25",
    DayCountType.NL_365: "Actual days excluding Feb 29 / 365",
    DayCountType.THIRTY_360_ISDA: "30/360 with day 31 adjusted (bond basis)",
    DayCountType.THIRTY_U_360: "30/360 US with end-of-February rules under EOM",
    DayCountType.THIRTY_E_360_ISDA: "30E/360 German, end of February except at maturity",
    DayCountType.THIRTY_E_360: "30/360 European (Eurobond basis)",
    DayCountType.THIRTY_EPLUS_360: "30E/360 with day 31 rolled to the next month",
}


# Pre-defined day count convention instances
ONE_ONE = DayCount(DayCountType.ONE_ONE)
ACT_ACT_ISDA = DayCount(DayCountType.ACT_ACT_ISDA)
ACT_365_ACTUAL = DayCount(DayCountType.ACT_365_ACTUAL)
ACT_360 = DayCount(DayCountType.ACT_360)
ACT_364 = DayCount(DayCountType.ACT_364)
ACT_365 = DayCount(DayCountType.ACT_365)
ACT_365_25 = DayCount(DayCountType.ACT_365_25)
NL_365 = DayCount(DayCountType.NL_365)
THIRTY_360_ISDA = DayCount(DayCountType.THIRTY_360_ISDA)
THIRTY_U_360 = DayCount(DayCountType.THIRTY_U_360)
THIRTY_E_360_ISDA = DayCount(DayCountType.THIRTY_E_360_ISDA)
THIRTY_E_360 = DayCount(DayCountType.THIRTY_E_360)
THIRTY_EPLUS_360 = DayCount(DayCountType.THIRTY_EPLUS_360)

# Registration order of the built-ins
STANDARD_DAY_COUNTS = (
    ONE_ONE,
    ACT_ACT_ISDA,
    ACT_365_ACTUAL,
    ACT_360,
    ACT_364,
    ACT_365,
    ACT_365_25,
    NL_365,
    THIRTY_360_ISDA,
    THIRTY_U_360,
    THIRTY_E_360_ISDA,
    THIRTY_E_360,
    THIRTY_EPLUS_360,
)
