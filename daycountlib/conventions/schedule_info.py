"""
Schedule information consumed by the day count conventions.

Some conventions need to know more than the two dates of a period: whether the
schedule follows the end-of-month rule, and whether a date is the final
accrual date of the schedule. Callers supply this through the ScheduleInfo
protocol; conventions never build or cache it themselves.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ScheduleInfo(Protocol):
    """Protocol for schedule context queried by day count conventions."""

    def is_end_of_month_convention(self) -> bool:
        """Whether the schedule rolls on month ends."""
        ...

    def is_schedule_end_date(self, dt: date) -> bool:
        """Whether the date is the final accrual date of the schedule."""
        ...


@dataclass(frozen=True)
class StandardScheduleInfo:
    """Plain ScheduleInfo built from an end-of-month flag and an optional end date."""

    end_of_month: bool = True
    end_date: Optional[date] = None

    def is_end_of_month_convention(self) -> bool:
        return self.end_of_month

    def is_schedule_end_date(self, dt: date) -> bool:
        return self.end_date is not None and dt == self.end_date
