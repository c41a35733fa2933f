"""
Core data structures for accrual schedules.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class SchedulePeriod:
    """Represents a single accrual period in a schedule."""

    start_date: date
    end_date: date
    year_fraction: float
    is_stub: bool = False

    @property
    def accrual_days(self) -> int:
        """Number of calendar days in accrual period."""
        return (self.end_date - self.start_date).days
