"""Day Count Convention Engine.

This package converts pairs of calendar dates into year fractions for
interest accrual, following the market-standard day count conventions.

Key modules:
- conventions: Day count conventions, schedule info and the convention registry
- schedule: Unadjusted accrual schedules and vectorised year fractions
- utils: Calendar date helpers
"""

__version__ = "1.0.0"

from daycountlib.conventions import (
    DayCount,
    DayCountConvention,
    DayCountRegistry,
    DayCountType,
    ScheduleInfo,
    StandardScheduleInfo,
    default_registry,
    get_day_count,
    list_day_counts,
)
from daycountlib.errors import (
    ConventionNotFoundError,
    DayCountError,
    DuplicateConventionError,
    InvalidDateOrderError,
)

__all__ = [
    "__version__",
    "DayCount",
    "DayCountConvention",
    "DayCountRegistry",
    "DayCountType",
    "ScheduleInfo",
    "StandardScheduleInfo",
    "default_registry",
    "get_day_count",
    "list_day_counts",
    "ConventionNotFoundError",
    "DayCountError",
    "DuplicateConventionError",
    "InvalidDateOrderError",
]
