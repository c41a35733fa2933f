# Re-export schedule components
from daycountlib.conventions.schedule_info import ScheduleInfo, StandardScheduleInfo

from .accrual import (
    accrual_periods,
    generate_schedule,
    schedule_dates,
    year_fractions,
)
from .adjustments import add_months, get_month_end, is_end_of_month
from .core import SchedulePeriod
