# Re-export conventions and registry
from .daycount import (
    ACT_360,
    ACT_364,
    ACT_365,
    ACT_365_25,
    ACT_365_ACTUAL,
    ACT_ACT_ISDA,
    NL_365,
    ONE_ONE,
    STANDARD_DAY_COUNTS,
    THIRTY_360_ISDA,
    THIRTY_E_360,
    THIRTY_E_360_ISDA,
    THIRTY_EPLUS_360,
    THIRTY_U_360,
    DayCount,
    DayCountConvention,
)
from .defaults import get_default_schedule_info, set_default_end_of_month_rule
from .registry import (
    DayCountRegistry,
    default_registry,
    get_day_count,
    list_day_counts,
)
from .schedule_info import ScheduleInfo, StandardScheduleInfo
from .types import DayCountType
