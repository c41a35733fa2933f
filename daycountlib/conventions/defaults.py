"""
Default settings for day count calculations.

The default schedule info is used when a year fraction is requested without
schedule context. It assumes the end-of-month rule applies and that no date
is the schedule end date.
"""

import logging
import os

from .schedule_info import StandardScheduleInfo

logger = logging.getLogger(__name__)

_END_OF_MONTH_ENV = "DAYCOUNTLIB_END_OF_MONTH"
_FALSE_VALUES = ("0", "false", "no", "off")


def _end_of_month_from_env() -> bool:
    value = os.environ.get(_END_OF_MONTH_ENV)
    if value is None:
        return True
    return value.strip().lower() not in _FALSE_VALUES


_DEFAULT_SCHEDULE_INFO = StandardScheduleInfo(end_of_month=_end_of_month_from_env())


def get_default_schedule_info() -> StandardScheduleInfo:
    """Schedule info used when none is supplied by the caller."""
    return _DEFAULT_SCHEDULE_INFO


def set_default_end_of_month_rule(end_of_month: bool) -> None:
    """
    Set whether the default schedule info applies the end-of-month rule.

    Call this during start-up, before conventions are used concurrently:
    two-argument year fractions read the default on every call.
    """
    global _DEFAULT_SCHEDULE_INFO
    logger.debug("Default end-of-month rule set to %s", end_of_month)
    _DEFAULT_SCHEDULE_INFO = StandardScheduleInfo(end_of_month=bool(end_of_month))
