"""
Month arithmetic for unadjusted schedule dates.
"""

import calendar
from datetime import date

from dateutil.relativedelta import relativedelta


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    return date(year, month, calendar.monthrange(year, month)[1])


def is_end_of_month(dt: date) -> bool:
    """Check if date is end of month."""
    return dt == get_month_end(dt.year, dt.month)


def add_months(dt: date, months: int, end_of_month_rule: bool = True) -> date:
    """
    Add months to a date, applying the end-of-month rule if requested.

    A month-end start date stays on month ends when the rule applies;
    otherwise the day of month is kept and clipped to the target month.
    """
    shifted = dt + relativedelta(months=months)
    if end_of_month_rule and is_end_of_month(dt):
        return get_month_end(shifted.year, shifted.month)
    return shifted
