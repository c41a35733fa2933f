from .date import (
    actual_days,
    contains_leap_day,
    count_leap_days,
    day_of_year,
    is_last_day_of_february,
    length_of_year,
    next_leap_day,
    to_date,
)
