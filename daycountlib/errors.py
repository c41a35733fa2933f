"""Exceptions raised by the day count engine."""

from datetime import date


class DayCountError(ValueError):
    """Base class for day count errors."""


class ConventionNotFoundError(DayCountError):
    """Raised when a convention name is not registered."""


class DuplicateConventionError(DayCountError):
    """Raised when two conventions share the same name in a registry."""


class InvalidDateOrderError(DayCountError):
    """Raised when the second date of a period precedes the first."""

    def __init__(self, first_date: date, second_date: date):
        super().__init__(
            f"Dates must be in order: {second_date} is before {first_date}"
        )
        self.first_date = first_date
        self.second_date = second_date
