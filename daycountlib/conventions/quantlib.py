"""
QuantLib equivalents of the built-in day count conventions.

Used to hand conventions to QuantLib-based pricing code and to cross-check
year fractions against QuantLib's implementations.
"""

from typing import Union

import QuantLib as ql

from daycountlib.errors import ConventionNotFoundError
from daycountlib.utils.date import DateLike, to_date

from .daycount import DayCount
from .registry import get_day_count
from .types import DayCountType


def to_ql_date(dt: DateLike) -> ql.Date:
    """Convert a Python date-like to a QuantLib Date."""
    py_date = to_date(dt)
    return ql.Date(py_date.day, py_date.month, py_date.year)


def _ql_day_counters():
    return {
        DayCountType.ACT_360: ql.Actual360(),
        DayCountType.ACT_365: ql.Actual365Fixed(),
        DayCountType.ACT_ACT_ISDA: ql.ActualActual(ql.ActualActual.ISDA),
        # QuantLib's bond basis applies the same day 31 rules as 30/360 ISDA
        DayCountType.THIRTY_360_ISDA: ql.Thirty360(ql.Thirty360.BondBasis),
        DayCountType.THIRTY_E_360: ql.Thirty360(ql.Thirty360.European),
    }


def to_ql_day_counter(convention: Union[DayCount, str]) -> ql.DayCounter:
    """Return the QuantLib day counter matching a built-in convention."""
    if isinstance(convention, str):
        convention = get_day_count(convention)
    kind = getattr(convention, "kind", None)
    counters = _ql_day_counters()
    if kind not in counters:
        raise ConventionNotFoundError(
            f"No QuantLib equivalent for day count convention: {convention.name}. "
            f"Available: {[k.value for k in counters]}"
        )
    return counters[kind]


def quantlib_year_fraction(
    convention: Union[DayCount, str], first_date: DateLike, second_date: DateLike
) -> float:
    """Year fraction computed by QuantLib for the given convention."""
    day_counter = to_ql_day_counter(convention)
    return day_counter.yearFraction(to_ql_date(first_date), to_ql_date(second_date))
