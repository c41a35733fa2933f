"""
Enumeration of the built-in day count conventions.
"""

from enum import Enum


class DayCountType(Enum):
    """Built-in day count conventions, valued by their canonical name."""

    ONE_ONE = "1/1"
    ACT_ACT_ISDA = "Act/Act ISDA"
    ACT_365_ACTUAL = "Act/365 Actual"
    ACT_360 = "Act/360"
    ACT_364 = "Act/364"
    ACT_365 = "Act/365"
    ACT_365_25 = "Act/365.25"
    NL_365 = "NL/365"
    THIRTY_360_ISDA = "30/360 ISDA"
    THIRTY_U_360 = "30U/360"
    THIRTY_E_360_ISDA = "30E/360 ISDA"
    THIRTY_E_360 = "30E/360"
    THIRTY_EPLUS_360 = "30E+/360"
