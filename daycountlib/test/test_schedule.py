"""Tests for accrual schedules and vectorised year fractions."""

from datetime import date

import numpy as np
import pytest

from daycountlib.conventions import ACT_360, THIRTY_E_360_ISDA, StandardScheduleInfo
from daycountlib.errors import ConventionNotFoundError, InvalidDateOrderError
from daycountlib.schedule import (
    accrual_periods,
    add_months,
    generate_schedule,
    get_month_end,
    is_end_of_month,
    schedule_dates,
    year_fractions,
)


class TestAdjustments:
    def test_month_end(self):
        assert get_month_end(2020, 2) == date(2020, 2, 29)
        assert get_month_end(2021, 12) == date(2021, 12, 31)

    def test_is_end_of_month(self):
        assert is_end_of_month(date(2021, 4, 30))
        assert not is_end_of_month(date(2021, 4, 29))

    def test_add_months_keeps_month_end(self):
        assert add_months(date(2021, 2, 28), 1) == date(2021, 3, 31)
        assert add_months(date(2021, 2, 28), 1, end_of_month_rule=False) == date(2021, 3, 28)

    def test_add_months_clips_day(self):
        assert add_months(date(2021, 1, 30), 1) == date(2021, 2, 28)


class TestScheduleDates:
    def test_end_of_month_roll(self):
        dates = schedule_dates(date(2021, 2, 28), date(2021, 6, 30), 1)
        assert dates == [
            date(2021, 2, 28),
            date(2021, 3, 31),
            date(2021, 4, 30),
            date(2021, 5, 31),
            date(2021, 6, 30),
        ]

    def test_without_end_of_month_rule(self):
        dates = schedule_dates(date(2021, 2, 28), date(2021, 6, 30), 1, end_of_month=False)
        assert dates[1:3] == [date(2021, 3, 28), date(2021, 4, 28)]
        assert dates[-2:] == [date(2021, 6, 28), date(2021, 6, 30)]

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            schedule_dates(date(2021, 1, 1), date(2022, 1, 1), 0)
        with pytest.raises(ValueError):
            schedule_dates(date(2022, 1, 1), date(2022, 1, 1), 6)


class TestAccrualPeriods:
    def test_regular_schedule(self):
        periods = generate_schedule(date(2020, 1, 15), date(2021, 1, 15), 6, ACT_360)
        assert len(periods) == 2
        assert not any(period.is_stub for period in periods)
        assert periods[0].accrual_days == 182
        assert periods[0].year_fraction == pytest.approx(182 / 360)

    def test_short_final_stub(self):
        periods = generate_schedule(date(2020, 1, 15), date(2020, 10, 1), 6, "Act/360")
        assert [period.is_stub for period in periods] == [False, True]
        assert periods[-1].accrual_days == 78
        assert periods[-1].year_fraction == pytest.approx(78 / 360)

    def test_last_date_is_schedule_end(self):
        periods = accrual_periods(
            [date(2020, 8, 31), date(2021, 2, 28), date(2021, 8, 31)], THIRTY_E_360_ISDA
        )
        assert [p.year_fraction for p in periods] == pytest.approx([0.5, 0.5])

        periods = accrual_periods([date(2020, 8, 31), date(2021, 2, 28)], THIRTY_E_360_ISDA)
        assert periods[0].year_fraction == pytest.approx(178 / 360)

    def test_dates_must_increase(self):
        with pytest.raises(ValueError):
            accrual_periods([date(2021, 1, 1), date(2021, 1, 1)], ACT_360)
        with pytest.raises(ValueError):
            accrual_periods([date(2021, 1, 1)], ACT_360)

    def test_unknown_convention_name(self):
        with pytest.raises(ConventionNotFoundError):
            accrual_periods([date(2021, 1, 1), date(2021, 7, 1)], "Act/999")


class TestYearFractions:
    def test_vectorised(self):
        firsts = [date(2021, 1, 1), date(2021, 1, 1), date(2020, 8, 31)]
        seconds = [date(2021, 7, 1), date(2022, 1, 1), date(2021, 2, 28)]
        result = year_fractions("Act/360", firsts, seconds)
        assert isinstance(result, np.ndarray)
        np.testing.assert_allclose(result, [181 / 360, 365 / 360, 181 / 360])

    def test_schedule_info_passed_through(self):
        info = StandardScheduleInfo(end_date=date(2021, 2, 28))
        result = year_fractions(THIRTY_E_360_ISDA, [date(2020, 8, 31)], [date(2021, 2, 28)], info)
        np.testing.assert_allclose(result, [178 / 360])

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            year_fractions(ACT_360, [date(2021, 1, 1)], [])

    def test_reversed_pair(self):
        with pytest.raises(InvalidDateOrderError):
            year_fractions(ACT_360, [date(2021, 7, 1)], [date(2021, 1, 1)])
