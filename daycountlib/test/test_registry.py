"""Tests for the day count convention registry."""

from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from daycountlib.conventions import (
    ACT_360,
    NL_365,
    DayCount,
    DayCountRegistry,
    DayCountType,
    default_registry,
    get_day_count,
    list_day_counts,
)
from daycountlib.conventions import registry as registry_module
from daycountlib.errors import (
    ConventionNotFoundError,
    DayCountError,
    DuplicateConventionError,
)
from daycountlib.utils.date import actual_days, to_date


class Actual366:
    """Actual days / 366"""

    name = "Act/366"

    def year_fraction(self, first_date, second_date, schedule_info=None):
        return actual_days(to_date(first_date), to_date(second_date)) / 366.0


class TestLookup:
    def test_known_name(self):
        assert get_day_count("Act/360") is ACT_360

    def test_unknown_name(self):
        with pytest.raises(ConventionNotFoundError, match="Nonexistent"):
            get_day_count("Nonexistent")

    def test_not_found_is_value_error(self):
        with pytest.raises(ValueError):
            get_day_count("Nonexistent")
        assert issubclass(ConventionNotFoundError, DayCountError)

    def test_names_are_case_sensitive(self):
        with pytest.raises(ConventionNotFoundError):
            get_day_count("act/360")

    @pytest.mark.parametrize("kind", list(DayCountType))
    def test_every_builtin_registered(self, kind):
        assert get_day_count(kind.value).kind is kind


class TestEnumeration:
    def test_registration_order(self):
        names = [convention.name for convention in list_day_counts()]
        assert names == [kind.value for kind in DayCountType]

    def test_names(self):
        registry = default_registry()
        assert registry.names()[0] == "1/1"
        assert registry.names()[-1] == "30E+/360"

    def test_container_protocol(self):
        registry = default_registry()
        assert len(registry) == 13
        assert "NL/365" in registry
        assert "NL/366" not in registry
        assert list(registry) == list(registry.list_all())

    def test_list_all_is_tuple(self):
        assert isinstance(list_day_counts(), tuple)

    def test_to_frame(self):
        frame = default_registry().to_frame()
        assert list(frame.columns) == ["name", "type", "description"]
        assert frame.shape == (13, 3)
        assert frame.iloc[0]["name"] == "1/1"
        assert frame.iloc[0]["type"] == "ONE_ONE"


class TestExtension:
    def test_extended_registry(self):
        extended = default_registry().extended(Actual366())
        assert len(extended) == 14
        assert extended.names()[-1] == "Act/366"
        result = extended.lookup("Act/366").year_fraction(date(2021, 1, 1), date(2021, 7, 1))
        assert result == pytest.approx(181 / 366)
        assert extended.lookup("NL/365") is NL_365

    def test_original_untouched(self):
        default_registry().extended(Actual366())
        assert "Act/366" not in default_registry()
        with pytest.raises(ConventionNotFoundError):
            get_day_count("Act/366")

    def test_duplicate_name(self):
        with pytest.raises(DuplicateConventionError):
            default_registry().extended(DayCount(DayCountType.ACT_360))

    def test_not_a_convention(self):
        with pytest.raises(TypeError):
            DayCountRegistry([ACT_360, object()])

    def test_custom_row_in_frame(self):
        frame = DayCountRegistry([Actual366()]).to_frame()
        assert frame.iloc[0]["type"] == "Actual366"
        assert frame.iloc[0]["description"] == "Actual days / 366"


class TestDefaultRegistry:
    def test_single_instance(self):
        assert default_registry() is default_registry()

    def test_concurrent_initialization(self, monkeypatch):
        monkeypatch.setattr(registry_module, "_DEFAULT_REGISTRY", None)
        with ThreadPoolExecutor(max_workers=8) as pool:
            registries = list(pool.map(lambda _: default_registry(), range(32)))
        assert all(registry is registries[0] for registry in registries)
        assert len(registries[0]) == 13
