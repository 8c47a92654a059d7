"""Tests for speed and vertical rate conversion."""

import itertools
import math

import pytest

from toctod.performance.units import RateUnit, SpeedUnit, convert_rate, convert_speed


class TestUnitEnums:
    """Test unit enum values."""

    def test_speed_unit_values(self):
        assert SpeedUnit.KT.value == "kt"
        assert SpeedUnit.MPH.value == "mph"
        assert SpeedUnit.KMH.value == "kmh"

    def test_rate_unit_values(self):
        assert RateUnit.FT_MIN.value == "ftmin"
        assert RateUnit.M_S.value == "ms"


class TestConvertSpeed:
    """Test speed conversion through knots."""

    def test_knots_to_kmh(self):
        """Test knots to km/h uses 1.852."""
        assert convert_speed(100.0, SpeedUnit.KT, SpeedUnit.KMH) == pytest.approx(185.2)

    def test_knots_to_mph(self):
        """Test knots to mph uses 1.15078."""
        assert convert_speed(100.0, SpeedUnit.KT, SpeedUnit.MPH) == pytest.approx(115.078)

    def test_mph_to_kmh_goes_through_knots(self):
        """Test a pair without knots composes both factors."""
        assert convert_speed(100.0, "mph", "kmh") == pytest.approx(100.0 * 0.868976 * 1.852)

    @pytest.mark.parametrize("unit", list(SpeedUnit))
    def test_identity_is_exact(self, unit):
        """Test converting a unit to itself returns the input unchanged."""
        for value in (0.0, 1.0, 123.456789, -42.5, 1e300):
            assert convert_speed(value, unit, unit) == value

    @pytest.mark.parametrize("from_unit, to_unit", list(itertools.permutations(SpeedUnit, 2)))
    def test_round_trip(self, from_unit, to_unit):
        """Test A -> B -> A reproduces the value."""
        value = 287.5
        there = convert_speed(value, from_unit, to_unit)

        assert convert_speed(there, to_unit, from_unit) == pytest.approx(value, rel=1e-5)

    def test_accepts_string_units(self):
        """Test units can be given by their string values."""
        assert convert_speed(250.0, "kt", "kmh") == convert_speed(250.0, SpeedUnit.KT, SpeedUnit.KMH)

    def test_unknown_unit_raises(self):
        """Test an unknown unit name is rejected."""
        with pytest.raises(ValueError):
            convert_speed(1.0, "mach", "kt")

    def test_overflow_yields_zero(self):
        """Test a result that overflows to infinity is replaced by zero."""
        assert convert_speed(1e308, SpeedUnit.KT, SpeedUnit.KMH) == 0.0

    def test_nan_input_yields_zero(self):
        """Test nan does not propagate through a conversion."""
        assert convert_speed(math.nan, SpeedUnit.MPH, SpeedUnit.KT) == 0.0

    def test_infinite_input_yields_zero(self):
        """Test infinity does not propagate through a conversion."""
        assert convert_speed(math.inf, SpeedUnit.KMH, SpeedUnit.KT) == 0.0


class TestConvertRate:
    """Test vertical rate conversion."""

    def test_feet_per_minute_to_meters_per_second(self):
        """Test ft/min to m/s uses 0.00508."""
        assert convert_rate(1000.0, RateUnit.FT_MIN, RateUnit.M_S) == pytest.approx(5.08)

    def test_meters_per_second_to_feet_per_minute(self):
        """Test m/s to ft/min uses 196.85."""
        assert convert_rate(10.0, RateUnit.M_S, RateUnit.FT_MIN) == pytest.approx(1968.5)

    @pytest.mark.parametrize("unit", list(RateUnit))
    def test_identity_is_exact(self, unit):
        """Test converting a rate to its own unit returns the input unchanged."""
        for value in (0.0, 1500.0, 7.62, -500.0):
            assert convert_rate(value, unit, unit) == value

    @pytest.mark.parametrize(
        "from_unit, to_unit, value",
        [(RateUnit.FT_MIN, RateUnit.M_S, 1500.0), (RateUnit.M_S, RateUnit.FT_MIN, 7.62)],
    )
    def test_round_trip(self, from_unit, to_unit, value):
        """Test A -> B -> A reproduces the value in both directions."""
        there = convert_rate(value, from_unit, to_unit)

        assert convert_rate(there, to_unit, from_unit) == pytest.approx(value, rel=1e-5)

    def test_accepts_string_units(self):
        """Test units can be given by their string values."""
        assert convert_rate(10.0, "ms", "ftmin") == pytest.approx(1968.5)

    def test_overflow_yields_zero(self):
        """Test a result that overflows to infinity is replaced by zero."""
        assert convert_rate(1e307, RateUnit.M_S, RateUnit.FT_MIN) == 0.0

    def test_nan_input_yields_zero(self):
        """Test nan does not propagate through a conversion."""
        assert convert_rate(math.nan, RateUnit.FT_MIN, RateUnit.M_S) == 0.0
