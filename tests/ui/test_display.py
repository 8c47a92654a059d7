"""Tests for profile display formatting."""

import math

import pytest

from toctod.airports.directory import AirportLookupResult
from toctod.performance.profile_calculator import CalculationResult
from toctod.ui.display import (
    DISCLAIMER,
    DisplayResult,
    format_airport,
    format_nearby,
    format_profile,
    sanitize_value,
)


def make_result(**overrides) -> CalculationResult:
    values = {
        "toc_distance_nm": 67.8,
        "tod_distance_nm": 108.8,
        "total_distance_nm": 276.6,
        "climb_time_min": 16.0,
        "cruise_time_min": 13.0,
        "descent_time_min": 23.0,
        "total_time_min": 53.0,
    }
    values.update(overrides)
    return CalculationResult(**values)


class TestSanitizeValue:
    """Test replacement of values that cannot be shown."""

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, None])
    def test_non_finite_becomes_zero(self, value):
        assert sanitize_value(value) == 0

    @pytest.mark.parametrize("value", [0.0, 67.8, -12.0, 1e300])
    def test_finite_unchanged(self, value):
        assert sanitize_value(value) == value


class TestDisplayResult:
    """Test conversion of calculation results for display."""

    def test_times_are_integers(self):
        """Test whole-minute times are shown as ints."""
        display = DisplayResult.from_result(make_result())

        assert display.climb_time_min == 16
        assert isinstance(display.climb_time_min, int)
        assert isinstance(display.total_time_min, int)
        assert display.toc_distance_nm == 67.8

    def test_non_finite_fields_become_zero(self):
        """Test a zero cruise speed result displays as zeros."""
        display = DisplayResult.from_result(
            make_result(cruise_time_min=math.inf, total_time_min=math.nan, toc_distance_nm=-math.inf)
        )

        assert display.cruise_time_min == 0
        assert display.total_time_min == 0
        assert display.toc_distance_nm == 0.0
        assert display.climb_time_min == 16

    def test_negative_cruise_kept(self):
        """Test a negative cruise time is shown as computed."""
        display = DisplayResult.from_result(make_result(cruise_time_min=-9.0))

        assert display.cruise_time_min == -9


class TestFormatAirport:
    """Test airport summary lines."""

    def test_known_airport(self):
        airport = AirportLookupResult(
            icao="SBGR",
            name="Guarulhos",
            city="Guarulhos",
            state="SP",
            elevation_ft=2459,
            elevation_m=750,
        )

        lines = format_airport("Departure", airport)

        assert lines[0] == "Departure: SBGR - Guarulhos"
        assert lines[1] == "  Guarulhos, SP"
        assert lines[2] == "  Elevation: 2459 ft (750 m)"

    def test_unknown_airport(self):
        assert format_airport("Arrival", None) == ["Arrival: unknown airport (sea level, no position)"]


class TestFormatProfile:
    """Test the rendered profile text."""

    def test_sections_and_values(self):
        """Test every phase is rendered with its values."""
        text = format_profile(DisplayResult.from_result(make_result()))

        assert "Distance to TOC: 67.8 NM" in text
        assert "Climb time: 16 min" in text
        assert "Cruise time: 13 min" in text
        assert "Distance from TOD: 108.8 NM" in text
        assert "Descent time: 23 min" in text
        assert "Total distance: 276.6 NM" in text
        assert "Total time: 53 min" in text

    def test_ends_with_disclaimer(self):
        text = format_profile(DisplayResult.from_result(make_result()))

        assert text.endswith(f"Note: {DISCLAIMER}")

    def test_no_nan_or_inf_in_output(self):
        """Test degenerate results never show nan or inf."""
        result = make_result(
            toc_distance_nm=math.nan,
            climb_time_min=math.inf,
            cruise_time_min=math.nan,
            total_time_min=-math.inf,
            total_distance_nm=math.inf,
        )

        text = format_profile(DisplayResult.from_result(result)).lower()

        assert "nan" not in text
        assert "inf" not in text
        assert "Distance to TOC: 0.0 NM" in format_profile(DisplayResult.from_result(result))


class TestFormatNearby:
    """Test the list of airports around an airport."""

    def test_lists_airports_with_distances(self, sbgr, sbbr):
        text = format_nearby("SBGL", 600, [(sbgr, 182.24), (sbbr, 502.0)])

        assert text.splitlines() == [
            "Airports within 600 NM of SBGL",
            f"  SBGR - {sbgr.name}: 182.2 NM",
            f"  SBBR - {sbbr.name}: 502.0 NM",
        ]

    def test_no_airports(self):
        assert format_nearby("SBGL", 12.5, []) == "Airports within 12.5 NM of SBGL\n  none"
