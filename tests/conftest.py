"""Pytest configuration and fixtures for all tests."""

import tempfile
from pathlib import Path

import pytest
import yaml

from toctod.airports.directory import AirportDirectory, AirportRecord
from toctod.navigation.great_circle import GeoPosition


def pytest_configure(config):
    """Send logs from the whole test session to a temporary directory."""
    from toctod.core.logging_system import initialize_logging

    log_dir = Path(tempfile.mkdtemp(prefix="toctod-test-logs-"))
    logging_config = log_dir / "logging.yaml"
    logging_config.write_text(
        yaml.safe_dump(
            {
                "level": "DEBUG",
                "log_dir": str(log_dir),
                "combined_log": {"enabled": True, "filename": "test.log"},
                "console": {"enabled": False},
            }
        ),
        encoding="utf-8",
    )
    initialize_logging(logging_config, use_platform_dir=False)


SBGR = AirportRecord(
    icao="SBGR",
    name="Aeroporto Internacional de São Paulo/Guarulhos",
    city="Guarulhos",
    state="SP",
    elevation_ft=2459,
    position=GeoPosition(latitude=-23.435556, longitude=-46.473056),
    iata="GRU",
)

SBGL = AirportRecord(
    icao="SBGL",
    name="Aeroporto Internacional do Rio de Janeiro/Galeão",
    city="Rio de Janeiro",
    state="RJ",
    elevation_ft=28,
    position=GeoPosition(latitude=-22.808889, longitude=-43.243611),
    iata="GIG",
)

SBBR = AirportRecord(
    icao="SBBR",
    name="Aeroporto Internacional Presidente Juscelino Kubitschek",
    city="Brasília",
    state="DF",
    elevation_ft=3497,
    position=GeoPosition(latitude=-15.869167, longitude=-47.920833),
    iata="BSB",
)

# Same fields as SBGL but without a position
SBXX = AirportRecord(
    icao="SBXX",
    name="Unsurveyed Field",
    city="Nowhere",
    state="RJ",
    elevation_ft=500,
)


@pytest.fixture
def directory() -> AirportDirectory:
    """Directory with three positioned airports and one without position."""
    return AirportDirectory([SBGR, SBGL, SBBR, SBXX])


@pytest.fixture
def sbgr() -> AirportRecord:
    return SBGR


@pytest.fixture
def sbgl() -> AirportRecord:
    return SBGL


@pytest.fixture
def sbbr() -> AirportRecord:
    return SBBR


@pytest.fixture
def sbxx() -> AirportRecord:
    return SBXX
