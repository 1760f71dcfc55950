"""
Test Turbine Loading

Real data wins when it loads; every failure path ends in a synthetic fleet
with the fallback logged.
"""
import logging

import pytest
import requests

from windscout.config import SOURCE_NVE, SOURCE_OPSD, SOURCE_SYNTHETIC, get_region
from windscout.turbines import loader
from windscout.turbines.schema import Turbine

REAL = [Turbine(lon=10.0, lat=52.0, capacity_mw=3.0), Turbine(lon=10.5, lat=52.5, capacity_mw=2.0)]


@pytest.fixture
def no_network(monkeypatch):
    """Fail loudly if a test reaches a real fetcher it did not stub."""

    def boom(*args, **kwargs):
        raise AssertionError("unexpected fetch")

    monkeypatch.setattr(loader, "fetch_opsd_turbines", boom)
    monkeypatch.setattr(loader, "fetch_nve_turbines", boom)


class TestLoadTurbines:

    def test_synthetic_requested(self, no_network):
        result = loader.load_turbines(get_region("germany"), use_real_data=False, seed=0)
        assert result.source == SOURCE_SYNTHETIC
        assert result.fell_back is False
        assert len(result.turbines) > 0

    def test_opsd_success(self, monkeypatch, no_network):
        monkeypatch.setattr(loader, "fetch_opsd_turbines", lambda region: REAL)
        result = loader.load_turbines(get_region("germany"))
        assert result.turbines == REAL
        assert result.source == SOURCE_OPSD
        assert result.fell_back is False

    def test_norway_uses_nve(self, monkeypatch, no_network):
        seen = {}

        def fake_nve(seed=None):
            seen["seed"] = seed
            return REAL

        monkeypatch.setattr(loader, "fetch_nve_turbines", fake_nve)
        result = loader.load_turbines(get_region("norway"), seed=11)
        assert result.source == SOURCE_NVE
        assert seen["seed"] == 11

    def test_region_without_source_falls_back(self, no_network):
        result = loader.load_turbines(get_region("us"), seed=0)
        assert result.source == SOURCE_SYNTHETIC
        assert result.fell_back is True

    @pytest.mark.parametrize("error", [
        RuntimeError("Empty or truncated OPSD payload"),
        requests.ConnectionError("offline"),
        ValueError("bad csv"),
    ])
    def test_fetch_failure_falls_back(self, monkeypatch, caplog, no_network, error):
        def failing(region):
            raise error

        monkeypatch.setattr(loader, "fetch_opsd_turbines", failing)
        with caplog.at_level(logging.WARNING, logger="windscout.loader"):
            result = loader.load_turbines(get_region("uk"), seed=0)

        assert result.source == SOURCE_SYNTHETIC
        assert result.fell_back is True
        assert len(result.turbines) > 0
        assert "Failed to fetch data for United Kingdom" in caplog.text

    def test_empty_result_falls_back(self, monkeypatch, caplog, no_network):
        monkeypatch.setattr(loader, "fetch_opsd_turbines", lambda region: [])
        with caplog.at_level(logging.WARNING, logger="windscout.loader"):
            result = loader.load_turbines(get_region("france"), seed=0)

        assert result.fell_back is True
        assert "No wind turbines found" in caplog.text

    def test_fallback_is_seeded(self, monkeypatch, no_network):
        monkeypatch.setattr(loader, "fetch_opsd_turbines", lambda region: [])
        first = loader.load_turbines(get_region("germany"), seed=5)
        second = loader.load_turbines(get_region("germany"), seed=5)
        assert first.turbines == second.turbines
