"""Shared fixtures: small deterministic turbine fleets."""
import numpy as np
import pytest

from windscout.turbines.schema import Turbine


def make_fleet(n: int, seed: int = 0, center=(10.0, 52.0), spread: float = 1.5):
    rng = np.random.default_rng(seed)
    lon = center[0] + rng.uniform(-spread, spread, n)
    lat = center[1] + rng.uniform(-spread, spread, n)
    capacity = np.round(rng.uniform(0.5, 6.0, n), 3)
    return [
        Turbine(lon=float(x), lat=float(y), capacity_mw=float(c))
        for x, y, c in zip(lon, lat, capacity)
    ]


@pytest.fixture
def fleet():
    return make_fleet(500)


@pytest.fixture
def two_close_turbines():
    return [
        Turbine(lon=13.0, lat=52.0, capacity_mw=3.0),
        Turbine(lon=13.001, lat=52.001, capacity_mw=2.0),
    ]


@pytest.fixture
def fleet_factory():
    return make_fleet
