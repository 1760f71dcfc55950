"""
Test Hexagon API

Real-data loading is replaced with a small fixed fleet so no request leaves
the process.
"""
import pytest
import requests
from fastapi.testclient import TestClient

from windscout.api import main as api_main
from windscout.config import REGIONS, SOURCE_OPSD, SOURCE_SYNTHETIC
from windscout.turbines import loader
from windscout.turbines.loader import LoadResult


@pytest.fixture
def load_calls():
    return []


@pytest.fixture
def client(monkeypatch, fleet_factory, load_calls):
    def fake_load(region, use_real_data=True, seed=None):
        load_calls.append((region.id, use_real_data, seed))
        return LoadResult(fleet_factory(200, center=region.center, spread=0.5), SOURCE_OPSD)

    monkeypatch.setattr(api_main, "load_turbines", fake_load)
    api_main.cached_region_turbines.cache_clear()
    yield TestClient(api_main.app)
    api_main.cached_region_turbines.cache_clear()


def test_health(client):
    assert client.get("/health").json() == {"ok": True, "app": api_main.APP_NAME}


def test_regions(client):
    body = client.get("/api/regions").json()
    assert [r["id"] for r in body] == [r.id for r in REGIONS]
    norway = next(r for r in body if r["id"] == "norway")
    assert norway["center"] == [15.0, 65.0]
    assert norway["has_real_data"] is True


def test_summary(client):
    resp = client.get("/api/regions/germany/summary")
    assert resp.status_code == 200
    body = resp.json()
    assert body["source"] == SOURCE_OPSD
    assert body["count"] == 200
    assert [r["res"] for r in body["resolutions"]] == [3, 4, 5, 6]


def test_hexagons(client):
    resp = client.get("/api/regions/germany/hexagons/5")
    assert resp.status_code == 200
    body = resp.json()
    assert body["type"] == "FeatureCollection"
    assert sum(f["properties"]["turbine_count"] for f in body["features"]) == 200
    assert body["max_mw"] == max(f["properties"]["total_mw"] for f in body["features"])


def test_turbines(client):
    body = client.get("/api/regions/germany/turbines").json()
    assert len(body["features"]) == 200
    assert body["features"][0]["geometry"]["type"] == "Point"


def test_loaded_turbines_are_cached(client, load_calls):
    client.get("/api/regions/uk/summary")
    client.get("/api/regions/uk/hexagons/3")
    client.get("/api/regions/uk/turbines")
    assert load_calls == [("uk", True, None)]


def test_synthetic_query(client, load_calls):
    client.get("/api/regions/uk/summary", params={"synthetic": "true", "seed": 4})
    assert load_calls == [("uk", False, 4)]


def test_unknown_region(client):
    assert client.get("/api/regions/atlantis/summary").status_code == 404
    assert client.get("/api/regions/atlantis/turbines").status_code == 404


def test_unserved_resolution(client):
    assert client.get("/api/regions/germany/hexagons/9").status_code == 404


@pytest.fixture
def fresh_cache():
    api_main.cached_region_turbines.cache_clear()
    yield
    api_main.cached_region_turbines.cache_clear()


def test_failed_fetch_is_retried_on_next_request(monkeypatch, fleet_factory, fresh_cache):
    """A transient fetch error serves synthetic data once, then real data again."""
    attempts = []

    def flaky_opsd(region):
        attempts.append(region.id)
        if len(attempts) == 1:
            raise requests.ConnectionError("network down")
        return fleet_factory(50, center=region.center, spread=0.5)

    monkeypatch.setattr(loader, "fetch_opsd_turbines", flaky_opsd)
    client = TestClient(api_main.app)

    first = client.get("/api/regions/germany/summary", params={"seed": 1}).json()
    second = client.get("/api/regions/germany/summary", params={"seed": 1}).json()
    third = client.get("/api/regions/germany/summary", params={"seed": 1}).json()

    assert first["source"] == SOURCE_SYNTHETIC
    assert second["source"] == SOURCE_OPSD
    assert second["count"] == 50
    assert third["source"] == SOURCE_OPSD
    assert len(attempts) == 2


def test_region_without_source_is_cached(monkeypatch, fleet_factory, fresh_cache):
    calls = []

    def fake_load(region, use_real_data=True, seed=None):
        calls.append(region.id)
        return LoadResult(fleet_factory(20, center=region.center), SOURCE_SYNTHETIC, fell_back=True)

    monkeypatch.setattr(api_main, "load_turbines", fake_load)
    client = TestClient(api_main.app)

    client.get("/api/regions/us/summary")
    client.get("/api/regions/us/turbines")
    assert calls == ["us"]
