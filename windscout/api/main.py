#!/usr/bin/env python3
# windscout/api/main.py

import os
from functools import lru_cache
from typing import Optional, Tuple

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from ..config import H3_RESOLUTIONS, REGIONS, RegionConfig, get_region
from ..hexagons.materialize import turbines_to_geojson
from ..pipeline import RegionLayers, build_layers
from ..turbines.loader import LoadResult, load_turbines
from ..turbines.schema import Turbine

APP_NAME = "WindScout Hexagon API"

# ---------- Config ----------
_FRONTEND_ORIGIN = os.environ.get("WS_FRONTEND_ORIGIN", "").strip()


# ---------- Data loading (cached) ----------
LoadedTurbines = Tuple[Tuple[Turbine, ...], str]


class _TransientFallback(Exception):
    """A real-data fetch failed; carries the synthetic fleet served instead."""

    def __init__(self, loaded: LoadResult):
        super().__init__(loaded.source)
        self.loaded = loaded


@lru_cache(maxsize=8)
def cached_region_turbines(region_id: str, use_real_data: bool, seed: Optional[int]) -> LoadedTurbines:
    """
    Loaded turbine list and source label, cached per (region, real/synthetic, seed).

    A fallback caused by a failed fetch raises instead of returning, so it is
    never cached and the next request retries the real source.
    """
    region = get_region(region_id)
    loaded = load_turbines(region, use_real_data=use_real_data, seed=seed)
    if loaded.fell_back and region.has_real_data:
        raise _TransientFallback(loaded)
    return tuple(loaded.turbines), loaded.source


def load_region_turbines(region_id: str, use_real_data: bool, seed: Optional[int]) -> LoadedTurbines:
    try:
        return cached_region_turbines(region_id, use_real_data, seed)
    except _TransientFallback as exc:
        return tuple(exc.loaded.turbines), exc.loaded.source


def _region_or_404(region_id: str) -> RegionConfig:
    try:
        return get_region(region_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _build(region_id: str, synthetic: bool, seed: Optional[int], resolutions=H3_RESOLUTIONS) -> RegionLayers:
    region = _region_or_404(region_id)
    turbines, source = load_region_turbines(region.id, not synthetic, seed)
    # Aggregation is always a fresh pass over the loaded turbines
    return build_layers(region, turbines, source, resolutions)


# ---------- FastAPI ----------
app = FastAPI(title=APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[_FRONTEND_ORIGIN] if _FRONTEND_ORIGIN else ["*"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/health")
def health():
    return {"ok": True, "app": APP_NAME}


@app.get("/api/regions")
def list_regions():
    return [
        {
            "id": r.id,
            "name": r.name,
            "center": list(r.center),
            "zoom": r.zoom,
            "has_real_data": r.has_real_data,
        }
        for r in REGIONS
    ]


@app.get("/api/regions/{region_id}/summary")
def region_summary(
    region_id: str,
    synthetic: bool = Query(False, description="Skip real data and synthesize turbines"),
    seed: Optional[int] = Query(None, description="Seed for synthetic data"),
):
    """Source, fleet totals and per-resolution max MW, color stops and zoom windows."""
    return _build(region_id, synthetic, seed).summary()


@app.get("/api/regions/{region_id}/hexagons/{res}")
def region_hexagons(
    region_id: str,
    res: int,
    synthetic: bool = Query(False, description="Skip real data and synthesize turbines"),
    seed: Optional[int] = Query(None, description="Seed for synthetic data"),
):
    """
    Returns the GeoJSON FeatureCollection for one resolution, with the
    resolution's max MW alongside for color-scale calibration.
    """
    if res not in H3_RESOLUTIONS:
        raise HTTPException(status_code=404, detail=f"Resolution {res} not served; use one of {list(H3_RESOLUTIONS)}")
    build = _build(region_id, synthetic, seed, resolutions=(res,))
    collection = dict(build.hexagons[res])
    collection["max_mw"] = build.max_mw[res]
    return collection


@app.get("/api/regions/{region_id}/turbines")
def region_turbines(
    region_id: str,
    synthetic: bool = Query(False, description="Skip real data and synthesize turbines"),
    seed: Optional[int] = Query(None, description="Seed for synthetic data"),
):
    region = _region_or_404(region_id)
    turbines, _ = load_region_turbines(region.id, not synthetic, seed)
    return turbines_to_geojson(turbines)


if __name__ == "__main__":
    # For local dev, allow overriding the port
    port = int(os.environ.get("PORT", 5175))
    print(f"Starting WindScout server on http://0.0.0.0:{port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
