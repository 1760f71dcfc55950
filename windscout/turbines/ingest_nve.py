"""
NVE Ingest

Fetches operational Norwegian wind farms from the NVE ArcGIS REST service.
Farms come as single points in UTM zone 33N with a turbine count; each farm
is expanded into one jittered point per turbine, sharing the farm capacity.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

import geopandas as gpd
import numpy as np
import pandas as pd

from ..config import H3_CRS, MIN_CAPACITY_MW, NORWAY_BOUNDS, NVE_SOURCE_CRS, NVE_WIND_API
from ..utils import round_half_up
from .fetch import download
from .schema import Turbine

LOGGER = logging.getLogger("windscout.ingest_nve")

NVE_QUERY_PARAMS = {
    "where": "status = 'D'",  # D = Drift (operational)
    "outFields": "OBJECTID,anleggNavn,fylkeNavn,kommune,effekt_MW_idrift,effekt_MW,antallTurbiner,forsteIdriftDato,status",
    "returnGeometry": "true",
    "f": "json",
    "outSR": NVE_SOURCE_CRS.split(":")[1],
}

# Half-width of the random offset applied to turbines of multi-turbine farms
JITTER_LON = 0.01
JITTER_LAT = 0.0075


def _farm_capacity(attrs: Dict[str, Any]) -> float:
    return float(attrs.get("effekt_MW_idrift") or attrs.get("effekt_MW") or 0)


def _commissioning_year(epoch_ms: Optional[float]) -> Optional[int]:
    if not epoch_ms:
        return None
    stamp = pd.to_datetime(epoch_ms, unit="ms", errors="coerce")
    return None if pd.isna(stamp) else int(stamp.year)


def utm33n_to_wgs84(x: Sequence[float], y: Sequence[float]) -> gpd.GeoSeries:
    """Reproject UTM 33N easting/northing arrays to lon/lat points."""
    points = gpd.GeoSeries(gpd.points_from_xy(x, y), crs=NVE_SOURCE_CRS)
    return points.to_crs(H3_CRS)


def parse_nve_features(
    features: List[Dict[str, Any]],
    seed: Union[None, int, np.random.Generator] = None,
) -> List[Turbine]:
    """
    Convert NVE ArcGIS features into per-turbine records.

    Farms without geometry, at the (0, 0) origin, below MIN_CAPACITY_MW or
    outside NORWAY_BOUNDS after reprojection are dropped.
    """
    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)

    farms = []
    for feature in features:
        attrs = feature.get("attributes") or {}
        geom = feature.get("geometry")
        if not geom or not geom.get("x") or not geom.get("y"):
            continue
        capacity = _farm_capacity(attrs)
        if capacity < MIN_CAPACITY_MW:
            continue
        farms.append((attrs, float(geom["x"]), float(geom["y"]), capacity))

    if not farms:
        return []

    lonlat = utm33n_to_wgs84([f[1] for f in farms], [f[2] for f in farms])

    turbines: List[Turbine] = []
    for (attrs, _, _, capacity), point in zip(farms, lonlat):
        lon, lat = point.x, point.y
        if not (NORWAY_BOUNDS["west"] <= lon <= NORWAY_BOUNDS["east"]
                and NORWAY_BOUNDS["south"] <= lat <= NORWAY_BOUNDS["north"]):
            LOGGER.warning(
                "Skipping out-of-bounds point: lon=%.4f lat=%.4f name=%s",
                lon, lat, attrs.get("anleggNavn"),
            )
            continue

        n_turbines = int(attrs.get("antallTurbiner") or 1)
        per_turbine = round_half_up(capacity / n_turbines, 2)
        year = _commissioning_year(attrs.get("forsteIdriftDato"))
        if n_turbines > 1:
            d_lon = rng.uniform(-JITTER_LON, JITTER_LON, n_turbines)
            d_lat = rng.uniform(-JITTER_LAT, JITTER_LAT, n_turbines)
        else:
            d_lon = d_lat = np.zeros(1)

        for i in range(n_turbines):
            turbines.append(
                Turbine(
                    lon=float(lon + d_lon[i]),
                    lat=float(lat + d_lat[i]),
                    capacity_mw=per_turbine,
                    project=attrs.get("anleggNavn") or "Wind Farm",
                    state=attrs.get("fylkeNavn") or attrs.get("kommune") or "Norway",
                    year=year,
                )
            )
    return turbines


def fetch_nve_turbines(seed: Union[None, int, np.random.Generator] = None) -> List[Turbine]:
    """
    Query NVE for operational wind farms and expand them to turbines.

    Raises:
        RuntimeError: if the request fails or NVE returns an error payload
    """
    LOGGER.info("Fetching Norway wind power data from NVE")
    payload = download(NVE_WIND_API, params=NVE_QUERY_PARAMS).json()
    if "error" in payload:
        raise RuntimeError(f"NVE query failed: {payload['error']}")

    features = payload.get("features") or []
    if not features:
        LOGGER.warning("No features found in NVE data")
        return []

    LOGGER.info("Parsing %d wind farms from NVE", len(features))
    turbines = parse_nve_features(features, seed=seed)
    LOGGER.info("Loaded %d wind turbines from NVE", len(turbines))
    return turbines
