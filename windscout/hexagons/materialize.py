"""
Turn aggregates into renderable geometry.

GeoJSON FeatureCollections feed the map client; GeoDataFrames back the
file exports. Boundaries are recomputed from the cell id every time.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Sequence

import geopandas as gpd
import pandas as pd

from ..config import H3_CRS, H3_RESOLUTIONS
from .aggregate import HexMap, generate_h3_indices
from .h3_utils import cell_polygon, cell_to_int, hex_polygon_lonlat

FeatureCollection = Dict[str, Any]


def h3_to_geojson(hex_map: HexMap) -> FeatureCollection:
    """One Polygon feature per aggregate, carrying h3Index, total_mw and turbine_count."""
    features = []
    for h3_index, data in hex_map.items():
        features.append({
            "type": "Feature",
            "properties": {
                "h3Index": h3_index,
                "total_mw": data.total_mw,
                "turbine_count": data.turbine_count,
            },
            "geometry": {"type": "Polygon", "coordinates": [hex_polygon_lonlat(h3_index)]},
        })
    return {"type": "FeatureCollection", "features": features}


def aggregate_hexagons(
    turbines: Iterable,
    resolutions: Sequence[int] = H3_RESOLUTIONS,
) -> Dict[int, FeatureCollection]:
    records = list(turbines)
    return {res: h3_to_geojson(generate_h3_indices(records, res)) for res in resolutions}


def turbines_to_geojson(turbines: Iterable) -> FeatureCollection:
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": t.properties(),
                "geometry": {"type": "Point", "coordinates": [t.lon, t.lat]},
            }
            for t in turbines
        ],
    }


def hex_map_to_geodataframe(hex_map: HexMap, resolution: int) -> gpd.GeoDataFrame:
    """
    Build a GeoDataFrame (EPSG:4326) with h3_id (uint64), res (int32),
    total_mw, turbine_count and the cell polygon as geometry.
    """
    cells = list(hex_map)
    df = pd.DataFrame({
        "h3_id": pd.Series([cell_to_int(c) for c in cells], dtype="uint64"),
        "res": pd.Series([resolution] * len(cells), dtype="int32"),
        "total_mw": pd.Series([hex_map[c].total_mw for c in cells], dtype="float64"),
        "turbine_count": pd.Series([hex_map[c].turbine_count for c in cells], dtype="int64"),
    })
    return gpd.GeoDataFrame(df, geometry=[cell_polygon(c) for c in cells], crs=H3_CRS)
