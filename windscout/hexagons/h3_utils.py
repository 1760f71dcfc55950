"""
Thin wrappers over the h3 library (v4 API).

Every H3 call in windscout goes through here so the rest of the package
only deals in cell strings, lon/lat rings and uint64 ids.
"""
from __future__ import annotations

from typing import List

import h3
from shapely.geometry import Polygon


def latlng_to_cell(lat: float, lon: float, resolution: int) -> str:
    return h3.latlng_to_cell(lat, lon, resolution)


def cell_boundary(cell: str):
    """Boundary vertices as returned by h3: (lat, lng) pairs, not closed."""
    return h3.cell_to_boundary(cell)


def hex_polygon_lonlat(cell: str) -> List[List[float]]:
    # returns a closed lon/lat ring for GeoJSON
    boundary_latlon = cell_boundary(cell)  # [(lat, lon), ...]
    ring = [[lon, lat] for (lat, lon) in boundary_latlon]
    if ring[0] != ring[-1]:
        ring.append(list(ring[0]))
    return ring


def cell_polygon(cell: str) -> Polygon:
    return Polygon(hex_polygon_lonlat(cell))


def cell_to_int(cell: str) -> int:
    """Uint64 integer form of an H3 address, as stored in the h3_id column."""
    return int(h3.str_to_int(cell))
