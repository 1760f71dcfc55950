"""
windscout.hexagons - H3 aggregation core.

Bins turbines into H3 cells per resolution, materializes cells as polygons
and computes the summary figures the map needs.
"""
from .aggregate import CellAggregate, aggregate_resolutions, aggregates_to_frame, generate_h3_indices
from .materialize import aggregate_hexagons, h3_to_geojson, hex_map_to_geodataframe, turbines_to_geojson
from .stats import TotalStats, color_ramp_stops, get_max_mw, get_total_stats

__all__ = [
    "CellAggregate",
    "TotalStats",
    "aggregate_hexagons",
    "aggregate_resolutions",
    "aggregates_to_frame",
    "color_ramp_stops",
    "generate_h3_indices",
    "get_max_mw",
    "get_total_stats",
    "h3_to_geojson",
    "hex_map_to_geodataframe",
    "turbines_to_geojson",
]
