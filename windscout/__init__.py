"""
windscout - Wind turbine density maps on H3 hexagons.

Loads wind-turbine installations per region (OPSD, NVE or synthesized),
bins them into H3 cells at several resolutions and materializes the cells
as GeoJSON polygons for a web map.
"""

__version__ = "0.1.0"
