"""
Region build orchestration.

A region build loads turbines, computes fleet stats and runs a fresh
aggregation at every resolution. Nothing is carried over between builds.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import H3_RESOLUTIONS, RESOLUTION_LAYERS, RegionConfig, ResolutionLayer
from .hexagons.aggregate import HexMap, aggregate_resolutions
from .hexagons.materialize import h3_to_geojson, turbines_to_geojson
from .hexagons.stats import TotalStats, color_ramp_stops, get_max_mw, get_total_stats
from .turbines.loader import load_turbines
from .turbines.schema import Turbine

LOGGER = logging.getLogger("windscout.pipeline")


@dataclass
class RegionLayers:
    region: RegionConfig
    source: str
    turbines: List[Turbine]
    stats: TotalStats
    hex_maps: Dict[int, HexMap] = field(default_factory=dict)
    hexagons: Dict[int, Dict[str, Any]] = field(default_factory=dict)
    max_mw: Dict[int, float] = field(default_factory=dict)

    @property
    def resolutions(self) -> List[int]:
        return list(self.hexagons)

    def color_stops(self, resolution: int) -> List[Tuple[float, str]]:
        return color_ramp_stops(self.max_mw[resolution])

    def turbine_geojson(self) -> Dict[str, Any]:
        return turbines_to_geojson(self.turbines)

    def summary(self) -> Dict[str, Any]:
        """JSON-ready description of the build, without geometry."""
        layers = {layer.res: layer for layer in RESOLUTION_LAYERS}
        return {
            "region": self.region.id,
            "name": self.region.name,
            "center": list(self.region.center),
            "zoom": self.region.zoom,
            "source": self.source,
            "count": self.stats.count,
            "total_mw": self.stats.total_mw,
            "resolutions": [
                _resolution_summary(res, self, layers.get(res)) for res in self.resolutions
            ],
        }


def _resolution_summary(res: int, build: RegionLayers, layer: Optional[ResolutionLayer]) -> Dict[str, Any]:
    entry: Dict[str, Any] = {
        "res": res,
        "cells": len(build.hexagons[res]["features"]),
        "max_mw": build.max_mw[res],
        "color_stops": [[value, color] for value, color in build.color_stops(res)],
    }
    if layer is not None:
        entry.update({
            "min_zoom": layer.min_zoom,
            "max_zoom": layer.max_zoom,
            "fade_in": list(layer.fade_in),
            "fade_out": list(layer.fade_out),
        })
    return entry


def build_layers(
    region: RegionConfig,
    turbines: Sequence[Turbine],
    source: str,
    resolutions: Sequence[int] = H3_RESOLUTIONS,
) -> RegionLayers:
    """Aggregate an already-loaded turbine list at every resolution."""
    turbines = list(turbines)
    build = RegionLayers(
        region=region,
        source=source,
        turbines=turbines,
        stats=get_total_stats(turbines),
        hex_maps=aggregate_resolutions(turbines, resolutions),
    )
    for res, hex_map in build.hex_maps.items():
        build.hexagons[res] = h3_to_geojson(hex_map)
        build.max_mw[res] = get_max_mw(hex_map)
        LOGGER.info("res=%d: %d cells, max %.1f MW", res, len(hex_map), build.max_mw[res])
    return build


def build_region_layers(
    region: RegionConfig,
    use_real_data: bool = True,
    resolutions: Sequence[int] = H3_RESOLUTIONS,
    seed: Optional[int] = None,
) -> RegionLayers:
    """
    Load turbines for ``region`` and build all hexagon layers.

    Args:
        region: Region to build
        use_real_data: Try OPSD/NVE before synthesizing
        resolutions: H3 resolutions to aggregate at
        seed: Seed for synthetic data and jitter

    Returns:
        RegionLayers with per-resolution FeatureCollections and max MW
    """
    loaded = load_turbines(region, use_real_data=use_real_data, seed=seed)
    LOGGER.info("Loaded %d turbines for %s from %s", len(loaded.turbines), region.name, loaded.source)
    return build_layers(region, loaded.turbines, loaded.source, resolutions)
