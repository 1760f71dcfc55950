"""
Synthesize plausible turbine fleets for regions without (reachable) real data.

Turbines are scattered with a Gaussian radial falloff around the region's
known wind-farm clusters. Capacity, hub height and rotor diameter are drawn
so that larger machines are also taller with bigger rotors.
"""
from __future__ import annotations

import logging
from typing import List, Union

import numpy as np

from ..config import RegionConfig
from .catalog import MANUFACTURERS, TURBINE_MODELS, WindFarmCluster, clusters_for_region
from .schema import Turbine

LOGGER = logging.getLogger("windscout.synthesize")

CAPACITY_RANGE_MW = (1.5, 6.0)
FIRST_YEAR = 2005
LAST_YEAR = 2025
# Longitude degrees are shorter than latitude degrees at these latitudes
LAT_SQUASH = 0.7

SeedLike = Union[None, int, np.random.Generator]


def _js_round(values: np.ndarray) -> np.ndarray:
    return np.floor(values + 0.5)


def _synthesize_cluster(cluster: WindFarmCluster, rng: np.random.Generator) -> List[Turbine]:
    n = cluster.count
    if n <= 0:
        return []

    angle = rng.random(n) * 2.0 * np.pi
    distance = np.abs(rng.normal(0.0, cluster.radius / 2.0, n))
    lon = cluster.center[0] + distance * np.cos(angle)
    lat = cluster.center[1] + distance * np.sin(angle) * LAT_SQUASH

    maker_idx = rng.integers(0, len(MANUFACTURERS), n)
    model_counts = np.array([len(TURBINE_MODELS[MANUFACTURERS[i]]) for i in maker_idx])
    model_idx = np.floor(rng.random(n) * model_counts).astype(int)

    capacity = _js_round(rng.uniform(*CAPACITY_RANGE_MW, n) * 10.0) / 10.0
    # product of two uniforms skews toward FIRST_YEAR
    year = np.minimum(FIRST_YEAR + np.floor(rng.random(n) * rng.random(n) * 20).astype(int), LAST_YEAR)
    hub_height = _js_round(60.0 + capacity * 15.0 + rng.uniform(-10.0, 10.0, n))
    rotor_dia = _js_round(70.0 + capacity * 20.0 + rng.uniform(-10.0, 10.0, n))

    turbines: List[Turbine] = []
    for i in range(n):
        maker = MANUFACTURERS[maker_idx[i]]
        turbines.append(
            Turbine(
                lon=float(lon[i]),
                lat=float(lat[i]),
                capacity_mw=float(capacity[i]),
                manufacturer=maker,
                model=TURBINE_MODELS[maker][model_idx[i]],
                project=cluster.name,
                state=cluster.name,
                year=int(year[i]),
                hub_height=float(hub_height[i]),
                rotor_dia=float(rotor_dia[i]),
            )
        )
    return turbines


def synthesize_turbines(region: RegionConfig, seed: SeedLike = None) -> List[Turbine]:
    """
    Generate a synthetic turbine fleet for ``region``.

    Regions without a cluster list use the US clusters. Passing ``seed``
    makes the output reproducible.
    """
    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
    turbines: List[Turbine] = []
    for cluster in clusters_for_region(region.id):
        turbines.extend(_synthesize_cluster(cluster, rng))
    LOGGER.info("Synthesized %d turbines for %s", len(turbines), region.name)
    return turbines
