"""
Turbine loading with fallback.

Real data is preferred when requested. Any fetch or parse failure, a region
without a source, or an empty parse result falls back to synthesized data;
the failure is logged and never surfaced to the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import requests

from ..config import (
    OPSD_DATA_URLS,
    SOURCE_NVE,
    SOURCE_OPSD,
    SOURCE_SYNTHETIC,
    RegionConfig,
)
from .ingest_nve import fetch_nve_turbines
from .ingest_opsd import fetch_opsd_turbines
from .schema import Turbine
from .synthesize import synthesize_turbines

LOGGER = logging.getLogger("windscout.loader")

FETCH_ERRORS = (RuntimeError, requests.RequestException, ValueError, KeyError)


@dataclass(frozen=True)
class LoadResult:
    turbines: List[Turbine]
    source: str
    fell_back: bool = False


def _synthetic(region: RegionConfig, seed: Optional[int], fell_back: bool) -> LoadResult:
    return LoadResult(synthesize_turbines(region, seed=seed), SOURCE_SYNTHETIC, fell_back)


def load_turbines(
    region: RegionConfig,
    use_real_data: bool = True,
    seed: Optional[int] = None,
) -> LoadResult:
    """
    Load turbines for ``region``.

    Args:
        region: Region to load
        use_real_data: Try OPSD/NVE first; False goes straight to synthesis
        seed: Seed for synthesis and NVE jitter

    Returns:
        LoadResult with the turbines, a human-readable source label and
        whether a real-data attempt fell back to synthesis
    """
    if not use_real_data:
        return _synthetic(region, seed, fell_back=False)

    if region.id == "norway":
        fetch, source = (lambda: fetch_nve_turbines(seed=seed)), SOURCE_NVE
    elif region.id in OPSD_DATA_URLS:
        fetch, source = (lambda: fetch_opsd_turbines(region)), SOURCE_OPSD
    else:
        LOGGER.info("No real data source for %s, using synthetic data", region.name)
        return _synthetic(region, seed, fell_back=True)

    try:
        turbines = fetch()
    except FETCH_ERRORS as exc:
        LOGGER.warning("Failed to fetch data for %s: %s. Using synthetic data", region.name, exc)
        return _synthetic(region, seed, fell_back=True)

    if not turbines:
        LOGGER.warning("No wind turbines found in %s data. Using synthetic data", region.name)
        return _synthetic(region, seed, fell_back=True)

    return LoadResult(turbines, source)
