"""
OPSD Ingest

Fetches an Open Power System Data renewable power plant register and keeps
the wind installations with usable coordinates and capacity.
"""
from __future__ import annotations

import io
import logging
from typing import List, Optional

import numpy as np
import pandas as pd

from ..config import MIN_CAPACITY_MW, MIN_PAYLOAD_CHARS, OPSD_DATA_URLS, RegionConfig
from ..utils import round_half_up
from .fetch import download
from .schema import Turbine

LOGGER = logging.getLogger("windscout.ingest_opsd")

OPSD_COLUMNS = [
    "lon",
    "lat",
    "electrical_capacity",
    "technology",
    "energy_source_level_2",
    "manufacturer",
    "model",
    "site_name",
    "commissioning_date",
    "federal_state",
    "municipality",
    "hub_height",
    "rotor_diameter",
    "country",
]

WIND_TECHNOLOGY_PATTERN = "wind|onshore|offshore"


def _coalesce(*values: str) -> Optional[str]:
    for value in values:
        if value:
            stripped = str(value).strip()
            if stripped:
                return stripped
    return None


def _optional_float(value: float) -> Optional[float]:
    return float(value) if np.isfinite(value) else None


def _wind_mask(df: pd.DataFrame) -> pd.Series:
    source = df["energy_source_level_2"].str.lower().str.contains("wind", regex=False)
    technology = df["technology"].str.lower().str.contains(WIND_TECHNOLOGY_PATTERN, regex=True)
    return source | technology


def parse_opsd_csv(csv_text: str, filter_wind: bool = True) -> List[Turbine]:
    """
    Parse OPSD CSV text into turbines.

    Rows are dropped when they are not wind (unless ``filter_wind`` is
    False), when lon/lat are missing, zero or non-finite, or when capacity
    is below MIN_CAPACITY_MW. Missing descriptive fields get defaults.
    """
    df = pd.read_csv(
        io.StringIO(csv_text),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        low_memory=False,
    )
    df = df.reindex(columns=OPSD_COLUMNS, fill_value="").astype(str)

    if filter_wind:
        df = df[_wind_mask(df)]

    lon = pd.to_numeric(df["lon"], errors="coerce")
    lat = pd.to_numeric(df["lat"], errors="coerce")
    capacity = pd.to_numeric(df["electrical_capacity"].replace("", "0"), errors="coerce")
    valid = (
        np.isfinite(lon) & np.isfinite(lat)
        & (lon != 0) & (lat != 0)
        & np.isfinite(capacity) & (capacity >= MIN_CAPACITY_MW)
    )
    df = df[valid]
    lon, lat, capacity = lon[valid], lat[valid], capacity[valid]

    year = pd.to_numeric(df["commissioning_date"].str.slice(0, 4), errors="coerce")
    hub_height = pd.to_numeric(df["hub_height"], errors="coerce")
    rotor_dia = pd.to_numeric(df["rotor_diameter"], errors="coerce")

    turbines: List[Turbine] = []
    for i, row in enumerate(df.itertuples(index=False)):
        row_year = year.iloc[i]
        turbines.append(
            Turbine(
                lon=float(lon.iloc[i]),
                lat=float(lat.iloc[i]),
                capacity_mw=round_half_up(float(capacity.iloc[i]), 2),
                manufacturer=_coalesce(row.manufacturer) or "Unknown",
                model=_coalesce(row.model) or "Unknown",
                project=_coalesce(row.site_name, row.municipality) or "Wind Farm",
                state=_coalesce(row.federal_state, row.country, row.municipality) or "Unknown",
                year=int(row_year) if np.isfinite(row_year) else None,
                hub_height=_optional_float(hub_height.iloc[i]),
                rotor_dia=_optional_float(rotor_dia.iloc[i]),
            )
        )
    return turbines


def fetch_opsd_turbines(region: RegionConfig) -> List[Turbine]:
    """
    Download and parse the OPSD register for ``region``.

    Raises:
        ValueError: if the region has no OPSD register
        RuntimeError: if the download fails or the payload is implausibly short
    """
    url = OPSD_DATA_URLS.get(region.id)
    if not url:
        raise ValueError(f"No OPSD data source for region '{region.id}'")

    LOGGER.info("Fetching real wind turbine data for %s", region.name)
    csv_text = download(url).text
    if not csv_text or len(csv_text) < MIN_PAYLOAD_CHARS:
        raise RuntimeError(f"Empty or truncated OPSD payload from {url}")

    LOGGER.info("Parsing CSV data (%d chars)", len(csv_text))
    turbines = parse_opsd_csv(csv_text)
    if not turbines:
        LOGGER.warning("Parsed 0 turbines. First 500 chars of CSV: %s", csv_text[:500])
    else:
        LOGGER.info("Loaded %d wind turbines", len(turbines))
    return turbines
