"""
Static configuration: regions, H3 resolutions, data sources and map styling.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

H3_CRS = "EPSG:4326"

# H3 resolutions, coarse to fine
H3_RESOLUTIONS: Tuple[int, ...] = (3, 4, 5, 6)
# Finest resolution h3 supports
H3_MAX_RESOLUTION = 15


@dataclass(frozen=True)
class RegionConfig:
    id: str
    name: str
    center: Tuple[float, float]  # (lon, lat)
    zoom: float
    has_real_data: bool


REGIONS: Tuple[RegionConfig, ...] = (
    RegionConfig("germany", "Germany", (10.5, 51.2), 5, True),
    RegionConfig("uk", "United Kingdom", (-3.5, 54.5), 5, True),
    RegionConfig("denmark", "Denmark", (9.5, 56.0), 6, True),
    RegionConfig("france", "France", (2.5, 46.5), 5, True),
    RegionConfig("sweden", "Sweden", (16.0, 62.0), 4, True),
    RegionConfig("norway", "Norway", (15.0, 65.0), 4, True),
    RegionConfig("eu", "European Union", (10.0, 50.0), 4, True),
    # USGS data ships as a zip; US always uses synthetic data
    RegionConfig("us", "United States", (-98.5, 39.5), 4, False),
)

DEFAULT_REGION = "germany"


def get_region(region_id: str) -> RegionConfig:
    """Look up a region by id (case-insensitive)."""
    key = str(region_id).strip().lower()
    for region in REGIONS:
        if region.id == key:
            return region
    known = ", ".join(r.id for r in REGIONS)
    raise ValueError(f"Unknown region '{region_id}'. Known regions: {known}")


@dataclass(frozen=True)
class ResolutionLayer:
    """Zoom window in which a resolution's fill layer is visible."""
    res: int
    min_zoom: float
    max_zoom: float
    fade_in: Tuple[float, float]
    fade_out: Tuple[float, float]


RESOLUTION_LAYERS: Tuple[ResolutionLayer, ...] = (
    ResolutionLayer(3, 0.0, 6.0, (0.0, 4.5), (4.5, 5.5)),
    ResolutionLayer(4, 4.5, 8.0, (4.5, 5.5), (6.5, 7.5)),
    ResolutionLayer(5, 6.5, 10.0, (6.5, 7.5), (8.5, 9.5)),
    ResolutionLayer(6, 8.5, 12.0, (8.5, 9.5), (10.5, 11.5)),
)

# Sequential fill ramp, light to dark
WIND_COLORS: Tuple[str, ...] = (
    "#e0f3db",
    "#a8ddb5",
    "#4eb3d3",
    "#2b8cbe",
    "#0868ac",
    "#084081",
)
# Fraction of the per-resolution max MW at which each color applies
WIND_COLOR_BREAKS: Tuple[float, ...] = (0.0, 0.05, 0.15, 0.35, 0.6, 1.0)

# Open Power System Data (OPSD) renewable power plant registers
OPSD_BASE_URL = os.environ.get(
    "WS_OPSD_BASE_URL",
    "https://data.open-power-system-data.org/renewable_power_plants/2020-08-25",
)
OPSD_COUNTRY_FILES = {
    "germany": "DE",
    "uk": "UK",
    "eu": "EU",
    "denmark": "DK",
    "france": "FR",
    "sweden": "SE",
    "switzerland": "CH",
    "czech": "CZ",
}
OPSD_DATA_URLS = {
    region_id: f"{OPSD_BASE_URL}/renewable_power_plants_{code}.csv"
    for region_id, code in OPSD_COUNTRY_FILES.items()
}

# NVE (Norwegian Water Resources and Energy Directorate) wind power service
NVE_WIND_API = "https://nve.geodataonline.no/arcgis/rest/services/Vindkraft2/MapServer/0/query"
NVE_SOURCE_CRS = "EPSG:25833"  # UTM zone 33N
# west, east, south, north
NORWAY_BOUNDS = {"west": 4.0, "east": 32.0, "south": 57.0, "north": 72.0}

# Installations below this capacity are dropped at ingest
MIN_CAPACITY_MW = 0.1

# Payloads shorter than this are treated as failed downloads
MIN_PAYLOAD_CHARS = 100

HTTP_TIMEOUT = float(os.environ.get("WS_HTTP_TIMEOUT", "60"))
DOWNLOAD_ATTEMPTS = int(os.environ.get("WS_DOWNLOAD_ATTEMPTS", "3"))
DOWNLOAD_BACKOFF = float(os.environ.get("WS_DOWNLOAD_BACKOFF", "2.0"))

SOURCE_OPSD = "Open Power System Data (OPSD)"
SOURCE_NVE = "NVE Vindkraft"
SOURCE_SYNTHETIC = "Synthesized data"
