"""
Static catalogs used to synthesize turbines: wind-farm clusters per region,
manufacturers and their model lines.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class WindFarmCluster:
    name: str
    center: Tuple[float, float]  # (lon, lat)
    radius: float  # degrees
    count: int


def _clusters(*rows) -> Tuple[WindFarmCluster, ...]:
    return tuple(WindFarmCluster(name, (lon, lat), radius, count) for name, lon, lat, radius, count in rows)


# Approximate locations of real wind-farm regions
WIND_FARM_CLUSTERS: Mapping[str, Tuple[WindFarmCluster, ...]] = MappingProxyType({
    "us": _clusters(
        ("Texas Panhandle", -101.5, 35.2, 1.5, 3000),
        ("Oklahoma", -97.5, 35.5, 1.0, 2500),
        ("Kansas", -99.5, 38.5, 1.2, 2000),
        ("Nebraska", -97.0, 41.5, 0.8, 1500),
        ("Iowa", -94.5, 42.5, 1.0, 3500),
        ("Illinois", -89.5, 41.0, 0.6, 1200),
        ("Indiana", -86.5, 41.0, 0.5, 800),
        ("California Tehachapi", -120.5, 35.0, 0.8, 1500),
        ("California Altamont", -121.5, 38.0, 0.6, 1000),
        ("Wyoming", -104.5, 41.0, 1.0, 2000),
        ("Colorado", -104.5, 39.5, 0.8, 1800),
        ("New Mexico", -106.5, 34.5, 0.7, 1200),
        ("Washington", -119.5, 46.0, 0.8, 1500),
        ("Oregon", -120.5, 45.0, 0.6, 1000),
        ("North Dakota", -96.5, 46.5, 0.8, 1200),
        ("South Dakota", -100.0, 44.5, 0.6, 800),
        ("Minnesota", -94.0, 45.0, 0.7, 1500),
    ),
    "norway": _clusters(
        ("Rogaland", 9.0, 59.0, 0.6, 400),
        ("Møre og Romsdal", 6.5, 62.0, 0.5, 350),
        ("Trøndelag", 10.5, 63.5, 0.7, 500),
        ("Nordland", 12.0, 66.0, 0.5, 300),
        ("Troms og Finnmark", 18.5, 69.5, 0.6, 250),
    ),
    "germany": _clusters(
        ("Schleswig-Holstein", 9.0, 54.5, 0.8, 2500),
        ("Hamburg Region", 9.5, 53.5, 0.5, 1200),
        ("Lower Saxony Coast", 7.5, 53.5, 0.7, 2000),
        ("Lower Saxony Inland", 8.5, 52.5, 0.6, 1500),
        ("Brandenburg", 12.0, 52.5, 0.8, 2200),
        ("Mecklenburg-Vorpommern", 12.5, 54.0, 0.6, 1800),
        ("Saxony-Anhalt", 11.5, 51.5, 0.5, 1200),
        ("North Rhine-Westphalia", 9.0, 51.5, 0.4, 800),
        ("Ruhr Area", 7.0, 51.0, 0.3, 600),
        ("Bavaria North", 10.5, 49.5, 0.4, 700),
        ("Hesse", 8.5, 50.0, 0.3, 500),
        ("Rhineland-Palatinate", 7.0, 49.5, 0.4, 600),
    ),
    "uk": _clusters(
        ("Scottish Highlands", -4.5, 57.5, 0.8, 1500),
        ("Central Scotland", -3.5, 56.0, 0.5, 1200),
        ("Southern Scotland", -4.0, 55.5, 0.4, 800),
        ("Cumbria", -2.5, 54.5, 0.5, 900),
        ("Lancashire", -2.0, 53.5, 0.4, 700),
        ("Yorkshire", -1.5, 54.5, 0.5, 1000),
        ("Lincolnshire", 0.5, 53.0, 0.4, 600),
        ("East Anglia", 1.5, 52.5, 0.3, 500),
        ("Wales", -4.0, 52.5, 0.5, 800),
        ("Cornwall", -5.0, 50.5, 0.3, 400),
        # Offshore
        ("Offshore East", 1.5, 53.5, 0.6, 800),
        ("Irish Sea Offshore", -3.5, 53.5, 0.4, 500),
    ),
    "eu": _clusters(
        ("North Germany", 9.0, 54.0, 1.0, 3000),
        ("East Germany", 12.0, 52.5, 0.8, 2000),
        ("Castile and León", -3.5, 42.0, 1.0, 2500),
        ("Galicia", -8.0, 43.0, 0.6, 1200),
        ("Navarra", -1.5, 42.5, 0.5, 1000),
        ("Andalusia", -2.5, 37.5, 0.5, 800),
        ("Northern France", 3.0, 49.5, 0.8, 1500),
        ("Brittany", -1.5, 48.0, 0.5, 800),
        ("Massif Central", 2.5, 44.5, 0.4, 600),
        ("Jutland", 9.5, 56.0, 0.6, 1500),
        ("Netherlands", 5.5, 52.5, 0.4, 800),
        ("Poland North", 17.5, 54.0, 0.6, 1000),
        ("Poland Central", 19.0, 52.0, 0.5, 700),
        ("Southern Sweden", 14.0, 56.5, 0.5, 800),
        ("Northern Sweden", 18.0, 63.0, 0.8, 1200),
        ("Southern Italy", 15.5, 41.0, 0.5, 700),
        ("Northern Italy", 9.0, 44.5, 0.3, 400),
        ("Portugal", -8.0, 40.0, 0.5, 900),
        ("Austria East", 16.0, 48.0, 0.4, 500),
        ("Southwest Norway", 9.0, 59.0, 0.6, 400),
        ("Central Norway", 10.5, 63.5, 0.8, 600),
        ("Northern Norway", 15.0, 68.0, 0.5, 300),
        ("Ireland", -8.5, 53.5, 0.6, 800),
        ("Greece", 23.0, 39.0, 0.5, 500),
        ("Romania", 27.5, 44.5, 0.5, 600),
    ),
})

# Regions without their own cluster list borrow this one
DEFAULT_CLUSTER_REGION = "us"

MANUFACTURERS: Tuple[str, ...] = (
    "Vestas",
    "Siemens Gamesa",
    "GE Renewable Energy",
    "Enercon",
    "Nordex",
    "Goldwind",
    "Envision",
    "Mingyang",
    "Suzlon",
)

TURBINE_MODELS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Vestas": ("V90-2.0", "V110-2.0", "V126-3.45", "V150-4.2", "V162-6.0"),
    "Siemens Gamesa": ("SG 3.4-132", "SG 4.5-145", "SG 5.0-145", "SG 6.0-170", "SG 8.0-167"),
    "GE Renewable Energy": ("GE 1.5-77", "GE 2.5-120", "GE 3.2-130", "GE 5.3-158", "GE 6.0-164"),
    "Enercon": ("E-82 E2", "E-101 EP2", "E-115 EP3", "E-138 EP3", "E-160 EP5"),
    "Nordex": ("N90/2500", "N100/3300", "N117/3000", "N149/4.5", "N163/5.X"),
    "Goldwind": ("GW121/2500", "GW140/3.0S", "GW155/4.5S", "GW175/6.0"),
    "Envision": ("EN-121/2.5", "EN-136/3.6", "EN-156/4.5"),
    "Mingyang": ("MY2.0-121", "MY3.0-135", "MY5.0-170"),
    "Suzlon": ("S97-2.1", "S111-2.1", "S120-2.1", "S128-2.6"),
})


def clusters_for_region(region_id: str) -> Tuple[WindFarmCluster, ...]:
    return WIND_FARM_CLUSTERS.get(region_id) or WIND_FARM_CLUSTERS[DEFAULT_CLUSTER_REGION]
