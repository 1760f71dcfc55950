"""
Bin turbines into H3 cells.

One pass per resolution: each turbine's capacity is added to the aggregate
of the cell containing it. Aggregates are created on first member, so none
ever has a zero count. Capacity totals are rounded to one decimal once,
after the pass.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Sequence

import pandas as pd

from ..config import H3_RESOLUTIONS
from ..utils import round_half_up
from .h3_utils import cell_to_int, latlng_to_cell

HexMap = Dict[str, "CellAggregate"]


@dataclass
class CellAggregate:
    total_mw: float
    turbine_count: int = 1

    def add(self, capacity_mw: float) -> None:
        self.total_mw += capacity_mw
        self.turbine_count += 1


def generate_h3_indices(turbines: Iterable, resolution: int) -> HexMap:
    """
    Aggregate turbines into H3 cells at a single resolution.

    ``turbines`` may be any iterable of objects with ``lat``, ``lon`` and
    ``capacity_mw`` attributes; coordinates are assumed valid.

    Returns:
        Fresh dict of cell id -> CellAggregate, with total_mw rounded to 0.1
    """
    hex_map: HexMap = {}
    for turbine in turbines:
        cell = latlng_to_cell(turbine.lat, turbine.lon, resolution)
        existing = hex_map.get(cell)
        if existing is not None:
            existing.add(turbine.capacity_mw)
        else:
            hex_map[cell] = CellAggregate(total_mw=turbine.capacity_mw)

    for aggregate in hex_map.values():
        aggregate.total_mw = round_half_up(aggregate.total_mw, 1)

    return hex_map


def aggregate_resolutions(
    turbines: Iterable,
    resolutions: Sequence[int] = H3_RESOLUTIONS,
) -> Dict[int, HexMap]:
    """Run generate_h3_indices independently at each resolution."""
    # Materialize once so one-shot iterators see every turbine at each resolution
    records = list(turbines)
    return {res: generate_h3_indices(records, res) for res in resolutions}


def aggregates_to_frame(hex_maps: Mapping[int, HexMap]) -> pd.DataFrame:
    """
    Flatten per-resolution aggregates into the tabular export schema:
    h3_id (uint64), res (int32), total_mw (float64), turbine_count (int64).
    """
    records = [
        (cell_to_int(cell), res, agg.total_mw, agg.turbine_count)
        for res, hex_map in hex_maps.items()
        for cell, agg in hex_map.items()
    ]
    df = pd.DataFrame(records, columns=["h3_id", "res", "total_mw", "turbine_count"])
    df["h3_id"] = df["h3_id"].astype("uint64", copy=False)
    df["res"] = df["res"].astype("int32", copy=False)
    df["total_mw"] = df["total_mw"].astype("float64", copy=False)
    df["turbine_count"] = df["turbine_count"].astype("int64", copy=False)
    return df
