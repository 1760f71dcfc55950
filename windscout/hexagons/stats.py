"""
Summary figures: fleet totals and the per-resolution max used to scale
the fill color ramp.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ..config import WIND_COLOR_BREAKS, WIND_COLORS
from ..utils import round_half_up
from .aggregate import HexMap


@dataclass(frozen=True)
class TotalStats:
    count: int
    total_mw: int


def get_total_stats(turbines: Iterable) -> TotalStats:
    """
    Count turbines and sum their capacity, rounded to whole MW.

    Cell totals are rounded to 0.1 MW instead; the two granularities differ
    on purpose (display conventions of the map client).
    """
    count = 0
    total = 0.0
    for turbine in turbines:
        count += 1
        total += turbine.capacity_mw
    return TotalStats(count=count, total_mw=int(round_half_up(total)))


def get_max_mw(hex_map: HexMap) -> float:
    max_mw = 0
    for data in hex_map.values():
        if data.total_mw > max_mw:
            max_mw = data.total_mw
    return max_mw


def color_ramp_stops(max_mw: float) -> List[Tuple[float, str]]:
    """(threshold MW, color) pairs for a linear fill interpolation."""
    return [(max_mw * brk, color) for brk, color in zip(WIND_COLOR_BREAKS, WIND_COLORS)]
