"""
Turbine Record Schema

Defines the record every loader produces and the aggregation core consumes.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Turbine:
    lon: float
    lat: float
    capacity_mw: float
    manufacturer: str = "Unknown"
    model: str = "Unknown"
    project: str = "Wind Farm"
    state: str = "Unknown"
    year: Optional[int] = None
    hub_height: Optional[float] = None
    rotor_dia: Optional[float] = None

    def properties(self) -> Dict[str, Any]:
        """Descriptive attributes, i.e. everything except the coordinates."""
        props = asdict(self)
        props.pop("lon")
        props.pop("lat")
        return props
