"""
windscout.turbines - Turbine records and the loaders that produce them.

Real data comes from Open Power System Data (OPSD) CSVs or, for Norway, the
NVE ArcGIS service. Regions without a source, or whose fetch fails, fall back
to synthesized turbines scattered around known wind-farm clusters.
"""
from .schema import Turbine
from .loader import LoadResult, load_turbines

__all__ = ["Turbine", "LoadResult", "load_turbines"]
