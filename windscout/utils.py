"""Small numeric helpers shared by the loaders and the aggregation core."""
from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round with ties going toward +infinity, e.g. 2.5 -> 3 and 0.25 -> 0.3.

    Python's round() uses banker's rounding; display values here follow the
    map client's convention instead (floor(x * 10**n + 0.5) / 10**n).
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor
