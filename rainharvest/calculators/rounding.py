"""Rounding helpers.

Every rounding point in the harvesting calculations rounds half away from
zero. Python's round() and np.round() round half to even, so they cannot be
used directly.
"""

import numpy as np


def _half_away(value: float) -> float:
    if not np.isfinite(value):
        raise ValueError(f"Cannot round non-finite value {value}")
    magnitude = np.abs(value)
    whole = np.floor(magnitude)
    # magnitude - whole is exact, so halves are detected without float drift
    if magnitude - whole >= 0.5:
        whole += 1
    return float(np.sign(value) * whole)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Examples:
        round_half_away(2.5) == 3
        round_half_away(-2.5) == -3
        round_half_away(2.4999) == 2

    Raises:
        ValueError: If value is infinite or NaN
    """
    return int(_half_away(value))


def round_half_away_to(value: float, decimals: int) -> float:
    """Round to `decimals` places, halves away from zero."""
    scale = 10**decimals
    return _half_away(value * scale) / scale
