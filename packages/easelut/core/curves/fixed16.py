"""16-bit fixed-point quantization.

Values in [0, 1] map to integers in [0, 65535]. Conversion rounds to nearest
and saturates, and interpolation between quantized points is done with exact
integer arithmetic so results are reproducible on every platform.
"""

from __future__ import annotations

import numpy as np

from easelut.core.curves.models import MAX_FIXED16


def to_fixed16(v: float) -> int:
    """Quantize a float in [0, 1] to [0, 65535].

    Rounds half up and saturates: negative input and NaN give 0, anything at
    or above 1 gives 65535.

    Example:
        >>> to_fixed16(0.5)
        32768
        >>> to_fixed16(-0.1), to_fixed16(1.2)
        (0, 65535)
    """
    scaled = v * MAX_FIXED16
    if not scaled > 0.0:
        return 0
    if scaled >= MAX_FIXED16:
        return MAX_FIXED16
    return int(scaled + 0.5)


def to_fixed16_array(values: np.ndarray) -> np.ndarray:
    """Vectorized to_fixed16 returning an int64 array."""
    scaled = np.asarray(values, dtype=np.float64) * MAX_FIXED16
    with np.errstate(invalid="ignore"):
        rounded = np.where(scaled > 0.0, np.floor(scaled + 0.5), 0.0)
    return np.clip(rounded, 0, MAX_FIXED16).astype(np.int64)


def from_fixed16(v: int) -> float:
    """Approximate float for a fixed-point value. Diagnostics only."""
    return v / float(MAX_FIXED16)


def lerp_fixed16(x: int, x0: int, y0: int, x1: int, y1: int) -> int:
    """Interpolate y at x between (x0, y0) and (x1, y1).

    Weights are the distances of x to each endpoint; the weighted sum is
    divided once and truncated, so the result at x == x0 is exactly y0.
    Requires x0 < x1.
    """
    return (y0 * (x1 - x) + y1 * (x - x0)) // (x1 - x0)
