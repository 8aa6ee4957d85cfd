import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp


def round_half_up(value: float) -> int:
    """Round to the nearest integer, sending halves up (``76.5 -> 77``)."""
    return int(math.floor(value + 0.5))


def np_round_half_up(values: NDArray) -> NDArray:
    """Vectorized ``round_half_up``; returns an integer array."""
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(int)


def unit_to_byte(value: float) -> int:
    """Scale a unit float to an 8-bit channel, clamped to ``[0, 255]``."""
    return int(clamp(round_half_up(value * 255), 0, 255))
