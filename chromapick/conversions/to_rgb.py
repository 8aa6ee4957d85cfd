import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBTuple
from .numbers import round_half_up

## HSL to RGB conversions

def hue_to_channel(p: float, q: float, t: float) -> float:
    """
    Interpolate one RGB channel from the HSL intermediates ``p`` and ``q``.

    Args:
        p: Lower intermediate, ``2 * l - q``
        q: Upper intermediate
        t: Hue offset for the channel in turns, wrapped once into [0, 1]

    Returns:
        float: Channel value in [0, 1]
    """
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees [0, 360]
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if s == 0:
        return l, l, l  # achromatic

    turns = h / 360
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    r = hue_to_channel(p, q, turns + 1 / 3)
    g = hue_to_channel(p, q, turns)
    b = hue_to_channel(p, q, turns - 1 / 3)
    return r, g, b

def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGBTuple:
    """
    Convert HSL in degrees/percent to 8-bit RGB.

    Args:
        hue: Hue in degrees [0, 360]
        saturation: Saturation in percent [0, 100]
        lightness: Lightness in percent [0, 100]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255], rounded half up
    """
    r, g, b = hsl_to_unit_rgb(hue, saturation / 100, lightness / 100)
    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)

def _np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )

def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees [0, 360]
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    turns = h / 360
    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    r = _np_hue_to_channel(p, q, turns + 1 / 3)
    g = _np_hue_to_channel(p, q, turns)
    b = _np_hue_to_channel(p, q, turns - 1 / 3)

    achromatic = s == 0
    r = np.where(achromatic, l, r)
    g = np.where(achromatic, l, g)
    b = np.where(achromatic, l, b)

    return np.stack([r, g, b], axis=-1)
