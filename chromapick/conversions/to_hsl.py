import numpy as np
from numpy import ndarray as NDArray

from .numbers import round_half_up

## RGB to HSL conversions

def _hue_turns(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    # Red is tested first, then green; the first channel equal to max wins
    if max_c == r:
        h = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return h / 6

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL without rounding.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        return 0.0, 0.0, lightness  # achromatic

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)
    return _hue_turns(r, g, b, max_c, delta) * 360, saturation, lightness

def rgb_to_hue(r: int, g: int, b: int) -> int:
    """Hue in whole degrees of an 8-bit RGB color; 0 for grays."""
    r, g, b = r / 255, g / 255, b / 255
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    if max_c == min_c:
        return 0
    return round_half_up(_hue_turns(r, g, b, max_c, max_c - min_c) * 360)

def rgb_to_saturation(r: int, g: int, b: int) -> int:
    """Saturation in whole percent of an 8-bit RGB color; 0 for grays."""
    _, saturation, _ = unit_rgb_to_hsl(r / 255, g / 255, b / 255)
    return round_half_up(saturation * 100)

def rgb_to_lightness(r: int, g: int, b: int) -> int:
    """Lightness in whole percent of an 8-bit RGB color."""
    r, g, b = r / 255, g / 255, b / 255
    return round_half_up((max(r, g, b) + min(r, g, b)) / 2 * 100)

def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """
    Convert 8-bit RGB to HSL in whole degrees and percent.

    Args:
        r, g, b: Channels in [0, 255]

    Returns:
        Tuple[int, int, int]: (hue [0, 360], saturation [0, 100], lightness [0, 100])
    """
    return rgb_to_hue(r, g, b), rgb_to_saturation(r, g, b), rgb_to_lightness(r, g, b)

def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL without rounding.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2.0

    chromatic = delta > 0
    # Grays never reach the divisions below
    safe_delta = np.where(chromatic, delta, 1.0)
    denominator = np.where(lightness > 0.5, 2 - max_c - min_c, max_c + min_c)
    safe_denominator = np.where(chromatic, denominator, 1.0)
    saturation = np.where(chromatic, delta / safe_denominator, 0.0)

    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue = np.zeros(out_shape)
    hue = np.where(mask_r, (g - b) / safe_delta + np.where(g < b, 6.0, 0.0), hue)
    hue = np.where(mask_g, (b - r) / safe_delta + 2, hue)
    hue = np.where(mask_b, (r - g) / safe_delta + 4, hue)

    return np.stack([hue / 6 * 360, saturation, lightness], axis=-1)
