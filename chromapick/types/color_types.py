from __future__ import annotations
from typing import Dict, Literal, Tuple

Scalar = int | float
RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, float]
ColorSpace = Literal["rgba", "hsla"]
Channel = Literal["hue", "saturation", "lightness", "opacity"]

CHANNELS: Tuple[Channel, ...] = ("hue", "saturation", "lightness", "opacity")

# Inclusive domain of every editable channel
CHANNEL_RANGES: Dict[str, Tuple[float, float]] = {
    "hue": (0.0, 360.0),
    "saturation": (0.0, 100.0),
    "lightness": (0.0, 100.0),
    "opacity": (0.0, 1.0),
}
