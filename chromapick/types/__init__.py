from .color_types import (
    Scalar, RGBTuple, RGBATuple,
    ColorSpace, Channel, CHANNELS, CHANNEL_RANGES,
)

__all__ = [
    "Scalar", "RGBTuple", "RGBATuple",
    "ColorSpace", "Channel", "CHANNELS", "CHANNEL_RANGES",
]
