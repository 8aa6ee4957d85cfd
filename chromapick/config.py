"""
Model configuration.

``ModelConfig`` holds the starting color of a new ``ColorModel`` and the
policy flags that change how it treats input:

- ``strict``: raise ``OutOfRange`` for out-of-domain channel values instead
  of clamping them.
- ``uppercase_hex``: emit ``#FF00AAFF`` rather than ``#ff00aaff``.
"""
from __future__ import annotations
from dataclasses import dataclass

from .errors import OutOfRange
from .types.color_types import CHANNEL_RANGES


@dataclass(frozen=True)
class ModelConfig:
    hue: float = 0.0
    saturation: float = 100.0
    lightness: float = 50.0
    opacity: float = 1.0
    strict: bool = False
    uppercase_hex: bool = True

    def __post_init__(self) -> None:
        for channel, (minimum, maximum) in CHANNEL_RANGES.items():
            value = getattr(self, channel)
            if not minimum <= value <= maximum:
                raise OutOfRange(channel, value, minimum, maximum)

    @property
    def defaults(self) -> dict[str, float]:
        """Starting channel values keyed by channel name."""
        return {channel: float(getattr(self, channel)) for channel in CHANNEL_RANGES}


DEFAULT_CONFIG = ModelConfig()
