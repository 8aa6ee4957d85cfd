from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..conversions.to_rgb import hsl_to_rgb
from ..conversions.to_hsl import rgb_to_hsl
from .color_base import ColorBase
from .rgba import ColorRGBA


class ColorHSLA(ColorBase):
    """Hue in degrees, saturation and lightness in percent, fractional alpha."""

    __slots__ = ()

    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = "hsla"
    maxima:        ClassVar[Tuple[float, float, float, float]] = (360.0, 100.0, 100.0, 1.0)
    channel_types: ClassVar[Tuple[type, ...]] = (float, float, float, float)
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "lightness", "opacity")

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def lightness(self) -> float:
        return self._value[2]

    @classmethod
    def from_rgba(cls, color: ColorRGBA) -> ColorHSLA:
        """Whole-degree/percent HSL of an 8-bit color; alpha carried over."""
        return cls((*rgb_to_hsl(color.r, color.g, color.b), color.alpha))

    def to_rgba(self) -> ColorRGBA:
        return ColorRGBA((*hsl_to_rgb(self.hue, self.saturation, self.lightness), self.alpha))


HSLA = ColorHSLA
