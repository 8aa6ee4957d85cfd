from __future__ import annotations
from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..conversions.hex import parse_hex, format_hex, format_css_rgba
from .color_base import ColorBase


class ColorRGBA(ColorBase):
    """8-bit red, green and blue with a fractional alpha."""

    __slots__ = ()

    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = "rgba"
    maxima:        ClassVar[Tuple[int, int, int, float]] = (255, 255, 255, 1.0)
    channel_types: ClassVar[Tuple[type, ...]] = (int, int, int, float)
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @classmethod
    def from_hex(cls, text: str) -> ColorRGBA:
        """Build from ``#RRGGBB`` or ``#RRGGBBAA``; raises ``InvalidHexFormat``."""
        return cls(parse_hex(text))

    def to_hex(self, uppercase: bool = True) -> str:
        return format_hex(*self._value, uppercase=uppercase)

    def to_css(self) -> str:
        return format_css_rgba(*self._value)


RGBA = ColorRGBA
