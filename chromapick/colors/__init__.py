"""
Chromapick Color Classes
========================

Immutable value objects for a single color, used to hand snapshots of the
editor state to callers without exposing the mutable model.

Features
--------
- Immutable instances (frozen after initialization)
- Channel types enforced (``int`` for r/g/b, ``float`` otherwise)
- Values clamped to their valid ranges on construction
- Equality and hashing by value

Usage
-----
>>> from chromapick.colors import ColorRGBA, ColorHSLA
>>>
>>> red = ColorRGBA.from_hex("#FF000080")
>>> red.value
(255, 0, 0, 0.5019607843137255)
>>> red.to_css()
'rgba(255, 0, 0, 0.5019607843137255)'
>>> ColorHSLA.from_rgba(red).value
(0.0, 100.0, 50.0, 0.5019607843137255)

Color Classes
-------------
    - ColorRGBA: r, g, b in 0-255, alpha in 0-1
    - ColorHSLA: hue in 0-360, saturation and lightness in 0-100, alpha in 0-1
"""

from .color_base import ColorBase
from .rgba import ColorRGBA, RGBA
from .hsla import ColorHSLA, HSLA

__all__ = ['ColorBase', 'ColorRGBA', 'ColorHSLA', 'RGBA', 'HSLA']
