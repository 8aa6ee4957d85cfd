"""
Chromapick Color Space Conversions
==================================

Pure functions converting between HSL, RGB and their string forms, in scalar
and vectorized (numpy) variants.

Conversion Functions
--------------------

HSL → RGB:
    hue_to_channel(p, q, t)
        Piecewise channel interpolation shared by every HSL → RGB path
    hsl_to_unit_rgb(h, s, l)
        Degrees and unit floats in, unit floats out
    hsl_to_rgb(hue, saturation, lightness)
        Degrees and percent in, 8-bit integers out
    np_hsl_to_unit_rgb(h, s, l)
        Vectorized hsl_to_unit_rgb

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
        Unit floats in, degrees and unit floats out
    rgb_to_hue(r, g, b), rgb_to_saturation(r, g, b), rgb_to_lightness(r, g, b)
        8-bit integers in, whole degrees / percent out
    rgb_to_hsl(r, g, b)
        All three of the above
    np_unit_rgb_to_hsl(r, g, b)
        Vectorized unit_rgb_to_hsl

Strings:
    parse_hex(text), format_hex(r, g, b, a), is_valid_hex(text)
        ``#RRGGBB`` / ``#RRGGBBAA``
    format_css_rgba(r, g, b, a)
        ``rgba(R, G, B, A)``

Rounding
--------
Every integer result is rounded half up (``round_half_up``), not to even,
so hex strings match those produced by browsers and JavaScript tools.

Examples
--------
>>> from chromapick.conversions import hsl_to_rgb, rgb_to_hsl, format_hex
>>> hsl_to_rgb(120, 100, 50)
(0, 255, 0)
>>> rgb_to_hsl(51, 102, 153)
(210, 50, 40)
>>> format_hex(255, 0, 0, 0.5)
'#FF000080'
"""

from .numbers import round_half_up, np_round_half_up, unit_to_byte

# HSL → RGB conversions
from .to_rgb import (
    hue_to_channel,
    hsl_to_unit_rgb,
    hsl_to_rgb,
    np_hsl_to_unit_rgb,
)

# RGB → HSL conversions
from .to_hsl import (
    unit_rgb_to_hsl,
    rgb_to_hue,
    rgb_to_saturation,
    rgb_to_lightness,
    rgb_to_hsl,
    np_unit_rgb_to_hsl,
)

# String codecs
from .hex import HEX_PATTERN, is_valid_hex, parse_hex, format_hex, format_css_rgba

__all__ = [
    # Rounding
    'round_half_up',
    'np_round_half_up',
    'unit_to_byte',

    # HSL → RGB
    'hue_to_channel',
    'hsl_to_unit_rgb',
    'hsl_to_rgb',
    'np_hsl_to_unit_rgb',

    # RGB → HSL
    'unit_rgb_to_hsl',
    'rgb_to_hue',
    'rgb_to_saturation',
    'rgb_to_lightness',
    'rgb_to_hsl',
    'np_unit_rgb_to_hsl',

    # Strings
    'HEX_PATTERN',
    'is_valid_hex',
    'parse_hex',
    'format_hex',
    'format_css_rgba',
]
