"""
Chromapick - HSL Color Picker Model
===================================

The state and conversion logic behind an interactive color picker: hue,
saturation, lightness and opacity in, RGB, ``#RRGGBBAA`` and CSS ``rgba()``
out, and a typed hex string back to HSL.

Key Features
------------
- HSL ↔ RGB ↔ Hex conversions with alpha, rounded half up
- Vectorized numpy conversions for slider tracks
- Mutable ``ColorModel`` with change listeners for two-way UI sync
- Immutable ``ColorRGBA`` / ``ColorHSLA`` snapshots
- ``EditorSession`` describing what a host UI renders and emits

Quick Start
-----------
>>> from chromapick import ColorModel
>>>
>>> model = ColorModel()
>>> model.set_opacity(0.5)
>>> model.to_hex()
'#FF000080'
>>> model.set_from_hex("#00FF00")
>>> (model.hue, model.saturation, model.lightness, model.opacity)
(120.0, 100.0, 50.0, 1.0)

Modules
-------
- model: ColorModel, the canonical editing state
- session: EditorSession, slider specs and save flow for host UIs
- colors: Immutable color value classes
- conversions: Color space and string conversion functions
- config: ModelConfig defaults and policy flags
- errors: Exception types
"""

from .model import ColorModel
from .session import EditorSession, SessionSnapshot, SliderSpec, SLIDERS
from .colors import ColorBase, ColorRGBA, ColorHSLA
from .config import ModelConfig, DEFAULT_CONFIG
from .errors import ChromapickError, InvalidHexFormat, OutOfRange, SessionClosed
from .logging_config import setup_logging

from .conversions import (
    hsl_to_rgb, rgb_to_hsl,
    parse_hex, format_hex, format_css_rgba, is_valid_hex,
)

__version__ = "1.0.0"

__all__ = [
    # Model and session
    "ColorModel",
    "EditorSession", "SessionSnapshot", "SliderSpec", "SLIDERS",

    # Color classes
    "ColorBase", "ColorRGBA", "ColorHSLA",

    # Configuration
    "ModelConfig", "DEFAULT_CONFIG",
    "setup_logging",

    # Errors
    "ChromapickError", "InvalidHexFormat", "OutOfRange", "SessionClosed",

    # Conversions
    "hsl_to_rgb", "rgb_to_hsl",
    "parse_hex", "format_hex", "format_css_rgba", "is_valid_hex",

    # Version
    "__version__",
]
