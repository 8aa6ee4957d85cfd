"""
The color model behind an editing session.

``ColorModel`` owns the canonical state (hue, saturation, lightness, opacity)
and derives every other representation from it on demand; nothing derived is
cached, so RGB, hex and CSS output always reflect the current fields.

>>> model = ColorModel()
>>> model.to_rgb()
(255, 0, 0, 1.0)
>>> model.set_hue(120)
>>> model.to_hex()
'#00FF00FF'
>>> model.set_from_hex("#80808080")
>>> model.values
{'hue': 0.0, 'saturation': 0.0, 'lightness': 50.0, 'opacity': 0.5019607843137255}
"""
from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Callable, Dict, List, Optional

import numpy as np
from boundednumbers.functions import clamp

from .colors import ColorHSLA, ColorRGBA
from .config import DEFAULT_CONFIG, ModelConfig
from .conversions import (
    format_css_rgba,
    format_hex,
    hsl_to_rgb,
    np_hsl_to_unit_rgb,
    np_round_half_up,
    parse_hex,
    rgb_to_hsl,
)
from .errors import OutOfRange
from .types.color_types import CHANNEL_RANGES, CHANNELS, Channel, RGBATuple

logger = logging.getLogger(__name__)

ChangeListener = Callable[["ColorModel"], None]


class ColorModel:
    """Mutable HSL + opacity state with conversions to RGB, hex and CSS."""

    def __init__(self, config: Optional[ModelConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        defaults = self.config.defaults
        self._hue = defaults["hue"]
        self._saturation = defaults["saturation"]
        self._lightness = defaults["lightness"]
        self._opacity = defaults["opacity"]
        self._listeners: List[ChangeListener] = []

    def __repr__(self) -> str:
        return (
            f"ColorModel(hue={self._hue!r}, saturation={self._saturation!r}, "
            f"lightness={self._lightness!r}, opacity={self._opacity!r})"
        )

    # ------------------ STATE ------------------
    @property
    def hue(self) -> float:
        return self._hue

    @property
    def saturation(self) -> float:
        return self._saturation

    @property
    def lightness(self) -> float:
        return self._lightness

    @property
    def opacity(self) -> float:
        return self._opacity

    @property
    def values(self) -> Dict[str, float]:
        """Current channel values keyed by channel name."""
        return {channel: getattr(self, channel) for channel in CHANNELS}

    def _accept(self, channel: str, value: Real) -> float:
        """Validate ``value`` for ``channel``, clamping unless the config is strict."""
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"{channel} must be a real number, got {type(value).__name__}")
        minimum, maximum = CHANNEL_RANGES[channel]
        value = float(value)
        if math.isnan(value):
            raise OutOfRange(channel, value, minimum, maximum)
        if minimum <= value <= maximum:
            return value
        if self.config.strict:
            raise OutOfRange(channel, value, minimum, maximum)
        clamped = float(clamp(value, minimum, maximum))
        logger.debug("Clamped %s from %r to %r", channel, value, clamped)
        return clamped

    # ------------------ SETTERS ------------------
    def set_hue(self, value: Real) -> None:
        self._hue = self._accept("hue", value)
        self._notify()

    def set_saturation(self, value: Real) -> None:
        self._saturation = self._accept("saturation", value)
        self._notify()

    def set_lightness(self, value: Real) -> None:
        self._lightness = self._accept("lightness", value)
        self._notify()

    def set_opacity(self, value: Real) -> None:
        self._opacity = self._accept("opacity", value)
        self._notify()

    def set_channel(self, channel: Channel, value: Real) -> None:
        """Dispatch to the setter named by ``channel``."""
        if channel not in CHANNEL_RANGES:
            raise KeyError(f"Unknown channel: {channel!r}")
        getattr(self, f"set_{channel}")(value)

    def set_hsla(
        self,
        hue: Optional[Real] = None,
        saturation: Optional[Real] = None,
        lightness: Optional[Real] = None,
        opacity: Optional[Real] = None,
    ) -> None:
        """
        Update several channels at once, notifying listeners a single time.

        Channels passed as ``None`` keep their value. All values are validated
        before any is written, so a rejected value leaves the state untouched.
        A call with nothing to update does not notify.
        """
        updates = {
            channel: self._accept(channel, value)
            for channel, value in zip(CHANNELS, (hue, saturation, lightness, opacity))
            if value is not None
        }
        if not updates:
            return
        for channel, value in updates.items():
            setattr(self, f"_{channel}", value)
        self._notify()

    def set_from_hex(self, text: str) -> None:
        """
        Replace all four channels with the color encoded in ``text``.

        ``#RRGGBB`` resets opacity to 1; ``#RRGGBBAA`` sets it to ``AA / 255``.
        Hue, saturation and lightness come out as whole degrees and percent.

        Raises:
            InvalidHexFormat: if ``text`` is not ``#RRGGBB`` or ``#RRGGBBAA``;
                the state is left unchanged.
        """
        r, g, b, a = parse_hex(text)
        hue, saturation, lightness = rgb_to_hsl(r, g, b)
        self._hue = float(hue)
        self._saturation = float(saturation)
        self._lightness = float(lightness)
        self._opacity = a
        self._notify()

    # ------------------ DERIVED ------------------
    def to_rgb(self) -> RGBATuple:
        """``(r, g, b, a)`` with 8-bit channels and the opacity passed through."""
        r, g, b = hsl_to_rgb(self._hue, self._saturation, self._lightness)
        return r, g, b, self._opacity

    def to_hex(self) -> str:
        """``#RRGGBBAA``."""
        return format_hex(*self.to_rgb(), uppercase=self.config.uppercase_hex)

    def to_css(self) -> str:
        """``rgba(R, G, B, A)`` with A as the raw opacity fraction."""
        return format_css_rgba(*self.to_rgb())

    def to_color(self) -> ColorRGBA:
        return ColorRGBA(self.to_rgb())

    def to_hsla(self) -> ColorHSLA:
        return ColorHSLA((self._hue, self._saturation, self._lightness, self._opacity))

    def channel_track(self, channel: Channel, steps: int = 32) -> np.ndarray:
        """
        Colors swept by one channel while the others stay at their current values.

        Args:
            channel: One of ``hue``, ``saturation``, ``lightness``, ``opacity``
            steps: Number of evenly spaced samples, endpoints included

        Returns:
            Integer array of shape ``(steps, 4)``: r, g, b in [0, 255] and
            alpha as an 8-bit value.
        """
        if channel not in CHANNEL_RANGES:
            raise KeyError(f"Unknown channel: {channel!r}")
        if steps < 2:
            raise ValueError("steps must be >= 2")

        minimum, maximum = CHANNEL_RANGES[channel]
        hsla = np.tile(
            np.array([self._hue, self._saturation, self._lightness, self._opacity], dtype=float),
            (steps, 1),
        )
        hsla[:, CHANNELS.index(channel)] = np.linspace(minimum, maximum, steps)

        rgb = np_hsl_to_unit_rgb(hsla[:, 0], hsla[:, 1] / 100, hsla[:, 2] / 100)
        rgba = np.concatenate([rgb, hsla[:, 3:]], axis=-1)
        return np_round_half_up(rgba * 255)

    # ------------------ NOTIFICATION ------------------
    def on_change(self, listener: ChangeListener) -> Callable[[], None]:
        """
        Call ``listener(model)`` after every mutation.

        Returns:
            A function that unsubscribes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
