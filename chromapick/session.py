"""
Host-facing contract for one color-editing session.

The host (a dialog, a TUI, a plugin) renders the sliders described by
``SLIDERS`` plus a hex text field and a preview, forwards user input to
``EditorSession.set_channel`` / ``EditorSession.input_hex``, and repaints
from the ``SessionSnapshot`` pushed to ``on_update`` after every change. A
hex typed by the user therefore moves the sliders too. ``save`` hands the
final ``rgba(...)`` string to ``on_save`` and ends the session.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Optional, Tuple

from .conversions import is_valid_hex
from .errors import SessionClosed
from .model import ColorModel
from .types.color_types import Channel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SliderSpec:
    channel: Channel
    label: str
    minimum: float
    maximum: float
    step: float


SLIDERS: Tuple[SliderSpec, ...] = (
    SliderSpec("hue", "Hue", 0, 360, 1),
    SliderSpec("saturation", "Saturation", 0, 100, 1),
    SliderSpec("lightness", "Lightness", 0, 100, 1),
    SliderSpec("opacity", "Opacity", 0, 1, 0.01),
)


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything a host needs to repaint its controls."""

    hue: float
    saturation: float
    lightness: float
    opacity: float
    hex: str
    css: str

    @classmethod
    def of(cls, model: ColorModel) -> SessionSnapshot:
        return cls(
            hue=model.hue,
            saturation=model.saturation,
            lightness=model.lightness,
            opacity=model.opacity,
            hex=model.to_hex(),
            css=model.to_css(),
        )


class EditorSession:
    """One open color editor, from first slider move to save or cancel."""

    def __init__(
        self,
        on_save: Callable[[str], None],
        model: Optional[ColorModel] = None,
        on_update: Optional[Callable[[SessionSnapshot], None]] = None,
    ) -> None:
        self._model = model if model is not None else ColorModel()
        self._on_save = on_save
        self._on_update = on_update
        self._closed = False
        self._unsubscribe = self._model.on_change(self._push_update)

    @property
    def model(self) -> ColorModel:
        return self._model

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> SessionSnapshot:
        self._ensure_open()
        return SessionSnapshot.of(self._model)

    def set_channel(self, channel: Channel, value: Real) -> None:
        self._ensure_open()
        self._model.set_channel(channel, value)

    def input_hex(self, text: str) -> bool:
        """
        Apply text typed into the hex field.

        Returns:
            True if ``text`` was a complete ``#RRGGBB``/``#RRGGBBAA`` color and
            was applied; False if it was ignored (e.g. still being typed).
        """
        self._ensure_open()
        if not is_valid_hex(text):
            logger.debug("Ignoring incomplete hex input %r", text)
            return False
        self._model.set_from_hex(text)
        return True

    def save(self) -> str:
        """Emit the ``rgba(...)`` string to ``on_save``, then close."""
        self._ensure_open()
        css = self._model.to_css()
        self._on_save(css)
        logger.info("Color %s saved", css)
        self.close()
        return css

    def close(self) -> None:
        """End the session. Closing twice is allowed and does nothing."""
        if self._closed:
            return
        self._unsubscribe()
        self._closed = True
        logger.info("Editor session closed")

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosed("editor session is closed")

    def _push_update(self, model: ColorModel) -> None:
        if self._on_update is not None:
            self._on_update(SessionSnapshot.of(model))
