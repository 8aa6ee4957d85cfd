"""Exceptions raised by chromapick."""

from __future__ import annotations
from typing import Any


class ChromapickError(Exception):
    """Base class for every error raised by this package."""


class InvalidHexFormat(ChromapickError, ValueError):
    """A string is not of the form ``#RRGGBB`` or ``#RRGGBBAA``."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"invalid hex color {value!r}: expected '#RRGGBB' or '#RRGGBBAA'"
        )


class OutOfRange(ChromapickError, ValueError):
    """A channel value lies outside its domain."""

    def __init__(self, channel: str, value: Any, minimum: float, maximum: float) -> None:
        self.channel = channel
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{channel} must be within [{minimum:g}, {maximum:g}], got {value!r}"
        )


class SessionClosed(ChromapickError, RuntimeError):
    """An editing session was used after it was saved or closed."""
