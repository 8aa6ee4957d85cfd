"""Hex and CSS string codecs for 8-bit RGB plus fractional alpha."""
import re
from typing import Any

from ..errors import InvalidHexFormat
from ..types.color_types import RGBATuple
from .numbers import unit_to_byte

HEX_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


def is_valid_hex(text: Any) -> bool:
    """True if ``text`` is ``#RRGGBB`` or ``#RRGGBBAA``."""
    return isinstance(text, str) and HEX_PATTERN.fullmatch(text) is not None


def parse_hex(text: str) -> RGBATuple:
    """
    Parse ``#RRGGBB`` or ``#RRGGBBAA``.

    Args:
        text: Hex string with a leading ``#``; digits are case-insensitive

    Returns:
        Tuple[int, int, int, float]: (r, g, b) in [0, 255] and alpha in [0, 1].
        Alpha is 1.0 when the string carries no alpha pair.

    Raises:
        InvalidHexFormat: if ``text`` does not match ``HEX_PATTERN``
    """
    if not is_valid_hex(text):
        raise InvalidHexFormat(text)
    r = int(text[1:3], 16)
    g = int(text[3:5], 16)
    b = int(text[5:7], 16)
    a = int(text[7:9], 16) / 255 if len(text) == 9 else 1.0
    return r, g, b, a


def format_hex(r: int, g: int, b: int, a: float = 1.0, uppercase: bool = True) -> str:
    """Format as ``#RRGGBBAA``; alpha becomes ``round_half_up(a * 255)``."""
    fmt = "02X" if uppercase else "02x"
    return "#" + "".join(format(v, fmt) for v in (r, g, b, unit_to_byte(a)))


def _css_number(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_css_rgba(r: int, g: int, b: int, a: float) -> str:
    """
    Format as a CSS color function, e.g. ``rgba(255, 0, 0, 0.5)``.

    Alpha is written as a plain fraction: ``1`` rather than ``1.0``, never a
    percentage or hex byte.
    """
    return f"rgba({r}, {g}, {b}, {_css_number(a)})"
