import pytest

from chromapick.colors import ColorBase, ColorRGBA, ColorHSLA
from chromapick.errors import InvalidHexFormat


def test_rgba_channels():
    color = ColorRGBA((255, 128, 0, 0.5))
    assert color.value == (255, 128, 0, 0.5)
    assert (color.r, color.g, color.b, color.alpha) == (255, 128, 0, 0.5)
    assert color.as_dict() == {"r": 255, "g": 128, "b": 0, "a": 0.5}
    assert list(color) == [255, 128, 0, 0.5]
    assert len(color) == 4

def test_rgba_coerces_types():
    color = ColorRGBA((255.0, 128.9, 0, 1))
    assert color.value == (255, 128, 0, 1.0)
    assert isinstance(color.r, int)
    assert isinstance(color.alpha, float)

def test_rgba_clamps():
    assert ColorRGBA((300, -5, 128, 1.5)).value == (255, 0, 128, 1.0)
    assert ColorHSLA((400.0, 120.0, -1.0, -0.5)).value == (360.0, 100.0, 0.0, 0.0)

def test_wrong_channel_count():
    with pytest.raises(ValueError):
        ColorRGBA((1, 2, 3))
    with pytest.raises(ValueError):
        ColorHSLA((1, 2, 3, 0.5, 9))

def test_immutable():
    color = ColorRGBA((1, 2, 3, 1.0))
    with pytest.raises(AttributeError):
        color._value = (0, 0, 0, 0.0)
    with pytest.raises(AttributeError):
        color.extra = 1

def test_equality_and_hash():
    a = ColorRGBA((10, 20, 30, 0.5))
    b = ColorRGBA([10, 20, 30, 0.5])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != ColorRGBA((10, 20, 30, 1.0))
    # Same numbers in a different space are a different color
    assert ColorHSLA((10, 20, 30, 0.5)) != ColorRGBA((10, 20, 30, 0.5))

def test_copy_from_color():
    a = ColorRGBA((10, 20, 30, 0.5))
    assert ColorRGBA(a) == a
    assert isinstance(a, ColorBase)

def test_rgba_hex():
    color = ColorRGBA.from_hex("#33669980")
    assert color.value[:3] == (51, 102, 153)
    assert abs(color.alpha - 128 / 255) < 1e-12
    assert color.to_hex() == "#33669980"
    assert color.to_hex(uppercase=False) == "#33669980".lower()
    with pytest.raises(InvalidHexFormat):
        ColorRGBA.from_hex("#336699G0")

def test_rgba_css():
    assert ColorRGBA((255, 0, 0, 1.0)).to_css() == "rgba(255, 0, 0, 1)"
    assert ColorRGBA((0, 128, 255, 0.25)).to_css() == "rgba(0, 128, 255, 0.25)"

def test_hsla_to_rgba():
    hsla = ColorHSLA((210, 60, 35, 0.75))
    assert (hsla.hue, hsla.saturation, hsla.lightness) == (210.0, 60.0, 35.0)
    assert hsla.to_rgba() == ColorRGBA((36, 89, 143, 0.75))

def test_hsla_from_rgba():
    hsla = ColorHSLA.from_rgba(ColorRGBA((51, 102, 153, 0.2)))
    assert hsla.value == (210.0, 50.0, 40.0, 0.2)
    assert hsla.as_dict() == {"hue": 210.0, "saturation": 50.0, "lightness": 40.0, "opacity": 0.2}

def test_repr():
    assert repr(ColorRGBA((1, 2, 3, 1.0))) == "ColorRGBA((1, 2, 3, 1.0))"
