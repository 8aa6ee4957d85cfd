import numpy as np

from chromapick.conversions.numbers import round_half_up, np_round_half_up, unit_to_byte


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(76.5) == 77
    assert round_half_up(127.5) == 128
    assert round_half_up(2.4999) == 2
    assert round_half_up(0.0) == 0
    assert isinstance(round_half_up(1.0), int)

def test_np_round_half_up():
    values = np.array([0.5, 2.5, 76.5, 2.4999, 254.6])
    assert np.array_equal(np_round_half_up(values), [1, 3, 77, 2, 255])
    assert np_round_half_up(values).dtype.kind == "i"

def test_unit_to_byte():
    assert unit_to_byte(0.0) == 0
    assert unit_to_byte(1.0) == 255
    assert unit_to_byte(0.5) == 128
    assert unit_to_byte(2.0) == 255
    assert unit_to_byte(-1.0) == 0
