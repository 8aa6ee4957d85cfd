import pytest

from chromapick import ColorModel, ModelConfig


@pytest.fixture
def model():
    return ColorModel()


@pytest.fixture
def strict_model():
    return ColorModel(ModelConfig(strict=True))
