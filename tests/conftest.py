import pytest

from solidshapes.model.shapes import Square, Circle, Cube
from solidshapes.model.calculators import AreaCalculator


@pytest.fixture
def mixed_shapes():
    """Square(1.0) + Circle(2.0): total area 4 + 2*pi."""
    return [Square(length=1.0), Circle(radius=2.0)]


@pytest.fixture
def pi_calculator():
    """Calculator whose total area is pi."""
    return AreaCalculator([Circle(radius=1.0)])


@pytest.fixture
def cube():
    return Cube(face_area=2.0)
