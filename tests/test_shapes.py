"""Tests for shapes and their capabilities."""
import dataclasses
import math

import pytest

from solidshapes.model.shapes import (
    ShapeWithArea,
    ThreeDObjectWithVolume,
    Square,
    Circle,
    Cube,
)


class TestAreas:
    """The area formulas are the example's own, not textbook geometry."""

    def test_square_area(self):
        assert Square(length=2.0).area() == 8.0

    def test_circle_area(self):
        assert Circle(radius=1.0).area() == pytest.approx(math.pi)

    def test_circle_area_is_linear_in_radius(self):
        assert Circle(radius=3.0).area() == pytest.approx(3.0 * math.pi)

    def test_cube_area(self, cube):
        assert cube.area() == 12.0

    def test_zero_and_negative_dimensions_are_accepted(self):
        assert Square(length=0.0).area() == 0.0
        assert Square(length=-1.5).area() == -6.0


class TestVolume:
    def test_cube_volume(self, cube):
        assert cube.volume() == 16.0

    def test_cube_has_both_capabilities(self, cube):
        assert isinstance(cube, ShapeWithArea)
        assert isinstance(cube, ThreeDObjectWithVolume)

    def test_flat_shapes_have_no_volume(self):
        """Flat shapes are not forced to implement volume()."""
        for shape in (Square(length=1.0), Circle(radius=1.0)):
            assert not isinstance(shape, ThreeDObjectWithVolume)
            assert not hasattr(shape, "volume")


class TestShapeContract:
    def test_abstract_shape_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            ShapeWithArea()

    def test_shape_without_area_cannot_be_instantiated(self):
        class Triangle(ShapeWithArea):
            pass

        with pytest.raises(TypeError):
            Triangle()

    def test_new_shape_only_needs_area(self):
        class Triangle(ShapeWithArea):
            def area(self) -> float:
                return 3.0

        assert Triangle().area() == 3.0

    def test_shapes_are_immutable(self):
        square = Square(length=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            square.length = 2.0

    def test_shapes_compare_by_value(self):
        assert Circle(radius=2.0) == Circle(radius=2.0)
        assert Circle(radius=2.0) != Circle(radius=3.0)
