"""
Area Calculators
================
Sums areas over a heterogeneous collection of shapes.

``AreaCalculator`` only relies on the ``ShapeWithArea`` capability, so a new
shape never requires a change here. ``VolumeCalculator`` reuses an
``AreaCalculator`` but reports something different (the cubed total), so it
is a separate type with a separately named operation rather than a subclass
overriding ``total_area``.
"""
from __future__ import annotations
import logging
from typing import Iterable, TYPE_CHECKING

import numpy as np

from solidshapes.model.shapes import ShapeWithArea

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class AreaCalculator:
    def __init__(self, shapes: Iterable[ShapeWithArea] = ()) -> None:
        self._shapes: tuple[ShapeWithArea, ...] = tuple(shapes)
        for shape in self._shapes:
            if not isinstance(shape, ShapeWithArea):
                raise TypeError(
                    f"{type(shape).__name__} does not implement ShapeWithArea."
                )
        logger.debug(f"AreaCalculator created with {len(self._shapes)} shapes.")

    @property
    def shapes(self) -> tuple[ShapeWithArea, ...]:
        return self._shapes

    def __len__(self) -> int:
        return len(self._shapes)

    def areas(self) -> npt.NDArray[np.float64]:
        """Area of every shape, in insertion order."""
        return np.array([shape.area() for shape in self._shapes], dtype=np.float64)

    def total_area(self) -> float:
        total = 0.0
        for shape in self._shapes:
            total = total + shape.area()
        return total


class VolumeCalculator:
    """
    The cubed total area of a set of shapes.

    Not an ``AreaCalculator``: it does not offer ``total_area`` and cannot be
    handed to an ``AreaCalculatorOutputter``.
    """

    def __init__(self, area_calculator: AreaCalculator) -> None:
        self._area_calculator = area_calculator

    @classmethod
    def from_shapes(cls, shapes: Iterable[ShapeWithArea]) -> VolumeCalculator:
        return cls(AreaCalculator(shapes))

    def cubed_total_area(self) -> float:
        s = self._area_calculator.total_area()
        return s * s * s
