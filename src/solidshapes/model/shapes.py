"""
Shapes and their capabilities.

Each shape carries its own ``area()`` so that calculators never need to ask
what kind of shape they hold. Volume is a separate capability: a flat
shape is never forced to implement it.

The formulas below are the ones this example has always used
(square = length * 4, circle = radius * pi, ...). They are not textbook
geometry and must stay as they are.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar
import math

from solidshapes.model.registry import register_shape


class ShapeWithArea(ABC):
    """Anything that can report its area."""
    KEY: ClassVar[str] = ""

    @abstractmethod
    def area(self) -> float:
        ...


class ThreeDObjectWithVolume(ABC):
    """Anything that can report its volume."""

    @abstractmethod
    def volume(self) -> float:
        ...


@register_shape
@dataclass(frozen=True)
class Square(ShapeWithArea):
    KEY: ClassVar[str] = "square"

    length: float

    def area(self) -> float:
        return self.length * 4


@register_shape
@dataclass(frozen=True)
class Circle(ShapeWithArea):
    KEY: ClassVar[str] = "circle"

    radius: float

    def area(self) -> float:
        return self.radius * math.pi


@register_shape
@dataclass(frozen=True)
class Cube(ShapeWithArea, ThreeDObjectWithVolume):
    """A cube described by the area of one face."""
    KEY: ClassVar[str] = "cube"

    face_area: float

    def area(self) -> float:
        return self.face_area * 6

    def volume(self) -> float:
        a = self.face_area
        return a * a * a * a
