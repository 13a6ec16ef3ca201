"""
Shape Registry
==============
Maps a short name (``"square"``, ``"circle"``, ...) to a shape class.

A shape joins the registry by decorating itself with ``register_shape``;
nothing that already exists has to be edited. A name belongs to the first
class that claims it, so a later class cannot shadow a built-in shape.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from solidshapes.model.shapes import ShapeWithArea

logger = logging.getLogger(__name__)

_SHAPES: dict[str, type[ShapeWithArea]] = {}


def register_shape(shape_cls: type[ShapeWithArea]) -> type[ShapeWithArea]:
    """Class decorator adding ``shape_cls`` under its ``KEY``."""
    name = getattr(shape_cls, "KEY", None)
    if not name:
        raise ValueError(f"Shape {shape_cls.__name__} has no KEY to register under.")

    existing = _SHAPES.get(name)
    if existing is not None and existing is not shape_cls:
        raise ValueError(
            f"Shape key '{name}' is already taken by {existing.__name__}; "
            f"{shape_cls.__name__} cannot replace it."
        )

    _SHAPES[name] = shape_cls
    logger.debug(f"Registered shape '{name}' -> {shape_cls.__name__}.")
    return shape_cls


def create_shape(name: str, **dimensions: float) -> ShapeWithArea:
    """Build the shape registered under ``name`` from keyword dimensions."""
    try:
        shape_cls = _SHAPES[name]
    except KeyError:
        raise KeyError(f"Unknown shape '{name}'. Known shapes: {', '.join(registered_names())}") from None
    return shape_cls(**dimensions)


def registered_names() -> list[str]:
    return sorted(_SHAPES)
