"""
Shape area aggregation, written as a walk through the SOLID principles.

The MODEL layer (``solidshapes.model``) holds the shapes, the calculators,
the outputter and the data-connection example.
"""
from solidshapes.model.shapes import ShapeWithArea, ThreeDObjectWithVolume, Square, Circle, Cube
from solidshapes.model.calculators import AreaCalculator, VolumeCalculator
from solidshapes.model.outputter import AreaCalculatorOutputter, OutputFormat
from solidshapes.model.connections import DbConnection, MySqlConnection, PostgresConnection, GetCustomerData

__all__ = [
    "ShapeWithArea",
    "ThreeDObjectWithVolume",
    "Square",
    "Circle",
    "Cube",
    "AreaCalculator",
    "VolumeCalculator",
    "AreaCalculatorOutputter",
    "OutputFormat",
    "DbConnection",
    "MySqlConnection",
    "PostgresConnection",
    "GetCustomerData",
]
