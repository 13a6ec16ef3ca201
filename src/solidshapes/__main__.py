"""Command-line interface."""
import logging

from solidshapes.logging_config import setup_logging
from solidshapes.model.registry import create_shape
from solidshapes.model.shapes import ThreeDObjectWithVolume
from solidshapes.model.calculators import AreaCalculator, VolumeCalculator
from solidshapes.model.outputter import AreaCalculatorOutputter, OutputFormat
from solidshapes.model.connections import MySqlConnection, PostgresConnection, GetCustomerData

# __name__ is "__main__" under `python -m`, which is outside the package logger
logger = logging.getLogger("solidshapes.demo")

DEMO_SHAPES: list[tuple[str, dict[str, float]]] = [
    ("square", {"length": 1.0}),
    ("circle", {"radius": 2.0}),
    ("cube", {"face_area": 2.0}),
]


def main() -> None:
    setup_logging(level=logging.INFO)

    shapes = [create_shape(name, **dimensions) for name, dimensions in DEMO_SHAPES]

    calculator = AreaCalculator(shapes)
    for shape, area in zip(calculator.shapes, calculator.areas()):
        print(f"{type(shape).__name__} area: {area:.2f}")

    outputter = AreaCalculatorOutputter(calculator)
    for fmt in OutputFormat:
        print(outputter.render(fmt))

    print(f"Cubed total area: {VolumeCalculator(calculator).cubed_total_area():.2f}")
    for shape in calculator.shapes:
        if isinstance(shape, ThreeDObjectWithVolume):
            print(f"{type(shape).__name__} volume: {shape.volume():.2f}")

    for connection in (MySqlConnection(), PostgresConnection()):
        customer_data = GetCustomerData(connection)
        logger.info(f"{type(connection).__name__}: {customer_data.get_data()}")


if __name__ == "__main__":
    main()
