"""
Output of a calculated area.

Rendering lives here and not in ``AreaCalculator`` so that adding a new
output format never touches the calculation.
"""
from __future__ import annotations
import logging
from enum import StrEnum

from solidshapes.config import OUTPUT_PRECISION, TEXT_TEMPLATE, JSON_TEMPLATE
from solidshapes.model.calculators import AreaCalculator

logger = logging.getLogger(__name__)


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


class AreaCalculatorOutputter:
    def __init__(self, area_calculator: AreaCalculator) -> None:
        if not isinstance(area_calculator, AreaCalculator):
            raise TypeError(
                f"{type(area_calculator).__name__} is not an AreaCalculator."
            )
        self._area_calculator = area_calculator

    def _formatted_area(self) -> str:
        return f"{self._area_calculator.total_area():.{OUTPUT_PRECISION}f}"

    def output_as_string(self) -> str:
        return TEXT_TEMPLATE.format(value=self._formatted_area())

    def output_as_json(self) -> str:
        """JSON-like ``{area:X.XX}``. Keys are not quoted."""
        return JSON_TEMPLATE.format(value=self._formatted_area())

    def render(self, fmt: OutputFormat | str) -> str:
        fmt = OutputFormat(fmt)
        logger.debug(f"Rendering area as {fmt}.")
        match fmt:
            case OutputFormat.TEXT:
                return self.output_as_string()
            case OutputFormat.JSON:
                return self.output_as_json()
