"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents format strings and precisions from being
   hardcoded in several places.
2. Single source: The outputter and the demo read the same values.

Exports:
    OUTPUT_PRECISION (int): Decimal places used when rendering an area.
    TEXT_TEMPLATE (str): Plain text rendering, filled with ``value``.
    JSON_TEMPLATE (str): JSON-like rendering, filled with ``value``.
"""

# Global Constants
OUTPUT_PRECISION: int = 2

TEXT_TEMPLATE: str = "area is {value}"
# Renders as {area:X.XX}; the key is unquoted, so this is not valid JSON.
JSON_TEMPLATE: str = "{{area:{value}}}"
