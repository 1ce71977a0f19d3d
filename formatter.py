"""
Number Formatter for LineCalc
Renders evaluated values in their canonical display form
"""
import math

import config
from errors import MathError


def format_number(value: float) -> str:
    """Format a finite float: integers without a fraction, else 6 dp trimmed"""
    if not math.isfinite(value):
        raise MathError(f"Cannot format non-finite value: {value}")

    if value % 1 == 0:
        return str(int(value))

    text = f"{value:.{config.DECIMAL_PLACES}f}".rstrip('0').rstrip('.')
    # Tiny negatives like -0.0000001 collapse to "-0"
    if text == "-0":
        return "0"
    return text
