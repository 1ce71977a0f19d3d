"""
Error types for LineCalc
"""


class CalculatorError(Exception):
    """Base class for expression evaluation failures"""


class MalformedExpression(CalculatorError):
    """The expression text cannot be tokenized or parsed"""


class MathError(CalculatorError):
    """The expression evaluates to NaN or infinity"""
