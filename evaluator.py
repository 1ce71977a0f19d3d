"""
Tree Evaluator for LineCalc
"""
import math
import operator

from errors import MalformedExpression, MathError
from expr_parser import BinaryOp, Literal, Negate


def _divide(left, right):
    # IEEE semantics: x/0 is +-inf and 0/0 is nan, checked once at the end
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


_BIN_OPS = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': _divide,
}


def evaluate_node(node) -> float:
    """Evaluate a tree without checking intermediate values"""
    # Explicit stack: long operator chains build trees deeper than the recursion limit
    pending = [(node, False)]
    values = []
    while pending:
        current, operands_done = pending.pop()

        if isinstance(current, Literal):
            values.append(float(current.value))
        elif isinstance(current, Negate):
            if operands_done:
                values.append(-values.pop())
            else:
                pending.append((current, True))
                pending.append((current.operand, False))
        elif isinstance(current, BinaryOp):
            if current.op not in _BIN_OPS:
                raise MalformedExpression(f"Unsupported operator: {current.op}")
            if operands_done:
                right = values.pop()
                left = values.pop()
                values.append(float(_BIN_OPS[current.op](left, right)))
            else:
                pending.append((current, True))
                pending.append((current.right, False))
                pending.append((current.left, False))
        else:
            raise MalformedExpression(f"Unsupported expression: {type(current).__name__}")

    return values.pop()


def evaluate(node) -> float:
    """Evaluate a tree and reject a NaN or infinite final value"""
    value = evaluate_node(node)
    if math.isnan(value) or math.isinf(value):
        raise MathError("Math error")
    return value
