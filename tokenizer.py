"""
Tokenizer for LineCalc
Splits a finished expression string into number and operator tokens
"""
from collections import namedtuple

import config
from errors import MalformedExpression

NUMBER = "number"
OPERATOR = "operator"
DIGITS = "0123456789"

Token = namedtuple("Token", ["kind", "value"])


def _is_number_char(ch):
    return ch in DIGITS or ch == '.'


def tokenize(expression):
    """Convert an expression like "2+-3*4.5" into a list of tokens"""
    tokens = []
    pos = 0
    length = len(expression)

    while pos < length:
        ch = expression[pos]
        # A '-' opens a signed number at the start or right after an operator
        unary_position = not tokens or tokens[-1].kind == OPERATOR

        if _is_number_char(ch) or (
            ch == '-' and unary_position
            and pos + 1 < length and _is_number_char(expression[pos + 1])
        ):
            start = pos
            pos += 1
            while pos < length and _is_number_char(expression[pos]):
                pos += 1
            chunk = expression[start:pos]
            try:
                tokens.append(Token(NUMBER, float(chunk)))
            except ValueError:
                raise MalformedExpression(f"Invalid number: {chunk}") from None
            continue

        if ch in config.OPERATORS:
            if tokens and tokens[-1].kind == OPERATOR and ch != '-':
                raise MalformedExpression(
                    f"Unexpected operator '{ch}' at position {pos}")
            tokens.append(Token(OPERATOR, ch))
            pos += 1
            continue

        raise MalformedExpression(f"Unexpected character '{ch}' at position {pos}")

    return tokens
