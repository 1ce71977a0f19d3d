"""
Expression Parser for LineCalc
Builds an arithmetic tree from tokens with standard precedence:

    expr   := term (('+' | '-') term)*
    term   := unary (('*' | '/') unary)*
    unary  := '-' unary | NUMBER

Both binary levels are left-associative.
"""
from dataclasses import dataclass
from typing import Union

from errors import MalformedExpression
from tokenizer import NUMBER, OPERATOR, tokenize


@dataclass
class Literal:
    value: float


@dataclass
class Negate:
    operand: "Node"


@dataclass
class BinaryOp:
    op: str
    left: "Node"
    right: "Node"


Node = Union[Literal, Negate, BinaryOp]


class Parser:
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.position = 0

    def parse(self) -> Node:
        """Parse the whole token stream into a single tree"""
        if not self.tokens:
            raise MalformedExpression("Expression is empty")
        node = self._parse_expr()
        if self.position < len(self.tokens):
            leftover = self.tokens[self.position]
            raise MalformedExpression(f"Unexpected token: {leftover.value}")
        return node

    def _peek_operator(self, symbols):
        if self.position < len(self.tokens):
            token = self.tokens[self.position]
            if token.kind == OPERATOR and token.value in symbols:
                return token.value
        return None

    def _parse_expr(self):
        """Parse addition and subtraction"""
        left = self._parse_term()
        op = self._peek_operator("+-")
        while op:
            self.position += 1
            left = BinaryOp(op, left, self._parse_term())
            op = self._peek_operator("+-")
        return left

    def _parse_term(self):
        """Parse multiplication and division"""
        left = self._parse_unary()
        op = self._peek_operator("*/")
        while op:
            self.position += 1
            left = BinaryOp(op, left, self._parse_unary())
            op = self._peek_operator("*/")
        return left

    def _parse_unary(self):
        """Parse a unary minus or a number"""
        negations = 0
        while self._peek_operator("-"):
            self.position += 1
            negations += 1

        if self.position >= len(self.tokens):
            raise MalformedExpression("Unexpected end of expression")
        token = self.tokens[self.position]
        if token.kind != NUMBER:
            raise MalformedExpression(f"Expected a number, got '{token.value}'")
        self.position += 1

        node = Literal(token.value)
        for _ in range(negations):
            node = Negate(node)
        return node


def parse(tokens) -> Node:
    return Parser(tokens).parse()


def parse_expression(expression: str) -> Node:
    """Tokenize and parse an expression string"""
    return parse(tokenize(expression))
