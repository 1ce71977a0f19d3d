"""
Tests for the tokenize / parse / evaluate / format pipeline
"""
import math
import unittest

from errors import MalformedExpression, MathError
from evaluator import evaluate, evaluate_node
from expr_parser import BinaryOp, Literal, Negate, parse, parse_expression
from formatter import format_number
from tokenizer import NUMBER, OPERATOR, Token, tokenize


def calculate(expression):
    return evaluate(parse_expression(expression))


class TestTokenizer(unittest.TestCase):
    def test_numbers_and_operators(self):
        self.assertEqual(tokenize("12+3.5*4"), [
            Token(NUMBER, 12.0), Token(OPERATOR, '+'), Token(NUMBER, 3.5),
            Token(OPERATOR, '*'), Token(NUMBER, 4.0),
        ])

    def test_unary_minus_joins_the_number(self):
        self.assertEqual(tokenize("-2*-3"), [
            Token(NUMBER, -2.0), Token(OPERATOR, '*'), Token(NUMBER, -3.0),
        ])

    def test_binary_minus_stays_an_operator(self):
        self.assertEqual(tokenize("5-3"), [
            Token(NUMBER, 5.0), Token(OPERATOR, '-'), Token(NUMBER, 3.0),
        ])

    def test_rejects_unknown_characters(self):
        for text in ("2+x", "1=2", "3%", "2 + 2"):
            with self.assertRaises(MalformedExpression):
                tokenize(text)

    def test_rejects_bad_numbers(self):
        for text in ("1..2", "1.2.3", "."):
            with self.assertRaises(MalformedExpression):
                tokenize(text)

    def test_rejects_adjacent_operators(self):
        for text in ("2+*3", "2*/3", "2-+3"):
            with self.assertRaises(MalformedExpression):
                tokenize(text)


class TestParser(unittest.TestCase):
    def test_precedence(self):
        tree = parse_expression("2+3*4")
        self.assertEqual(tree, BinaryOp('+', Literal(2.0),
                                        BinaryOp('*', Literal(3.0), Literal(4.0))))

    def test_left_associative(self):
        tree = parse_expression("8-4-2")
        self.assertEqual(tree, BinaryOp('-', BinaryOp('-', Literal(8.0), Literal(4.0)),
                                        Literal(2.0)))

    def test_unary_minus_operator(self):
        tree = parse([Token(OPERATOR, '-'), Token(NUMBER, 5.0)])
        self.assertEqual(tree, Negate(Literal(5.0)))

    def test_malformed_token_streams(self):
        for text in ("", "5+", "*5", "-", "5*"):
            with self.assertRaises(MalformedExpression):
                parse_expression(text)

    def test_trailing_tokens(self):
        with self.assertRaises(MalformedExpression):
            parse([Token(NUMBER, 1.0), Token(NUMBER, 2.0)])

    def test_long_minus_run(self):
        # One binary minus, then a run of unary ones folded down to -1
        self.assertEqual(calculate("1" + "-" * 3000 + "1"), 2.0)
        self.assertEqual(calculate("2" + "*1" * 5000), 2.0)


class TestEvaluator(unittest.TestCase):
    def test_arithmetic(self):
        self.assertEqual(calculate("2+3*4"), 14.0)
        self.assertEqual(calculate("10/4"), 2.5)
        self.assertEqual(calculate("8-4-2"), 2.0)
        self.assertEqual(calculate("5--3"), 8.0)
        self.assertEqual(calculate("-1.5*2"), -3.0)

    def test_division_by_zero_is_ieee(self):
        self.assertEqual(evaluate_node(parse_expression("5/0")), math.inf)
        self.assertEqual(evaluate_node(parse_expression("-5/0")), -math.inf)
        self.assertTrue(math.isnan(evaluate_node(parse_expression("0/0"))))

    def test_non_finite_result_is_math_error(self):
        for text in ("5/0", "0/0", "1/0-1/0"):
            with self.assertRaises(MathError):
                calculate(text)

    def test_only_final_value_is_checked(self):
        # 1/0 is infinite but dividing by it gives a finite zero
        self.assertEqual(evaluate(BinaryOp('/', Literal(1.0),
                                           BinaryOp('/', Literal(1.0), Literal(0.0)))), 0.0)

    def test_unknown_node(self):
        with self.assertRaises(MalformedExpression):
            evaluate("2+2")


class TestFormatter(unittest.TestCase):
    def test_integers(self):
        self.assertEqual(format_number(14.0), "14")
        self.assertEqual(format_number(-6.0), "-6")
        self.assertEqual(format_number(1e20), "100000000000000000000")
        self.assertEqual(format_number(-0.0), "0")

    def test_fractions(self):
        self.assertEqual(format_number(1 / 3), "0.333333")
        self.assertEqual(format_number(2.5), "2.5")
        self.assertEqual(format_number(0.1 + 0.2), "0.3")
        self.assertEqual(format_number(2 / 3), "0.666667")

    def test_rounds_to_zero(self):
        self.assertEqual(format_number(0.0000001), "0")
        self.assertEqual(format_number(-0.0000001), "0")

    def test_round_trip(self):
        for text in ("14", "-6", "0", "0.333333", "2.5", "-0.125", "123456.000001"):
            self.assertEqual(format_number(float(text)), text)

    def test_rejects_non_finite(self):
        for value in (math.inf, -math.inf, math.nan):
            with self.assertRaises(MathError):
                format_number(value)


if __name__ == "__main__":
    unittest.main()
