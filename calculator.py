"""
Calculator Engine for LineCalc
Holds the expression being typed and applies input events to it
"""
import math

import config
from errors import CalculatorError
from evaluator import evaluate
from expr_parser import parse_expression
from formatter import format_number

DIGITS = "0123456789"


class ExpressionBuilder:
    def __init__(self, on_evaluation_failed=None):
        self.text = ""
        self.result = ""
        self.on_evaluation_failed = on_evaluation_failed

    # ── State checks ─────────────────────────────────────────────────────
    def _has_operator_at_end(self):
        return bool(self.text) and self.text[-1] in config.OPERATORS

    def _has_number_at_end(self):
        return bool(self.text) and self.text[-1] in DIGITS + ')'

    def _evaluation_showing(self):
        return bool(self.result) and '=' in self.text

    def _start_fresh_if_evaluated(self):
        """Drop a completed evaluation before new number input"""
        if self._evaluation_showing():
            self.clear()

    def _continue_from_result(self):
        """Seed the text with the last good result before an operation"""
        if self._evaluation_showing() and self.result != config.ERROR_TEXT:
            self.text = self.result
            self.result = ""

    def _last_number_chunk(self):
        chunk_start = 0
        for i, ch in enumerate(self.text):
            if ch in config.OPERATORS:
                chunk_start = i + 1
        return self.text[chunk_start:]

    def _trailing_number_start(self):
        """Index where the trailing -?digits(.digits)? token starts, or None"""
        text = self.text
        pos = len(text)
        while pos > 0 and text[pos - 1] in DIGITS:
            pos -= 1
        if pos == len(text):
            return None
        if pos >= 2 and text[pos - 1] == '.' and text[pos - 2] in DIGITS:
            pos -= 1
            while pos > 0 and text[pos - 1] in DIGITS:
                pos -= 1
        # The sign is part of the number only where a unary minus can stand
        if pos > 0 and text[pos - 1] == '-':
            if pos == 1 or text[pos - 2] in config.OPERATORS:
                pos -= 1
        return pos

    # ── Input events ─────────────────────────────────────────────────────
    def clear(self):
        """Clear expression and result"""
        self.text = ""
        self.result = ""

    def append_digit(self, digit):
        """Add a digit, starting a new expression after an evaluation"""
        if len(digit) != 1 or digit not in DIGITS:
            return
        self._start_fresh_if_evaluated()
        self.text += digit

    def append_dot(self):
        """Add a decimal point unless the current number already has one"""
        self._start_fresh_if_evaluated()
        if '.' in self._last_number_chunk():
            return
        if not self.text or self._has_operator_at_end():
            self.text += "0."
        else:
            self.text += "."

    def append_operator(self, op):
        """Add an operator, replacing a pending one"""
        if len(op) != 1 or op not in config.OPERATORS:
            return
        self._continue_from_result()

        if not self.text:
            # Only a leading minus may start an expression
            if op == '-':
                self.text = '-'
            return

        if self._has_operator_at_end():
            self.text = self.text[:-1] + op
        elif self._has_number_at_end():
            self.text += op

    def backspace(self):
        """Remove the last character (CE)"""
        self.text = self.text[:-1]

    def square_current(self):
        """Replace the trailing number with its square"""
        self._continue_from_result()
        if not self.text or self._has_operator_at_end():
            return

        start = self._trailing_number_start()
        if start is None:
            return
        value = float(self.text[start:])
        squared = value * value
        if not math.isfinite(squared):
            return
        self.text = self.text[:start] + format_number(squared)

    def evaluate(self):
        """Evaluate the expression and append "=result" or "=Error" """
        if not self.text or self._has_operator_at_end() or '=' in self.text:
            return

        try:
            formatted = format_number(evaluate(parse_expression(self.text)))
        except CalculatorError:
            self.result = config.ERROR_TEXT
            self.text = f"{self.text}={config.ERROR_TEXT}"
            if self.on_evaluation_failed:
                self.on_evaluation_failed(config.ERROR_NOTICE)
            return

        self.result = formatted
        self.text = f"{self.text}={self.result}"

    # ── Read accessors ───────────────────────────────────────────────────
    def display_text(self):
        """Expression with spaced operators, or "0" when empty"""
        if not self.text:
            return "0"
        pretty = self.text.replace('=', ' = ')
        for op in config.OPERATORS:
            pretty = pretty.replace(op, f" {op} ")
        return pretty

    def result_text(self):
        return self.result
