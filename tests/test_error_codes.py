"""Test error codes and error classes for each failure."""

import unittest

from btmath_pkg.api import evaluate_expression
from btmath_pkg.types import (
    EvalError,
    EvaluationError,
    ExpressionSyntaxError,
    LexError,
)


class TestErrorCodes(unittest.TestCase):
    """Test that every failure carries the right class and code."""

    CASES = [
        ("2 @ 2", LexError, "UNEXPECTED_CHAR"),
        ("1.2.3", LexError, "MALFORMED_NUMBER"),
        ("9" * 400, LexError, "NUMBER_TOO_BIG"),
        ("", ExpressionSyntaxError, "EMPTY_EXPRESSION"),
        ("(1 + 2", ExpressionSyntaxError, "UNMATCHED_PAREN"),
        ("1 + 2)", ExpressionSyntaxError, "UNMATCHED_PAREN"),
        ("pow(1)", ExpressionSyntaxError, "ARGUMENT_COUNT"),
        ("1, 2", ExpressionSyntaxError, "MISPLACED_COMMA"),
        ("2 3", ExpressionSyntaxError, "UNEXPECTED_TOKEN"),
        ("2 *", ExpressionSyntaxError, "MISSING_OPERAND"),
        ("1 / 0", EvalError, "DIVISION_BY_ZERO"),
        ("acos(3)", EvalError, "DOMAIN_ERROR"),
        ("exp(1000)", EvalError, "NUMERIC_OVERFLOW"),
        ("^".join(["1"] * 1001), EvalError, "STACK_OVERFLOW"),
    ]

    def test_codes(self):
        for expression, error_class, code in self.CASES:
            with self.subTest(expression=expression[:20]):
                with self.assertRaises(error_class) as ctx:
                    evaluate_expression(expression)
                self.assertEqual(ctx.exception.code, code)

    def test_common_base_class(self):
        for error_class in (LexError, ExpressionSyntaxError, EvalError):
            self.assertTrue(issubclass(error_class, EvaluationError))

    def test_message_is_str(self):
        try:
            evaluate_expression("sqrt(-4)")
            self.fail("Should have raised EvalError")
        except EvalError as e:
            self.assertEqual(e.function, "sqrt")
            self.assertEqual(str(e), e.message)
            self.assertEqual(e.position, 0)

    def test_position_points_at_operator(self):
        with self.assertRaises(EvalError) as ctx:
            evaluate_expression("4 + 8 / (2 - 2)")
        self.assertEqual(ctx.exception.position, 6)

    def test_deep_right_associative_chain_within_limit(self):
        self.assertEqual(evaluate_expression("^".join(["1"] * 1000)), 1.0)


if __name__ == "__main__":
    unittest.main()
