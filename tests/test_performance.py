"""Performance tests for BT Math.

These tests are marked as 'slow' and can be skipped with: pytest -m "not slow"
"""

import time

import pytest

from btmath_pkg.api import evaluate_expression


@pytest.mark.slow
class TestEvaluationPerformance:
    """Evaluation time grows linearly with input length."""

    def test_simple_expression_time(self):
        start = time.time()
        for _ in range(1000):
            evaluate_expression("2 + 3 * 4 - sqrt(16) / pow(2, 2)")
        elapsed = time.time() - start
        assert elapsed < 2.0, f"Evaluation too slow: {elapsed}s"

    def test_long_sum(self):
        expression = "+".join(["1"] * 2000)
        start = time.time()
        assert evaluate_expression(expression) == 2000.0
        elapsed = time.time() - start
        assert elapsed < 1.0, f"Long expression too slow: {elapsed}s"

    def test_deep_nesting(self):
        expression = "(" * 1000 + "1" + ")" * 1000
        assert evaluate_expression(expression) == 1.0
