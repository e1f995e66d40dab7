"""BT Math package: tokenizer, shunting-yard converter, RPN evaluator and CLI."""

from .api import evaluate, evaluate_expression, expression_to_rpn, validate_expression
from .types import (
    EvalError,
    EvalResult,
    EvaluationError,
    ExpressionSyntaxError,
    LexError,
)

__all__ = [
    "api",
    "cli",
    "config",
    "evaluator",
    "lexer",
    "logging_config",
    "parser",
    "tokens",
    "types",
]

# Public API exports

__api_exports__ = [
    "evaluate_expression",
    "evaluate",
    "validate_expression",
    "expression_to_rpn",
    "EvaluationError",
    "LexError",
    "ExpressionSyntaxError",
    "EvalError",
    "EvalResult",
]
