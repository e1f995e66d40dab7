"""Public API for BT Math - pure functions without side effects."""

from __future__ import annotations

from . import config
from .evaluator import evaluate_rpn
from .lexer import tokenize
from .logging_config import get_logger
from .parser import format_rpn, to_rpn
from .types import EvalResult, EvaluationError

logger = get_logger("api")


def evaluate_expression(text: str) -> float:
    """Evaluate an infix arithmetic expression.

    Args:
        text: Expression string (e.g., "2 + 3 * 4", "sqrt(16)", "pow(2, 10)")

    Returns:
        The numeric result

    Raises:
        LexError, ExpressionSyntaxError, EvalError: All subclasses of
            EvaluationError, describing the first fault found

    Example:
        >>> from btmath_pkg.api import evaluate_expression
        >>> evaluate_expression("(2 + 3) * 4")
        20.0
        >>> evaluate_expression("ln(E)")
        1.0
    """
    rpn = to_rpn(tokenize(text, config.MAX_INPUT_LENGTH))
    return evaluate_rpn(rpn, config.MAX_STACK_DEPTH)


def evaluate(text: str) -> EvalResult:
    """Evaluate an expression and report the outcome as an EvalResult.

    Args:
        text: Expression string

    Returns:
        EvalResult with the result and its RPN form, or the error details

    Example:
        >>> from btmath_pkg.api import evaluate
        >>> evaluate("2 + 3 * 4")
        EvalResult(ok=True, result=14.0, rpn='2 3 4 * +')
        >>> evaluate("5 / 0").error_code
        'DIVISION_BY_ZERO'
    """
    rpn_text = None
    try:
        rpn = to_rpn(tokenize(text, config.MAX_INPUT_LENGTH))
        rpn_text = format_rpn(rpn)
        value = evaluate_rpn(rpn, config.MAX_STACK_DEPTH)
    except EvaluationError as e:
        logger.debug("Evaluation of %r failed: %s (%s)", text, e, e.code)
        return EvalResult(
            ok=False,
            rpn=rpn_text,
            error=str(e),
            error_code=e.code,
            position=e.position,
        )
    return EvalResult(ok=True, result=value, rpn=rpn_text)


def validate_expression(text: str) -> tuple[bool, str | None]:
    """Check that an expression tokenizes and converts, without evaluating it.

    Args:
        text: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from btmath_pkg.api import validate_expression
        >>> validate_expression("sqrt(-1)")
        (True, None)
        >>> validate_expression("(2 + 3")
        (False, "Missing ')' for '(' at position 0")
    """
    try:
        to_rpn(tokenize(text, config.MAX_INPUT_LENGTH))
    except EvaluationError as e:
        return False, str(e)
    return True, None


def expression_to_rpn(text: str) -> str:
    """Return the RPN form of an infix expression.

    Example:
        >>> from btmath_pkg.api import expression_to_rpn
        >>> expression_to_rpn("-2 ^ 2")
        '2 neg 2 ^'
    """
    return format_rpn(to_rpn(tokenize(text, config.MAX_INPUT_LENGTH)))
