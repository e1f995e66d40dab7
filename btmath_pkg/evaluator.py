"""RPN stack machine."""

from __future__ import annotations

import math
from typing import Callable

from .config import MAX_STACK_DEPTH
from .tokens import Function, Operator, Token, TokenKind
from .types import EvalError


# math raises ValueError outside each function's real domain
UNARY_FUNCTIONS: dict[Function, Callable[[float], float]] = {
    Function.LN: math.log,
    Function.LOG2: math.log2,
    Function.LOG10: math.log10,
    Function.EXP: math.exp,
    Function.ASIN: math.asin,
    Function.ACOS: math.acos,
    Function.ATAN: math.atan,
    Function.SIN: math.sin,
    Function.COS: math.cos,
    Function.TAN: math.tan,
    Function.ABS: math.fabs,
    Function.SQRT: math.sqrt,
}


def _divide(left: float, right: float) -> float:
    if right == 0:
        raise ZeroDivisionError("division by zero")
    return left / right


def _power(base: float, exponent: float) -> float:
    # math.pow raises ValueError for non-real results and 0 ** negative
    return math.pow(base, exponent)


BINARY_OPERATORS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: _divide,
    Operator.POW: _power,
}

BINARY_FUNCTIONS: dict[Function, Callable[[float, float], float]] = {
    Function.POW: _power,
}


def _pop(stack: list[float], token: Token) -> float:
    if not stack:
        raise EvalError(
            f"Not enough values for '{token}' at position {token.position}",
            "STACK_UNDERFLOW",
            token.position,
        )
    return stack.pop()


def _apply(token: Token, func: Callable[..., float], *args: float) -> float:
    """Call ``func`` and translate float errors into ``EvalError``."""
    name = str(token)
    try:
        result = func(*args)
    except ZeroDivisionError:
        raise EvalError(
            f"Division by zero at position {token.position}",
            "DIVISION_BY_ZERO",
            token.position,
        ) from None
    except ValueError:
        raise EvalError(
            f"Math domain error in '{name}' at position {token.position}",
            "DOMAIN_ERROR",
            token.position,
            function=name,
        ) from None
    except OverflowError:
        raise EvalError(
            f"Numeric overflow in '{name}' at position {token.position}",
            "NUMERIC_OVERFLOW",
            token.position,
            function=name,
        ) from None
    if math.isinf(result):
        raise EvalError(
            f"Numeric overflow in '{name}' at position {token.position}",
            "NUMERIC_OVERFLOW",
            token.position,
            function=name,
        )
    return result


def evaluate_rpn(rpn: list[Token], max_depth: int = MAX_STACK_DEPTH) -> float:
    """Evaluate an RPN token sequence with a single value stack.

    Args:
        rpn: Tokens in postfix order, as produced by ``parser.to_rpn``
        max_depth: Maximum number of values held on the stack at once

    Returns:
        The single value left on the stack

    Raises:
        EvalError: On stack underflow/overflow, division by zero, a domain
            error, numeric overflow or a leftover stack
    """
    stack: list[float] = []

    for token in rpn:
        kind = token.kind

        if kind is TokenKind.NUMBER or kind is TokenKind.CONSTANT:
            if len(stack) >= max_depth:
                raise EvalError(
                    f"Value stack exceeds {max_depth} entries at position {token.position}",
                    "STACK_OVERFLOW",
                    token.position,
                )
            stack.append(token.value if kind is TokenKind.NUMBER else token.value.number)

        elif kind is TokenKind.UNARY_MINUS:
            stack.append(-_pop(stack, token))

        elif kind is TokenKind.OPERATOR:
            right = _pop(stack, token)
            left = _pop(stack, token)
            stack.append(_apply(token, BINARY_OPERATORS[token.value], left, right))

        elif kind is TokenKind.FUNCTION and token.value.arity == 1:
            operand = _pop(stack, token)
            stack.append(_apply(token, UNARY_FUNCTIONS[token.value], operand))

        elif kind is TokenKind.FUNCTION:
            exponent = _pop(stack, token)
            base = _pop(stack, token)
            stack.append(_apply(token, BINARY_FUNCTIONS[token.value], base, exponent))

        else:
            raise EvalError(
                f"Invalid token '{token}' in RPN sequence at position {token.position}",
                "MALFORMED_EXPRESSION",
                token.position,
            )

    if len(stack) != 1:
        raise EvalError(
            f"Malformed expression: {len(stack)} values left on the stack, expected 1",
            "MALFORMED_EXPRESSION",
        )
    return stack[0]
