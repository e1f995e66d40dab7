"""Infix to RPN conversion and result formatting.

This module handles:
- Shunting-yard conversion of lexer tokens into Reverse Polish Notation
- Operand/operator alternation checks, reported as syntax errors
- Function-call argument counting (comma separated)
- Rendering of RPN sequences and numeric results
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from . import config
from .tokens import OPERATOR_KINDS, Token, TokenKind
from .types import ExpressionSyntaxError


@dataclass
class _ParenFrame:
    """Bookkeeping for one open parenthesis."""

    paren: Token
    function: Token | None = None
    arguments: int = 1


def _unexpected(token: Token) -> ExpressionSyntaxError:
    return ExpressionSyntaxError(
        f"Unexpected '{token}' at position {token.position}",
        "UNEXPECTED_TOKEN",
        token.position,
    )


def _missing_operand(token: Token) -> ExpressionSyntaxError:
    return ExpressionSyntaxError(
        f"Missing operand before '{token}' at position {token.position}",
        "MISSING_OPERAND",
        token.position,
    )


def _should_pop(top: Token, incoming: Token) -> bool:
    """Return True if ``top`` must be output before ``incoming`` is pushed."""
    if top.kind not in OPERATOR_KINDS and top.kind is not TokenKind.FUNCTION:
        return False
    if top.precedence > incoming.precedence:
        return True
    return top.precedence == incoming.precedence and incoming.value.is_left_associative


def _flush_to_paren(stack: list[Token], output: list[Token]) -> bool:
    """Move operators to the output until a '(' is on top of the stack.

    Returns:
        True if a '(' was found (it stays on the stack), False if the stack emptied
    """
    while stack:
        if stack[-1].kind is TokenKind.LEFT_PAREN:
            return True
        output.append(stack.pop())
    return False


def to_rpn(tokens: list[Token]) -> list[Token]:
    """Convert infix tokens to RPN order with the shunting-yard algorithm.

    Args:
        tokens: Tokens as produced by ``lexer.tokenize``

    Returns:
        New list of tokens in postfix order (no parentheses or commas)

    Raises:
        ExpressionSyntaxError: On empty input, unbalanced parentheses, a wrong
            number of function arguments or a misplaced operand/operator
    """
    if not tokens:
        raise ExpressionSyntaxError("Empty expression", "EMPTY_EXPRESSION")

    output: list[Token] = []
    stack: list[Token] = []
    frames: list[_ParenFrame] = []
    expect_operand = True

    for index, token in enumerate(tokens):
        kind = token.kind

        if token.is_operand:
            if not expect_operand:
                raise _unexpected(token)
            output.append(token)
            expect_operand = False

        elif kind is TokenKind.FUNCTION:
            if not expect_operand:
                raise _unexpected(token)
            following = tokens[index + 1] if index + 1 < len(tokens) else None
            called = following is not None and following.kind is TokenKind.LEFT_PAREN
            if not called and token.value.arity != 1:
                raise ExpressionSyntaxError(
                    f"Function '{token}' takes {token.value.arity} arguments "
                    f"and must be called with parentheses",
                    "ARGUMENT_COUNT",
                    token.position,
                )
            stack.append(token)

        elif kind is TokenKind.LEFT_PAREN:
            if not expect_operand:
                raise _unexpected(token)
            previous = tokens[index - 1] if index > 0 else None
            if previous is not None and previous.kind is TokenKind.FUNCTION:
                frames.append(_ParenFrame(token, previous))
            else:
                frames.append(_ParenFrame(token))
            stack.append(token)

        elif kind is TokenKind.COMMA:
            if expect_operand:
                raise _missing_operand(token)
            _flush_to_paren(stack, output)
            if not frames or frames[-1].function is None:
                raise ExpressionSyntaxError(
                    f"Comma outside of a function call at position {token.position}",
                    "MISPLACED_COMMA",
                    token.position,
                )
            frames[-1].arguments += 1
            expect_operand = True

        elif kind is TokenKind.RIGHT_PAREN:
            if expect_operand:
                raise _missing_operand(token)
            if not _flush_to_paren(stack, output):
                raise ExpressionSyntaxError(
                    f"Missing '(' for ')' at position {token.position}",
                    "UNMATCHED_PAREN",
                    token.position,
                )
            stack.pop()
            frame = frames.pop()
            if frame.function is not None:
                function = stack.pop()
                if frame.arguments != function.value.arity:
                    raise ExpressionSyntaxError(
                        f"Function '{function}' takes {function.value.arity} "
                        f"argument(s), got {frame.arguments}",
                        "ARGUMENT_COUNT",
                        function.position,
                    )
                output.append(function)

        elif kind is TokenKind.UNARY_MINUS:
            # Prefix operator: nothing before it is complete yet
            if not expect_operand:
                raise _unexpected(token)
            stack.append(token)

        else:
            if expect_operand:
                raise _missing_operand(token)
            while stack and _should_pop(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)
            expect_operand = True

    if expect_operand:
        last = tokens[-1]
        raise ExpressionSyntaxError(
            f"Expression ends after '{last}' where an operand is expected",
            "MISSING_OPERAND",
            last.position,
        )

    while stack:
        top = stack.pop()
        if top.kind is TokenKind.LEFT_PAREN:
            raise ExpressionSyntaxError(
                f"Missing ')' for '(' at position {top.position}",
                "UNMATCHED_PAREN",
                top.position,
            )
        output.append(top)

    return output


def format_rpn(rpn: list[Token]) -> str:
    """Render an RPN sequence as space-separated symbols (e.g. "2 3 4 * +")."""
    return " ".join(str(token) for token in rpn)


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: config.OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    try:
        fmt = "{:." + str(int(precision)) + "g}"
        return fmt.format(float(val))
    except (ValueError, TypeError, OverflowError):
        # Fallback for non-numeric or invalid values
        return str(val)
