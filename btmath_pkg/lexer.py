"""Tokenizer: turns expression text into a flat list of tokens."""

from __future__ import annotations

import math
import string

from .config import MAX_INPUT_LENGTH
from .tokens import (
    BINARY_OPERATORS,
    IDENTIFIER_NAMES,
    IDENTIFIERS,
    Constant,
    Operator,
    Token,
    TokenKind,
)
from .types import LexError

DIGITS = frozenset(string.digits)

PUNCTUATION = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    ",": TokenKind.COMMA,
}

# A '-' following one of these (or at the start) is a unary minus
_UNARY_CONTEXT = frozenset(
    {
        TokenKind.OPERATOR,
        TokenKind.UNARY_MINUS,
        TokenKind.FUNCTION,
        TokenKind.LEFT_PAREN,
        TokenKind.COMMA,
    }
)


def _is_unary_context(previous: Token | None) -> bool:
    return previous is None or previous.kind in _UNARY_CONTEXT


def _scan_number(text: str, start: int) -> tuple[float, int]:
    """Scan a numeric literal starting at ``start``.

    Returns:
        (value, index just past the literal)
    """
    end = start
    seen_point = False
    seen_digit = False
    while end < len(text) and (text[end] in DIGITS or text[end] == "."):
        if text[end] == ".":
            if seen_point:
                raise LexError(
                    f"More than one '.' in number at position {end}",
                    "MALFORMED_NUMBER",
                    end,
                )
            seen_point = True
        else:
            seen_digit = True
        end += 1
    if not seen_digit:
        raise LexError(
            f"Unexpected character '.' at position {start}", "UNEXPECTED_CHAR", start
        )
    value = float(text[start:end])
    if math.isinf(value):
        raise LexError(f"Number too big at position {start}", "NUMBER_TOO_BIG", start)
    return value, end


def _match_identifier(text: str, start: int) -> str | None:
    """Return the longest function or constant name at ``start`` (case-insensitive)."""
    for name in IDENTIFIER_NAMES:
        span = text[start : start + len(name)]
        if span.isascii() and span.lower() == name:
            return name
    return None


def tokenize(text: str, max_length: int = MAX_INPUT_LENGTH) -> list[Token]:
    """Scan ``text`` into tokens.

    Unary minus is told apart from subtraction by looking at the previously
    emitted token, and is emitted as its own ``UNARY_MINUS`` kind.

    Args:
        text: Infix expression (e.g. "2 * sin(PI / 4)")
        max_length: Maximum accepted input length in characters

    Returns:
        List of tokens in input order

    Raises:
        LexError: On an unrecognized character, a malformed number or
            overly long input
    """
    if len(text) > max_length:
        raise LexError(
            f"Input too long ({len(text)} > {max_length} characters)",
            "INPUT_TOO_LONG",
        )

    tokens: list[Token] = []
    i = 0
    while i < len(text):
        char = text[i]
        previous = tokens[-1] if tokens else None

        if char.isspace():
            i += 1
            continue

        if char in DIGITS or char == ".":
            number, end = _scan_number(text, i)
            tokens.append(Token(TokenKind.NUMBER, i, number))
            i = end
            continue

        if char.isalpha():
            name = _match_identifier(text, i)
            if name is None:
                raise LexError(
                    f"Unexpected character '{char}' at position {i}",
                    "UNEXPECTED_CHAR",
                    i,
                )
            entry = IDENTIFIERS[name]
            kind = TokenKind.CONSTANT if isinstance(entry, Constant) else TokenKind.FUNCTION
            tokens.append(Token(kind, i, entry))
            i += len(name)
            continue

        if char == "-" and _is_unary_context(previous):
            tokens.append(Token(TokenKind.UNARY_MINUS, i, Operator.NEGATE))
        elif char in BINARY_OPERATORS:
            tokens.append(Token(TokenKind.OPERATOR, i, BINARY_OPERATORS[char]))
        elif char in PUNCTUATION:
            tokens.append(Token(PUNCTUATION[char], i))
        else:
            raise LexError(
                f"Unexpected character '{char}' at position {i}", "UNEXPECTED_CHAR", i
            )
        i += 1

    return tokens
