"""Token data model shared by the lexer, the converter and the evaluator.

Operators, functions and constants are closed enumerations. The lexer resolves
every name to one of their members once, so later stages dispatch on enum
members and never compare strings.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Operator(Enum):
    """Operators with their display symbol, precedence rank and associativity."""

    ADD = ("+", 1, Associativity.LEFT)
    SUB = ("-", 1, Associativity.LEFT)
    MUL = ("*", 2, Associativity.LEFT)
    DIV = ("/", 2, Associativity.LEFT)
    POW = ("^", 3, Associativity.RIGHT)
    NEGATE = ("neg", 4, Associativity.RIGHT)  # unary minus

    def __init__(self, symbol: str, precedence: int, associativity: Associativity):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity

    @property
    def is_left_associative(self) -> bool:
        return self.associativity is Associativity.LEFT


class Function(Enum):
    """Built-in functions with their lowercase name and arity."""

    LN = ("ln", 1)
    LOG2 = ("log2", 1)
    LOG10 = ("log10", 1)
    EXP = ("exp", 1)
    ASIN = ("asin", 1)
    ACOS = ("acos", 1)
    ATAN = ("atan", 1)
    SIN = ("sin", 1)
    COS = ("cos", 1)
    TAN = ("tan", 1)
    ABS = ("abs", 1)
    SQRT = ("sqrt", 1)
    POW = ("pow", 2)

    def __init__(self, symbol: str, arity: int):
        self.symbol = symbol
        self.arity = arity


class Constant(Enum):
    PI = ("pi", math.pi)
    E = ("e", math.e)

    def __init__(self, symbol: str, number: float):
        self.symbol = symbol
        self.number = number


class TokenKind(Enum):
    NUMBER = "number"
    CONSTANT = "constant"
    OPERATOR = "operator"
    UNARY_MINUS = "unary_minus"
    FUNCTION = "function"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    COMMA = "comma"


# A function written without parentheses binds tighter than any operator
PREFIX_FUNCTION_PRECEDENCE = 5

BINARY_OPERATORS: dict[str, Operator] = {
    op.symbol: op for op in Operator if op is not Operator.NEGATE
}

FUNCTION_NAMES: dict[str, Function] = {func.symbol: func for func in Function}
FUNCTION_NAMES["log"] = Function.LOG10

CONSTANT_NAMES: dict[str, Constant] = {const.symbol: const for const in Constant}

IDENTIFIERS: dict[str, Function | Constant] = {**FUNCTION_NAMES, **CONSTANT_NAMES}

# Longest names first so that a prefix scan finds the longest match
IDENTIFIER_NAMES: tuple[str, ...] = tuple(
    sorted(IDENTIFIERS, key=lambda name: (-len(name), name))
)

OPERAND_KINDS = frozenset({TokenKind.NUMBER, TokenKind.CONSTANT})
OPERATOR_KINDS = frozenset({TokenKind.OPERATOR, TokenKind.UNARY_MINUS})


@dataclass(frozen=True)
class Token:
    """A single lexical unit and the offset where it starts in the input."""

    kind: TokenKind
    position: int = 0
    value: float | Operator | Function | Constant | None = None

    @property
    def precedence(self) -> int:
        if self.kind in OPERATOR_KINDS:
            return self.value.precedence
        if self.kind is TokenKind.FUNCTION:
            return PREFIX_FUNCTION_PRECEDENCE
        return 0

    @property
    def is_operand(self) -> bool:
        return self.kind in OPERAND_KINDS

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return "{:.15g}".format(self.value)
        if self.kind is TokenKind.CONSTANT:
            return self.value.name
        if self.kind in OPERATOR_KINDS or self.kind is TokenKind.FUNCTION:
            return self.value.symbol
        if self.kind is TokenKind.LEFT_PAREN:
            return "("
        if self.kind is TokenKind.RIGHT_PAREN:
            return ")"
        return ","
