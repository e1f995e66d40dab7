"""Type definitions, result dataclass and the error hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""

    ok: bool
    result: float | None = None
    rpn: str | None = None
    error: str | None = None
    error_code: str | None = None
    position: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.rpn is not None:
            result_dict["rpn"] = self.rpn
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        if self.position is not None:
            result_dict["position"] = self.position
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}", f"result={self.result!r}"]
        if self.rpn is not None:
            parts.append(f"rpn={self.rpn!r}")
        return f"EvalResult({', '.join(parts)})"


class EvaluationError(Exception):
    """Base class for every failure of the evaluation pipeline."""

    def __init__(
        self, message: str, code: str = "EVALUATION_ERROR", position: int | None = None
    ):
        self.message = message
        self.code = code
        self.position = position
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class LexError(EvaluationError):
    """Raised when the tokenizer meets text it cannot scan."""

    def __init__(
        self, message: str, code: str = "UNEXPECTED_CHAR", position: int | None = None
    ):
        super().__init__(message, code, position)


class ExpressionSyntaxError(EvaluationError):
    """Raised when the token stream is not a well-formed infix expression."""

    def __init__(
        self, message: str, code: str = "SYNTAX_ERROR", position: int | None = None
    ):
        super().__init__(message, code, position)


class EvalError(EvaluationError):
    """Raised by the RPN stack machine."""

    def __init__(
        self,
        message: str,
        code: str = "EVAL_ERROR",
        position: int | None = None,
        function: str | None = None,
    ):
        self.function = function
        super().__init__(message, code, position)
