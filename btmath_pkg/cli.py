"""Command-line interface and interactive REPL for BT Math."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from . import config
from .api import evaluate
from .logging_config import get_logger, setup_logging
from .parser import format_number

logger = get_logger("cli")

PROMPT = ">>> "


def print_result_pretty(
    expression: str,
    res: dict[str, Any],
    output_format: str = "human",
    show_rpn: bool = False,
) -> None:
    """Print result in specified format.

    Args:
        expression: The expression as typed by the user
        res: Result dictionary (EvalResult.to_dict())
        output_format: "json" for JSON output, "human" for human-readable
        show_rpn: Also print the RPN form in human output
    """
    if output_format == "json":
        print(json.dumps({"expression": expression, **res}, ensure_ascii=False))
        return
    if show_rpn and res.get("rpn"):
        print(f"RPN: {res['rpn']}")
    if not res.get("ok"):
        print("Error:", res.get("error"))
        return
    print(f"Result of '{expression}' = {format_number(res.get('result'))}")


def evaluate_and_print(
    expression: str, output_format: str = "human", show_rpn: bool = False
) -> bool:
    """Evaluate one expression, print it and return whether it succeeded."""
    result = evaluate(expression)
    if result.ok:
        logger.info("Evaluated %r -> %r", expression, result.result)
    else:
        logger.info("Rejected %r: %s", expression, result.error_code)
    print_result_pretty(expression, result.to_dict(), output_format, show_rpn)
    return result.ok


def print_help_text() -> None:
    print(
        "Enter an arithmetic expression, e.g. 2 + 3 * 4 or sqrt(16) - pow(2, 3).\n"
        "\n"
        "Operators:  + - * / ^   (^ is right-associative, unary minus binds tightest)\n"
        "Functions:  ln log2 log10 exp asin acos atan sin cos tan abs sqrt  pow(x, y)\n"
        "Constants:  PI E   (names are case-insensitive)\n"
        "\n"
        "Commands:   help, rpn (toggle RPN display), quit, exit"
    )


def repl_loop(output_format: str = "human", show_rpn: bool = False) -> None:
    """Interactive REPL loop with graceful interrupt handling."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    print("BT Math - type 'help' for commands, 'quit' to exit.")
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return
        except KeyboardInterrupt:
            print("\nInterrupted. Type 'quit' to exit.")
            continue

        expression = line.strip()
        if not expression:
            continue
        command = expression.lower()
        if command in ("quit", "exit"):
            return
        if command == "help":
            print_help_text()
            continue
        if command == "rpn":
            show_rpn = not show_rpn
            print(f"RPN display {'on' if show_rpn else 'off'}")
            continue
        evaluate_and_print(expression, output_format, show_rpn)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for BT Math CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 when every expression evaluated, 1 otherwise)
    """
    parser = argparse.ArgumentParser(
        prog="btmath", description="Evaluate arithmetic expressions via RPN."
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate in turn (starts the REPL when omitted)",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--rpn", action="store_true", help="Also print the RPN form of each expression"
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "--max-stack-depth", type=int, help="Set the evaluator's value stack limit"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)
    if args.max_stack_depth and args.max_stack_depth > 0:
        config.MAX_STACK_DEPTH = int(args.max_stack_depth)

    if args.version:
        print(config.VERSION)
        return 0

    expressions = list(args.expressions)
    if args.eval_expr is not None:
        expressions.append(args.eval_expr)

    if not expressions:
        repl_loop(args.format, args.rpn)
        return 0

    logger.debug("Evaluating %d expression(s)", len(expressions))
    all_ok = True
    for expression in expressions:
        if not evaluate_and_print(expression, args.format, args.rpn):
            all_ok = False
    return 0 if all_ok else 1


if __name__ == "__main__":
    sys.exit(main_entry())
