"""
Lox expression language.

Scanner, parser, and tree-walking evaluator for the expression subset of
Lox: arithmetic, comparison, equality, logical not, string concatenation,
and nil/boolean semantics.

Usage:
    from pylox.core.expression_lang import evaluate, parse, scan

    expr = parse(scan("(1 + 2) * 3"))
    result = evaluate(expr)
    # result == 9.0
"""

from pylox.core.expression_lang.interpreter import (
    Interpreter,
    evaluate,
    interpret,
    is_equal,
    is_truthy,
    stringify,
)
from pylox.core.expression_lang.parser import Parser, parse
from pylox.core.expression_lang.scanner import Scanner, scan

__all__ = [
    "Interpreter",
    "Parser",
    "Scanner",
    "evaluate",
    "interpret",
    "is_equal",
    "is_truthy",
    "parse",
    "scan",
    "stringify",
]
