"""
Intermediate representation for Lox: tokens and the expression AST.
"""

from .expressions import (
    Binary,
    Expr,
    Grouping,
    Literal,
    RuntimeValue,
    Unary,
    format_number,
    format_value,
    render,
)
from .tokens import KEYWORDS, Token, TokenKind

__all__ = [
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenKind",
    # Expressions
    "Binary",
    "Expr",
    "Grouping",
    "Literal",
    "RuntimeValue",
    "Unary",
    "format_number",
    "format_value",
    "render",
]
