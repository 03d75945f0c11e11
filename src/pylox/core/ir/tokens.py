"""
Token types for the Lox scanner.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from types import MappingProxyType


class TokenKind(StrEnum):
    """Token types in the Lox language."""

    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # End of input
    EOF = auto()


KEYWORDS: MappingProxyType[str, TokenKind] = MappingProxyType(
    {
        "and": TokenKind.AND,
        "class": TokenKind.CLASS,
        "else": TokenKind.ELSE,
        "false": TokenKind.FALSE,
        "for": TokenKind.FOR,
        "fun": TokenKind.FUN,
        "if": TokenKind.IF,
        "nil": TokenKind.NIL,
        "or": TokenKind.OR,
        "print": TokenKind.PRINT,
        "return": TokenKind.RETURN,
        "super": TokenKind.SUPER,
        "this": TokenKind.THIS,
        "true": TokenKind.TRUE,
        "var": TokenKind.VAR,
        "while": TokenKind.WHILE,
    }
)


@dataclass(frozen=True)
class Token:
    """
    A single token from the scanner.

    Attributes:
        kind: Type of token
        lexeme: Exact source text of the token
        literal: Parsed payload for NUMBER (float) and STRING (str) tokens
        line: Line number (1-indexed)
    """

    kind: TokenKind
    lexeme: str
    literal: float | str | None
    line: int

    def __str__(self) -> str:
        literal = "null" if self.literal is None else repr(self.literal)
        return f"{self.kind.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.lexeme!r}, line={self.line})"
