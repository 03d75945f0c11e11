"""
Scanner for the Lox language.

Converts source text into a list of tokens with line tracking. Errors are
collected rather than raised so one pass reports every bad character.
"""

from __future__ import annotations

import logging

from pylox.core.errors import ScanError, ScanErrors
from pylox.core.ir.tokens import KEYWORDS, Token, TokenKind

logger = logging.getLogger(__name__)

_SINGLE_CHAR: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# char -> (kind without "=", kind with "=")
_ONE_OR_TWO_CHAR: dict[str, tuple[TokenKind, TokenKind]] = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"


def _is_alpha_numeric(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


class Scanner:
    """
    Scanner for Lox source text.

    A Scanner is single-use: create one per source string.
    """

    def __init__(self, source: str):
        self.source = source
        self.tokens: list[Token] = []
        self.errors: list[ScanError] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        """Consume and return the current character."""
        c = self.source[self.current]
        self.current += 1
        return c

    def peek(self) -> str:
        """Current character, or "" at end of input."""
        if self.is_at_end():
            return ""
        return self.source[self.current]

    def peek_next(self) -> str:
        """Character after the current one, or "" past the end."""
        if self.current + 1 >= len(self.source):
            return ""
        return self.source[self.current + 1]

    def match(self, expected: str) -> bool:
        """Consume the current character only if it equals ``expected``."""
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def scan_tokens(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            Token list terminated by exactly one EOF token. Problems found
            along the way are left in ``self.errors``.
        """
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token(TokenKind.EOF, "", None, self.line))
        logger.debug(
            "Scanned %d tokens over %d lines (%d errors)",
            len(self.tokens),
            self.line,
            len(self.errors),
        )
        return self.tokens

    def scan_token(self) -> None:
        c = self.advance()

        if c in _SINGLE_CHAR:
            self.add_token(_SINGLE_CHAR[c])
        elif c in _ONE_OR_TWO_CHAR:
            single, double = _ONE_OR_TWO_CHAR[c]
            self.add_token(double if self.match("=") else single)
        elif c == "/":
            if self.match("/"):
                self.skip_comment()
            else:
                self.add_token(TokenKind.SLASH)
        elif c in (" ", "\r", "\t"):
            pass
        elif c == "\n":
            self.line += 1
        elif c == '"':
            self.string()
        elif _is_digit(c):
            self.number()
        elif _is_alpha(c):
            self.identifier()
        else:
            self.error("Unexpected character.", c)

    def skip_comment(self) -> None:
        """Skip a line comment up to, not including, the newline."""
        while self.peek() != "\n" and not self.is_at_end():
            self.advance()

    def string(self) -> None:
        """Read a string literal; the opening quote is already consumed."""
        start_line = self.line
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.is_at_end():
            self.errors.append(ScanError("Unterminated string.", start_line))
            logger.debug("Unterminated string starting on line %d", start_line)
            return

        self.advance()  # closing quote
        value = self.source[self.start + 1 : self.current - 1]
        self.add_token(TokenKind.STRING, value)

    def number(self) -> None:
        while _is_digit(self.peek()):
            self.advance()

        # A fractional part needs at least one digit after the dot
        if self.peek() == "." and _is_digit(self.peek_next()):
            self.advance()
            while _is_digit(self.peek()):
                self.advance()

        self.add_token(TokenKind.NUMBER, float(self.source[self.start : self.current]))

    def identifier(self) -> None:
        while _is_alpha_numeric(self.peek()):
            self.advance()

        text = self.source[self.start : self.current]
        self.add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def add_token(self, kind: TokenKind, literal: float | str | None = None) -> None:
        text = self.source[self.start : self.current]
        self.tokens.append(Token(kind, text, literal, self.line))

    def error(self, message: str, char: str | None = None) -> None:
        self.errors.append(ScanError(message, self.line, char))
        logger.debug("Scan error on line %d: %s %r", self.line, message, char)


def scan(source: str) -> list[Token]:
    """
    Convenience function to scan Lox source text.

    Args:
        source: Source text

    Returns:
        List of tokens ending with EOF.

    Raises:
        ScanErrors: If any character could not be scanned.
    """
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    if scanner.errors:
        raise ScanErrors(scanner.errors)
    return tokens
