"""
Error types for Lox scanning, parsing, and evaluation.

Every error carries a message, the 1-indexed source line, and (when one
exists) the token that triggered it. ``report()`` renders the diagnostic
line printed by the command line tools.
"""

from __future__ import annotations

from .ir.tokens import Token, TokenKind


class LoxError(Exception):
    """Base exception for all Lox errors."""

    def __init__(self, message: str, line: int, token: Token | None = None):
        self.message = message
        self.line = line
        self.token = token
        super().__init__(self.report())

    @property
    def lexeme(self) -> str | None:
        """Source text to quote in the report, if any."""
        if self.token is None or self.token.kind == TokenKind.EOF:
            return None
        return self.token.lexeme

    def report(self) -> str:
        """
        Format the error as a single diagnostic line.

        Returns:
            ``LINE 3: message`` at end of input, otherwise
            ``LINE 3: 'lexeme': message``.
        """
        lexeme = self.lexeme
        if lexeme is None:
            return f"LINE {self.line}: {self.message}"
        return f"LINE {self.line}: '{lexeme}': {self.message}"


class ScanError(LoxError):
    """
    Raised (or collected) when source text cannot be tokenized.

    Examples:
    - Unterminated string literal
    - Unexpected character
    """

    def __init__(self, message: str, line: int, char: str | None = None):
        self.char = char
        super().__init__(message, line)

    @property
    def lexeme(self) -> str | None:
        return self.char


class ScanErrors(LoxError):
    """All scan errors found in one source text."""

    def __init__(self, errors: list[ScanError]):
        if not errors:
            raise ValueError("ScanErrors requires at least one error")
        self.errors = list(errors)
        first = self.errors[0]
        super().__init__(first.message, first.line)

    def report(self) -> str:
        return "\n".join(error.report() for error in self.errors)


class ParseError(LoxError):
    """
    Raised when a token sequence is not a valid expression.

    Examples:
    - Expression expected but another token found
    - Missing closing parenthesis
    - Nesting deeper than the configured bound
    """

    pass


class LoxRuntimeError(LoxError):
    """
    Raised when an operator is applied to operands of the wrong type.

    Named to avoid shadowing the builtin ``RuntimeError``.
    """

    pass


class ConfigError(Exception):
    """Raised when a configuration file is unreadable or invalid."""

    pass


def make_parse_error(message: str, token: Token) -> ParseError:
    """
    Helper to create a ParseError located at a token.

    Args:
        message: Error description
        token: Offending token (its line is used)

    Returns:
        ParseError with token context attached
    """
    return ParseError(message, token.line, token)


def make_runtime_error(message: str, operator: Token) -> LoxRuntimeError:
    """Helper to create a LoxRuntimeError located at an operator token."""
    return LoxRuntimeError(message, operator.line, operator)
