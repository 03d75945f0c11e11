"""Tests for Lox error types and their report format."""

from __future__ import annotations

import pytest

from pylox.core.errors import (
    LoxError,
    LoxRuntimeError,
    ParseError,
    ScanError,
    ScanErrors,
    make_parse_error,
    make_runtime_error,
)
from pylox.core.ir.tokens import Token, TokenKind


class TestReportFormat:
    """Errors render as LINE diagnostics."""

    def test_token_with_lexeme(self) -> None:
        token = Token(TokenKind.PLUS, "+", None, 4)
        err = make_runtime_error("Operands must be numbers.", token)
        assert err.report() == "LINE 4: '+': Operands must be numbers."
        assert str(err) == err.report()

    def test_eof_token_omits_lexeme(self) -> None:
        token = Token(TokenKind.EOF, "", None, 2)
        err = make_parse_error("Expect expression.", token)
        assert err.report() == "LINE 2: Expect expression."

    def test_error_without_token(self) -> None:
        assert LoxError("Something broke.", 7).report() == "LINE 7: Something broke."

    def test_scan_error_quotes_character(self) -> None:
        assert ScanError("Unexpected character.", 1, "?").report() == (
            "LINE 1: '?': Unexpected character."
        )

    def test_scan_errors_one_line_each(self) -> None:
        errors = [ScanError("Unexpected character.", 1, "@"), ScanError("Unterminated string.", 3)]
        aggregate = ScanErrors(errors)
        assert aggregate.line == 1
        assert aggregate.report().splitlines() == [
            "LINE 1: '@': Unexpected character.",
            "LINE 3: Unterminated string.",
        ]

    def test_scan_errors_needs_errors(self) -> None:
        with pytest.raises(ValueError):
            ScanErrors([])


class TestHierarchy:
    """All Lox errors share a base class."""

    @pytest.mark.parametrize("cls", [ScanError, ScanErrors, ParseError, LoxRuntimeError])
    def test_subclasses(self, cls: type) -> None:
        assert issubclass(cls, LoxError)

    def test_runtime_error_does_not_shadow_builtin(self) -> None:
        assert not issubclass(LoxRuntimeError, RuntimeError)

    def test_helpers_attach_token(self) -> None:
        token = Token(TokenKind.RIGHT_PAREN, ")", None, 5)
        err = make_parse_error("Expect expression.", token)
        assert isinstance(err, ParseError)
        assert err.token is token
        assert err.line == 5
