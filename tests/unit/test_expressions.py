"""Tests for the expression AST models and their prefix-form rendering."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pylox.core.ir.expressions import (
    Binary,
    Grouping,
    Literal,
    Unary,
    format_number,
    render,
)
from pylox.core.ir.tokens import Token, TokenKind


def op(kind: TokenKind, lexeme: str) -> Token:
    return Token(kind, lexeme, None, 1)


class TestRender:
    """Trees render as fully parenthesized prefix expressions."""

    def test_printer_example(self) -> None:
        expr = Binary(
            left=Unary(operator=op(TokenKind.MINUS, "-"), right=Literal(value=123.0)),
            operator=op(TokenKind.STAR, "*"),
            right=Grouping(expression=Literal(value=45.67)),
        )
        assert str(expr) == "(* (- 123) (group 45.67))"

    def test_literals(self) -> None:
        assert str(Literal(value=None)) == "nil"
        assert str(Literal(value=True)) == "true"
        assert str(Literal(value=False)) == "false"
        assert str(Literal(value="hi")) == "hi"
        assert str(Literal(value=1.5)) == "1.5"

    def test_render_matches_str(self) -> None:
        expr = Grouping(expression=Literal(value=1.0))
        assert render(expr) == str(expr) == "(group 1)"

    def test_deep_left_chain(self) -> None:
        expr = Literal(value=1.0)
        for _ in range(5000):
            expr = Binary(left=expr, operator=op(TokenKind.PLUS, "+"), right=Literal(value=1.0))
        text = render(expr)
        assert text.startswith("(+ " * 5000 + "1 1)")
        assert text.endswith(" 1)")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (3.0, "3"),
            (0.1, "0.1"),
            (-2.0, "-2"),
            (1e16, "10000000000000000"),
            (1e21, "1000000000000000000000"),
            (1e-5, "0.00001"),
            (float("inf"), "inf"),
            (float("-inf"), "-inf"),
            (float("nan"), "nan"),
        ],
    )
    def test_format_number(self, value: float, expected: str) -> None:
        assert format_number(value) == expected


class TestModels:
    """AST nodes are immutable, comparable pydantic models."""

    def test_nodes_are_frozen(self) -> None:
        expr = Literal(value=1.0)
        with pytest.raises(ValidationError):
            expr.value = 2.0  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        a = Unary(operator=op(TokenKind.BANG, "!"), right=Literal(value=None))
        b = Unary(operator=op(TokenKind.BANG, "!"), right=Literal(value=None))
        assert a == b

    def test_bool_literal_stays_bool(self) -> None:
        assert Literal(value=True).value is True
        assert Literal(value=False).value is False
