"""
Recursive descent parser for Lox expressions.

Grammar (precedence low to high):
    expression  → equality
    equality    → comparison (("!=" | "==") comparison)*
    comparison  → term ((">" | ">=" | "<" | "<=") term)*
    term        → factor (("-" | "+") factor)*
    factor      → unary (("/" | "*") unary)*
    unary       → ("!" | "-") unary | primary
    primary     → NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"

Binary levels fold left, so ``1 - 2 - 3`` is ``(1 - 2) - 3``. Only one
expression is parsed; tokens after it are left for the caller.
"""

from __future__ import annotations

import logging

from pylox.core.errors import ParseError, make_parse_error
from pylox.core.ir.expressions import Binary, Expr, Grouping, Literal, Unary
from pylox.core.ir.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100

# Tokens that begin a statement; synchronize() stops in front of them
_STATEMENT_STARTS = frozenset(
    {
        TokenKind.CLASS,
        TokenKind.FUN,
        TokenKind.VAR,
        TokenKind.FOR,
        TokenKind.IF,
        TokenKind.WHILE,
        TokenKind.PRINT,
        TokenKind.RETURN,
    }
)

_LITERAL_KEYWORDS: dict[TokenKind, bool | None] = {
    TokenKind.FALSE: False,
    TokenKind.TRUE: True,
    TokenKind.NIL: None,
}


class Parser:
    """Recursive descent parser over a token list ending in EOF."""

    def __init__(self, tokens: list[Token], max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("Token list must end with an EOF token")
        self.tokens = tokens
        self.current = 0
        self.max_depth = max_depth
        self._depth = 0

    # -- Cursor helpers --

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def is_at_end(self) -> bool:
        return self.peek().kind == TokenKind.EOF

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def check(self, kind: TokenKind) -> bool:
        if self.is_at_end():
            return False
        return self.peek().kind == kind

    def match(self, *kinds: TokenKind) -> bool:
        for kind in kinds:
            if self.check(kind):
                self.advance()
                return True
        return False

    def expect(self, kind: TokenKind, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        logger.debug("Parse error at %r: %s", token, message)
        return make_parse_error(message, token)

    def _nest(self) -> None:
        self._depth += 1
        if self._depth > self.max_depth:
            raise self.error(self.peek(), "Expression nesting is too deep.")

    def _unnest(self) -> None:
        self._depth -= 1

    # -- Grammar rules --

    def expression(self) -> Expr:
        """Top-level: equality."""
        return self.equality()

    def equality(self) -> Expr:
        """comparison (('!=' | '==') comparison)*"""
        expr = self.comparison()
        while self.match(TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL):
            operator = self.previous()
            right = self.comparison()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def comparison(self) -> Expr:
        """term (('>' | '>=' | '<' | '<=') term)*"""
        expr = self.term()
        while self.match(
            TokenKind.GREATER,
            TokenKind.GREATER_EQUAL,
            TokenKind.LESS,
            TokenKind.LESS_EQUAL,
        ):
            operator = self.previous()
            right = self.term()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def term(self) -> Expr:
        """factor (('-' | '+') factor)*"""
        expr = self.factor()
        while self.match(TokenKind.MINUS, TokenKind.PLUS):
            operator = self.previous()
            right = self.factor()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def factor(self) -> Expr:
        """unary (('/' | '*') unary)*"""
        expr = self.unary()
        while self.match(TokenKind.SLASH, TokenKind.STAR):
            operator = self.previous()
            right = self.unary()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def unary(self) -> Expr:
        """('!' | '-') unary | primary"""
        if self.match(TokenKind.BANG, TokenKind.MINUS):
            operator = self.previous()
            self._nest()
            try:
                right = self.unary()
            finally:
                self._unnest()
            return Unary(operator=operator, right=right)
        return self.primary()

    def primary(self) -> Expr:
        """NUMBER | STRING | 'true' | 'false' | 'nil' | '(' expression ')'"""
        tok = self.peek()

        if tok.kind in _LITERAL_KEYWORDS:
            self.advance()
            return Literal(value=_LITERAL_KEYWORDS[tok.kind])

        if self.match(TokenKind.NUMBER, TokenKind.STRING):
            return Literal(value=self.previous().literal)

        if self.match(TokenKind.LEFT_PAREN):
            self._nest()
            try:
                expr = self.expression()
            finally:
                self._unnest()
            self.expect(TokenKind.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expression=expr)

        raise self.error(tok, "Expect expression.")

    # -- Error recovery --

    def synchronize(self) -> None:
        """Discard tokens until the start of the next statement."""
        self.advance()

        while not self.is_at_end():
            if self.previous().kind == TokenKind.SEMICOLON:
                return
            if self.peek().kind in _STATEMENT_STARTS:
                return
            self.advance()


def parse(tokens: list[Token], max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    """Parse one expression from a token list.

    Args:
        tokens: Scanner output, ending with EOF.
        max_depth: Bound on nested groupings and prefix operators.

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the tokens do not start with a valid expression.
    """
    parser = Parser(tokens, max_depth=max_depth)
    expr = parser.expression()
    logger.debug("Parsed %s (stopped at token %d of %d)", expr, parser.current, len(tokens))
    return expr
