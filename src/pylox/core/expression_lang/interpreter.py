"""
Tree-walking evaluator for Lox expressions.

Evaluates an expression AST to a runtime value: ``float``, ``str``,
``True``/``False`` or ``None`` (nil). Pure evaluation, no I/O, no state
kept between calls.
"""

from __future__ import annotations

import logging
import math

from pylox.core.errors import make_runtime_error
from pylox.core.ir.expressions import (
    Binary,
    Expr,
    Grouping,
    Literal,
    RuntimeValue,
    Unary,
    format_value,
)
from pylox.core.ir.tokens import TokenKind

logger = logging.getLogger(__name__)


def is_truthy(value: RuntimeValue) -> bool:
    """Only false and nil are falsy; 0 and "" are truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left: RuntimeValue, right: RuntimeValue) -> bool:
    """Lox equality: same type and same value. Never raises."""
    # bool is a subclass of int and True == 1.0 in Python, so compare types first
    if type(left) is not type(right):
        return False
    return left == right


def stringify(value: RuntimeValue) -> str:
    """Render a runtime value for display."""
    return format_value(value)


def _is_number(value: RuntimeValue) -> bool:
    return isinstance(value, float)


class Interpreter:
    """
    Evaluator for expression trees.

    The tree is walked with an explicit work stack instead of Python
    recursion, so evaluation depth is not limited by the recursion limit.
    Operands are evaluated left to right and the first error aborts.
    """

    def evaluate(self, expr: Expr) -> RuntimeValue:
        """Evaluate an expression.

        Raises:
            LoxRuntimeError: If an operator gets operands of the wrong type.
        """
        values: list[RuntimeValue] = []
        stack: list[tuple[Expr, bool]] = [(expr, False)]

        while stack:
            node, operands_ready = stack.pop()

            if isinstance(node, Literal):
                values.append(node.value)
            elif isinstance(node, Grouping):
                stack.append((node.expression, False))
            elif isinstance(node, Unary):
                if operands_ready:
                    values.append(self._unary(node, values.pop()))
                else:
                    stack.append((node, True))
                    stack.append((node.right, False))
            elif isinstance(node, Binary):
                if operands_ready:
                    right = values.pop()
                    left = values.pop()
                    values.append(self._binary(node, left, right))
                else:
                    stack.append((node, True))
                    stack.append((node.right, False))
                    stack.append((node.left, False))
            else:
                raise TypeError(f"Unknown expression type: {type(node).__name__}")

        return values.pop()

    def interpret(self, expr: Expr) -> str:
        """Evaluate an expression and render the result."""
        result = stringify(self.evaluate(expr))
        logger.debug("Evaluated %s -> %s", expr, result)
        return result

    def _unary(self, expr: Unary, right: RuntimeValue) -> RuntimeValue:
        kind = expr.operator.kind

        if kind == TokenKind.BANG:
            return not is_truthy(right)
        if kind == TokenKind.MINUS:
            if not _is_number(right):
                raise make_runtime_error("Operand must be a number.", expr.operator)
            return -right

        raise make_runtime_error("Unknown unary operator.", expr.operator)

    def _binary(self, expr: Binary, left: RuntimeValue, right: RuntimeValue) -> RuntimeValue:
        op = expr.operator
        kind = op.kind

        # Equality is defined for every pair of values
        if kind == TokenKind.EQUAL_EQUAL:
            return is_equal(left, right)
        if kind == TokenKind.BANG_EQUAL:
            return not is_equal(left, right)

        if kind == TokenKind.PLUS:
            if _is_number(left) and _is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise make_runtime_error("Operands must be two numbers or two strings.", op)

        if kind in (TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH):
            if not (_is_number(left) and _is_number(right)):
                raise make_runtime_error("Operands must be numbers.", op)
            if kind == TokenKind.MINUS:
                return left - right
            if kind == TokenKind.STAR:
                return left * right
            return _divide(left, right)

        if kind in (
            TokenKind.GREATER,
            TokenKind.GREATER_EQUAL,
            TokenKind.LESS,
            TokenKind.LESS_EQUAL,
        ):
            both_numbers = _is_number(left) and _is_number(right)
            both_strings = isinstance(left, str) and isinstance(right, str)
            if not (both_numbers or both_strings):
                raise make_runtime_error("Operands must be numbers or strings.", op)
            if kind == TokenKind.GREATER:
                return left > right
            if kind == TokenKind.GREATER_EQUAL:
                return left >= right
            if kind == TokenKind.LESS:
                return left < right
            return left <= right

        raise make_runtime_error("Unknown binary operator.", op)


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is +-inf, 0/0 is nan."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return float("nan")
        # copysign keeps the sign of a negative zero divisor
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def evaluate(expr: Expr) -> RuntimeValue:
    """Evaluate an expression with a fresh Interpreter."""
    return Interpreter().evaluate(expr)


def interpret(expr: Expr) -> str:
    """Evaluate an expression and render the result."""
    return Interpreter().interpret(expr)
