"""
Expression AST for the Lox interpreter.

Four node shapes make up every tree:
- Binary: left operator right
- Grouping: ( expression )
- Literal: number, string, true, false, nil
- Unary: operator right

Nodes are frozen pydantic models. ``str(node)`` renders the fully
parenthesized prefix form, e.g. ``(* (- 123) (group 45.67))``.
"""

from __future__ import annotations

import math
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from .tokens import Token

# Lox number, string, true/false, nil
RuntimeValue = float | bool | str | None


def format_number(value: float) -> str:
    """
    Render a float the way Lox prints numbers: ``3`` not ``3.0``.

    Shortest round-trip digits are written out positionally, so ``1e16``
    prints as ``10000000000000000`` and ``1e-05`` as ``0.00001``.
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        return text[:-2]
    return text


def format_value(value: RuntimeValue) -> str:
    """Render a runtime value as Lox source-like text."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return value


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A literal value: number, string, true, false, or nil (None)."""

    value: RuntimeValue = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return format_value(self.value)


class Grouping(BaseModel):
    """Parenthesized expression."""

    expression: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class Binary(BaseModel):
    """Binary operation: left operator right."""

    left: Expr
    operator: Token
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class Unary(BaseModel):
    """Prefix operation: operator right."""

    operator: Token
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Binary | Grouping | Literal | Unary

# Rebuild models for recursive forward references
Grouping.model_rebuild()
Binary.model_rebuild()
Unary.model_rebuild()


def render(expr: Expr) -> str:
    """
    Render an expression in parenthesized prefix form.

    Walks the tree with an explicit stack, so long operator chains do not
    hit the interpreter's recursion limit.
    """
    parts: list[str] = []
    stack: list[tuple[Expr, bool]] = [(expr, False)]

    while stack:
        node, children_done = stack.pop()

        if isinstance(node, Literal):
            parts.append(str(node))
        elif not children_done:
            stack.append((node, True))
            if isinstance(node, Binary):
                stack.append((node.right, False))
                stack.append((node.left, False))
            elif isinstance(node, Grouping):
                stack.append((node.expression, False))
            elif isinstance(node, Unary):
                stack.append((node.right, False))
            else:
                raise TypeError(f"Unknown expression type: {type(node).__name__}")
        elif isinstance(node, Binary):
            right = parts.pop()
            left = parts.pop()
            parts.append(f"({node.operator.lexeme} {left} {right})")
        elif isinstance(node, Grouping):
            parts.append(f"(group {parts.pop()})")
        else:
            parts.append(f"({node.operator.lexeme} {parts.pop()})")

    return parts.pop()
