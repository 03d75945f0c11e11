"""
Run one Lox source text through scan, parse, and evaluate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import LoxConfig
from .errors import LoxError, LoxRuntimeError, ParseError, ScanErrors
from .expression_lang.interpreter import Interpreter, stringify
from .expression_lang.parser import parse
from .expression_lang.scanner import scan
from .ir.expressions import Expr, RuntimeValue
from .ir.tokens import Token

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """
    Outcome of running one source text.

    Attributes:
        tokens: Scanner output (empty if scanning failed)
        expr: Parsed expression, if parsing succeeded
        value: Evaluated value, if evaluation succeeded
        output: Rendered value, or None on any error
        errors: Errors that stopped the pipeline
    """

    tokens: list[Token] = field(default_factory=list)
    expr: Expr | None = None
    value: RuntimeValue = None
    output: str | None = None
    errors: list[LoxError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def has_static_error(self) -> bool:
        """Scan or parse error."""
        return any(isinstance(e, (ScanErrors, ParseError)) for e in self.errors)

    @property
    def has_runtime_error(self) -> bool:
        return any(isinstance(e, LoxRuntimeError) for e in self.errors)


def run_source(source: str, config: LoxConfig | None = None) -> RunResult:
    """
    Scan, parse, and evaluate a source text.

    Each stage only runs if the previous one succeeded. Errors are
    collected on the result rather than raised.
    """
    config = config or LoxConfig()
    result = RunResult()

    try:
        result.tokens = scan(source)
        result.expr = parse(result.tokens, max_depth=config.max_depth)
        interpreter = Interpreter()
        result.value = interpreter.evaluate(result.expr)
    except LoxError as e:
        logger.debug("Run failed: %s", e.report())
        result.errors.append(e)
        return result

    result.output = stringify(result.value)
    logger.debug("Result: %s", result.output)
    return result
