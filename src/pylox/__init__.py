"""
pylox - a tree-walking interpreter for Lox expressions.

Scans source text into tokens, parses one expression, and evaluates it.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import LoxError, LoxRuntimeError, ParseError, ScanError, ScanErrors
from .core.expression_lang import evaluate, interpret, parse, scan, stringify

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    # Pipeline
    "evaluate",
    "interpret",
    "parse",
    "scan",
    "stringify",
    # Errors
    "LoxError",
    "LoxRuntimeError",
    "ParseError",
    "ScanError",
    "ScanErrors",
]
