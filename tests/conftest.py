"""Shared pytest fixtures for pylox tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from pylox.core.expression_lang import evaluate, parse, scan
from pylox.core.ir import Expr, RuntimeValue


@pytest.fixture
def parse_source() -> Callable[[str], Expr]:
    """Return a helper that scans and parses a source string."""

    def _parse(source: str) -> Expr:
        return parse(scan(source))

    return _parse


@pytest.fixture
def eval_source() -> Callable[[str], RuntimeValue]:
    """Return a helper that scans, parses, and evaluates a source string."""

    def _eval(source: str) -> RuntimeValue:
        return evaluate(parse(scan(source)))

    return _eval


@pytest.fixture
def lox_file(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes a .lox script into a temp directory."""

    def _write(source: str, name: str = "script.lox") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write
