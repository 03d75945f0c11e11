"""
Core of the pylox interpreter: IR, expression language, configuration,
and the source runner.
"""

from .config import LoxConfig, load_config
from .errors import (
    ConfigError,
    LoxError,
    LoxRuntimeError,
    ParseError,
    ScanError,
    ScanErrors,
)
from .runner import RunResult, run_source

__all__ = [
    # Configuration
    "LoxConfig",
    "load_config",
    # Errors
    "ConfigError",
    "LoxError",
    "LoxRuntimeError",
    "ParseError",
    "ScanError",
    "ScanErrors",
    # Running
    "RunResult",
    "run_source",
]
