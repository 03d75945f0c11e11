"""
Interpreter configuration.

Reads the ``[pylox]`` table from ``pylox.toml`` (or ``[tool.pylox]`` from
``pyproject.toml``) and validates it into a typed ``LoxConfig``.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .expression_lang.parser import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "pylox.toml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoxConfig(BaseModel):
    """Complete interpreter configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Each nesting level costs the parser about seven Python frames
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=120)
    log_level: LogLevel = "WARNING"
    show_tokens: bool = False
    show_ast: bool = False
    prompt: str = "> "
    echo: bool = False


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _find_table(directory: Path) -> tuple[Path, dict[str, Any]] | None:
    """Locate the pylox table in ``directory``, if any."""
    config_file = directory / CONFIG_FILENAME
    if config_file.exists():
        return config_file, _read_toml(config_file).get("pylox", {})

    pyproject = directory / "pyproject.toml"
    if pyproject.exists():
        table = _read_toml(pyproject).get("tool", {}).get("pylox")
        if table is not None:
            return pyproject, table

    return None


def load_config(path: Path | None = None, directory: Path | None = None) -> LoxConfig:
    """
    Load interpreter configuration.

    Args:
        path: Explicit config file; its ``[pylox]`` table is used.
        directory: Where to look for ``pylox.toml``/``pyproject.toml``
            when no path is given (default: current directory).

    Returns:
        Validated configuration, or defaults when nothing is found.

    Raises:
        ConfigError: If the file cannot be read or the values are invalid.
    """
    if path is not None:
        source, table = path, _read_toml(path).get("pylox", {})
    else:
        found = _find_table(directory or Path.cwd())
        if found is None:
            logger.debug("No pylox configuration found, using defaults")
            return LoxConfig()
        source, table = found

    if not isinstance(table, dict):
        raise ConfigError(f"{source}: pylox configuration must be a table")

    try:
        config = LoxConfig.model_validate(table)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {source}:\n{e}") from e

    logger.debug("Loaded configuration from %s", source)
    return config
