"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from pylox.core.config import LoxConfig, load_config
from pylox.core.errors import ConfigError


class TestLoadConfig:
    """load_config finds and validates the pylox table."""

    def test_defaults_when_nothing_found(self, tmp_path: Path) -> None:
        config = load_config(directory=tmp_path)
        assert config == LoxConfig()
        assert config.max_depth == 100
        assert config.prompt == "> "

    def test_pylox_toml(self, tmp_path: Path) -> None:
        (tmp_path / "pylox.toml").write_text(
            """
[pylox]
max_depth = 20
show_ast = true
log_level = "DEBUG"
"""
        )
        config = load_config(directory=tmp_path)
        assert config.max_depth == 20
        assert config.show_ast is True
        assert config.log_level == "DEBUG"

    def test_pyproject_tool_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            """
[project]
name = "demo"

[tool.pylox]
echo = true
prompt = "lox> "
"""
        )
        config = load_config(directory=tmp_path)
        assert config.echo is True
        assert config.prompt == "lox> "

    def test_pyproject_without_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')
        assert load_config(directory=tmp_path) == LoxConfig()

    def test_pylox_toml_wins_over_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pylox.toml").write_text("[pylox]\nmax_depth = 5\n")
        (tmp_path / "pyproject.toml").write_text("[tool.pylox]\nmax_depth = 50\n")
        assert load_config(directory=tmp_path).max_depth == 5

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text("[pylox]\nshow_tokens = true\n")
        assert load_config(path).show_tokens is True


class TestConfigErrors:
    """Bad configuration raises ConfigError."""

    def test_unknown_key(self, tmp_path: Path) -> None:
        (tmp_path / "pylox.toml").write_text("[pylox]\ncolour = true\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(directory=tmp_path)

    @pytest.mark.parametrize("depth", [1, 120])
    def test_depth_bounds_accepted(self, tmp_path: Path, depth: int) -> None:
        (tmp_path / "pylox.toml").write_text(f"[pylox]\nmax_depth = {depth}\n")
        assert load_config(directory=tmp_path).max_depth == depth

    @pytest.mark.parametrize("depth", [0, 121, 300, -3])
    def test_depth_out_of_range(self, tmp_path: Path, depth: int) -> None:
        (tmp_path / "pylox.toml").write_text(f"[pylox]\nmax_depth = {depth}\n")
        with pytest.raises(ConfigError):
            load_config(directory=tmp_path)

    def test_bad_log_level(self, tmp_path: Path) -> None:
        (tmp_path / "pylox.toml").write_text('[pylox]\nlog_level = "LOUD"\n')
        with pytest.raises(ConfigError):
            load_config(directory=tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "pylox.toml").write_text("[pylox\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(directory=tmp_path)

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "missing.toml")

    def test_table_must_be_a_table(self, tmp_path: Path) -> None:
        (tmp_path / "pylox.toml").write_text('pylox = "yes"\n')
        with pytest.raises(ConfigError, match="must be a table"):
            load_config(directory=tmp_path)
