"""Unit tests for configuration system."""

from pathlib import Path
from typing import Any

import pytest

from ctxgraph.config import (
    ContextGraphConfig,
    VerifyConfig,
    find_config_file,
    load_config,
    load_config_from_dict,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    """Tests for environment variable substitution."""

    def test_substitute_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting env var in string."""
        monkeypatch.setenv("TEST_VAR", "test_value")

        result = substitute_env_vars("prefix_${TEST_VAR}_suffix")

        assert result == "prefix_test_value_suffix"

    def test_substitute_in_dict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting env vars in nested dictionaries."""
        monkeypatch.setenv("APP_SRC", "source")

        data = {"scan": {"source_root": "${APP_SRC}"}, "other": 3}
        result = substitute_env_vars(data)

        assert result["scan"]["source_root"] == "source"
        assert result["other"] == 3

    def test_substitute_in_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting env vars in list."""
        monkeypatch.setenv("ITEM", "value")

        result = substitute_env_vars(["static", "${ITEM}"])

        assert result == ["static", "value"]

    def test_missing_env_var_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an unset variable raises ValueError."""
        monkeypatch.delenv("CTXGRAPH_UNSET_VAR", raising=False)

        with pytest.raises(ValueError, match="CTXGRAPH_UNSET_VAR"):
            substitute_env_vars("${CTXGRAPH_UNSET_VAR}")


class TestFindConfigFile:
    """Tests for config file discovery."""

    def test_finds_dot_directory_first(self, tmp_path: Path) -> None:
        """Test that .ctxgraph/config.yaml wins over ctxgraph.yaml."""
        (tmp_path / ".ctxgraph").mkdir()
        preferred = tmp_path / ".ctxgraph" / "config.yaml"
        preferred.write_text("verify: {}\n")
        (tmp_path / "ctxgraph.yaml").write_text("verify: {}\n")

        assert find_config_file(tmp_path) == preferred.resolve()

    def test_finds_root_file(self, tmp_path: Path) -> None:
        """Test discovery of ctxgraph.yaml."""
        (tmp_path / "ctxgraph.yaml").write_text("scan: {}\n")

        assert find_config_file(tmp_path) == (tmp_path / "ctxgraph.yaml").resolve()

    def test_returns_none_when_absent(self, tmp_path: Path) -> None:
        """Test that no config file yields None."""
        assert find_config_file(tmp_path) is None


class TestLoadConfig:
    """Tests for config loading."""

    def test_defaults(self) -> None:
        """Test default configuration values."""
        config = ContextGraphConfig()

        assert config.scan.source_root == "src"
        assert config.scan.backend_root == "supabase"
        assert config.verify.context_dir == "context"
        assert config.verify.fail_under == 60
        assert config.verify.warn_under == 80
        assert config.ci.fail_on_warning is False
        assert config.config_path is None

    def test_minimal_config(self, minimal_config: dict[str, Any]) -> None:
        """Test that missing sections keep their defaults."""
        config = load_config_from_dict(minimal_config)

        assert config.verify.context_dir == "context"
        assert config.scan.source_root == "src"

    def test_full_config(self, full_config: dict[str, Any]) -> None:
        """Test loading every section."""
        config = load_config_from_dict(full_config)

        assert config.scan.source_root == "app-src"
        assert config.scan.backend_root == "backend"
        assert config.verify.context_dir == "docs/context"
        assert config.verify.fail_under == 50
        assert config.verify.warn_under == 70
        assert config.ci.fail_on_warning is True

    def test_empty_section(self) -> None:
        """Test that an empty YAML section is treated as defaults."""
        config = load_config_from_dict({"verify": None})

        assert config.verify.warn_under == 80

    def test_invalid_thresholds(self) -> None:
        """Test that fail_under above warn_under is rejected."""
        with pytest.raises(ValueError, match="fail_under"):
            load_config_from_dict({"verify": {"fail_under": 90, "warn_under": 80}})

    def test_threshold_out_of_range(self) -> None:
        """Test that thresholds above 100 are rejected."""
        with pytest.raises(ValueError):
            VerifyConfig(fail_under=60, warn_under=120)

    def test_load_from_file(self, tmp_path: Path) -> None:
        """Test loading an explicit YAML file."""
        path = tmp_path / "custom.yaml"
        path.write_text("verify:\n  context_dir: docs\n  warn_under: 90\n")

        config = load_config(config_path=path)

        assert config.verify.context_dir == "docs"
        assert config.verify.warn_under == 90
        assert config.config_path == path

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Test that an explicit missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(config_path=tmp_path / "missing.yaml")

    def test_no_auto_discover(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that auto discovery can be disabled."""
        (tmp_path / "ctxgraph.yaml").write_text("verify:\n  context_dir: docs\n")
        monkeypatch.chdir(tmp_path)

        config = load_config(auto_discover=False)

        assert config.verify.context_dir == "context"
        assert config.config_path is None
