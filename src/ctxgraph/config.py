"""ctxgraph configuration system.

Configuration is YAML-based with per-run CLI overrides (--src, --backend, --dir).
Supports environment variable substitution (${VAR}) in config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.ctxgraph/config.yaml
3. ./ctxgraph.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class ScanConfig:
    """Repository profiler configuration.

    Attributes:
        source_root: Primary source directory relative to the project root
        backend_root: Hosted-backend directory relative to the project root
    """

    source_root: str = "src"
    backend_root: str = "supabase"


@dataclass
class VerifyConfig:
    """Documentation graph verifier configuration.

    Attributes:
        context_dir: Documentation root relative to the project root
        fail_under: Completeness below this exits with code 1
        warn_under: Completeness below this (but not below fail_under) exits with code 2
    """

    context_dir: str = "context"
    fail_under: int = 60
    warn_under: int = 80

    def __post_init__(self) -> None:
        """Validate score thresholds."""
        if not 0 <= self.fail_under <= self.warn_under <= 100:
            raise ValueError(
                "Thresholds must satisfy 0 <= fail_under <= warn_under <= 100 "
                f"(got fail_under={self.fail_under}, warn_under={self.warn_under})"
            )


@dataclass
class CIConfig:
    """CI/CD-specific configuration.

    Attributes:
        fail_on_warning: Treat the warning exit tier as a failure
        json_output: Emit JSON instead of the text report by default
    """

    fail_on_warning: bool = False
    json_output: bool = False


@dataclass
class ContextGraphConfig:
    """Top-level ctxgraph configuration.

    Attributes:
        scan: Profiler settings
        verify: Verifier settings and exit thresholds
        ci: CI/CD settings
    """

    scan: ScanConfig = field(default_factory=ScanConfig)
    verify: VerifyConfig = field(default_factory=VerifyConfig)
    ci: CIConfig = field(default_factory=CIConfig)

    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} syntax, e.g. ``source_root: "${APP_SRC}"``.

    Args:
        value: Config value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, str):

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return _ENV_VAR_PATTERN.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.ctxgraph/config.yaml
    2. ./ctxgraph.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".ctxgraph" / "config.yaml",
        start_path / "ctxgraph.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> ContextGraphConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        ContextGraphConfig instance

    Raises:
        ValueError: If a value fails validation
    """
    data = substitute_env_vars(data)

    config = ContextGraphConfig()

    if "scan" in data:
        scan_data = data["scan"] or {}
        config.scan = ScanConfig(
            source_root=scan_data.get("source_root", config.scan.source_root),
            backend_root=scan_data.get("backend_root", config.scan.backend_root),
        )

    if "verify" in data:
        verify_data = data["verify"] or {}
        config.verify = VerifyConfig(
            context_dir=verify_data.get("context_dir", config.verify.context_dir),
            fail_under=int(verify_data.get("fail_under", config.verify.fail_under)),
            warn_under=int(verify_data.get("warn_under", config.verify.warn_under)),
        )

    if "ci" in data:
        ci_data = data["ci"] or {}
        config.ci = CIConfig(
            fail_on_warning=ci_data.get("fail_on_warning", False),
            json_output=ci_data.get("json_output", False),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> ContextGraphConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        ContextGraphConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = ContextGraphConfig()

    return config
