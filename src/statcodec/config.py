"""Statcodec configuration system.

Configuration is YAML-based with minimal CLI overrides (--output).
Supports environment variable substitution (${VAR}) in config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.statcodec/config.yaml
3. ./statcodec.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from statcodec.codecs.registry import DEFAULT_FORMATS

# =============================================================================
# Configuration Dataclasses
# =============================================================================

SORT_KEYS = ("name", "lines", "code", "comments", "blanks", "files")


@dataclass
class FormatsConfig:
    """Per-format switches.

    A format switched off here is disabled even when its library is
    installed. Formats not mentioned stay on.

    Attributes:
        enabled: Format name to enabled flag
    """

    enabled: dict[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate format switches."""
        known = {spec.name for spec in DEFAULT_FORMATS}
        for name, value in self.enabled.items():
            if name not in known:
                raise ValueError(f"Unknown format in config: {name}. Valid: {sorted(known)}")
            if not isinstance(value, bool):
                raise ValueError(f"Format switch for {name} must be true or false (got {value!r})")

    def is_enabled(self, name: str) -> bool:
        return self.enabled.get(name, True)


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        format: Default output format (None prints a summary table)
        sort: Summary table sort key
    """

    format: str | None = None
    sort: str = "name"

    def __post_init__(self) -> None:
        """Validate output configuration."""
        if self.sort not in SORT_KEYS:
            raise ValueError(f"Invalid sort key: {self.sort}. Valid: {list(SORT_KEYS)}")


@dataclass
class StatcodecConfig:
    """Top-level statcodec configuration.

    Attributes:
        formats: Per-format switches
        output: Output defaults
    """

    formats: FormatsConfig = field(default_factory=FormatsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Set by load_config
    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(value: Any) -> Any:
    """Substitute ${VAR} references in config values.

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

        return _ENV_PATTERN.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


def _coerce_bool(value: Any) -> Any:
    # ${VAR} substitution always yields strings
    if isinstance(value, str) and value.lower() in {"true", "false"}:
        return value.lower() == "true"
    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.statcodec/config.yaml
    2. ./statcodec.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".statcodec" / "config.yaml",
        start_path / "statcodec.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> StatcodecConfig:
    """Load configuration from a dictionary.

    Raises:
        ValueError: If a section has the wrong shape or an invalid value
    """
    data = substitute_env_vars(data)

    config = StatcodecConfig()

    if "formats" in data:
        formats_data = data["formats"] or {}
        if not isinstance(formats_data, dict):
            raise ValueError("'formats' must be a mapping of format name to true/false")
        config.formats = FormatsConfig(
            enabled={str(k): _coerce_bool(v) for k, v in formats_data.items()},
        )

    if "output" in data:
        output_data = data["output"] or {}
        if not isinstance(output_data, dict):
            raise ValueError("'output' must be a mapping")
        config.output = OutputConfig(
            format=output_data.get("format", config.output.format),
            sort=output_data.get("sort", config.output.sort),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> StatcodecConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        StatcodecConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
        ValueError: If the file is not valid YAML or holds invalid settings
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
        with open(found_path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {found_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {found_path}")
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = StatcodecConfig()

    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    format_lines = "\n".join(f"  {spec.name}: true" for spec in DEFAULT_FORMATS)
    sort_keys = ", ".join(SORT_KEYS)
    return f"""# statcodec configuration

# Formats switched off here are never tried when parsing and cannot be
# requested with --output, even if their library is installed.
formats:
{format_lines}

# Output defaults
output:
  # format: "json"   # default --output format; unset prints a summary table
  sort: "name"       # summary table order: {sort_keys}
"""
