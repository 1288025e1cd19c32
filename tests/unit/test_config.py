"""Unit tests for configuration system."""

from pathlib import Path

import pytest
import yaml

from statcodec.config import (
    FormatsConfig,
    OutputConfig,
    create_default_config,
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
        monkeypatch.setenv("OUT_FORMAT", "yaml")

        result = substitute_env_vars({"output": {"format": "${OUT_FORMAT}"}, "other": 1})

        assert result == {"output": {"format": "yaml"}, "other": 1}

    def test_substitute_in_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ITEM", "value")

        assert substitute_env_vars(["static", "${ITEM}"]) == ["static", "value"]

    def test_missing_env_var_raises(self) -> None:
        with pytest.raises(ValueError, match="Environment variable not set"):
            substitute_env_vars("${STATCODEC_NONEXISTENT_VAR}")

    def test_passthrough_non_string(self) -> None:
        assert substitute_env_vars(123) == 123
        assert substitute_env_vars(True) is True
        assert substitute_env_vars(None) is None


class TestFindConfigFile:
    """Tests for config file discovery."""

    def test_find_dir_config(self, tmp_path: Path) -> None:
        """Test finding .statcodec/config.yaml."""
        config_dir = tmp_path / ".statcodec"
        config_dir.mkdir()
        config_file = config_dir / "config.yaml"
        config_file.write_text("formats:\n  toml: false")

        assert find_config_file(tmp_path) == config_file

    def test_find_root_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "statcodec.yaml"
        config_file.write_text("formats:\n  toml: false")

        assert find_config_file(tmp_path) == config_file

    def test_prefer_dir_over_root(self, tmp_path: Path) -> None:
        config_dir = tmp_path / ".statcodec"
        config_dir.mkdir()
        preferred = config_dir / "config.yaml"
        preferred.write_text("# preferred")
        (tmp_path / "statcodec.yaml").write_text("# fallback")

        assert find_config_file(tmp_path) == preferred

    def test_no_config_returns_none(self, tmp_path: Path) -> None:
        assert find_config_file(tmp_path) is None


class TestLoadConfigFromDict:
    """Tests for loading config from dictionary."""

    def test_default_values(self) -> None:
        config = load_config_from_dict({})

        assert config.formats.enabled == {}
        assert config.formats.is_enabled("toml") is True
        assert config.output.format is None
        assert config.output.sort == "name"

    def test_format_switches(self) -> None:
        config = load_config_from_dict({"formats": {"toml": False, "json": True}})

        assert config.formats.is_enabled("toml") is False
        assert config.formats.is_enabled("json") is True
        assert config.formats.is_enabled("cbor") is True

    def test_format_switch_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that substituted "false" strings become booleans."""
        monkeypatch.setenv("USE_CBOR", "false")

        config = load_config_from_dict({"formats": {"cbor": "${USE_CBOR}"}})

        assert config.formats.is_enabled("cbor") is False

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown format in config: xml"):
            load_config_from_dict({"formats": {"xml": True}})

    def test_non_bool_switch_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be true or false"):
            load_config_from_dict({"formats": {"json": "sometimes"}})

    def test_formats_must_be_mapping(self) -> None:
        with pytest.raises(ValueError, match="'formats' must be a mapping"):
            load_config_from_dict({"formats": ["json"]})

    def test_empty_sections_allowed(self) -> None:
        config = load_config_from_dict({"formats": None, "output": None})

        assert config.formats.enabled == {}
        assert config.output.sort == "name"

    def test_custom_output(self) -> None:
        config = load_config_from_dict({"output": {"format": "yaml", "sort": "code"}})

        assert config.output.format == "yaml"
        assert config.output.sort == "code"


class TestConfigValidation:
    """Tests for dataclass validation."""

    def test_invalid_sort(self) -> None:
        with pytest.raises(ValueError, match="Invalid sort key"):
            OutputConfig(sort="size")

    def test_formats_config_direct(self) -> None:
        assert FormatsConfig({"yaml": False}).is_enabled("yaml") is False


class TestLoadConfig:
    """Tests for loading config files."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("formats:\n  toml: false\noutput:\n  format: json\n")

        config = load_config(config_path=config_file)

        assert config.config_path == config_file
        assert config.formats.is_enabled("toml") is False
        assert config.output.format == "json"

    def test_missing_explicit_path(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(config_path=tmp_path / "missing.yaml")

    def test_non_mapping_file_rejected(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- json\n- yaml\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(config_path=config_file)

    def test_no_discovery(self) -> None:
        config = load_config(auto_discover=False)

        assert config.config_path is None

    def test_default_config_round_trips(self, tmp_path: Path) -> None:
        """Test that the generated default config loads to the defaults."""
        config_file = tmp_path / "statcodec.yaml"
        config_file.write_text(create_default_config())

        data = yaml.safe_load(config_file.read_text())
        config = load_config(config_path=config_file)

        assert data["formats"] == {"cbor": True, "json": True, "yaml": True, "toml": True}
        assert config.output.format is None
        assert config.output.sort == "name"

    def test_malformed_yaml_is_value_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "statcodec.yaml"
        config_file.write_text("formats: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML in config file"):
            load_config(config_path=config_file)
