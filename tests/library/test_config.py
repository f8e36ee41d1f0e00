"""
Unit tests for configuration loading.

Tests config file creation, loading from YAML, and environment variable overrides.
"""

from pathlib import Path

import pytest

from profile_library.config import loader
from profile_library.config.settings import ManagerSettings


@pytest.mark.unit
class TestConfigLoader:
    """Test configuration loading functions."""

    def test_get_config_path_returns_profilemgr_yaml(self, mock_storage_env: Path) -> None:
        """Test get_config_path returns profilemgr.yaml in config dir."""
        config_path = loader.get_config_path()

        assert config_path.name == "profilemgr.yaml"
        assert config_path.parent == mock_storage_env / "config"

    def test_create_default_config_creates_file(self, mock_storage_env: Path) -> None:
        """Test create_default_config creates profilemgr.yaml if it doesn't exist."""
        config_path = loader.get_config_path()
        assert not config_path.exists()

        loader.create_default_config()

        assert config_path.is_file()
        content = config_path.read_text()
        assert "app_name:" in content
        assert "reserved_name:" in content

    def test_create_default_config_is_idempotent(self, mock_storage_env: Path) -> None:
        """Test create_default_config doesn't overwrite existing config."""
        config_path = loader.get_config_path()
        loader.create_default_config()

        custom_content = "# Custom config\napp_name: editor\n"
        config_path.write_text(custom_content)

        loader.create_default_config()

        assert config_path.read_text() == custom_content

    def test_load_config_creates_default_if_missing(self, mock_storage_env: Path) -> None:
        """Test load_config creates default config if file doesn't exist."""
        settings = loader.load_config()

        assert loader.get_config_path().exists()
        assert isinstance(settings, ManagerSettings)
        assert settings.app_name == "app"

    def test_load_config_parses_yaml_settings(self, mock_storage_env: Path, tmp_path: Path) -> None:
        """Test load_config parses settings from YAML file."""
        loader.get_config_path().write_text(
            f'app_name: "editor"\nreserved_name: "(none)"\nsettings_dir: "{tmp_path}"\nlog_level: "debug"\n'
        )

        settings = loader.load_config()

        assert settings.app_name == "editor"
        assert settings.reserved_name == "(none)"
        assert settings.settings_dir == str(tmp_path.resolve())
        assert settings.log_level == "debug"

    def test_load_config_env_overrides_yaml(self, mock_storage_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variables override YAML settings."""
        loader.get_config_path().write_text("app_name: editor\n")
        monkeypatch.setenv("PROFILEMGR_APP_NAME", "viewer")

        settings = loader.load_config()

        assert settings.app_name == "viewer"

    def test_load_config_handles_invalid_yaml(self, mock_storage_env: Path, caplog) -> None:
        """Test load_config handles corrupted YAML gracefully."""
        loader.get_config_path().write_text("{{invalid yaml content\n")

        settings = loader.load_config()

        assert isinstance(settings, ManagerSettings)
        assert "Failed to load config" in caplog.text

    def test_load_config_ignores_non_mapping(self, mock_storage_env: Path, caplog) -> None:
        """Test a YAML list at top level falls back to defaults."""
        loader.get_config_path().write_text("- one\n- two\n")

        settings = loader.load_config()

        assert settings.app_name == "app"
        assert "must be a mapping" in caplog.text

    def test_load_config_with_custom_path(self, mock_storage_env: Path) -> None:
        """Test load_config accepts custom config path."""
        custom_path = mock_storage_env / "custom-config.yaml"
        custom_path.write_text("app_name: custom\nregistry_suffix: _profiles.ini\n")

        settings = loader.load_config(config_path=custom_path)

        assert settings.app_name == "custom"
        assert settings.registry_suffix == "_profiles.ini"


@pytest.mark.unit
class TestManagerSettings:
    """Test ManagerSettings model."""

    def test_default_values(self, mock_storage_env: Path) -> None:
        """Test ManagerSettings has sensible defaults."""
        settings = ManagerSettings()

        assert settings.app_name == "app"
        assert settings.settings_dir is None
        assert settings.reserved_name == "(default)"
        assert settings.registry_suffix == "_prof.ini"
        assert settings.log_level == "warning"

    def test_settings_dir_expands_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test ~ in settings_dir is expanded to an absolute path."""
        monkeypatch.setenv("HOME", str(tmp_path))

        settings = ManagerSettings(settings_dir="~/myapp")

        assert settings.settings_dir == str((tmp_path / "myapp").resolve())

    def test_empty_registry_suffix_rejected(self) -> None:
        """Test the registry suffix cannot be empty."""
        with pytest.raises(ValueError, match="registry_suffix"):
            ManagerSettings(registry_suffix="")
