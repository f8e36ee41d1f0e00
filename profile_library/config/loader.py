"""Configuration loading for the profile manager.

This module handles loading configuration from a YAML file and
environment variables.

Contract:
- Inputs: Config file paths, environment variables
- Outputs: ManagerSettings objects
- Side Effects: Creates default config file if missing
"""

import logging
import os
from pathlib import Path

import yaml

from ..storage.paths import get_config_dir
from .settings import ManagerSettings

logger = logging.getLogger(__name__)

ENV_PREFIX = "PROFILEMGR_"

DEFAULT_CONFIG = """# profilemgr configuration

# Stem of the application's primary settings file (<app_name>.ini)
app_name: "app"

# Display name of the permanent first profile entry
reserved_name: "(default)"

# Suffix replacing the settings file extension for the profile registry store
registry_suffix: "_prof.ini"

log_level: "warning"

# Directory holding the primary settings file
# Default: $PROFILEMGR_HOME
# Can be overridden with PROFILEMGR_SETTINGS_DIR environment variable
# settings_dir: "~/.myapp"
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to profilemgr.yaml in config directory

    Example:
        >>> config_path = get_config_path()
        >>> assert config_path.name == "profilemgr.yaml"
    """
    return get_config_dir() / "profilemgr.yaml"


def create_default_config() -> None:
    """Create default config file if it doesn't exist."""
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return

    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")


def load_config(config_path: Path | None = None) -> ManagerSettings:
    """Load configuration from YAML and environment.

    Environment variables take precedence over YAML settings.
    Variables should be prefixed with PROFILEMGR_ (e.g., PROFILEMGR_APP_NAME).

    Args:
        config_path: Optional config file path (default: profilemgr.yaml in config dir)

    Returns:
        Validated manager settings
    """
    if config_path is None:
        config_path = get_config_path()
        if not config_path.exists():
            create_default_config()

    yaml_settings = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
            logger.debug(f"Loaded config from {config_path}")
        except (yaml.YAMLError, OSError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")

    if not isinstance(yaml_settings, dict):
        logger.warning(f"Ignoring config {config_path}: top level must be a mapping")
        yaml_settings = {}

    # Only pass YAML values that don't have corresponding env vars
    filtered_yaml = {}
    for key, value in yaml_settings.items():
        env_key = f"{ENV_PREFIX}{str(key).upper()}"
        if env_key not in os.environ:
            filtered_yaml[key] = value

    settings = ManagerSettings(**filtered_yaml)

    logger.debug(
        f"Configuration loaded: app_name={settings.app_name}, settings_dir={settings.settings_dir}, "
        f"log_level={settings.log_level}"
    )

    return settings
