"""Settings model for the profile manager.

Contract:
- Inputs: Environment variables, YAML files
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class ManagerSettings(BaseSettings):
    """Configuration for the profile manager.

    Attributes:
        app_name: Stem of the application's primary settings file (default: app)
        settings_dir: Directory holding the primary settings file
            (default: None, meaning $PROFILEMGR_HOME)
        reserved_name: Display name of the permanent first entry (default: (default))
        registry_suffix: Replaces the settings file extension to form the
            registry store name (default: _prof.ini)
        log_level: Logging level (default: warning)

    Example:
        >>> settings = ManagerSettings()
        >>> assert settings.reserved_name == "(default)"
    """

    model_config = SettingsConfigDict(
        env_prefix="PROFILEMGR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "app"
    settings_dir: str | None = None
    reserved_name: str = "(default)"
    registry_suffix: str = "_prof.ini"
    log_level: str = "warning"

    @field_validator("settings_dir")
    @classmethod
    def expand_and_resolve_path(cls, v: str | None) -> str | None:
        """Expand ~ and resolve to absolute path.

        Args:
            v: Path string (may contain ~ or be relative)

        Returns:
            Absolute path as string, or None when unset
        """
        if not v:
            return None
        return str(Path(v).expanduser().resolve())

    @field_validator("registry_suffix")
    @classmethod
    def require_suffix(cls, v: str) -> str:
        if not v:
            raise ValueError("registry_suffix must not be empty")
        return v
