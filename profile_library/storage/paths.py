"""Path resolution for profile manager storage locations.

This module provides path resolution based on the PROFILEMGR_HOME environment
variable, plus the layout rules that tie the application's primary settings
file, the profile registry store and the per-profile directories together.

Layout without a named profile context::

    <settings_dir>/app.ini            primary settings file
    <settings_dir>/app_prof.ini       profile registry store
    <settings_dir>/<name>/            storage directory of profile <name>

With a named profile context ``work`` the primary settings file moves into
the profile's own directory while the registry store and the sibling
profile directories stay where they were::

    <settings_dir>/work/app.ini
    <settings_dir>/app_prof.ini
    <settings_dir>/<name>/

Contract:
- Inputs: Environment variables (PROFILEMGR_HOME and overrides), profile names
- Outputs: Resolved Path objects
- Side Effects: get_*_dir() create directories if they don't exist
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_SUFFIX = "_prof.ini"


def get_home_dir() -> Path:
    """Get PROFILEMGR_HOME from environment.

    Returns:
        Path to root directory (default: .profilemgr)
    """
    root = os.environ.get("PROFILEMGR_HOME", ".profilemgr")
    return Path(root).expanduser().resolve()


def get_config_dir() -> Path:
    """Get configuration directory.

    Returns:
        Path to config directory ($PROFILEMGR_HOME/config)

    Environment Variables:
        PROFILEMGR_CONFIG_DIR: Override config directory location
    """
    config_dir: Path = get_home_dir() / "config"

    env_override: str | None = os.environ.get("PROFILEMGR_CONFIG_DIR")
    if env_override is not None:
        config_dir = Path(env_override).resolve()

    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings_file(app_name: str, profile_name: str | None = None, settings_dir: Path | None = None) -> Path:
    """Get the application's primary settings file.

    Args:
        app_name: Application name, used as the file stem
        profile_name: Active named profile, if any
        settings_dir: Base settings directory (default: $PROFILEMGR_HOME)

    Returns:
        <settings_dir>/<app_name>.ini, or <settings_dir>/<profile_name>/<app_name>.ini
        when a non-empty profile name is active

    Example:
        >>> get_settings_file("app", "work", Path("/s"))
        PosixPath('/s/work/app.ini')
    """
    base = settings_dir if settings_dir is not None else get_home_dir()
    if profile_name:
        base = base / profile_name
    return base / f"{app_name}.ini"


def get_registry_file(
    settings_file: Path, profile_name: str | None = None, suffix: str = DEFAULT_REGISTRY_SUFFIX
) -> Path:
    """Get the profile registry store path.

    The extension of the primary settings file is replaced by ``suffix``.
    When a named profile is active the primary settings file lives inside
    that profile's directory, so the store is looked up two levels above
    the settings file path.

    Args:
        settings_file: Primary settings file path
        profile_name: Active named profile, if any
        suffix: Replacement for the settings file extension

    Returns:
        Path to the registry store
    """
    path = settings_file
    if profile_name:
        path = settings_file.parent.parent / settings_file.name
    return path.with_name(path.stem + suffix)


def get_profile_dir(name: str, settings_file: Path, profile_name: str | None = None) -> Path:
    """Get the storage directory of the profile called ``name``.

    Args:
        name: Target profile name
        settings_file: Primary settings file path
        profile_name: Active named profile, if any

    Returns:
        Directory where the target profile keeps its settings
    """
    base = settings_file.parent
    if profile_name:
        base = base.parent
    return base / name


@dataclass(frozen=True)
class ProfilePaths:
    """Resolved storage locations for one profile context.

    Attributes:
        settings_file: Primary settings file of the running application
        active_profile: Named profile supplied from outside, if any
        registry_suffix: Suffix that replaces the settings file extension

    Example:
        >>> paths = ProfilePaths(Path("/s/app.ini"))
        >>> paths.registry_file
        PosixPath('/s/app_prof.ini')
    """

    settings_file: Path
    active_profile: str | None = None
    registry_suffix: str = DEFAULT_REGISTRY_SUFFIX

    @classmethod
    def for_profile(
        cls,
        app_name: str,
        profile_name: str | None = None,
        settings_dir: Path | None = None,
        registry_suffix: str = DEFAULT_REGISTRY_SUFFIX,
    ) -> "ProfilePaths":
        """Build paths for an application and an optional named profile context."""
        settings_file = get_settings_file(app_name, profile_name, settings_dir)
        logger.debug(f"Primary settings file for profile {profile_name!r}: {settings_file}")
        return cls(settings_file=settings_file, active_profile=profile_name or None, registry_suffix=registry_suffix)

    @property
    def registry_file(self) -> Path:
        return get_registry_file(self.settings_file, self.active_profile, self.registry_suffix)

    def profile_dir(self, name: str) -> Path:
        return get_profile_dir(name, self.settings_file, self.active_profile)
