"""Startup profile resolution.

Decides whether the profile to run with is already determined by the command
line and the stored registry, or whether the interactive chooser has to run.
"""

import logging
from pathlib import Path

from ..config.settings import ManagerSettings
from ..models.launch import CommandLineIntent
from ..models.launch import LaunchRequest
from ..storage.paths import ProfilePaths
from .registry import ProfileRegistry

logger = logging.getLogger(__name__)


def registry_for_intent(intent: LaunchRequest, settings: ManagerSettings) -> ProfileRegistry:
    """Create an empty registry bound to the store implied by ``intent``.

    Args:
        intent: Launch arguments; a non-empty profile name selects the
            named-profile path context
        settings: Manager configuration

    Returns:
        Registry that has not been loaded yet
    """
    paths = ProfilePaths.for_profile(
        settings.app_name,
        intent.active_profile,
        Path(settings.settings_dir) if settings.settings_dir else None,
        settings.registry_suffix,
    )
    return ProfileRegistry(paths, reserved_name=settings.reserved_name)


def try_select_profile(intent: CommandLineIntent, registry: ProfileRegistry) -> bool:
    """Determine the profile without asking the user, if possible.

    Resolution order:
    1. Profile manager explicitly requested → chooser
    2. Profile name given on the command line → resolved
    3. No stored registry (first run) → resolved, reserved profile
    4. Stored default points at a named profile → resolved, name written
       back into ``intent``
    5. Stored default missing or broken → chooser, so the user can fix it

    Args:
        intent: Command-line state; receives the default profile name in case 4
        registry: Registry to load; its state reflects the store afterwards

    Returns:
        True if a profile was determined, False if the chooser must run
    """
    loaded = registry.read_settings()

    if intent.wants_profile_manager_ui():
        logger.debug("Profile manager requested on the command line")
        return False

    if intent.has_explicit_profile_name():
        logger.debug("Profile given on the command line")
        return True

    if not loaded:
        logger.debug("No profile settings found, using the reserved profile")
        return True

    default = registry.default()
    if default is not None and 0 < default <= registry.size():
        name = registry.at(default)
        logger.info(f"Starting with default profile {name!r}")
        intent.set_profile_name(name)
        return True

    logger.info("No usable default profile, profile chooser required")
    return False
