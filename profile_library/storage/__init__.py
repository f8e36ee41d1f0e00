"""Storage module for profile_library.

Provides the flat settings file codec and storage path resolution.

Public Interface:
    - load_ini: Load a section/key settings file
    - save_ini: Save a settings file with atomic write
    - ProfilePaths: Store and profile directory locations for one context
    - get_home_dir: Get PROFILEMGR_HOME
    - get_config_dir: Get config directory
    - get_settings_file: Get the application's primary settings file
"""

from .ini_store import load_ini
from .ini_store import save_ini
from .paths import ProfilePaths
from .paths import get_config_dir
from .paths import get_home_dir
from .paths import get_settings_file

__all__ = [
    "load_ini",
    "save_ini",
    "ProfilePaths",
    "get_home_dir",
    "get_config_dir",
    "get_settings_file",
]
