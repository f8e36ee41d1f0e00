"""Profile registry, startup resolution and chooser session.

Public Interface:
    - ProfileRegistry: Ordered profile list with default pointer and persistence
    - is_profile_name_valid: Naming rules for profiles
    - try_select_profile: Decide whether the chooser must run
    - registry_for_intent: Registry bound to the store implied by launch arguments
    - ChooserSession: State of one interactive chooser run
"""

from .chooser import ChooserSession
from .registry import DEFAULT_RESERVED_NAME
from .registry import ProfileRegistry
from .registry import is_profile_name_valid
from .resolution import registry_for_intent
from .resolution import try_select_profile

__all__ = [
    "ChooserSession",
    "DEFAULT_RESERVED_NAME",
    "ProfileRegistry",
    "is_profile_name_valid",
    "registry_for_intent",
    "try_select_profile",
]
