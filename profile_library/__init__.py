"""Profile library layer.

This is the business logic layer behind the profilemgr command line: the
profile registry, its settings store, and the startup resolution policy.

Public Interface:
    Modules:
    - profiles: Registry, resolution policy, chooser session
    - storage: Settings file codec and path resolution
    - config: Configuration loading
    - models: Shared data structures
    - errors: ProfileError family and RangeError
"""

# Re-export key types for convenience
from .errors import ProfileError
from .errors import RangeError
from .models import LaunchRequest
from .profiles import ProfileRegistry
from .profiles import try_select_profile

__all__ = [
    "LaunchRequest",
    "ProfileError",
    "ProfileRegistry",
    "RangeError",
    "try_select_profile",
]
