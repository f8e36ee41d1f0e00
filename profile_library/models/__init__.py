"""Models for profile library."""

from .launch import CommandLineIntent
from .launch import LaunchRequest
from .profiles import ProfileEntry
from .profiles import RegistrySnapshot

__all__ = [
    "CommandLineIntent",
    "LaunchRequest",
    "ProfileEntry",
    "RegistrySnapshot",
]
