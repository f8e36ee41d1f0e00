"""Launch intent models for profile resolution."""

from typing import Protocol

from pydantic import BaseModel
from pydantic import Field


class CommandLineIntent(Protocol):
    """What the resolution policy needs from parsed command-line state."""

    def wants_profile_manager_ui(self) -> bool: ...

    def has_explicit_profile_name(self) -> bool: ...

    def set_profile_name(self, name: str) -> None: ...


class LaunchRequest(BaseModel):
    """Profile-related part of an application's launch arguments.

    An explicit empty ``profile_name`` still counts as explicit: it selects
    the reserved profile without consulting the stored default.

    Example:
        >>> request = LaunchRequest(profile_name="work")
        >>> request.has_explicit_profile_name()
        True
    """

    show_profile_manager: bool = Field(default=False, description="Force the interactive profile chooser")
    profile_name: str | None = Field(default=None, description="Profile requested on the command line")

    def wants_profile_manager_ui(self) -> bool:
        return self.show_profile_manager

    def has_explicit_profile_name(self) -> bool:
        return self.profile_name is not None

    def set_profile_name(self, name: str) -> None:
        self.profile_name = name

    @property
    def active_profile(self) -> str | None:
        """Named profile context, or None for the reserved profile."""
        return self.profile_name or None
