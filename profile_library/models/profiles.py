"""Profile-related models for profile_library."""

from pathlib import Path

from pydantic import BaseModel
from pydantic import Field


class ProfileEntry(BaseModel):
    """One row of the profile list as shown by a chooser."""

    index: int = Field(description="Position in the registry; 0 is the reserved entry")
    name: str = Field(description="Profile name")
    is_default: bool = Field(default=False, description="Whether this profile starts by default")
    is_reserved: bool = Field(default=False, description="Whether this is the permanent first entry")

    @property
    def label(self) -> str:
        return f"{self.name}*" if self.is_default else self.name


class RegistrySnapshot(BaseModel):
    """Point-in-time copy of a registry's state."""

    entries: list[str] = Field(description="Profile names, reserved entry first")
    default_index: int | None = Field(default=None, description="Index of the default profile, if any")
    language_resource: Path | None = Field(default=None, description="Alternate localization resource")
