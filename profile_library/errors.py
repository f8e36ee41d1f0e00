"""Errors raised by profile registry operations.

Name and filesystem failures share one family, ProfileError, whose ``kind``
selects the user-facing message. Bad indices raise RangeError, which is an
IndexError and not a ProfileError: it signals a caller bug rather than
something to show the user.
"""

from enum import Enum


class ProfileErrorKind(str, Enum):
    """Failure categories for profile mutations."""

    INVALID_CHAR = "invalid_char"
    ALREADY_EXISTS = "already_exists"
    FILE_EXISTS = "file_exists"
    RENAME_FAILED = "rename_failed"


MESSAGES: dict[ProfileErrorKind, str] = {
    ProfileErrorKind.INVALID_CHAR: "The name contains characters that cannot be used.",
    ProfileErrorKind.ALREADY_EXISTS: "A profile with the same name already exists.",
    ProfileErrorKind.FILE_EXISTS: "Cannot create the profile because a file with the same name exists.",
    ProfileErrorKind.RENAME_FAILED: "Failed to rename the profile directory.",
}


class ProfileError(Exception):
    """Base class for profile mutation failures.

    Attributes:
        kind: Failure category
        name: Profile name the operation was attempted with
        message: Human-readable message from the fixed catalog
    """

    kind: ProfileErrorKind

    def __init__(self, name: str) -> None:
        self.name = name
        self.message = MESSAGES[self.kind]
        super().__init__(self.message)


class ValidationError(ProfileError):
    """The name is a self/parent reference or contains a reserved character."""

    kind = ProfileErrorKind.INVALID_CHAR


class DuplicateError(ProfileError):
    """The name is empty or already used by another entry."""

    kind = ProfileErrorKind.ALREADY_EXISTS


class ConflictError(ProfileError):
    """Something already exists at the profile's storage location."""

    kind = ProfileErrorKind.FILE_EXISTS


class ProfileIOError(ProfileError):
    """The profile directory could not be moved."""

    kind = ProfileErrorKind.RENAME_FAILED


class RangeError(IndexError):
    """Index outside the bounds accepted by a registry operation."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"index {index} is out of range for {size} profiles")
