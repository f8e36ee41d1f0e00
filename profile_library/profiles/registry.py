"""Profile registry: the ordered list of profiles and its persisted state.

Index 0 always holds the reserved entry that stands for the unnamed
configuration space. It can never be renamed or deleted and nothing is
inserted in front of it. Every other entry is a named profile with its own
storage directory next to the registry store.

Contract:
- Inputs: Profile names and indices, the registry store file
- Outputs: Registry state, ProfileError / RangeError on rejected mutations
- Side Effects: rename() moves profile directories; write_settings() writes the store
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from ..errors import ConflictError
from ..errors import DuplicateError
from ..errors import ProfileIOError
from ..errors import RangeError
from ..errors import ValidationError
from ..models.profiles import ProfileEntry
from ..models.profiles import RegistrySnapshot
from ..storage.ini_store import format_bool
from ..storage.ini_store import get_bool
from ..storage.ini_store import get_int
from ..storage.ini_store import load_ini
from ..storage.ini_store import save_ini
from ..storage.paths import ProfilePaths

logger = logging.getLogger(__name__)

DEFAULT_RESERVED_NAME = "(default)"

# Path separators, wildcards, quotes, redirection and shell metacharacters
RESERVED_CHARS = frozenset("\\/*?\"<>|\t&':")

SECTION = "Profile"
ENTRY_KEY = re.compile(r"P\[([1-9][0-9]*)\]")
STORE_HEADER = "Profile manager settings"


def is_profile_name_valid(name: str) -> bool:
    """Check a candidate name against the naming rules.

    Rejects the self and parent directory references ("." and "..") and any
    name containing one of ``\\ / * ? " < > | TAB & ' :``. Emptiness and
    uniqueness are checked separately by ProfileRegistry.is_new_profile_name.

    Args:
        name: Candidate profile name

    Returns:
        True if the name may be used as a profile directory name

    Example:
        >>> is_profile_name_valid("work")
        True
        >>> is_profile_name_valid("a:b")
        False
    """
    if name in (".", ".."):
        return False
    return not any(ch in RESERVED_CHARS for ch in name)


def _entry_slots(values: dict[str, str], count: int) -> list[int]:
    """Indices i of the P[i] keys present in ``values`` with 1 <= i <= count, ascending."""
    slots = []
    for key in values:
        match = ENTRY_KEY.fullmatch(key)
        if match:
            i = int(match.group(1))
            if 1 <= i <= count:
                slots.append(i)
    return sorted(slots)


class ProfileRegistry:
    """Ordered profile names with a default pointer and a language resource.

    The registry is owned by one session at a time; nothing here is
    thread-safe.

    Attributes:
        paths: Store and profile directory locations
        reserved_name: Name of the permanent entry at index 0

    Example:
        >>> registry = ProfileRegistry(ProfilePaths.for_profile("app"))
        >>> registry.add(0, "work")
        1
        >>> registry.at(1)
        'work'
    """

    is_profile_name_valid = staticmethod(is_profile_name_valid)

    def __init__(self, paths: ProfilePaths, reserved_name: str = DEFAULT_RESERVED_NAME) -> None:
        self.paths = paths
        self.reserved_name = reserved_name
        self._profiles: list[str] = [reserved_name]
        self._default_index: int | None = None
        self._language_resource: Path | None = None

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._profiles))

    def __repr__(self) -> str:
        return f"ProfileRegistry(profiles={self._profiles!r}, default_index={self._default_index!r})"

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def size(self) -> int:
        return len(self._profiles)

    def at(self, index: int) -> str:
        """Get the name at ``index``.

        Raises:
            RangeError: If index is negative or past the last entry
        """
        if index < 0 or index >= len(self._profiles):
            raise RangeError(index, len(self._profiles))
        return self._profiles[index]

    def default(self) -> int | None:
        return self._default_index

    def names(self) -> list[str]:
        return list(self._profiles)

    def index_of(self, name: str) -> int | None:
        """Find an entry by case-insensitive name.

        Names match when their lowercase forms are equal; "straße" and
        "strasse" are different profiles.
        """
        lowered = name.lower()
        for index, profile in enumerate(self._profiles):
            if profile.lower() == lowered:
                return index
        return None

    def is_new_profile_name(self, name: str) -> bool:
        """Check that ``name`` is non-empty and not used by any entry.

        Comparison is case-insensitive and includes the reserved entry.
        """
        return bool(name) and self.index_of(name) is None

    def entries(self) -> list[ProfileEntry]:
        """Rows for a profile list, default marked."""
        return [
            ProfileEntry(index=i, name=name, is_default=i == self._default_index, is_reserved=i == 0)
            for i, name in enumerate(self._profiles)
        ]

    def snapshot(self) -> RegistrySnapshot:
        return RegistrySnapshot(
            entries=list(self._profiles),
            default_index=self._default_index,
            language_resource=self._language_resource,
        )

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #

    def add(self, index: int, name: str) -> int:
        """Insert a new profile.

        Indices below 1 or past the end append the profile instead. A default
        pointer at or after the insertion point moves up with its entry.

        Args:
            index: Requested insertion position
            name: New profile name

        Returns:
            Index the profile was inserted at

        Raises:
            ValidationError: If the name breaks the naming rules
            DuplicateError: If the name is empty or already used
            ConflictError: If the profile's storage location already exists
        """
        self._validate_new_name(name)

        if index < 1 or index > len(self._profiles):
            index = len(self._profiles)
        self._profiles.insert(index, name)

        if self._default_index is not None and self._default_index >= index:
            self._default_index += 1

        logger.info(f"Added profile {name!r} at index {index}")
        return index

    def rename(self, index: int, name: str) -> None:
        """Rename the profile at ``index`` and move its storage directory.

        A profile whose directory was never created has nothing to move; the
        new name is then added at ``index`` and the old entry shifts one slot
        down the list.

        Raises:
            RangeError: If index is the reserved entry or out of range
            ValidationError: If the name breaks the naming rules
            DuplicateError: If the name is empty or already used
            ConflictError: If the new storage location already exists
            ProfileIOError: If the directory cannot be moved
        """
        self._check_mutable_index(index)
        old_name = self._profiles[index]

        old_dir = self.paths.profile_dir(old_name)
        if not old_dir.is_dir():
            logger.debug(f"No directory for profile {old_name!r} at {old_dir}, adding {name!r} instead")
            self.add(index, name)
            return

        self._validate_new_name(name)

        new_dir = self.paths.profile_dir(name)
        try:
            old_dir.rename(new_dir)
        except OSError as e:
            logger.error(f"Failed to move {old_dir} to {new_dir}: {e}")
            raise ProfileIOError(name) from e

        self._profiles[index] = name
        logger.info(f"Renamed profile {old_name!r} to {name!r}")

    def delete(self, index: int) -> None:
        """Remove the profile at ``index`` from the list.

        The storage directory is left on disk.

        Raises:
            RangeError: If index is the reserved entry or out of range
        """
        self._check_mutable_index(index)

        default = self._default_index
        if default is not None:
            if default == index:
                self._default_index = None
            elif default > 1 and index < default:
                self._default_index = default - 1

        name = self._profiles.pop(index)
        logger.info(f"Deleted profile {name!r}")

    def set_default(self, index: int) -> None:
        """Make the profile at ``index`` start by default.

        Raises:
            RangeError: If index is the reserved entry or out of range
        """
        self._check_mutable_index(index)
        self._default_index = index

    def clear_default(self) -> None:
        self._default_index = None

    def set_language_resource(self, path: Path | str | None) -> None:
        self._language_resource = Path(path) if path else None

    def get_language_resource(self) -> Path | None:
        return self._language_resource

    # ------------------------------------------------------------------ #
    # Persistence
    # ------------------------------------------------------------------ #

    def read_settings(self) -> bool:
        """Load the registry from its store.

        Entries that are invalid or duplicated are dropped. A default index
        outside the loaded list, or stored together with a false
        ``bDefaultSelected``, leaves the default unset. Keys that are missing
        or malformed keep the value the registry already has.

        Returns:
            False if the store does not exist (state untouched), True otherwise
        """
        store_path = self.paths.registry_file
        data = load_ini(store_path)
        if data is None:
            return False

        values = data.get(SECTION, {})
        self._profiles = [self.reserved_name]

        count = get_int(values, "nCount", 0)
        # P[1]..P[count]; absent slots read as empty names and would be dropped anyway
        for i in _entry_slots(values, count):
            name = values[f"P[{i}]"]
            if self.is_new_profile_name(name) and is_profile_name_valid(name):
                self._profiles.append(name)
            else:
                logger.debug(f"Dropping profile entry P[{i}]={name!r} from {store_path}")

        current = -1 if self._default_index is None else self._default_index
        stored_index = get_int(values, "nDefaultIndex", current)
        default: int | None = stored_index
        if stored_index < 0 or stored_index >= len(self._profiles):
            default = None

        if not get_bool(values, "bDefaultSelected", default is not None):
            default = None
        self._default_index = default

        if "szDllLanguage" in values:
            self.set_language_resource(values["szDllLanguage"])

        logger.info(f"Loaded {len(self._profiles) - 1} profiles from {store_path} (default: {default})")
        return True

    def write_settings(self) -> bool:
        """Save the registry to its store.

        Returns:
            True if the store was written
        """
        values: dict[str, str] = {"nCount": str(len(self._profiles) - 1)}
        for i in range(1, len(self._profiles)):
            values[f"P[{i}]"] = self._profiles[i]
        values["nDefaultIndex"] = str(-1 if self._default_index is None else self._default_index)
        values["bDefaultSelected"] = format_bool(self._default_index is not None)
        values["szDllLanguage"] = str(self._language_resource) if self._language_resource else ""

        store_path = self.paths.registry_file
        try:
            save_ini(store_path, {SECTION: values}, header=STORE_HEADER)
        except OSError as e:
            logger.error(f"Failed to save profile settings to {store_path}: {e}")
            return False

        logger.info(f"Saved {len(self._profiles) - 1} profiles to {store_path}")
        return True

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _check_mutable_index(self, index: int) -> None:
        if index < 1 or index >= len(self._profiles):
            raise RangeError(index, len(self._profiles))

    def _validate_new_name(self, name: str) -> None:
        if not is_profile_name_valid(name):
            raise ValidationError(name)

        if not self.is_new_profile_name(name):
            raise DuplicateError(name)

        profile_dir = self.paths.profile_dir(name)
        if profile_dir.exists():
            logger.debug(f"Profile location already taken: {profile_dir}")
            raise ConflictError(name)
