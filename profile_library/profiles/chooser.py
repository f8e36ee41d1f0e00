"""Interactive profile chooser session.

Holds the state a profile chooser UI works with: the registry it borrows for
the session, the selected row and the "start with this profile by default"
flag. The UI renders rows(), forwards user actions to the methods below and
shows the message of any ProfileError they raise; the session stays usable
after such an error.

Actions that need a named profile selected (rename, delete) silently do
nothing when the reserved entry or no row is selected, mirroring disabled
buttons.
"""

import logging
from pathlib import Path

from ..errors import RangeError
from ..models.profiles import ProfileEntry
from .registry import ProfileRegistry

logger = logging.getLogger(__name__)


class ChooserSession:
    """One run of the profile chooser over a borrowed registry.

    Attributes:
        registry: Registry mutated by this session
        current_index: Selected row, or None when nothing is selected
        start_after_close: Make the selected profile the default on confirm
    """

    def __init__(self, registry: ProfileRegistry) -> None:
        self.registry = registry
        self.current_index: int | None = None
        self.start_after_close = False

    def open(self) -> Path | None:
        """Load the registry and select the default profile.

        Returns:
            Alternate localization resource the UI should switch to, if any
        """
        self.registry.read_settings()
        default = self.registry.default()
        self.current_index = default if default is not None else 0
        return self.registry.get_language_resource()

    def rows(self) -> list[ProfileEntry]:
        return self.registry.entries()

    @property
    def can_modify(self) -> bool:
        """Whether rename and delete apply to the current selection."""
        return self._named_selection() is not None

    @property
    def can_clear_default(self) -> bool:
        return self.registry.default() is not None

    def select(self, index: int) -> None:
        """Select a row.

        Raises:
            RangeError: If index is not a row
        """
        if index < 0 or index >= self.registry.size():
            raise RangeError(index, self.registry.size())
        self.current_index = index

    def create(self, name: str) -> None:
        """Add a profile right after the selection and select it.

        With the reserved row (or nothing) selected the profile goes to the
        top of the named profiles.
        """
        if not name:
            return
        position = 1 if self.current_index is None else self.current_index + 1
        self.current_index = self.registry.add(position, name)

    def rename(self, name: str) -> None:
        index = self._named_selection()
        if index is None or not name:
            return
        self.registry.rename(index, name)

    def delete(self) -> None:
        index = self._named_selection()
        if index is None:
            return
        self.registry.delete(index)
        self.current_index = index - 1

    def set_default(self) -> None:
        """Make the selection the default; selecting the reserved entry clears it."""
        if self.current_index is None:
            return
        if self.current_index == 0:
            self.registry.clear_default()
        else:
            self.registry.set_default(self.current_index)

    def clear_default(self) -> None:
        self.registry.clear_default()

    def confirm(self) -> str:
        """Finish the session and save the registry.

        Returns:
            Profile to launch with; an empty string stands for the reserved profile
        """
        if self.current_index is None:
            self.current_index = 0
        if self.start_after_close:
            self.set_default()

        if not self.registry.write_settings():
            logger.warning("Profile settings were not saved")

        if self.current_index == 0:
            return ""
        return self.registry.at(self.current_index)

    def _named_selection(self) -> int | None:
        """Index of the selected named profile, None for the reserved row or no selection."""
        index = self.current_index
        if index is None or not 0 < index < self.registry.size():
            return None
        return index
