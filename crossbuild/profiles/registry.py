"""Registry of profile managers.

This module provides the ProfileRegistry class, which maps profile names to
the Manager implementations that install and uninstall them, along with a
process-wide default registry and module-level helpers that operate on it.

Profile implementations are expected to be registered explicitly from a
startup routine:

    from crossbuild.profiles import registry

    def register_profiles():
        registry.register("go", GoManager())
"""

import logging
import threading

from crossbuild.profiles.errors import DuplicateProfileError
from crossbuild.profiles.manager import Manager

logger = logging.getLogger(__name__)


class ProfileRegistry:
    """Thread-safe mapping from profile name to Manager.

    Names are write-once: registering a second manager under an existing
    name raises DuplicateProfileError instead of replacing the first one.
    The same manager may be registered under several names.

    A single lock guards the underlying map and is held only for the
    duration of one operation, never while a manager is doing work.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._managers: dict[str, Manager] = {}

    def register(self, name: str, manager: Manager) -> None:
        """Register a profile manager under name.

        Args:
            name: Profile name (e.g., "go", "android")
            manager: Manager implementing the profile

        Raises:
            DuplicateProfileError: If name is already registered. This is a
                startup-time programming error and should not be caught.
        """
        with self._lock:
            duplicate = name in self._managers
            if not duplicate:
                self._managers[name] = manager

        if duplicate:
            message = f"a profile manager is already registered for: {name}"
            logger.critical(message)
            raise DuplicateProfileError(message)
        logger.debug(f"Registered profile manager: {name}")

    def managers(self) -> list[str]:
        """Return the names of all registered profile managers.

        Returns:
            Profile names in lexicographic order. The list is a snapshot and
            is not affected by later registrations.
        """
        with self._lock:
            names = list(self._managers)
        return sorted(names)

    def lookup_manager(self, name: str) -> Manager | None:
        """Get the manager registered for a profile.

        Args:
            name: Profile name

        Returns:
            The registered Manager, or None if name is not registered
        """
        with self._lock:
            return self._managers.get(name)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._managers

    def __len__(self) -> int:
        with self._lock:
            return len(self._managers)


# Process-wide registry used by the module-level helpers and the CLI.
_registry = ProfileRegistry()


def default_registry() -> ProfileRegistry:
    """Return the process-wide profile registry."""
    return _registry


def register(name: str, manager: Manager) -> None:
    """Register a profile manager with the process-wide registry."""
    _registry.register(name, manager)


def managers() -> list[str]:
    """Return the sorted names registered with the process-wide registry."""
    return _registry.managers()


def lookup_manager(name: str) -> Manager | None:
    """Look up a profile manager in the process-wide registry."""
    return _registry.lookup_manager(name)
