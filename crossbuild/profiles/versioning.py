"""Profile version metadata.

This module provides semantic version comparison and the VersionInfo class
that profile managers use to describe the versions they can install.
"""

import re
from typing import Any

from crossbuild.profiles.errors import UnsupportedVersionError

_VERSION_PATTERN = re.compile(
    r"^(\d+)\.(\d+)\.(\d+)(?:-([0-9A-Za-z\-\.]+))?(?:\+([0-9A-Za-z\-\.]+))?$"
)


def _parse_version(version: str) -> tuple[int, int, int, str, str]:
    """Parse semantic version string into components.

    Args:
        version: Semantic version string (e.g., "1.2.3", "1.0.0-alpha+build")

    Returns:
        Tuple of (major, minor, patch, prerelease, build_metadata)

    Raises:
        ValueError: If version doesn't match semantic versioning format
    """
    match = _VERSION_PATTERN.match(version)
    if not match:
        raise ValueError(f"Invalid semantic version: {version}")

    major, minor, patch, prerelease, build = match.groups()
    return (
        int(major),
        int(minor),
        int(patch),
        prerelease or "",
        build or "",
    )


def compare_versions(v1: str, v2: str) -> int:
    """Compare two semantic version strings.

    Build metadata is ignored. A release sorts after its pre-releases and
    pre-release strings are compared lexically.

    Returns:
        -1 if v1 < v2, 0 if v1 == v2, 1 if v1 > v2

    Raises:
        ValueError: If either version string is invalid

    Examples:
        >>> compare_versions("1.10.0", "1.9.0")
        1
        >>> compare_versions("1.0.0-rc1", "1.0.0")
        -1
    """
    major1, minor1, patch1, pre1, _ = _parse_version(v1)
    major2, minor2, patch2, pre2, _ = _parse_version(v2)

    if (major1, minor1, patch1) != (major2, minor2, patch2):
        return 1 if (major1, minor1, patch1) > (major2, minor2, patch2) else -1

    if pre1 == pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1
    return 1 if pre1 > pre2 else -1


class VersionInfo:
    """The versions of a profile that a manager knows how to install.

    Each supported version maps to arbitrary data the manager needs to
    install it (a source URL, a git revision, a dict of settings).

    Attributes:
        name: Profile name this information belongs to
    """

    def __init__(self, name: str, versions: dict[str, Any], default_version: str):
        """Initialize version information.

        Args:
            name: Profile name
            versions: Mapping of supported version to per-version data
            default_version: Version installed when none is requested

        Raises:
            ValueError: If a version is not a semantic version, or if
                default_version is not one of versions
        """
        for version in versions:
            _parse_version(version)
        if default_version not in versions:
            raise ValueError(
                f"Default version {default_version} of profile {name} is not a supported version"
            )
        self.name = name
        self._versions = dict(versions)
        self._default = default_version

    def supported(self) -> list[str]:
        """Return the supported versions, newest first."""
        return sorted(self._versions, key=_parse_version_key, reverse=True)

    def default(self) -> str:
        return self._default

    def lookup(self, version: str) -> Any | None:
        """Return the data for version, or None if it is not supported."""
        return self._versions.get(version)

    def select(self, version: str = "") -> str:
        """Choose the version to operate on.

        Args:
            version: Requested version; empty selects the default

        Returns:
            The selected version

        Raises:
            UnsupportedVersionError: If version is not supported
        """
        if not version:
            return self._default
        if version not in self._versions:
            raise UnsupportedVersionError(self.name, version, self.supported())
        return version

    @staticmethod
    def is_newer_than(v1: str, v2: str) -> bool:
        """Return True if v1 is a newer version than v2."""
        return compare_versions(v1, v2) > 0

    def __str__(self) -> str:
        return f"{self.name} {self._default}"

    def __repr__(self) -> str:
        return f"VersionInfo({self.name!r}, default={self._default!r}, supported={self.supported()!r})"


def _parse_version_key(version: str) -> tuple[int, int, int, int, str]:
    """Sort key matching compare_versions ordering."""
    major, minor, patch, pre, _ = _parse_version(version)
    # Releases sort after their pre-releases.
    return (major, minor, patch, 0 if pre else 1, pre)
