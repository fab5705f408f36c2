"""Profile management for crossbuild.

A profile is a named collection of external software required by a build,
such as a compiler toolchain or an SDK, that must be compiled for a
specific target: a CPU architecture, an operating system and a set of
environment variables. Targets provide the essential support for cross
compilation.

Profile implementations register a Manager with the registry, and the
installer installs or uninstalls them by name. Installation locations are
recorded as RelativePaths so they remain valid when the root moves.
"""

from crossbuild.profiles.errors import (
    DuplicateProfileError,
    ProfileError,
    ProfileNotFoundError,
    UnsupportedVersionError,
)
from crossbuild.profiles.installer import ProfileInstaller
from crossbuild.profiles.manager import Action, Context, Manager, flag_name
from crossbuild.profiles.registry import (
    ProfileRegistry,
    default_registry,
    lookup_manager,
    managers,
    register,
)
from crossbuild.profiles.relative_path import RelativePath
from crossbuild.profiles.target import EnvVars, Target
from crossbuild.profiles.versioning import VersionInfo, compare_versions

__all__ = [
    # Registry
    "ProfileRegistry",
    "default_registry",
    "register",
    "managers",
    "lookup_manager",
    # Manager contract
    "Action",
    "Context",
    "Manager",
    "flag_name",
    # Paths
    "RelativePath",
    # Targets
    "Target",
    "EnvVars",
    # Versioning
    "VersionInfo",
    "compare_versions",
    # Installation
    "ProfileInstaller",
    # Errors
    "ProfileError",
    "DuplicateProfileError",
    "ProfileNotFoundError",
    "UnsupportedVersionError",
]
