"""Profile manager protocol.

Defines the interface every profile implementation must provide to be
installed, uninstalled and described by crossbuild, along with the Action
enum and the Context passed to install and uninstall.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from crossbuild.profiles.relative_path import RelativePath
from crossbuild.profiles.target import EnvVars, Target
from crossbuild.profiles.versioning import VersionInfo


class Action(Enum):
    """The lifecycle operation being performed on a profile."""

    INSTALL = "install"
    UNINSTALL = "uninstall"


def flag_name(profile: str, flag: str) -> str:
    """Return the namespaced name of a profile flag: <profile>.<flag>."""
    return f"{profile}.{flag}"


@dataclass
class Context:
    """State shared with a manager for one install or uninstall.

    Attributes:
        flags: Parsed command-line flags, including profile flags
        env: Environment of the running process
        dry_run: If True, managers report what they would do without doing it
        logger: Logger managers should report progress to
    """

    flags: argparse.Namespace = field(default_factory=argparse.Namespace)
    env: EnvVars = field(default_factory=EnvVars)
    dry_run: bool = False
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("crossbuild"))

    def flag(self, profile: str, name: str, default: Any = None) -> Any:
        """Read the value of a profile flag added by Manager.add_flags."""
        # argparse stores --a-b.c-d as a_b.c_d
        dest = flag_name(profile, name).replace("-", "_")
        return getattr(self.flags, dest, default)


@runtime_checkable
class Manager(Protocol):
    """Protocol for profile managers.

    Implementations install, uninstall and describe one profile. Install
    and uninstall report failures by raising; they must never terminate
    the process.
    """

    def add_flags(self, parser: argparse.ArgumentParser, action: Action) -> None:
        """Add profile specific flags for action to parser.

        Flags must be named --<profile-name>.<flag> (see flag_name) so that
        several profiles can share one parser.
        """
        ...

    def name(self) -> str:
        """Return the name of this profile."""
        ...

    def info(self) -> str:
        """Return an informative description of the profile."""
        ...

    def version_info(self) -> VersionInfo:
        """Return the VersionInfo for this profile."""
        ...

    def __str__(self) -> str:
        """Return the profile's name and version."""
        ...

    def install(self, ctx: Context, root: RelativePath, target: Target) -> None:
        """Install the profile for target under root.

        Raises:
            Exception: Any failure, propagated to the caller unchanged.
        """
        ...

    def uninstall(self, ctx: Context, root: RelativePath, target: Target) -> None:
        """Uninstall the profile for target.

        When the last target of the profile is uninstalled, the profile
        itself (i.e. its source code) is removed as well.
        """
        ...
