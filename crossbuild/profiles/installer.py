"""Profile installer for installing and uninstalling profiles by name.

This module provides the ProfileInstaller class, which resolves profile
names through a registry and delegates to the registered managers.
"""

import argparse
import logging

from crossbuild.profiles.errors import ProfileNotFoundError
from crossbuild.profiles.manager import Action, Context, Manager
from crossbuild.profiles.registry import ProfileRegistry, default_registry
from crossbuild.profiles.relative_path import RelativePath
from crossbuild.profiles.target import Target

logger = logging.getLogger(__name__)


class ProfileInstaller:
    """Installer for registered profiles.

    Failures raised by a manager are logged and propagated unchanged; the
    installer does not retry or interpret them.

    Attributes:
        registry: Registry used to look up profile managers
        root: Root under which profiles are installed (e.g., ${CROSSBUILD_ROOT}/.profiles)
    """

    def __init__(self, root: RelativePath, registry: ProfileRegistry | None = None):
        """Initialize profile installer.

        Args:
            root: Root under which profiles are installed
            registry: Registry to look profiles up in.
                      Defaults to the process-wide registry if not specified.
        """
        self.root = root
        self.registry = registry if registry is not None else default_registry()

    def manager(self, name: str) -> Manager:
        """Get the manager for a profile.

        Raises:
            ProfileNotFoundError: If no manager is registered for name
        """
        mgr = self.registry.lookup_manager(name)
        if mgr is None:
            raise ProfileNotFoundError(name)
        return mgr

    def add_flags(
        self,
        parser: argparse.ArgumentParser,
        action: Action,
        names: list[str] | None = None,
    ) -> None:
        """Let profile managers add their flags for action to parser.

        Args:
            parser: Parser to add flags to
            action: Action the flags are for
            names: Profiles to add flags for (default: all registered)
        """
        seen: list[Manager] = []
        for name in names if names is not None else self.registry.managers():
            mgr = self.manager(name)
            # A manager registered under several names adds its flags once.
            if any(mgr is other for other in seen):
                continue
            seen.append(mgr)
            mgr.add_flags(parser, action)

    def install(self, ctx: Context, name: str, target: Target) -> Manager:
        """Install a profile for target.

        The root variable is substituted throughout target.env before the
        manager is invoked.

        Args:
            ctx: Context for the operation
            name: Profile name
            target: Target to install for

        Returns:
            The manager that performed the installation

        Raises:
            ProfileNotFoundError: If the profile is not registered
        """
        return self._run(Action.INSTALL, ctx, name, target)

    def uninstall(self, ctx: Context, name: str, target: Target) -> Manager:
        """Uninstall a profile for target.

        Raises:
            ProfileNotFoundError: If the profile is not registered
        """
        return self._run(Action.UNINSTALL, ctx, name, target)

    def _run(self, action: Action, ctx: Context, name: str, target: Target) -> Manager:
        mgr = self.manager(name)
        self.root.expand_env(target.env)

        prefix = "[dry run] " if ctx.dry_run else ""
        logger.info(f"{prefix}{action.value} {mgr} for {target} in {self.root}")
        try:
            if action is Action.INSTALL:
                mgr.install(ctx, self.root, target)
            else:
                mgr.uninstall(ctx, self.root, target)
        except Exception as e:
            logger.error(f"{action.value} {name} for {target} failed: {e}")
            raise
        logger.info(f"{prefix}{action.value} {name} for {target}: done")
        return mgr
