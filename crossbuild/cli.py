"""
crossbuild CLI - Install and uninstall profiles for cross-compilation targets.

Usage:
    crossbuild list
        Lists the registered profiles.

    crossbuild info <profile>
        Shows the description and supported versions of a profile.

    crossbuild install <profile> [--target arm-android] [--env CC=clang] [--dry-run]
        Installs a profile for a target (default: the native target).
        Profiles may add their own flags, named --<profile>.<flag>.

    crossbuild uninstall <profile> [--target arm-android] [--dry-run]
        Uninstalls a profile for a target.

Profiles are registered by the startup routine passed to main().
"""

import argparse
import logging
import os
import sys
from collections.abc import Callable

from crossbuild.config import Settings, get_settings
from crossbuild.profiles.errors import ProfileError
from crossbuild.profiles.installer import ProfileInstaller
from crossbuild.profiles.manager import Action, Context
from crossbuild.profiles.registry import ProfileRegistry, default_registry
from crossbuild.profiles.target import EnvVars, Target

logger = logging.getLogger(__name__)


def _target_from_args(args: argparse.Namespace) -> Target:
    """Build the target named on the command line."""
    env = EnvVars.from_list(args.env or [])
    if args.target:
        return Target.parse(args.target, env=env)
    return Target.native(env=env)


def cmd_list(args: argparse.Namespace) -> None:
    """Execute the 'list' subcommand: print registered profile names."""
    names = args.installer.registry.managers()
    if not names:
        print("No profiles registered")
        return
    for name in names:
        print(name)


def cmd_info(args: argparse.Namespace) -> None:
    """Execute the 'info' subcommand: describe a profile."""
    mgr = args.installer.manager(args.profile)
    versions = mgr.version_info()

    print(f"Profile: {mgr}")
    print(f"{'=' * 50}")
    print(mgr.info())
    print()
    print(f"  Default version:    {versions.default()}")
    print(f"  Supported versions: {', '.join(versions.supported())}")


def _run_action(args: argparse.Namespace, action: Action) -> None:
    installer: ProfileInstaller = args.installer
    ctx = Context(
        flags=args,
        env=EnvVars.from_map(dict(os.environ)),
        dry_run=args.dry_run,
        logger=logging.getLogger(f"crossbuild.profiles.{args.profile}"),
    )
    target = _target_from_args(args)

    if action is Action.INSTALL:
        installer.install(ctx, args.profile, target)
        print(f"Installed {args.profile} for {target} in {installer.root}")
    else:
        installer.uninstall(ctx, args.profile, target)
        print(f"Uninstalled {args.profile} for {target}")


def cmd_install(args: argparse.Namespace) -> None:
    """Execute the 'install' subcommand."""
    _run_action(args, Action.INSTALL)


def cmd_uninstall(args: argparse.Namespace) -> None:
    """Execute the 'uninstall' subcommand."""
    _run_action(args, Action.UNINSTALL)


def _add_target_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("profile", type=str, help="Profile name")
    parser.add_argument(
        "--target",
        type=str,
        default="",
        help="Target as <arch>-<os> (default: native target)",
    )
    parser.add_argument(
        "--env",
        type=str,
        action="append",
        metavar="KEY=VALUE",
        help="Environment variable for the target (repeatable)",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Show what would be done without doing it"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")


def build_parser(installer: ProfileInstaller) -> argparse.ArgumentParser:
    """Build the argument parser, including flags added by profiles."""
    parser = argparse.ArgumentParser(
        prog="crossbuild",
        description="crossbuild - Manage profiles for cross-compilation targets",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # 'list' subcommand
    list_parser = subparsers.add_parser("list", help="List registered profiles")
    list_parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    list_parser.set_defaults(func=cmd_list)

    # 'info' subcommand
    info_parser = subparsers.add_parser("info", help="Describe a profile")
    info_parser.add_argument("profile", type=str, help="Profile name")
    info_parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    info_parser.set_defaults(func=cmd_info)

    # 'install' subcommand
    install_parser = subparsers.add_parser("install", help="Install a profile for a target")
    _add_target_arguments(install_parser)
    installer.add_flags(install_parser, Action.INSTALL)
    install_parser.set_defaults(func=cmd_install)

    # 'uninstall' subcommand
    uninstall_parser = subparsers.add_parser("uninstall", help="Uninstall a profile for a target")
    _add_target_arguments(uninstall_parser)
    installer.add_flags(uninstall_parser, Action.UNINSTALL)
    uninstall_parser.set_defaults(func=cmd_uninstall)

    return parser


def main(
    argv: list[str] | None = None,
    register_profiles: Callable[[ProfileRegistry], None] | None = None,
    registry: ProfileRegistry | None = None,
    settings: Settings | None = None,
) -> None:
    """Run the CLI.

    Args:
        argv: Arguments (default: sys.argv[1:])
        register_profiles: Startup routine that registers profile managers
        registry: Registry to use (default: the process-wide registry)
        settings: Settings to use (default: loaded from file and environment)
    """
    if registry is None:
        registry = default_registry()
    if register_profiles is not None:
        register_profiles(registry)

    settings = settings or get_settings()
    installer = ProfileInstaller(settings.profiles_root(), registry=registry)

    parser = build_parser(installer)
    args = parser.parse_args(argv)
    args.installer = installer

    # Configure logging
    level = logging.DEBUG if getattr(args, "verbose", False) else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug(f"Registered profiles: {registry.managers()}")

    try:
        args.func(args)
    except (ProfileError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        # Install and uninstall failures come from the profile managers.
        print(f"Error: {args.command} {getattr(args, 'profile', '')} failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
