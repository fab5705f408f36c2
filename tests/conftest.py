"""Shared fixtures for profile tests."""

import argparse

import pytest

from crossbuild.profiles.manager import Action, Context, flag_name
from crossbuild.profiles.registry import ProfileRegistry
from crossbuild.profiles.relative_path import RelativePath
from crossbuild.profiles.target import Target
from crossbuild.profiles.versioning import VersionInfo


class FakeManager:
    """Manager that records the calls made to it."""

    def __init__(self, name: str = "fake", fail_with: Exception | None = None):
        self._name = name
        self._versions = VersionInfo(name, {"1.0.0": "rev1", "1.1.0": "rev2"}, "1.1.0")
        self.fail_with = fail_with
        self.calls: list[tuple[str, RelativePath, Target]] = []
        self.seen_env: list[dict[str, str]] = []

    def add_flags(self, parser: argparse.ArgumentParser, action: Action) -> None:
        parser.add_argument(f"--{flag_name(self._name, 'version')}", default="")
        if action is Action.UNINSTALL:
            parser.add_argument(f"--{flag_name(self._name, 'keep-source')}", action="store_true")

    def name(self) -> str:
        return self._name

    def info(self) -> str:
        return f"The {self._name} profile, for tests."

    def version_info(self) -> VersionInfo:
        return self._versions

    def __str__(self) -> str:
        return f"{self._name} {self._versions.default()}"

    def install(self, ctx: Context, root: RelativePath, target: Target) -> None:
        self._record("install", root, target)

    def uninstall(self, ctx: Context, root: RelativePath, target: Target) -> None:
        self._record("uninstall", root, target)

    def _record(self, op: str, root: RelativePath, target: Target) -> None:
        self.calls.append((op, root, target))
        self.seen_env.append(target.env.to_map())
        if self.fail_with is not None:
            raise self.fail_with


@pytest.fixture
def make_manager():
    """Factory for FakeManager instances."""
    return FakeManager


@pytest.fixture
def fake_manager():
    return FakeManager()


@pytest.fixture
def registry():
    """A fresh registry, independent of the process-wide one."""
    return ProfileRegistry()


@pytest.fixture
def root(tmp_path):
    return RelativePath("CROSSBUILD_ROOT", str(tmp_path)).join(".profiles")
