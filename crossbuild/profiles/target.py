"""Build targets and environment variable sets.

A target identifies one cross-compilation configuration: the CPU
architecture to generate code for, the operating system to generate code
for, and the environment variables to use when compiling and using a
profile.
"""

import platform
import re
import sys
from dataclasses import dataclass, field

# <arch>-<os>, e.g. "amd64-linux" or "arm-android"
TARGET_PATTERN = re.compile(r"^([A-Za-z0-9_]*)-([A-Za-z0-9_]*)$")

_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "armv7l": "arm",
}


class EnvVars:
    """A mutable set of environment variables.

    Tracks which variables were set or deleted after construction so that
    callers can tell what an operation actually changed.
    """

    def __init__(self, variables: dict[str, str] | None = None):
        self._vars: dict[str, str] = dict(variables or {})
        self._deltas: dict[str, str | None] = {}

    @classmethod
    def from_map(cls, variables: dict[str, str]) -> "EnvVars":
        return cls(variables)

    @classmethod
    def from_list(cls, entries: list[str]) -> "EnvVars":
        """Create from KEY=VALUE strings.

        Raises:
            ValueError: If an entry has no "=" or an empty key
        """
        variables = {}
        for entry in entries:
            key, sep, value = entry.partition("=")
            if not sep or not key:
                raise ValueError(f"Invalid environment variable: {entry!r} (expected KEY=VALUE)")
            variables[key] = value
        return cls(variables)

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._vars[key] = value
        self._deltas[key] = value

    def delete(self, key: str) -> None:
        if key in self._vars:
            del self._vars[key]
            self._deltas[key] = None

    def to_map(self) -> dict[str, str]:
        """Return a copy of the variables as a dict."""
        return dict(self._vars)

    def to_list(self) -> list[str]:
        """Return the variables as sorted KEY=VALUE strings."""
        return [f"{key}={value}" for key, value in sorted(self._vars.items())]

    def deltas(self) -> dict[str, str | None]:
        """Return variables changed since construction.

        Deleted variables map to None.
        """
        return dict(self._deltas)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvVars):
            return NotImplemented
        return self._vars == other._vars

    def __repr__(self) -> str:
        return f"EnvVars({self._vars!r})"


def native_arch() -> str:
    """Return the architecture of the machine we are running on."""
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine)


def native_os() -> str:
    """Return the operating system we are running on."""
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "darwin"
    if sys.platform in ("win32", "cygwin"):
        return "windows"
    return sys.platform


@dataclass
class Target:
    """A compilation target for a profile.

    Attributes:
        arch: CPU architecture to generate code for (e.g., "amd64")
        os: Operating system to generate code for (e.g., "linux")
        env: Environment variables used when compiling and using the profile
    """

    arch: str
    os: str
    env: EnvVars = field(default_factory=EnvVars)

    @classmethod
    def native(cls, env: EnvVars | None = None) -> "Target":
        """Create a target for the machine the command runs on."""
        return cls(arch=native_arch(), os=native_os(), env=env or EnvVars())

    @classmethod
    def parse(cls, value: str, env: EnvVars | None = None) -> "Target":
        """Parse a target of the form <arch>-<os>.

        Either component may be empty, in which case the native value is
        used (e.g., "arm-" is arm on the native operating system).

        Raises:
            ValueError: If value is not of the form <arch>-<os>
        """
        match = TARGET_PATTERN.match(value)
        if not match:
            raise ValueError(f"Invalid target: {value!r} (expected <arch>-<os>)")
        arch, os_name = match.groups()
        return cls(
            arch=arch or native_arch(),
            os=os_name or native_os(),
            env=env or EnvVars(),
        )

    def __str__(self) -> str:
        return f"{self.arch}-{self.os}"
