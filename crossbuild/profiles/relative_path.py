"""Paths anchored at a root environment variable.

Installed profile locations are recorded relative to a root variable such
as ${CROSSBUILD_ROOT} so that they stay valid when the checkout moves. A
RelativePath keeps the variable name, its value on this machine and the
path below it apart, and only combines them on request.
"""

import os

from crossbuild.profiles.target import EnvVars


def _join(*components: str) -> str:
    """Join non-empty components and clean the result.

    Unlike os.path.join, an absolute component does not discard the ones
    before it. Returns an empty string when every component is empty.
    """
    parts = [c for c in components if c]
    if not parts:
        return ""
    head, *rest = parts
    return os.path.normpath(os.path.join(head, *(p.lstrip(os.sep) for p in rest)))


def _relative(*components: str) -> str:
    """Join components into a path that never leaves the root by a leading separator."""
    return _join(*components).lstrip(os.sep)


class RelativePath:
    """A path of the form ${NAME}/some/sub/dir.

    Instances are immutable; join and root_join return new values.

    Attributes:
        name: Name of the root variable (e.g., "CROSSBUILD_ROOT")
        value: Value of the root variable on this machine
    """

    __slots__ = ("_name", "_value", "_path")

    def __init__(self, name: str, value: str):
        self._name = name
        self._value = value
        self._path = ""

    def _with_path(self, path: str) -> "RelativePath":
        rp = RelativePath(self._name, self._value)
        rp._path = path
        return rp

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        return self._value

    @property
    def symbol(self) -> str:
        """The root variable as it appears in symbolic paths: ${NAME}."""
        return "${" + self._name + "}"

    def join(self, *components: str) -> "RelativePath":
        """Return a copy with components appended to the relative path.

        Components are joined with the platform separator and the result is
        cleaned, so "." and ".." segments are collapsed. A leading separator
        on a component does not make it absolute: the path stays below the
        root.
        """
        if not components:
            return self
        return self._with_path(_relative(self._path, *components))

    def root_join(self, *components: str) -> "RelativePath":
        """Return a path with the same root and only components below it.

        Any relative path on the receiver is discarded, which makes this the
        way to derive a sibling location from an existing one.
        """
        return self._with_path(_relative(*components))

    def expand(self) -> str:
        """Return the path with the root variable replaced by its value."""
        return _join(self._value, self._path)

    def relative_path(self) -> str:
        """Return just the relative component, without any root."""
        return self._path

    def expand_env(self, env: EnvVars) -> None:
        """Replace the root symbol with its value throughout env.

        Only variables whose value actually changes are written back.

        Args:
            env: Environment variables to update in place
        """
        symbol = self.symbol
        for key, value in env.to_map().items():
            expanded = value.replace(symbol, self._value)
            if expanded != value:
                env.set(key, expanded)

    def __str__(self) -> str:
        if not self._path:
            return self.symbol
        return self.symbol + os.sep + self._path

    def __repr__(self) -> str:
        return f"RelativePath({self._name!r}, {self._value!r}).join({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RelativePath):
            return NotImplemented
        return (self._name, self._value, self._path) == (other._name, other._value, other._path)

    def __hash__(self) -> int:
        return hash((self._name, self._value, self._path))
