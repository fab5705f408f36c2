"""Exception types raised by the profile system."""


class ProfileError(Exception):
    """Base class for profile management errors."""


class DuplicateProfileError(ProfileError):
    """Raised when a profile name is registered twice.

    This indicates two profile implementations collided on a name. It is
    raised at startup and is not meant to be caught.
    """


class ProfileNotFoundError(ProfileError, LookupError):
    """Raised when an operation names a profile that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"unknown profile: {name}")
        self.name = name


class UnsupportedVersionError(ProfileError, ValueError):
    """Raised when a profile is asked for a version it does not support."""

    def __init__(self, profile: str, version: str, supported: list[str]):
        super().__init__(
            f"profile {profile} does not support version {version!r}"
            f" (supported: {', '.join(supported) or 'none'})"
        )
        self.profile = profile
        self.version = version
        self.supported = supported
