"""crossbuild - profile management for cross-compilation builds."""

__version__ = "0.1.0"
