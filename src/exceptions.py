"""Error types raised by the matching core and the profile registry."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside its allowed range (e.g. k < 0)."""


class DuplicateProfileError(ValueError):
    """Raised when a profile name is already present in a registry."""


class ProfileNotFoundError(KeyError):
    """Raised when a profile name is not present in a registry."""
