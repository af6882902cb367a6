"""Custom exceptions for Presence Icons."""

from .base import PresenceIconsException
from .resolution import (
    MalformedExtensionKeyError,
    ManifestReadError,
    NoIconForFileError,
    ResolutionError,
    ThemeNotFoundError,
)

__all__ = [
    "PresenceIconsException",
    "ResolutionError",
    "ThemeNotFoundError",
    "ManifestReadError",
    "NoIconForFileError",
    "MalformedExtensionKeyError",
]
