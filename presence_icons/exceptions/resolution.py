"""Icon resolution exceptions."""

from .base import PresenceIconsException


class ResolutionError(PresenceIconsException):
    """Raised when the theme icon for a file cannot be resolved."""

    pass


class ThemeNotFoundError(ResolutionError):
    """Raised when no installed extension provides the active icon theme."""

    pass


class ManifestReadError(ResolutionError):
    """Raised when an icon theme manifest cannot be read or parsed."""

    pass


class NoIconForFileError(ResolutionError):
    """Raised when the icon theme has no icon for the file."""

    pass


class MalformedExtensionKeyError(PresenceIconsException):
    """Raised when a delimited regex key in the known extensions table fails to compile.

    Only raised while building the table; the static resolver never lets it escape.
    """

    pass
