"""Protocol for enumerating installed extensions."""

from typing import Protocol

from presence_icons.models import ExtensionDescriptor


class ExtensionRegistry(Protocol):
    """Interface for the collection of installed editor extensions."""

    def all(self) -> list[ExtensionDescriptor]:
        """Return every installed extension, in registry order."""
        ...
