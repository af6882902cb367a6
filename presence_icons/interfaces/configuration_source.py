"""Protocol for reading editor settings."""

from typing import Protocol


class ConfigurationSource(Protocol):
    """Interface for a read-only view of the editor's settings."""

    def get(self, key: str) -> str | None:
        """Look up a setting.

        Args:
            key: Dotted setting key (e.g., 'workbench.iconTheme').

        Returns:
            The setting's string value, or None if unset.
        """
        ...
