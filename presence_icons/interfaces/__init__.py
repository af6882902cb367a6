"""Interface protocols for Presence Icons."""

from .configuration_source import ConfigurationSource
from .extension_registry import ExtensionRegistry
from .file_reader import FileReader

__all__ = ["ConfigurationSource", "ExtensionRegistry", "FileReader"]
