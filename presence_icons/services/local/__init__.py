"""Filesystem-backed collaborators for resolving icons outside the editor."""

from .extension_registry import LocalExtensionRegistry
from .file_reader import LocalFileReader
from .settings import DictConfigurationSource, JsonSettingsSource

__all__ = [
    "LocalExtensionRegistry",
    "LocalFileReader",
    "DictConfigurationSource",
    "JsonSettingsSource",
]
