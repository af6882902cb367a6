"""Icon resolution services for Presence Icons."""

from .git_context import GitHandleContext
from .icon_resolution_service import IconResolutionService
from .icon_url_builder import IconUrlBuilder
from .local import (
    DictConfigurationSource,
    JsonSettingsSource,
    LocalExtensionRegistry,
    LocalFileReader,
)
from .manifest_loader import ManifestLoader
from .static_icon_resolver import StaticIconResolver
from .theme_icon_resolver import ThemeIconResolver, match_icon_type
from .theme_locator import locate_theme

__all__ = [
    "StaticIconResolver",
    "ThemeIconResolver",
    "IconResolutionService",
    "IconUrlBuilder",
    "ManifestLoader",
    "GitHandleContext",
    "LocalExtensionRegistry",
    "LocalFileReader",
    "DictConfigurationSource",
    "JsonSettingsSource",
    "match_icon_type",
    "locate_theme",
]
