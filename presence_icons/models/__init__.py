"""Data models for Presence Icons."""

from .icon import DocumentInfo, ResolvedIcon, ThemeIcon
from .known import ExtensionKey, KnownExtension, KnownLanguage, PatternKey, SuffixKey
from .theme import (
    AssetLayout,
    ExtensionDescriptor,
    IconDefinition,
    IconThemeContribution,
    IconThemeManifest,
    ThemeMatchStrategy,
)

__all__ = [
    "DocumentInfo",
    "ResolvedIcon",
    "ThemeIcon",
    "ExtensionKey",
    "SuffixKey",
    "PatternKey",
    "KnownExtension",
    "KnownLanguage",
    "AssetLayout",
    "ThemeMatchStrategy",
    "ExtensionDescriptor",
    "IconThemeContribution",
    "IconDefinition",
    "IconThemeManifest",
]
