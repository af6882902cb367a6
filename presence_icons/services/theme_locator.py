"""Locate the installed extension that provides the active icon theme."""

import logging

from presence_icons.exceptions import ManifestReadError, ThemeNotFoundError
from presence_icons.models import ExtensionDescriptor, IconThemeContribution, ThemeMatchStrategy

logger = logging.getLogger(__name__)


def find_by_contribution(
    extensions: list[ExtensionDescriptor], theme_id: str
) -> tuple[ExtensionDescriptor, IconThemeContribution] | None:
    """Find the first icon theme contribution whose id contains theme_id."""
    for extension in extensions:
        for contribution in extension.icon_themes:
            if theme_id in contribution.id:
                return extension, contribution
    return None


def find_by_extension_id(
    extensions: list[ExtensionDescriptor], theme_id: str
) -> ExtensionDescriptor | None:
    """Find the first extension whose id contains theme_id."""
    for extension in extensions:
        if theme_id in extension.id:
            return extension
    return None


def select_contribution(extension: ExtensionDescriptor, theme_id: str) -> IconThemeContribution:
    """Pick the icon theme contribution of an extension to read the manifest from.

    A single contribution is used directly. With several, the one whose id
    contains theme_id wins, falling back to the first.

    Raises:
        ManifestReadError: If the extension declares no icon themes
    """
    if not extension.icon_themes:
        raise ManifestReadError(f"Extension {extension.id} does not contribute any icon theme")
    if len(extension.icon_themes) == 1:
        return extension.icon_themes[0]
    for contribution in extension.icon_themes:
        if theme_id in contribution.id:
            return contribution
    return extension.icon_themes[0]


def locate_theme(
    extensions: list[ExtensionDescriptor],
    theme_id: str,
    strategy: ThemeMatchStrategy = ThemeMatchStrategy.AUTO,
) -> tuple[ExtensionDescriptor, IconThemeContribution]:
    """Find the extension and contribution providing an icon theme.

    Args:
        extensions: Installed extensions
        theme_id: Configured icon theme id
        strategy: How theme_id is matched against extensions

    Returns:
        Tuple of (extension, contribution)

    Raises:
        ThemeNotFoundError: If no extension matches theme_id
        ManifestReadError: If the matching extension declares no icon themes
    """
    if strategy in (ThemeMatchStrategy.CONTRIBUTION_ID, ThemeMatchStrategy.AUTO):
        found = find_by_contribution(extensions, theme_id)
        if found is not None:
            logger.debug(f"Icon theme '{theme_id}' contributed by {found[0]}")
            return found

    if strategy in (ThemeMatchStrategy.EXTENSION_ID, ThemeMatchStrategy.AUTO):
        extension = find_by_extension_id(extensions, theme_id)
        if extension is not None:
            logger.debug(f"Icon theme '{theme_id}' matched extension {extension}")
            return extension, select_contribution(extension, theme_id)

    raise ThemeNotFoundError(
        f"No installed extension provides icon theme '{theme_id}' "
        f"({len(extensions)} extensions searched)"
    )
