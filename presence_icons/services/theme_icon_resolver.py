"""Service for resolving file icons from the active editor icon theme."""

import logging
import os
import posixpath

from presence_icons.config import PresenceIconsConfig
from presence_icons.exceptions import NoIconForFileError, ThemeNotFoundError
from presence_icons.interfaces import ConfigurationSource, ExtensionRegistry, FileReader
from presence_icons.models import (
    AssetLayout,
    ExtensionDescriptor,
    IconThemeManifest,
    ThemeIcon,
)
from presence_icons.utils import base_name, full_extension, normalize_relative

from .icon_url_builder import IconUrlBuilder
from .manifest_loader import ManifestLoader
from .theme_locator import locate_theme

logger = logging.getLogger(__name__)


def match_icon_type(manifest: IconThemeManifest, file_name: str, language_id: str) -> str:
    """Find the manifest icon type for a file.

    Precedence is file name, then file extension, then language id. The file
    extension is everything after the first dot, so "archive.tar.gz" is looked
    up as "tar.gz".

    Args:
        manifest: Icon theme manifest
        file_name: Full path of the file
        language_id: Editor language id of the document

    Returns:
        Icon type (key into manifest.icon_definitions)

    Raises:
        NoIconForFileError: If none of the lookup tables contain the file
    """
    name = base_name(file_name).lower()
    extension = full_extension(name)

    # Most specific first
    matchers = [
        ("file name", manifest.file_names, name),
        ("file extension", manifest.file_extensions, extension),
        ("file language", manifest.language_ids, language_id),
    ]
    for label, table, key in matchers:
        logger.debug(f"Checking {label}: {key}")
        icon_type = table.get(key)
        if icon_type is not None:
            return icon_type

    raise NoIconForFileError(
        f"Icon theme has no icon for {name} (extension '{extension}', language '{language_id}')"
    )


class ThemeIconResolver:
    """Resolve a file's icon from the icon theme the editor currently uses.

    Every call looks up the theme's extension and re-reads its manifest, so
    theme switches are picked up immediately.
    """

    def __init__(
        self,
        config: PresenceIconsConfig,
        configuration: ConfigurationSource,
        registry: ExtensionRegistry,
        file_reader: FileReader,
    ):
        """Initialize the resolver.

        Args:
            config: Icon resolution configuration
            configuration: Editor settings, used for the active icon theme id
            registry: Installed extensions
            file_reader: Asynchronous file reader for theme files
        """
        self.config = config
        self._configuration = configuration
        self._registry = registry
        self._file_reader = file_reader
        self._manifest_loader = ManifestLoader(file_reader)
        self._url_builder = IconUrlBuilder(config)

    async def resolve(self, file_name: str, language_id: str) -> ThemeIcon:
        """Resolve the theme icon for a file.

        Args:
            file_name: Full path of the file
            language_id: Editor language id of the document

        Returns:
            ThemeIcon with the rendered icon URL and the manifest icon type

        Raises:
            ThemeNotFoundError: If no icon theme is configured or installed
            ManifestReadError: If the theme manifest cannot be read or parsed
            NoIconForFileError: If the theme has no icon for the file
        """
        theme_id = self._configuration.get(self.config.icon_theme_setting_key)
        if not theme_id:
            raise ThemeNotFoundError(
                f"No icon theme configured under '{self.config.icon_theme_setting_key}'"
            )

        extension, contribution = locate_theme(
            self._registry.all(), theme_id, self.config.theme_match_strategy
        )
        manifest_path = normalize_relative(contribution.path)
        manifest = await self._manifest_loader.load(self._extension_file(extension, manifest_path))

        icon_type = match_icon_type(manifest, file_name, language_id)
        definition = manifest.icon_definitions.get(icon_type)
        if definition is None or not definition.icon_path:
            raise NoIconForFileError(f"Icon type '{icon_type}' has no iconPath in {theme_id}")

        asset_path = await self._asset_path(extension, manifest_path, definition.icon_path)
        icon_url = self._url_builder.build(extension, asset_path)
        logger.debug(icon_url)
        return ThemeIcon(icon_url=icon_url, icon_type=icon_type)

    async def _asset_path(
        self, extension: ExtensionDescriptor, manifest_path: str, icon_path: str
    ) -> str:
        """Work out where an icon file lives relative to the extension root.

        Args:
            extension: Theme extension
            manifest_path: Manifest path relative to the extension root
            icon_path: iconPath from the manifest's icon definition

        Returns:
            POSIX asset path relative to the extension root
        """
        relative = normalize_relative(posixpath.join(posixpath.dirname(manifest_path), icon_path))
        icons_dir = posixpath.join("icons", posixpath.basename(icon_path.replace("\\", "/")))

        layout = self.config.asset_layout
        if layout == AssetLayout.RELATIVE:
            return relative
        if layout == AssetLayout.ICONS_DIR:
            return icons_dir

        if await self._is_file(self._extension_file(extension, relative)):
            return relative
        if await self._is_file(self._extension_file(extension, icons_dir)):
            logger.debug(f"Using icons/ layout for {extension.id}")
            return icons_dir
        logger.debug(f"Icon {icon_path} not found in {extension.path}, assuming relative layout")
        return relative

    async def _is_file(self, path: str) -> bool:
        # Unreadable locations count as missing
        try:
            return await self._file_reader.exists(path)
        except OSError as e:
            logger.debug(f"Cannot check {path}: {e}")
            return False

    @staticmethod
    def _extension_file(extension: ExtensionDescriptor, relative_path: str) -> str:
        return os.path.join(os.path.normpath(extension.path), *relative_path.split("/"))
