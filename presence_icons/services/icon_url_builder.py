"""Build remote image URLs for theme icon assets."""

from urllib.parse import quote, urlencode

from presence_icons.config import PresenceIconsConfig
from presence_icons.models import ExtensionDescriptor


class IconUrlBuilder:
    """Compose the rendered-icon URL for an asset inside a theme extension.

    The asset URL points at the extension's published files on the
    marketplace CDN; it is then passed, percent-encoded, as the ``img``
    parameter of an SVG-to-PNG conversion service.
    """

    def __init__(self, config: PresenceIconsConfig):
        self.config = config

    def asset_url(self, extension: ExtensionDescriptor, asset_path: str) -> str:
        """URL of an extension file on the CDN.

        Args:
            extension: Extension that ships the asset
            asset_path: POSIX path of the asset relative to the extension root

        Returns:
            Asset URL
        """
        return self.config.cdn_url_template.format(
            author=extension.author,
            name=extension.name,
            version=extension.version,
            asset_path=asset_path,
        )

    def build(self, extension: ExtensionDescriptor, asset_path: str) -> str:
        """URL of the converted raster image of an extension asset."""
        query = urlencode(
            {
                "img": self.asset_url(extension, asset_path),
                "size": self.config.convert_size,
                "pad": self.config.convert_pad,
            },
            safe="",
            quote_via=quote,
        )
        return f"{self.config.convert_endpoint}?{query}"
