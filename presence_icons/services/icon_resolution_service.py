"""Service that picks an icon for a document, preferring the active icon theme."""

import asyncio
import logging

from presence_icons.config import PresenceIconsConfig
from presence_icons.exceptions import ResolutionError
from presence_icons.models import DocumentInfo, ResolvedIcon

from .static_icon_resolver import StaticIconResolver
from .theme_icon_resolver import ThemeIconResolver

logger = logging.getLogger(__name__)


class IconResolutionService:
    """Resolve document icons with the theme resolver and static fallback.

    The theme resolver is optional; without one (or with use_theme_icons
    disabled) only the static tables are used.
    """

    def __init__(
        self,
        config: PresenceIconsConfig,
        static_resolver: StaticIconResolver | None = None,
        theme_resolver: ThemeIconResolver | None = None,
    ):
        """Initialize the service.

        Args:
            config: Icon resolution configuration
            static_resolver: Static resolver (built from the bundled tables if None)
            theme_resolver: Theme resolver, or None to disable theme icons
        """
        self.config = config
        self.static_resolver = static_resolver or StaticIconResolver(
            fallback_icon=config.fallback_icon
        )
        self.theme_resolver = theme_resolver

    def resolve_static(self, document: DocumentInfo) -> ResolvedIcon:
        """Resolve an icon from the bundled tables only."""
        image = self.static_resolver.resolve(document.file_name, document.language_id)
        return ResolvedIcon(image=image)

    async def resolve(self, document: DocumentInfo) -> ResolvedIcon:
        """Resolve an icon for a document.

        The theme lookup runs under config.theme_lookup_timeout. Any
        resolution failure or timeout falls back to the static tables.

        Args:
            document: Document to resolve

        Returns:
            ResolvedIcon
        """
        if not self.config.use_theme_icons or self.theme_resolver is None:
            return self.resolve_static(document)

        try:
            icon = await asyncio.wait_for(
                self.theme_resolver.resolve(document.file_name, document.language_id),
                timeout=self.config.theme_lookup_timeout,
            )
        except ResolutionError as e:
            logger.warning(f"Theme icon lookup failed, using bundled icons: {e}")
            return self.resolve_static(document)
        except asyncio.TimeoutError:
            logger.warning(
                f"Theme icon lookup timed out after {self.config.theme_lookup_timeout}s, "
                f"using bundled icons"
            )
            return self.resolve_static(document)

        return ResolvedIcon(image=icon.icon_type, icon_url=icon.icon_url, from_theme=True)
