"""Registry of extensions installed in a local extensions directory."""

import json
import logging
from pathlib import Path

from presence_icons.models import ExtensionDescriptor

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS_DIR = Path.home() / ".vscode" / "extensions"


class LocalExtensionRegistry:
    """Enumerate extensions by scanning ``<dir>/*/package.json``.

    Implements ExtensionRegistry protocol. The directory is rescanned on
    every call so newly installed themes are visible.
    """

    def __init__(self, extensions_dir: Path = DEFAULT_EXTENSIONS_DIR):
        """Initialize with the directory holding installed extensions.

        Args:
            extensions_dir: Extensions directory (one subdirectory per extension)
        """
        self._dir = extensions_dir

    def all(self) -> list[ExtensionDescriptor]:
        """Return every extension with a readable package.json, sorted by directory name."""
        if not self._dir.is_dir():
            logger.warning(f"Extensions directory not found: {self._dir}")
            return []

        extensions: list[ExtensionDescriptor] = []
        for package_file in sorted(self._dir.glob("*/package.json")):
            try:
                with package_file.open("r", encoding="utf-8") as f:
                    package = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Skipping extension with unreadable package.json {package_file}: {e}")
                continue
            if not isinstance(package, dict):
                continue
            if not isinstance(package.get("contributes") or {}, dict):
                logger.warning(f"Skipping extension with malformed contributes {package_file}")
                continue
            extensions.append(
                ExtensionDescriptor.from_package_json(str(package_file.parent), package)
            )

        logger.debug(f"Found {len(extensions)} installed extensions in {self._dir}")
        return extensions
