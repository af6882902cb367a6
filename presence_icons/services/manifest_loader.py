"""Service for reading icon theme manifests."""

import json
import logging

from presence_icons.exceptions import ManifestReadError
from presence_icons.interfaces import FileReader
from presence_icons.models import IconThemeManifest

logger = logging.getLogger(__name__)


class ManifestLoader:
    """Read and validate icon theme manifest files (no caching)."""

    def __init__(self, file_reader: FileReader):
        """Initialize with the collaborator used for file access.

        Args:
            file_reader: Asynchronous file reader
        """
        self._file_reader = file_reader

    async def load(self, path: str) -> IconThemeManifest:
        """Read and parse a manifest.

        Args:
            path: Absolute path of the manifest JSON file

        Returns:
            Parsed manifest

        Raises:
            ManifestReadError: If the file cannot be read, decoded or validated
        """
        logger.debug(f"Reading icon theme manifest {path}")
        try:
            raw = await self._file_reader.read_bytes(path)
        except OSError as e:
            raise ManifestReadError(f"Cannot read icon theme manifest {path}: {e}") from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ManifestReadError(f"Invalid icon theme manifest {path}: {e}") from e

        return IconThemeManifest.from_dict(data)
