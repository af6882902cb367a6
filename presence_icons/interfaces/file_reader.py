"""Protocol for asynchronous file access."""

from typing import Protocol


class FileReader(Protocol):
    """Interface for reading theme files from disk or theme storage.

    Both methods are suspension points; callers await them before
    continuing with any matching logic.
    """

    async def read_bytes(self, path: str) -> bytes:
        """Read a whole file.

        Args:
            path: Absolute file path.

        Returns:
            Raw file contents.

        Raises:
            OSError: If the file is missing or unreadable.
        """
        ...

    async def exists(self, path: str) -> bool:
        """Check whether a regular file exists at path."""
        ...
