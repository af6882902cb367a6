"""Asynchronous access to files on the local disk."""

import asyncio
from pathlib import Path


class LocalFileReader:
    """Read files from disk without blocking the event loop.

    Implements FileReader protocol.
    """

    async def read_bytes(self, path: str) -> bytes:
        return await asyncio.to_thread(Path(path).read_bytes)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(Path(path).is_file)
