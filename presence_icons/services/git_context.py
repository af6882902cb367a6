"""Lazily loaded handle to the editor's git integration."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)

GitLoader = Callable[[], Awaitable[Any]]


class GitHandleContext:
    """Holds the git API handle for whoever needs repository details.

    The handle is loaded on first use. A failed load is remembered as None
    so the loader is not retried until invalidate() is called.
    """

    def __init__(self, loader: GitLoader):
        """Initialize with the coroutine function that acquires the handle.

        Args:
            loader: Async callable returning the git API handle
        """
        self._loader = loader
        self._handle: Any = None
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        """Check if a load has been attempted since the last invalidation."""
        return self._loaded

    async def get(self) -> Any:
        """Return the git handle, loading it on first use.

        Returns:
            The git API handle, or None if loading failed
        """
        if self._loaded:
            return self._handle

        try:
            logger.debug("Loading git extension")
            self._handle = await self._loader()
        except Exception as e:
            self._handle = None
            logger.error(f"Failed to load git extension, is git installed?; {e}")
        self._loaded = True
        return self._handle

    def invalidate(self) -> None:
        """Forget the current handle so the next get() loads it again."""
        self._handle = None
        self._loaded = False
