"""Bundled lookup tables for Presence Icons."""

from .known_icons import KNOWN_EXTENSIONS, KNOWN_LANGUAGES

__all__ = ["KNOWN_EXTENSIONS", "KNOWN_LANGUAGES"]
