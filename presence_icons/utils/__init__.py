"""Utility functions for Presence Icons."""

from .path_utils import base_name, full_extension, normalize_relative
from .text_utils import to_lower, to_title, to_upper

__all__ = [
    "base_name",
    "full_extension",
    "normalize_relative",
    "to_lower",
    "to_upper",
    "to_title",
]
