"""File name utilities."""

import posixpath
import re

_SEPARATORS = re.compile(r"[\\/]")


def base_name(file_name: str) -> str:
    """Strip the directory part of a path.

    Both forward and back slashes are treated as separators so that
    Windows paths reported by the editor behave the same everywhere.

    Args:
        file_name: Full or relative file path

    Returns:
        The final path component
    """
    return _SEPARATORS.split(file_name)[-1]


def full_extension(name: str) -> str:
    """Return everything after the first dot of a file name.

    Examples:
        "archive.tar.gz" -> "tar.gz"
        ".gitignore" -> "gitignore"
        "Makefile" -> ""
    """
    _, _, extension = name.partition(".")
    return extension


def normalize_relative(path: str) -> str:
    """Normalize a package-relative path to POSIX form without leading './'.

    Args:
        path: Relative path as written in a package manifest

    Returns:
        Normalized relative path (e.g. "./dist/../icons/a.svg" -> "icons/a.svg")
    """
    normalized = posixpath.normpath(path.replace("\\", "/"))
    return normalized.lstrip("/")
