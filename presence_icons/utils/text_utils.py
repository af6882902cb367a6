"""Text formatting utilities."""

import re

_FIRST_WORD_CHAR = re.compile(r"^\w")


def to_lower(text: str) -> str:
    """Lower-case a string."""
    return text.lower()


def to_upper(text: str) -> str:
    """Upper-case a string."""
    return text.upper()


def to_title(text: str) -> str:
    """Lower-case a string, then capitalise its first character.

    Unlike str.title(), only the very first character is changed, and only
    if it is a word character (e.g. "typescriptreact" -> "Typescriptreact").

    Args:
        text: Text to format

    Returns:
        Formatted text
    """
    return _FIRST_WORD_CHAR.sub(lambda match: match.group(0).upper(), to_lower(text))
