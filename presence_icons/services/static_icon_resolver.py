"""Service for resolving file icons from the bundled extension and language tables."""

import logging
import re
from collections.abc import Iterable, Mapping

from presence_icons.data import KNOWN_EXTENSIONS, KNOWN_LANGUAGES
from presence_icons.exceptions import MalformedExtensionKeyError
from presence_icons.models import (
    ExtensionKey,
    KnownExtension,
    KnownLanguage,
    PatternKey,
    SuffixKey,
)
from presence_icons.utils import base_name

logger = logging.getLogger(__name__)

DEFAULT_ICON = "text"

_DELIMITED_REGEX = re.compile(r"^/(.*)/([mgiy]+)$")
_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
}


def parse_extension_key(key: str) -> ExtensionKey:
    """Turn a table key into a suffix or pattern key.

    Args:
        key: Literal suffix or "/pattern/flags" string

    Returns:
        SuffixKey or PatternKey

    Raises:
        MalformedExtensionKeyError: If a delimited key does not compile
    """
    match = _DELIMITED_REGEX.match(key)
    if not match:
        return SuffixKey(key)

    body, flags = match.groups()
    re_flags = 0
    for flag in flags:
        re_flags |= _FLAGS.get(flag, 0)

    try:
        pattern = re.compile(body, re_flags)
    except re.error as e:
        raise MalformedExtensionKeyError(f"Invalid pattern in extension key {key!r}: {e}") from e

    return PatternKey(source=key, pattern=pattern, sticky="y" in flags)


def build_extension_table(
    table: Mapping[str, str | Mapping[str, str]],
) -> list[KnownExtension]:
    """Parse a raw known extensions table, keeping its order.

    Delimited keys that fail to compile are kept as literal suffix keys.

    Args:
        table: Mapping of key to icon id or {"image": icon id}

    Returns:
        Parsed entries in table order
    """
    entries: list[KnownExtension] = []
    for key, value in table.items():
        image = value if isinstance(value, str) else value["image"]
        try:
            parsed_key = parse_extension_key(key)
        except MalformedExtensionKeyError as e:
            logger.debug(f"Treating extension key as literal: {e}")
            parsed_key = SuffixKey(key)
        entries.append(KnownExtension(key=parsed_key, image=image))
    return entries


def build_language_table(table: Iterable[Mapping[str, str]]) -> list[KnownLanguage]:
    return [KnownLanguage(language=entry["language"], image=entry["image"]) for entry in table]


class StaticIconResolver:
    """Resolve a file's icon id from static extension and language tables.

    Resolution order:
        1. First extension key (in table order) matching the base file name
        2. Language table entry equal to the document's language id
        3. The fallback icon ("text")

    Pure and total: never raises, never does I/O.
    """

    def __init__(
        self,
        extensions: Mapping[str, str | Mapping[str, str]] | None = None,
        languages: Iterable[Mapping[str, str]] | None = None,
        fallback_icon: str = DEFAULT_ICON,
    ):
        """Initialize the resolver.

        Args:
            extensions: Known extensions table (defaults to the bundled table)
            languages: Known languages table (defaults to the bundled table)
            fallback_icon: Icon id returned when nothing matches
        """
        self._extensions = build_extension_table(
            KNOWN_EXTENSIONS if extensions is None else extensions
        )
        self._languages = build_language_table(
            KNOWN_LANGUAGES if languages is None else languages
        )
        self._fallback_icon = fallback_icon

    def resolve(self, file_name: str, language_id: str) -> str:
        """Resolve the icon id for a file.

        Args:
            file_name: Full path of the file
            language_id: Editor language id of the document

        Returns:
            Icon identifier
        """
        name = base_name(file_name)

        for entry in self._extensions:
            if entry.key.matches(name):
                return entry.image

        for language in self._languages:
            if language.language == language_id:
                return language.image

        return self._fallback_icon
