"""Data models for the bundled extension and language tables."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SuffixKey:
    """A known extension key matched as a literal file name suffix."""

    suffix: str

    def matches(self, file_name: str) -> bool:
        return file_name.endswith(self.suffix)


@dataclass(frozen=True)
class PatternKey:
    """A known extension key written as a delimited regular expression."""

    source: str  # Original "/pattern/flags" key
    pattern: re.Pattern
    sticky: bool = False  # "y" flag: match must start at position 0

    def matches(self, file_name: str) -> bool:
        # The literal form of the key is checked first, like any other key
        if file_name.endswith(self.source):
            return True
        if self.sticky:
            return self.pattern.match(file_name) is not None
        return self.pattern.search(file_name) is not None


ExtensionKey = SuffixKey | PatternKey


@dataclass(frozen=True)
class KnownExtension:
    """A parsed entry of the known extensions table."""

    key: ExtensionKey
    image: str


@dataclass(frozen=True)
class KnownLanguage:
    """An entry of the known languages table."""

    language: str
    image: str
