"""Data models for documents and resolved icons."""

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class DocumentInfo:
    """The file whose icon is being resolved."""

    file_name: str  # Full path as reported by the editor
    language_id: str  # Editor language tag, e.g. "python"


class ThemeIcon(NamedTuple):
    """Result of resolving an icon from the active icon theme."""

    icon_url: str
    icon_type: str  # Key into the manifest's iconDefinitions


@dataclass(frozen=True)
class ResolvedIcon:
    """Icon chosen for a document by the resolution service."""

    image: str  # Static icon identifier or theme icon type
    icon_url: str | None = None
    from_theme: bool = False

    def __str__(self) -> str:
        if self.icon_url:
            return f"{self.image} ({self.icon_url})"
        return self.image
