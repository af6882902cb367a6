"""Data models for installed extensions and their icon theme manifests."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from presence_icons.exceptions import ManifestReadError


class ThemeMatchStrategy(Enum):
    """How the active icon theme id is matched against installed extensions."""

    EXTENSION_ID = "extension_id"  # Extension id contains the theme id
    CONTRIBUTION_ID = "contribution_id"  # A contributed icon theme id contains the theme id
    AUTO = "auto"  # Contribution first, then extension id


class AssetLayout(Enum):
    """Where a theme package keeps the icon files its manifest points at."""

    RELATIVE = "relative"  # Icon path is relative to the manifest's directory
    ICONS_DIR = "icons_dir"  # Icon file name lives under <extension>/icons/
    AUTO = "auto"  # Detect per icon by probing the extension directory


@dataclass(frozen=True)
class IconThemeContribution:
    """An entry of an extension's ``contributes.iconThemes`` array."""

    id: str
    label: str
    path: str


@dataclass(frozen=True)
class ExtensionDescriptor:
    """An installed editor extension."""

    id: str  # Dotted "publisher.name" identifier
    path: str  # Install directory
    version: str
    icon_themes: list[IconThemeContribution] = field(default_factory=list)

    @property
    def author(self) -> str:
        """Lower-cased publisher part of the extension id."""
        return self.id.lower().split(".", 1)[0]

    @property
    def name(self) -> str:
        """Lower-cased name part of the extension id."""
        parts = self.id.lower().split(".", 1)
        return parts[1] if len(parts) > 1 else ""

    @classmethod
    def from_package_json(cls, path: str, package: dict[str, Any]) -> "ExtensionDescriptor":
        """Build a descriptor from a parsed extension ``package.json``.

        Args:
            path: Extension install directory
            package: Parsed package.json contents

        Returns:
            ExtensionDescriptor for the package
        """
        contributes = package.get("contributes")
        if not isinstance(contributes, dict):
            contributes = {}
        entries = contributes.get("iconThemes")
        if not isinstance(entries, list):
            entries = []
        icon_themes = [
            IconThemeContribution(
                id=str(entry.get("id", "")),
                label=str(entry.get("label", "")),
                path=str(entry.get("path", "")),
            )
            for entry in entries
            if isinstance(entry, dict)
        ]
        return cls(
            id=f"{package.get('publisher', '')}.{package.get('name', '')}",
            path=path,
            version=str(package.get("version", "")),
            icon_themes=icon_themes,
        )

    def __str__(self) -> str:
        return f"{self.id}@{self.version}"


@dataclass(frozen=True)
class IconDefinition:
    """A single ``iconDefinitions`` entry."""

    icon_path: str | None = None  # Font-glyph themes have no iconPath


@dataclass(frozen=True)
class IconThemeManifest:
    """The lookup tables and icon definitions of an icon theme manifest."""

    file_names: dict[str, str] = field(default_factory=dict)
    file_extensions: dict[str, str] = field(default_factory=dict)
    language_ids: dict[str, str] = field(default_factory=dict)
    icon_definitions: dict[str, IconDefinition] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "IconThemeManifest":
        """Validate parsed manifest JSON and build the manifest record.

        Missing tables are treated as empty.

        Args:
            data: Parsed JSON document

        Returns:
            IconThemeManifest built from the document

        Raises:
            ManifestReadError: If the document or one of its tables has the wrong shape
        """
        if not isinstance(data, dict):
            raise ManifestReadError("Icon theme manifest must be a JSON object")

        definitions: dict[str, IconDefinition] = {}
        for key, value in _table(data, "iconDefinitions").items():
            if not isinstance(value, dict):
                raise ManifestReadError(f"Icon definition '{key}' must be an object")
            icon_path = value.get("iconPath")
            if icon_path is not None and not isinstance(icon_path, str):
                raise ManifestReadError(f"Icon definition '{key}' has a non-string iconPath")
            definitions[key] = IconDefinition(icon_path=icon_path)

        return cls(
            file_names=_string_table(data, "fileNames"),
            file_extensions=_string_table(data, "fileExtensions"),
            language_ids=_string_table(data, "languageIds"),
            icon_definitions=definitions,
        )


def _table(data: dict[str, Any], key: str) -> dict[str, Any]:
    table = data.get(key)
    if table is None:
        return {}
    if not isinstance(table, dict):
        raise ManifestReadError(f"Manifest field '{key}' must be an object")
    return table


def _string_table(data: dict[str, Any], key: str) -> dict[str, str]:
    table = _table(data, key)
    for name, value in table.items():
        if not isinstance(value, str):
            raise ManifestReadError(f"Manifest field '{key}.{name}' must be a string")
    return dict(table)
