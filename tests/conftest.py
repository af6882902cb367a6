"""Pytest configuration and shared fixtures."""

import json

import pytest

from presence_icons.config import PresenceIconsConfig
from presence_icons.models import ExtensionDescriptor
from presence_icons.services import DictConfigurationSource, LocalFileReader

SAMPLE_MANIFEST = {
    "iconDefinitions": {
        "docker": {"iconPath": "./../icons/docker.svg"},
        "yaml": {"iconPath": "./../icons/yaml.svg"},
        "py": {"iconPath": "./../icons/python.svg"},
        "archive": {"iconPath": "./../icons/zip.svg"},
        "glyph": {"fontCharacter": "\\E001"},
    },
    "fileNames": {"dockerfile": "docker"},
    "fileExtensions": {"yml": "yaml", "tar.gz": "archive"},
    "languageIds": {"python": "py", "fontonly": "glyph"},
}


class StaticRegistry:
    """An ExtensionRegistry over a fixed list of descriptors."""

    def __init__(self, extensions):
        self.extensions = list(extensions)

    def all(self):
        return list(self.extensions)


class FailingFileReader:
    """A FileReader whose reads always fail."""

    def __init__(self, error=None):
        self.error = error or FileNotFoundError("no such file")
        self.reads = []

    async def read_bytes(self, path):
        self.reads.append(path)
        raise self.error

    async def exists(self, path):
        return False


@pytest.fixture
def test_config():
    """Provide a configuration with theme icons enabled and auto detection."""
    return PresenceIconsConfig(use_theme_icons=True)


@pytest.fixture
def extensions_dir(tmp_path):
    """Provide an empty extensions directory."""
    path = tmp_path / "extensions"
    path.mkdir()
    return path


@pytest.fixture
def make_theme_extension(extensions_dir):
    """Factory fixture that installs an icon theme extension on disk.

    Icon files are written under ``<extension>/icons/`` for every icon
    definition that has an iconPath.
    """

    def _make(
        publisher="PKief",
        name="material-icon-theme",
        version="4.0.0",
        themes=None,
        manifest=None,
        manifest_path="dist/material-icons.json",
        create_icons=True,
    ):
        root = extensions_dir / f"{publisher.lower()}.{name}-{version}"
        root.mkdir(parents=True)
        if themes is None:
            themes = [
                {"id": name, "label": "Material Icon Theme", "path": f"./{manifest_path}"}
            ]
        package = {
            "publisher": publisher,
            "name": name,
            "version": version,
            "contributes": {"iconThemes": themes},
        }
        (root / "package.json").write_text(json.dumps(package), encoding="utf-8")

        manifest = SAMPLE_MANIFEST if manifest is None else manifest
        manifest_file = root / manifest_path
        manifest_file.parent.mkdir(parents=True, exist_ok=True)
        manifest_file.write_text(json.dumps(manifest), encoding="utf-8")

        if create_icons:
            (root / "icons").mkdir(exist_ok=True)
            for definition in manifest.get("iconDefinitions", {}).values():
                icon_path = definition.get("iconPath")
                if icon_path:
                    icon_name = icon_path.rsplit("/", 1)[-1]
                    (root / "icons" / icon_name).write_text("<svg/>", encoding="utf-8")

        return ExtensionDescriptor.from_package_json(str(root), package)

    return _make


@pytest.fixture
def theme_settings():
    """Provide settings selecting the material icon theme."""
    return DictConfigurationSource({"workbench.iconTheme": "material-icon-theme"})


@pytest.fixture
def file_reader():
    """Provide a reader for the local disk."""
    return LocalFileReader()


@pytest.fixture
def make_registry():
    """Factory fixture for registries over fixed extension lists."""

    def _make(*extensions):
        return StaticRegistry(extensions)

    return _make


@pytest.fixture
def failing_reader():
    """Provide a reader whose reads fail with FileNotFoundError."""
    return FailingFileReader()
