"""Tests for the filesystem-backed collaborators."""

import asyncio
import json

import pytest

from presence_icons.services import (
    DictConfigurationSource,
    JsonSettingsSource,
    LocalExtensionRegistry,
    LocalFileReader,
)


class TestLocalExtensionRegistry:
    """Tests for scanning an extensions directory."""

    def test_lists_installed_extensions(self, extensions_dir, make_theme_extension):
        """Test that every extension with a package.json is listed."""
        make_theme_extension()
        make_theme_extension(publisher="vscode-icons-team", name="vscode-icons", version="12.0.0")

        extensions = LocalExtensionRegistry(extensions_dir).all()

        assert [e.id for e in extensions] == [
            "PKief.material-icon-theme",
            "vscode-icons-team.vscode-icons",
        ]
        assert extensions[0].icon_themes[0].path == "./dist/material-icons.json"

    def test_skips_invalid_package_json(self, extensions_dir, make_theme_extension, caplog):
        """Test that unreadable package manifests are skipped with a warning."""
        make_theme_extension()
        broken = extensions_dir / "broken.ext-1.0.0"
        broken.mkdir()
        (broken / "package.json").write_text("{oops", encoding="utf-8")

        extensions = LocalExtensionRegistry(extensions_dir).all()

        assert [e.id for e in extensions] == ["PKief.material-icon-theme"]
        assert "Skipping extension" in caplog.text

    def test_skips_malformed_contributes(self, extensions_dir, make_theme_extension, caplog):
        """Test that a package.json whose contributes is not an object is skipped."""
        make_theme_extension()
        odd = extensions_dir / "odd.ext-1.0.0"
        odd.mkdir()
        (odd / "package.json").write_text(
            json.dumps({"publisher": "odd", "name": "ext", "version": "1.0.0", "contributes": "x"}),
            encoding="utf-8",
        )

        extensions = LocalExtensionRegistry(extensions_dir).all()

        assert [e.id for e in extensions] == ["PKief.material-icon-theme"]
        assert "malformed contributes" in caplog.text

    def test_missing_directory(self, tmp_path):
        """Test that a missing directory yields no extensions."""
        assert LocalExtensionRegistry(tmp_path / "nope").all() == []


class TestSettingsSources:
    """Tests for the configuration sources."""

    def test_dict_source(self):
        """Test lookups in an in-memory source."""
        source = DictConfigurationSource({"workbench.iconTheme": "vs-seti", "editor.tabSize": 4})
        assert source.get("workbench.iconTheme") == "vs-seti"
        assert source.get("editor.tabSize") is None
        assert source.get("missing") is None

    def test_json_settings(self, tmp_path):
        """Test reading settings.json."""
        settings = tmp_path / "settings.json"
        settings.write_text(json.dumps({"workbench.iconTheme": "vscode-icons"}), encoding="utf-8")
        assert JsonSettingsSource(settings).get("workbench.iconTheme") == "vscode-icons"

    def test_missing_settings_file(self, tmp_path, caplog):
        """Test that a missing settings file yields empty settings."""
        source = JsonSettingsSource(tmp_path / "settings.json")
        assert source.get("workbench.iconTheme") is None
        assert "Settings file not found" in caplog.text

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
    def test_invalid_settings_file(self, tmp_path, content):
        """Test that invalid settings files are ignored."""
        settings = tmp_path / "settings.json"
        settings.write_text(content, encoding="utf-8")
        assert JsonSettingsSource(settings).get("workbench.iconTheme") is None


class TestLocalFileReader:
    """Tests for the asynchronous file reader."""

    def test_read_bytes(self, tmp_path):
        """Test reading a file's raw contents."""
        target = tmp_path / "a.json"
        target.write_bytes(b'{"a": 1}')
        assert asyncio.run(LocalFileReader().read_bytes(str(target))) == b'{"a": 1}'

    def test_read_missing_file_raises(self, tmp_path):
        """Test that reading a missing file raises an OSError."""
        with pytest.raises(OSError):
            asyncio.run(LocalFileReader().read_bytes(str(tmp_path / "missing")))

    def test_exists(self, tmp_path):
        """Test that exists() is true only for regular files."""
        target = tmp_path / "a.svg"
        target.write_text("<svg/>", encoding="utf-8")
        reader = LocalFileReader()
        assert asyncio.run(reader.exists(str(target))) is True
        assert asyncio.run(reader.exists(str(tmp_path))) is False
        assert asyncio.run(reader.exists(str(tmp_path / "b.svg"))) is False
