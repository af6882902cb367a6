"""Tests for configuration."""

import dataclasses

import pytest

from presence_icons.config import PresenceIconsConfig, create_default_config
from presence_icons.models import AssetLayout, ThemeMatchStrategy


class TestPresenceIconsConfig:
    """Tests for PresenceIconsConfig."""

    def test_defaults(self):
        """Test the default icon resolution settings."""
        config = PresenceIconsConfig()
        assert config.use_theme_icons is False
        assert config.fallback_icon == "text"
        assert config.icon_theme_setting_key == "workbench.iconTheme"
        assert config.theme_match_strategy is ThemeMatchStrategy.AUTO
        assert config.asset_layout is AssetLayout.AUTO
        assert config.convert_size == "1024"
        assert config.convert_pad == "0.32"

    def test_string_enums_are_converted(self):
        """Test that enum settings accept their string values."""
        config = create_default_config(
            theme_match_strategy="extension_id", asset_layout="icons_dir"
        )
        assert config.theme_match_strategy is ThemeMatchStrategy.EXTENSION_ID
        assert config.asset_layout is AssetLayout.ICONS_DIR

    def test_invalid_enum_value(self):
        """Test that unknown strategy names are rejected."""
        with pytest.raises(ValueError):
            create_default_config(theme_match_strategy="fuzzy")

    def test_frozen(self):
        """Test that configuration cannot be modified."""
        config = PresenceIconsConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.use_theme_icons = True

    def test_overrides(self):
        """Test that overrides are applied."""
        config = create_default_config(idle_timeout=60, workspace_exclude_patterns=["**/tmp"])
        assert config.idle_timeout == 60
        assert config.workspace_exclude_patterns == ["**/tmp"]
