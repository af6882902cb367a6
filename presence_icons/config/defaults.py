"""Factory for Presence Icons configuration."""

from .config import PresenceIconsConfig


def create_default_config(**overrides) -> PresenceIconsConfig:
    """Build a PresenceIconsConfig from its defaults.

    Enum settings may be passed by value (e.g. asset_layout="icons_dir"),
    which is how they appear in JSON or on the command line.

    Args:
        **overrides: Field values replacing the defaults

    Returns:
        PresenceIconsConfig

    Example:
        config = create_default_config(use_theme_icons=True, theme_lookup_timeout=2.0)
    """
    return PresenceIconsConfig(**overrides)
