"""Configuration management for Presence Icons."""

from .config import PresenceIconsConfig
from .defaults import create_default_config

__all__ = ["PresenceIconsConfig", "create_default_config"]
