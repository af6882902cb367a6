"""Configuration classes for Presence Icons."""

from dataclasses import dataclass, field

from presence_icons.models import AssetLayout, ThemeMatchStrategy


@dataclass(frozen=True)
class PresenceIconsConfig:
    """Immutable configuration for presence reporting and icon resolution.

    All configuration is frozen (immutable) so resolvers can share one
    instance without copying it.
    """

    # Presence settings
    enabled: bool = True
    details_idling: str = "Idling"
    details_editing: str = "Editing {file_name}"
    details_debugging: str = "Debugging {file_name}"
    lower_details_idling: str = "Idling"
    lower_details_editing: str = "Workspace: {workspace}"
    lower_details_debugging: str = "Debugging: {workspace}"
    lower_details_no_workspace_found: str = "No workspace"
    large_image_idling: str = "Idling"
    large_image: str = "Editing a {language_id} file"
    small_image: str = "Visual Studio Code"
    suppress_notifications: bool = False
    workspace_exclude_patterns: list[str] = field(default_factory=list)
    swap_big_and_small_image: bool = False
    remove_details: bool = False
    remove_lower_details: bool = False
    remove_timestamp: bool = False
    remove_remote_repository: bool = False
    idle_timeout: int = 300  # Seconds without activity before idling

    # Icon resolution settings
    use_theme_icons: bool = False
    fallback_icon: str = "text"
    icon_theme_setting_key: str = "workbench.iconTheme"
    theme_match_strategy: ThemeMatchStrategy = ThemeMatchStrategy.AUTO
    asset_layout: AssetLayout = AssetLayout.AUTO
    cdn_url_template: str = (
        "https://{author}.vscode-unpkg.net/{author}/{name}/{version}/extension/{asset_path}"
    )
    convert_endpoint: str = "https://vercel-svg-to-png.vercel.app/api/convert"
    convert_size: str = "1024"
    convert_pad: str = "0.32"
    theme_lookup_timeout: float = 5.0  # Seconds, applied around the whole theme lookup

    def __post_init__(self):
        """Convert string enum values to enum members if needed."""
        if isinstance(self.theme_match_strategy, str):
            object.__setattr__(
                self, "theme_match_strategy", ThemeMatchStrategy(self.theme_match_strategy)
            )
        if isinstance(self.asset_layout, str):
            object.__setattr__(self, "asset_layout", AssetLayout(self.asset_layout))
