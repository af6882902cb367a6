"""CLI command for resolving the icon of a single file."""

import asyncio
import logging
from pathlib import Path

from presence_icons.config import create_default_config
from presence_icons.models import DocumentInfo
from presence_icons.services import (
    IconResolutionService,
    JsonSettingsSource,
    LocalExtensionRegistry,
    LocalFileReader,
    ThemeIconResolver,
)
from presence_icons.services.local.extension_registry import DEFAULT_EXTENSIONS_DIR
from presence_icons.utils import to_title


def resolve_command(args) -> int:
    """Execute the resolve subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    document = DocumentInfo(file_name=args.file, language_id=args.language)

    if not args.static_only and not args.settings:
        print("[ERROR] --settings is required unless --static-only is given")
        return 1

    config = create_default_config(use_theme_icons=not args.static_only)
    theme_resolver = None
    if config.use_theme_icons:
        extensions_dir = Path(args.extensions_dir) if args.extensions_dir else DEFAULT_EXTENSIONS_DIR
        theme_resolver = ThemeIconResolver(
            config,
            JsonSettingsSource(Path(args.settings)),
            LocalExtensionRegistry(extensions_dir),
            LocalFileReader(),
        )

    service = IconResolutionService(config, theme_resolver=theme_resolver)
    icon = asyncio.run(service.resolve(document))

    print(f"Language: {to_title(document.language_id)}")
    print(f"Icon: {icon.image}{'' if icon.from_theme else ' (bundled)'}")
    if icon.icon_url:
        print(f"URL: {icon.icon_url}")
    return 0
