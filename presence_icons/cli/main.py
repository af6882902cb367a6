"""Main CLI entry point for presence_icons."""

import argparse
import sys

from presence_icons import __version__
from presence_icons.cli.commands import resolve


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="presence_icons",
        description="Resolve the icon a presence status shows for an open file",
        epilog="Use 'presence_icons <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # presence_icons resolve <file>
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve the icon for a file",
        description="Resolve a file's icon from the active icon theme or the bundled tables",
    )
    resolve_parser.add_argument("file", help="Path of the file (it does not need to exist)")
    resolve_parser.add_argument(
        "--language",
        default="plaintext",
        help="Editor language id of the file (default: plaintext)",
    )
    resolve_parser.add_argument(
        "--settings",
        help="Path to the editor settings.json holding workbench.iconTheme",
    )
    resolve_parser.add_argument(
        "--extensions-dir",
        help="Directory of installed editor extensions (default: ~/.vscode/extensions)",
    )
    resolve_parser.add_argument(
        "--static-only",
        action="store_true",
        help="Only use the bundled extension and language tables",
    )
    resolve_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each lookup step",
    )

    args = parser.parse_args()

    # Dispatch to appropriate command
    if args.command == "resolve":
        return resolve.resolve_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
