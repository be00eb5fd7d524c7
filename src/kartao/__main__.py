"""CLI entry point for kartao."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="kartao",
        description="Personal kanban board server storing boards as JSON files",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding the board files (default: ./data)",
    )
    parser.add_argument(
        "--default-columns",
        default=None,
        metavar="NAMES",
        help="Comma-separated column names for new boards",
    )
    parser.add_argument("--host", default=None, help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings from the environment, overridden by CLI args."""
    settings_kwargs: dict = {}
    if args.data_dir:
        settings_kwargs["data_dir"] = args.data_dir
    if args.default_columns:
        settings_kwargs["default_columns"] = args.default_columns
    if args.host:
        settings_kwargs["host"] = args.host
    if args.port:
        settings_kwargs["port"] = args.port
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main() -> None:
    """Main entry point."""
    args = parse_args()
    settings = build_settings(args)

    setup_logging(settings.verbose, settings.log_file)

    # Import here so --help and --version don't load the web stack
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
