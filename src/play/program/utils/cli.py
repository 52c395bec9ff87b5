import argparse
import sys

from pydantic import ValidationError

from play.program.settings import settings_manager
from play.program.settings.manager import format_validation_error
from play.program.settings.models import AppModel, RunConfiguration
from play.program.exceptions import (
    ConfigurationException,
    ResourceNotFoundException,
)

USAGE = "play <file> [-s speed] [-p port]"


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports bad input with exit code 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    # Flags default to None so that only the ones given override PLAY_* settings
    defaults = {name: field.default for name, field in AppModel.model_fields.items()}

    parser = ArgumentParser(
        prog="play",
        usage=USAGE,
        description="Stream a local media file to a browser-based player.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Path of the media file to play.",
    )
    parser.add_argument(
        "-s",
        "--speed",
        type=float,
        help=f"Playback speed multiplier (default: {defaults['speed']})",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        help=f"Port to run the server on (default: {defaults['port']})",
    )
    parser.add_argument(
        "--host",
        help=f"Interface to bind to (default: {defaults['host']})",
    )
    parser.add_argument(
        "--no-browser",
        dest="open_browser",
        action="store_const",
        const=False,
        help="Don't open the default browser.",
    )
    parser.add_argument(
        "--log-level",
        help=f"Minimum log level (default: {defaults['log_level']})",
    )
    return parser


def build_configuration(args: argparse.Namespace) -> RunConfiguration:
    """
    Turn parsed CLI arguments into the run configuration.

    Flags that were given take precedence over PLAY_* environment variables,
    which take precedence over the schema defaults.

    Raises:
        ConfigurationException: If no file was given or a value is invalid.
        ResourceNotFoundException: If the file does not exist.
    """

    if not args.file:
        raise ConfigurationException(f"Usage: {USAGE}")

    flags = {
        key: value
        for key, value in vars(args).items()
        if key != "file" and value is not None
    }

    try:
        values = settings_manager.load(**flags)
    except ValueError as e:
        raise ConfigurationException(f"Invalid environment settings: {e}") from e

    try:
        config = RunConfiguration(path=args.file, **values)
    except ValidationError as e:
        raise ConfigurationException(
            f"Invalid settings:\n{format_validation_error(e)}"
        ) from e

    if not config.path.is_file():
        raise ResourceNotFoundException(str(config.path))

    return config


def handle_args(argv: list[str] | None = None) -> RunConfiguration:
    """
    Parse CLI arguments into a run configuration.

    The first non-flag argument is the file to play. Defaults come from the
    PLAY_* environment settings.

    Returns:
        RunConfiguration: The validated, immutable configuration.
    """
    args = build_parser().parse_args(argv)
    return build_configuration(args)
