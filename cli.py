"""
CLI and configuration utilities for days.

Handles command-line argument parsing and resolution of the image request.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, datetime
from pathlib import Path

import yaml

from days_core.calendar_days import YearProgress
from days_core.config import DaysConfigService
from days_core.constants import (
    DEFAULT_IMAGE_SETTINGS,
    DEFAULT_PALETTE,
    DEFAULT_RUNTIME_PATHS,
    VALID_IMAGE_FORMATS,
)
from days_core.params import ImageRequest

logger = logging.getLogger("days")

__version__ = "1.0.0"
DATE_FORMAT = "%Y-%m-%d"
# CLI option dest -> request parameter name
COLOUR_OPTIONS = {
    'bg_color': 'bgColor',
    'primary': 'primary',
    'secondary': 'secondary',
    'accent': 'accent',
}


class CLIError(ValueError):
    """User-facing CLI validation error with optional hint text."""

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class FriendlyArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises CLIError instead of exiting immediately."""

    def error(self, message: str) -> None:
        hint = None
        if "unrecognized arguments" in message:
            if "--bgColor" in message or "--bg_color" in message:
                hint = "Use --bg-color (or --background)."
            elif "--size" in message:
                hint = "Use --width and --height."
        usage = self.format_usage().strip()
        raise CLIError(f"Argument error: {message}\n{usage}", hint=hint)


def _resolve_config_defaults(argv: list[str]) -> tuple[Path, dict[str, object], dict[str, str]]:
    """Resolve config path, request defaults and runtime paths from a CLI pre-parse."""
    config_probe = argparse.ArgumentParser(add_help=False)
    config_probe.add_argument("--config", type=Path, default=Path("config.yaml"))
    probe_args, _ = config_probe.parse_known_args(argv)
    config_path = probe_args.config

    if "--help" in argv or "-h" in argv or "--version" in argv:
        return config_path, {**DEFAULT_IMAGE_SETTINGS, **DEFAULT_PALETTE}, DEFAULT_RUNTIME_PATHS.copy()

    service = DaysConfigService(config_path)
    try:
        defaults = service.load_request_defaults()
        runtime_paths = service.load_runtime_paths()
    except FileNotFoundError:
        raise CLIError(
            f"Config file not found: {config_path}",
            "Run from the project directory or provide a valid --config path.",
        )
    except (ValueError, OSError, yaml.YAMLError) as exc:
        raise CLIError(
            f"Failed to load defaults from {config_path}: {exc}",
            "Fix the image, palette and runtime_paths sections of config.yaml.",
        )

    return config_path, defaults, runtime_paths


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for days.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``).

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    if argv is None:
        argv = sys.argv[1:]
    config_path_default, defaults, runtime_paths = _resolve_config_defaults(argv)

    parser = FriendlyArgumentParser(
        prog="days",
        description="Generate a year-progress dot grid image (one dot per day of the year).",
        epilog="""
Examples:
  %(prog)s                                     # Today, default size and colours
  %(prog)s --width 1200 --height 630           # Social preview size
  %(prog)s --primary ffffff --accent ff0000    # Custom past/today colours
  %(prog)s --date 2024-12-31 -o last_day.png   # Specific day and output file
  %(prog)s --dry-run -v                        # Show layout without rendering
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Image size
    size_group = parser.add_argument_group("image size (clamped to configured limits)")
    size_group.add_argument(
        "-W", "--width",
        type=str,
        default=None,
        help=f"Image width in pixels (default: {defaults['width']})"
    )
    size_group.add_argument(
        "-H", "--height",
        type=str,
        default=None,
        help=f"Image height in pixels (default: {defaults['height']})"
    )

    # Colours
    colour_group = parser.add_argument_group("colours (six hex digits without '#'; invalid values use the default)")
    colour_group.add_argument(
        "--bg-color", "--background",
        dest="bg_color",
        type=str,
        default=None,
        help=f"Background colour (default: {defaults['bgColor']})"
    )
    colour_group.add_argument(
        "--primary", "--past",
        dest="primary",
        type=str,
        default=None,
        help=f"Colour of past days (default: {defaults['primary']})"
    )
    colour_group.add_argument(
        "--secondary", "--future",
        dest="secondary",
        type=str,
        default=None,
        help=f"Colour of future days (default: {defaults['secondary']})"
    )
    colour_group.add_argument(
        "--accent", "--today",
        dest="accent",
        type=str,
        default=None,
        help=f"Colour of today's dot and the caption (default: {defaults['accent']})"
    )

    # Day selection
    time_group = parser.add_argument_group("time")
    time_group.add_argument(
        "-d", "--date",
        type=str,
        default=None,
        help="Day to draw as YYYY-MM-DD (default: today)"
    )

    # Output options
    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--out-dir",
        type=Path,
        default=Path(runtime_paths["out_dir"]),
        help=f"Output directory for images (default: {runtime_paths['out_dir']})"
    )
    output_group.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output file path (overrides --out-dir and the configured filename)"
    )
    output_group.add_argument(
        "-f", "--format",
        dest="image_format",
        choices=VALID_IMAGE_FORMATS,
        default=None,
        help="Image format (default: from the output suffix, else png)"
    )
    output_group.add_argument(
        "--config",
        type=Path,
        default=config_path_default,
        help=f"Path to config YAML file (default: {config_path_default})"
    )

    # Advanced options
    advanced_group = parser.add_argument_group("advanced options")
    advanced_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the resolved request and grid layout without writing an image"
    )
    advanced_group.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress console output except errors (log file unaffected)"
    )
    advanced_group.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose console output (DEBUG level, log file always at DEBUG)"
    )

    return parser.parse_args(argv)


def parse_date(date_str: str | None) -> date:
    """
    Parse the --date value.

    Args:
        date_str: Date in YYYY-MM-DD format, or None for today.

    Returns:
        date: Requested day.

    Raises:
        CLIError: If the date format is invalid.
    """
    if date_str is None:
        return date.today()
    try:
        return datetime.strptime(date_str.strip(), DATE_FORMAT).date()
    except ValueError:
        raise CLIError(
            f"Invalid --date value: '{date_str}'.",
            "Use YYYY-MM-DD (for example: --date 2025-03-14)."
        )


def build_request_params(args: argparse.Namespace) -> dict[str, str | None]:
    """Map CLI options onto request parameter names."""
    params: dict[str, str | None] = {
        'width': args.width,
        'height': args.height,
    }
    for dest, key in COLOUR_OPTIONS.items():
        value = getattr(args, dest)
        params[key] = value.strip().lstrip('#') if value else value
    return params


def resolve_image_format(args: argparse.Namespace) -> str:
    """Resolve the output format from --format, the --output suffix, or png."""
    if args.image_format:
        return args.image_format
    if args.output is not None:
        suffix = args.output.suffix.lower().lstrip('.')
        if suffix in VALID_IMAGE_FORMATS:
            return suffix
        if suffix:
            raise CLIError(
                f"Unsupported output suffix '.{suffix}'.",
                f"Use one of: {', '.join(VALID_IMAGE_FORMATS)}, or pass --format."
            )
    return 'png'


def resolve_output_path(
    args: argparse.Namespace,
    progress: YearProgress,
    request: ImageRequest,
    filename_template: str,
    image_format: str,
) -> Path:
    """
    Determine where the image is written.

    Args:
        args: Parsed command-line arguments.
        progress: Year progress being drawn.
        request: Validated image request.
        filename_template: Template with ``year``, ``day``, ``width``, ``height``.
        image_format: Resolved image format; replaces the template suffix.

    Returns:
        Path: Output file path.
    """
    if args.output is not None:
        return args.output

    filename = filename_template.format(
        year=progress.year,
        day=progress.current_day,
        width=request.width,
        height=request.height,
    )
    return (args.out_dir / filename).with_suffix(f".{image_format}")
