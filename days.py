"""
days: year-progress dot grid images.

Main entry point for the days application. Resolves the image request from the
command line and config.yaml, lays out one dot per day of the year and renders
the image.
"""

import logging
import sys

import yaml

from cli import (
    CLIError,
    build_request_params,
    parse_args,
    parse_date,
    resolve_image_format,
    resolve_output_path,
)
from days_core.calendar_days import year_progress
from days_core.config import DaysConfigService
from days_core.grid import calculate_grid
from days_core.params import resolve_image_request
from days_plot.renderer import DotGridRenderer
from logging_config import get_logger, setup_logging


def _configure_console_logging(args, logger) -> None:
    """Apply console verbosity rules based on CLI flags."""
    days_logger = logging.getLogger("days")
    if args.verbose:
        for handler in days_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled (console output at DEBUG level)")
    elif args.quiet:
        for handler in days_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(logging.ERROR)
    elif args.dry_run:
        for handler in days_logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                if handler.level > logging.INFO:
                    handler.setLevel(logging.INFO)


def _resolve_run_context(args):
    """Resolve parsed CLI options into validated run-time context values."""
    progress = year_progress(parse_date(args.date))
    image_format = resolve_image_format(args)

    service = DaysConfigService(args.config)
    try:
        defaults = service.load_request_defaults()
        limits = service.load_limits()
        caption = service.load_caption_settings()
        output = service.load_output_settings()
    except (ValueError, OSError, yaml.YAMLError) as exc:
        raise CLIError(str(exc)) from exc

    request = resolve_image_request(build_request_params(args), defaults, limits)
    output_path = resolve_output_path(args, progress, request, output['filename'], image_format)
    return {
        'progress': progress,
        'request': request,
        'caption': caption,
        'image_format': image_format,
        'output_path': output_path,
    }


def _handle_dry_run(ctx, logger) -> int:
    """Render dry-run summary and exit early."""
    progress = ctx['progress']
    request = ctx['request']
    grid = calculate_grid(request.width, request.height, progress.total_days)
    logger.info("DRY RUN MODE - No image will be written")
    logger.info(f"Day: {progress.current_day}/{progress.total_days} of {progress.year} ({progress.percent_complete:.1f}%)")
    logger.info(f"Image: {request.width}x{request.height} {ctx['image_format']}")
    logger.info(f"Palette: {request.palette.to_dict()}")
    logger.info(
        f"Grid: {grid.columns} columns x {grid.rows} rows, spacing {grid.dot_spacing}px, "
        f"radius {grid.dot_radius}px, offset ({grid.offset_x}, {grid.offset_y})"
    )
    logger.info(f"Output file: {ctx['output_path']}")
    return 0


def _render(ctx) -> int:
    renderer = DotGridRenderer(
        ctx['request'],
        ctx['progress'],
        caption_template=ctx['caption']['template'],
        font_family=ctx['caption']['font_family'],
    )
    renderer.save(ctx['output_path'], image_format=ctx['image_format'])
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for days.

    Parses command-line arguments, loads configuration, and writes the
    year-progress image (or reports the layout in dry-run mode).
    """
    try:
        args = parse_args(argv)
    except CLIError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    # Initialize logging
    try:
        setup_logging(args.config)
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"ERROR: Failed to configure logging from {args.config}: {e}", file=sys.stderr)
        return 2
    logger = get_logger("days")

    # Handle verbose/quiet flags for console output
    _configure_console_logging(args, logger)

    try:
        context = _resolve_run_context(args)
    except CLIError as e:
        logger.error(str(e))
        return 2

    # Dry-run mode: show what would be done without executing
    if args.dry_run:
        return _handle_dry_run(context, logger)

    return _render(context)


if __name__ == "__main__":
    raise SystemExit(main())
