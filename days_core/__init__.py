"""Core shared helpers for days packages."""

from .calendar_days import YearProgress, day_of_year, days_in_year, year_progress
from .config import (
    DaysConfigService,
    load_caption_settings,
    load_image_settings,
    load_limits,
    load_output_settings,
    load_palette_defaults,
    load_runtime_paths,
)
from .grid import GridConfig, calculate_grid
from .layout_frame import build_day_frame
from .palette import DayStatus, Palette, classify_day, is_valid_hex, parse_hex
from .params import ImageRequest, clamp, parse_dimension, resolve_image_request

__all__ = [
    "build_day_frame",
    "calculate_grid",
    "clamp",
    "classify_day",
    "day_of_year",
    "days_in_year",
    "DayStatus",
    "DaysConfigService",
    "GridConfig",
    "ImageRequest",
    "is_valid_hex",
    "load_caption_settings",
    "load_image_settings",
    "load_limits",
    "load_output_settings",
    "load_palette_defaults",
    "load_runtime_paths",
    "Palette",
    "parse_dimension",
    "parse_hex",
    "resolve_image_request",
    "year_progress",
    "YearProgress",
]
