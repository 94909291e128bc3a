"""Configuration helpers shared across CLI and rendering layers."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .constants import (
    DEFAULT_CAPTION_SETTINGS,
    DEFAULT_IMAGE_SETTINGS,
    DEFAULT_LIMITS,
    DEFAULT_OUTPUT_SETTINGS,
    DEFAULT_PALETTE,
    DEFAULT_RUNTIME_PATHS,
    PALETTE_KEYS,
)
from .palette import is_valid_hex

logger = logging.getLogger("days")


def _load_config(config_file: Path) -> dict:
    with open(config_file, 'r') as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Invalid config in {config_file}; expected mapping at top level.")
    return config


def _get_section(config: dict, section: str, config_file: Path) -> dict:
    value = config.get(section, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Invalid {section} section in {config_file}; expected mapping.")
    return value


def _require_positive_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer")
    return value


class DaysConfigService:
    """Stateful access wrapper for core config helpers."""

    def __init__(self, config_file: Path = Path("config.yaml")) -> None:
        self.config_file = config_file

    def load_image_settings(self) -> dict[str, int]:
        return load_image_settings(self.config_file)

    def load_limits(self) -> dict[str, int]:
        return load_limits(self.config_file)

    def load_palette_defaults(self) -> dict[str, str]:
        return load_palette_defaults(self.config_file)

    def load_caption_settings(self) -> dict[str, str]:
        return load_caption_settings(self.config_file)

    def load_runtime_paths(self) -> dict[str, str]:
        return load_runtime_paths(self.config_file)

    def load_output_settings(self) -> dict[str, str]:
        return load_output_settings(self.config_file)

    def load_request_defaults(self) -> dict[str, object]:
        """Image size and palette defaults merged into one mapping."""
        defaults: dict[str, object] = {}
        defaults.update(self.load_image_settings())
        defaults.update(self.load_palette_defaults())
        return defaults


def load_image_settings(config_file: Path = Path("config.yaml")) -> dict[str, int]:
    """Load default image dimensions from the ``image`` section."""
    config = _load_config(config_file)
    image = _get_section(config, 'image', config_file)

    settings = DEFAULT_IMAGE_SETTINGS.copy()
    for key in DEFAULT_IMAGE_SETTINGS:
        if key in image:
            settings[key] = _require_positive_int(image[key], f"image.{key}")
    return settings


def load_limits(config_file: Path = Path("config.yaml")) -> dict[str, int]:
    """Load dimension clamping limits from the ``limits`` section."""
    config = _load_config(config_file)
    limits = _get_section(config, 'limits', config_file)

    settings = DEFAULT_LIMITS.copy()
    for key in DEFAULT_LIMITS:
        if key in limits:
            settings[key] = _require_positive_int(limits[key], f"limits.{key}")

    if settings['min_width'] > settings['max_width']:
        raise ValueError("limits.min_width must be <= limits.max_width")
    if settings['min_height'] > settings['max_height']:
        raise ValueError("limits.min_height must be <= limits.max_height")
    return settings


def load_palette_defaults(config_file: Path = Path("config.yaml")) -> dict[str, str]:
    """Load default colours (six hex digits, no '#') from the ``palette`` section."""
    config = _load_config(config_file)
    palette = _get_section(config, 'palette', config_file)

    settings = DEFAULT_PALETTE.copy()
    for key in PALETTE_KEYS:
        if key in palette:
            value = str(palette[key]).strip().lstrip('#')
            if not is_valid_hex(value):
                raise ValueError(f"palette.{key} must be six hex digits, got '{palette[key]}'")
            settings[key] = value.lower()
    return settings


def load_caption_settings(config_file: Path = Path("config.yaml")) -> dict[str, str]:
    """Load caption template and font family from the ``caption`` section."""
    config = _load_config(config_file)
    caption = _get_section(config, 'caption', config_file)

    settings = DEFAULT_CAPTION_SETTINGS.copy()
    for key in DEFAULT_CAPTION_SETTINGS:
        if key in caption:
            value = caption[key]
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"caption.{key} must be a non-empty string")
            settings[key] = value

    try:
        settings['template'].format(current_day=1, total_days=365, year=2025, percent=0.0)
    except (KeyError, IndexError, ValueError) as exc:
        raise ValueError(f"caption.template has an unsupported placeholder: {exc}") from exc
    return settings


def load_runtime_paths(config_file: Path = Path("config.yaml")) -> dict[str, str]:
    """Load runtime path defaults from config YAML.

    Paths are read from top-level ``runtime_paths`` and merged with minimal
    defaults when keys are missing.
    """
    config = _load_config(config_file)
    runtime_paths = _get_section(config, 'runtime_paths', config_file)

    paths = DEFAULT_RUNTIME_PATHS.copy()
    for key in DEFAULT_RUNTIME_PATHS:
        if key in runtime_paths:
            value = runtime_paths[key]
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"runtime_paths.{key} must be a non-empty string")
            paths[key] = value.strip()
    return paths


def load_output_settings(config_file: Path = Path("config.yaml")) -> dict[str, str]:
    """Load the output filename template from the ``output`` section."""
    config = _load_config(config_file)
    output = _get_section(config, 'output', config_file)

    settings = DEFAULT_OUTPUT_SETTINGS.copy()
    if 'filename' in output:
        value = output['filename']
        if not isinstance(value, str) or not value.strip():
            raise ValueError("output.filename must be a non-empty string")
        settings['filename'] = value.strip()

    try:
        settings['filename'].format(year=2025, day=1, width=100, height=100)
    except (KeyError, IndexError, ValueError) as exc:
        raise ValueError(f"output.filename has an unsupported placeholder: {exc}") from exc
    return settings
