"""Image request parameters, validated before layout and rendering."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass

from .constants import DEFAULT_IMAGE_SETTINGS, DEFAULT_LIMITS, DEFAULT_PALETTE
from .palette import Palette, is_valid_hex, parse_hex

logger = logging.getLogger("days")

_LEADING_INT_PATTERN = re.compile(r'^\s*([+-]?\d+)')


def clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(maximum, value))


def _leading_int(raw: str | int | None) -> int | None:
    """Parse the leading base-10 integer of ``raw`` ("640px" -> 640)."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT_PATTERN.match(str(raw))
    if not match:
        return None
    return int(match.group(1))


def parse_dimension(raw: str | int | None, default: int, minimum: int, maximum: int) -> int:
    """
    Resolve one pixel dimension.

    Missing, unparsable and zero values use ``default``; anything else is
    clamped to ``[minimum, maximum]``.
    """
    value = _leading_int(raw)
    if not value:
        if raw not in (None, ''):
            logger.warning(f"Invalid dimension '{raw}'; using default {default}")
        value = default
    clamped = clamp(value, minimum, maximum)
    if clamped != value:
        logger.warning(f"Dimension {value} outside [{minimum}, {maximum}]; clamped to {clamped}")
    return clamped


@dataclass(frozen=True)
class ImageRequest:
    """Validated inputs for one rendered image."""
    width: int
    height: int
    palette: Palette


def _resolve_colour(params: Mapping[str, str | None], key: str, fallback: str) -> str:
    raw = params.get(key)
    if raw and not is_valid_hex(raw):
        logger.warning(f"Invalid colour {key}='{raw}'; using default '{fallback}'")
    return parse_hex(raw, fallback)


def resolve_image_request(
    params: Mapping[str, str | int | None],
    defaults: Mapping[str, object] | None = None,
    limits: Mapping[str, int] | None = None,
) -> ImageRequest:
    """
    Build an ImageRequest from raw parameters.

    Keys use the image query-string names: ``width``, ``height``,
    ``bgColor``, ``primary``, ``secondary``, ``accent``. Malformed values fall
    back to ``defaults`` and never raise.

    Args:
        params: Raw parameter values (strings, ints or None).
        defaults: Default ``width``/``height`` plus the four palette keys.
        limits: ``min_width``, ``max_width``, ``min_height``, ``max_height``.

    Returns:
        ImageRequest: Clamped dimensions and a ``#rrggbb`` palette.
    """
    merged_defaults: dict[str, object] = {**DEFAULT_IMAGE_SETTINGS, **DEFAULT_PALETTE}
    merged_defaults.update(defaults or {})
    merged_limits = DEFAULT_LIMITS.copy()
    merged_limits.update(limits or {})

    width = parse_dimension(
        params.get('width'),
        int(merged_defaults['width']),
        merged_limits['min_width'],
        merged_limits['max_width'],
    )
    height = parse_dimension(
        params.get('height'),
        int(merged_defaults['height']),
        merged_limits['min_height'],
        merged_limits['max_height'],
    )
    palette = Palette(
        background=_resolve_colour(params, 'bgColor', str(merged_defaults['bgColor'])),
        past=_resolve_colour(params, 'primary', str(merged_defaults['primary'])),
        future=_resolve_colour(params, 'secondary', str(merged_defaults['secondary'])),
        today=_resolve_colour(params, 'accent', str(merged_defaults['accent'])),
    )
    return ImageRequest(width=width, height=height, palette=palette)
