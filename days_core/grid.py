"""Dot grid layout shared across CLI and rendering layers."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass

GRID_COLUMNS = 15
AVAILABLE_WIDTH_FRACTION = 0.8
AVAILABLE_HEIGHT_FRACTION = 0.75
MAX_DOT_RADIUS = 16
DOT_RADIUS_FRACTION = 0.35
# Upward shift that leaves room for the caption under the grid.
CAPTION_LIFT_FRACTION = 0.06


@dataclass(frozen=True)
class GridConfig:
    """Placement geometry for one dot per day, in image pixels.

    ``grid_width`` and ``grid_height`` span dot centres, not dot edges; use
    :meth:`pixel_bounds` for the painted extent.
    """
    columns: int
    rows: int
    total_dots: int
    dot_radius: int
    dot_spacing: int
    grid_width: int
    grid_height: int
    offset_x: int
    offset_y: int

    def dot_centre(self, index: int) -> tuple[int, int]:
        """Return the (x, y) centre of dot ``index`` (0-based, row-major)."""
        row, column = divmod(index, self.columns)
        return (
            self.offset_x + column * self.dot_spacing,
            self.offset_y + row * self.dot_spacing,
        )

    def dot_centres(self) -> list[tuple[int, int]]:
        return [self.dot_centre(index) for index in range(self.total_dots)]

    def pixel_bounds(self) -> tuple[int, int, int, int]:
        """Return (left, top, right, bottom) of the painted dots."""
        return (
            self.offset_x - self.dot_radius,
            self.offset_y - self.dot_radius,
            self.offset_x + self.grid_width + self.dot_radius,
            self.offset_y + self.grid_height + self.dot_radius,
        )

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def calculate_grid(image_width: float, image_height: float, total_days: int) -> GridConfig:
    """
    Calculate the dot grid that fits ``total_days`` dots into an image.

    The column count is fixed; the tighter of the two axes decides the spacing
    so the grid never overflows the reserved drawing region (80% of the width,
    75% of the height). Dots are centred horizontally and lifted above the
    vertical centre to leave room for a caption.

    No validation is done here. A zero day count yields ``rows == 0`` and the
    width axis alone decides the spacing.

    Args:
        image_width: Canvas width in pixels.
        image_height: Canvas height in pixels.
        total_days: Number of dots to place (365 or 366 for a calendar year).

    Returns:
        GridConfig: Layout geometry for the renderer.

    Examples:
        >>> grid = calculate_grid(1200, 630, 365)
        >>> (grid.rows, grid.dot_spacing, grid.dot_radius)
        (25, 18, 6)
        >>> (grid.offset_x, grid.offset_y)
        (474, 62)
    """
    columns = GRID_COLUMNS
    rows = math.ceil(total_days / columns)

    available_width = image_width * AVAILABLE_WIDTH_FRACTION
    available_height = image_height * AVAILABLE_HEIGHT_FRACTION

    spacing_by_width = available_width / columns
    spacing_by_height = available_height / rows if rows else math.inf
    dot_spacing = math.floor(min(spacing_by_width, spacing_by_height))

    dot_radius = min(MAX_DOT_RADIUS, math.floor(dot_spacing * DOT_RADIUS_FRACTION))

    grid_width = (columns - 1) * dot_spacing
    grid_height = (rows - 1) * dot_spacing

    offset_x = math.floor((image_width - grid_width) / 2)
    offset_y = math.floor((image_height - grid_height) / 2) - math.floor(image_height * CAPTION_LIFT_FRACTION)

    return GridConfig(
        columns=columns,
        rows=rows,
        total_dots=total_days,
        dot_radius=dot_radius,
        dot_spacing=dot_spacing,
        grid_width=grid_width,
        grid_height=grid_height,
        offset_x=offset_x,
        offset_y=offset_y,
    )
