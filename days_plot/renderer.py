import io
import logging
import math
from pathlib import Path

import pandas as pd
from matplotlib.collections import PatchCollection
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from days_core.calendar_days import YearProgress
from days_core.constants import DEFAULT_CAPTION_SETTINGS
from days_core.grid import GridConfig, calculate_grid
from days_core.layout_frame import build_day_frame
from days_core.params import ImageRequest

logger = logging.getLogger("days")


class DotGridRenderer:
    """
    Renderer for the year-progress dot grid.

    Draws one circle per day at the centres given by the grid layout, fills the
    background, and writes a caption below the grid in the today colour. Images
    are exactly ``request.width`` x ``request.height`` pixels.
    """

    # Power of two keeps width / DPI * DPI exact, so the canvas never loses a pixel.
    DPI = 64
    POINTS_PER_INCH = 72
    MIN_CAPTION_FONT_PX = 12
    CAPTION_FONT_FRACTION = 0.03
    CAPTION_GAP_FRACTION = 0.04

    def __init__(
        self,
        request: ImageRequest,
        progress: YearProgress,
        caption_template: str = DEFAULT_CAPTION_SETTINGS['template'],
        font_family: str = DEFAULT_CAPTION_SETTINGS['font_family'],
    ) -> None:
        """
        Initialize the renderer and compute the grid layout.

        Args:
            request: Validated image size and palette.
            progress: Year and current day to draw.
            caption_template: Format string with ``current_day``, ``total_days``,
                ``year`` and ``percent`` placeholders.
            font_family: Matplotlib font family for the caption.
        """
        self.request = request
        self.progress = progress
        self.caption_template = caption_template
        self.font_family = font_family
        self.grid: GridConfig = calculate_grid(request.width, request.height, progress.total_days)
        logger.debug(f"Grid layout for {request.width}x{request.height}: {self.grid.to_dict()}")

    @property
    def caption(self) -> str:
        try:
            return self.caption_template.format(
                current_day=self.progress.current_day,
                total_days=self.progress.total_days,
                year=self.progress.year,
                percent=self.progress.percent_complete,
            )
        except KeyError as exc:
            raise ValueError(f"Missing placeholder context for caption template: {exc}") from exc

    @property
    def caption_font_px(self) -> int:
        return max(self.MIN_CAPTION_FONT_PX, math.floor(self.request.width * self.CAPTION_FONT_FRACTION))

    @property
    def caption_top(self) -> int:
        """Pixel row where the caption's top edge sits."""
        _, _, _, grid_bottom = self.grid.pixel_bounds()
        return grid_bottom + math.floor(self.request.height * self.CAPTION_GAP_FRACTION)

    def day_frame(self) -> pd.DataFrame:
        return build_day_frame(self.grid, self.progress, self.request.palette)

    def build_figure(self) -> Figure:
        """
        Draw the dot grid and caption onto a new figure.

        Returns:
            Figure: Figure sized to the requested pixel dimensions.
        """
        width = self.request.width
        height = self.request.height
        palette = self.request.palette

        fig = Figure(figsize=(width / self.DPI, height / self.DPI), dpi=self.DPI)
        fig.patch.set_facecolor(palette.background)

        ax = fig.add_axes([0, 0, 1, 1])
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)  # image coordinates, origin top-left
        ax.set_axis_off()

        df = self.day_frame()
        dots = [Circle((x, y), self.grid.dot_radius) for x, y in zip(df['x'], df['y'])]
        ax.add_collection(PatchCollection(
            dots,
            facecolors=list(df['colour']),
            edgecolors='none',
            linewidths=0,
        ))

        font_points = self.caption_font_px * self.POINTS_PER_INCH / self.DPI
        ax.text(
            width / 2,
            self.caption_top,
            self.caption,
            color=palette.today,
            fontsize=font_points,
            family=self.font_family,
            horizontalalignment='center',
            verticalalignment='top',
        )
        return fig

    def render_bytes(self, image_format: str = 'png') -> bytes:
        """Render the image into memory and return the encoded bytes."""
        fig = self.build_figure()
        buffer = io.BytesIO()
        fig.savefig(buffer, format=image_format, dpi=self.DPI, facecolor=fig.get_facecolor())
        return buffer.getvalue()

    def save(self, save_file: Path, image_format: str | None = None) -> Path:
        """
        Render the image to ``save_file``, creating parent directories.

        Args:
            save_file: Destination path; its suffix selects the format unless
                ``image_format`` is given.
            image_format: Optional explicit format ('png', 'jpg', 'svg', 'pdf').

        Returns:
            Path: The written file.
        """
        save_file = Path(save_file)
        save_file.parent.mkdir(parents=True, exist_ok=True)
        fig = self.build_figure()
        fig.savefig(save_file, format=image_format, dpi=self.DPI, facecolor=fig.get_facecolor())
        logger.info(f"Saved {self.request.width}x{self.request.height} image to {save_file}")
        return save_file
