"""Per-day placement table combining grid geometry and day colours."""

from __future__ import annotations

import numpy as np
import pandas as pd

from .calendar_days import YearProgress
from .grid import GridConfig
from .palette import Palette, classify_day

FRAME_COLUMNS = ['day', 'date', 'status', 'colour', 'x', 'y']


def build_day_frame(grid: GridConfig, progress: YearProgress, palette: Palette) -> pd.DataFrame:
    """
    Build one row per dot with its date, status, colour and centre.

    Args:
        grid: Layout from ``calculate_grid``.
        progress: Year and current day being drawn.
        palette: Colours for past, today and future days.

    Returns:
        pd.DataFrame: Columns ``day``, ``date``, ``status``, ``colour``, ``x``, ``y``.
    """
    index = np.arange(grid.total_dots)
    rows, cols = np.divmod(index, grid.columns)

    df = pd.DataFrame({
        'day': index + 1,
        'date': pd.date_range(start=f"{progress.year}-01-01", periods=grid.total_dots, freq='D'),
    })
    statuses = [classify_day(day, progress.current_day) for day in df['day']]
    df['status'] = [status.value for status in statuses]
    df['colour'] = [palette.colour_for(status) for status in statuses]
    df['x'] = grid.offset_x + cols * grid.dot_spacing
    df['y'] = grid.offset_y + rows * grid.dot_spacing
    return df[FRAME_COLUMNS]
