"""Calendar lookups for the current year's progress."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date


def day_of_year(day: date) -> int:
    """Return the 1-based ordinal of ``day`` within its year."""
    return day.timetuple().tm_yday


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


@dataclass(frozen=True)
class YearProgress:
    """Position of one calendar day within its year."""
    year: int
    current_day: int
    total_days: int

    @property
    def days_remaining(self) -> int:
        return self.total_days - self.current_day

    @property
    def percent_complete(self) -> float:
        return 100.0 * self.current_day / self.total_days


def year_progress(today: date | None = None) -> YearProgress:
    """
    Build the year progress for ``today`` (defaults to the local date).

    Args:
        today: Day to report on.

    Returns:
        YearProgress: Year, 1-based day number and day count of the year.
    """
    if today is None:
        today = date.today()
    return YearProgress(
        year=today.year,
        current_day=day_of_year(today),
        total_days=days_in_year(today.year),
    )
