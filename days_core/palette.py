"""Dot colours and past/today/future classification."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_HEX_PATTERN = re.compile(r'^[0-9a-fA-F]{6}$')


class DayStatus(Enum):
    PAST = 'past'
    TODAY = 'today'
    FUTURE = 'future'


def classify_day(day_number: int, current_day: int) -> DayStatus:
    """Classify a 1-based day number relative to the current day."""
    if day_number < current_day:
        return DayStatus.PAST
    if day_number == current_day:
        return DayStatus.TODAY
    return DayStatus.FUTURE


def is_valid_hex(value: str | None) -> bool:
    """Return True for exactly six hex digits (no leading '#')."""
    return isinstance(value, str) and _HEX_PATTERN.match(value) is not None


def parse_hex(value: str | None, fallback: str) -> str:
    """
    Convert a bare hex colour into ``#rrggbb``, falling back when malformed.

    Args:
        value: Raw colour such as ``"ff6b35"``; may be None.
        fallback: Six hex digits used when ``value`` is not valid.

    Returns:
        str: Colour with a leading ``#``.
    """
    if value and is_valid_hex(value):
        return '#' + value
    return '#' + fallback


@dataclass(frozen=True)
class Palette:
    """
    Four-colour scheme for the grid.

    background: Image fill.
    past:       Dots for elapsed days.
    future:     Dots for upcoming days.
    today:      The current day's dot and the caption.
    """
    background: str
    past: str
    future: str
    today: str

    def colour_for(self, status: DayStatus) -> str:
        if status is DayStatus.PAST:
            return self.past
        if status is DayStatus.TODAY:
            return self.today
        return self.future

    def to_dict(self) -> dict[str, str]:
        return {
            'background': self.background,
            'past': self.past,
            'future': self.future,
            'today': self.today,
        }
