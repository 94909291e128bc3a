"""Rendering-layer package for days."""

from .renderer import DotGridRenderer

__all__ = ["DotGridRenderer"]
