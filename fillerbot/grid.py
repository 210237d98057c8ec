"""Geometry of the board grid drawn by the visualizer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

BACKGROUND_COLOR = (45, 49, 66)
LINE_COLOR = (128, 128, 128, 126)

GRID_TOP = 20.0
GRID_WIDTH = 800.0
GRID_HEIGHT = 600.0


def _round_half_away(value):
    if value >= 0:
        return float(math.floor(value + 0.5))
    return float(math.ceil(value - 0.5))


@dataclass
class Rect:
    """An axis-aligned rectangle."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass
class Grid:
    """Where the board grid sits on screen and how large its cells are."""

    rect: Rect = field(default_factory=Rect)
    cell_size: tuple[float, float] = (0.0, 0.0)
    rows: int = 0
    cols: int = 0

    def resize(self, rows, cols, size):
        """Lay the grid out for ``rows`` x ``cols`` cells on a screen of ``size``."""
        if rows < 1 or cols < 1:
            raise ValueError(f"grid needs at least one row and column, got {rows}x{cols}")
        self.rect = Rect(size[0] / 6.0, GRID_TOP, GRID_WIDTH, GRID_HEIGHT)
        self.cell_size = (
            _round_half_away(self.rect.w / cols),
            _round_half_away(self.rect.h / rows),
        )
        self.rows = rows
        self.cols = cols

    def background(self):
        """Return the grid's background rectangle and its colour."""
        return self.rect, BACKGROUND_COLOR

    def lines(self):
        """Return the grid lines as ((x0, y0), (x1, y1)) segments, rows first."""
        if self.cols < 2:
            return []
        cw, ch = self.cell_size
        width = (self.cols - 2) * cw
        height = self.rows * ch
        segments = []
        for row in range(self.rows):
            y = self.rect.y + row * ch
            segments.append(((self.rect.x, y), (self.rect.x + width, y)))
        for col in range(self.cols - 1):
            x = self.rect.x + col * cw
            segments.append(((x, self.rect.y), (x, self.rect.y + height)))
        return segments