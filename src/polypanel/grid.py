"""Partition a pixel canvas into an evenly split grid of regions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Region:
    """Pixel rectangle inside the canvas, origin at the top-left corner."""

    index: int
    x: int
    y: int
    width: int
    height: int

    def inset(self, margin: int) -> Tuple[int, int, int, int]:
        """Return ``(x, y, width, height)`` shrunk by ``margin`` on every side.

        The size never drops below one pixel.
        """
        m = max(0, min(margin, (self.width - 1) // 2, (self.height - 1) // 2))
        return self.x + m, self.y + m, self.width - 2 * m, self.height - 2 * m

    def to_figure_rect(self, canvas_width: int, canvas_height: int,
                       margin: int = 0) -> Tuple[float, float, float, float]:
        """Return ``[left, bottom, width, height]`` in figure fractions."""
        x, y, w, h = self.inset(margin)
        return (x / canvas_width,
                1.0 - (y + h) / canvas_height,
                w / canvas_width,
                h / canvas_height)


def split_evenly(width: int, height: int, rows: int, cols: int) -> List[Region]:
    """Split a ``width`` x ``height`` canvas into ``rows`` x ``cols`` regions.

    Regions are returned in row-major order (``index = row*cols + col``).
    Breakpoints are integer pixels, so when the canvas does not divide
    evenly the leftover pixels are spread over the cells and the grid still
    tiles the whole canvas.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f'bad grid shape {rows}x{cols}')
    if width < cols or height < rows:
        raise ValueError(f'canvas {width}x{height} too small for a {rows}x{cols} grid')

    xs = [c * width // cols for c in range(cols + 1)]
    ys = [r * height // rows for r in range(rows + 1)]

    regions = []
    for r in range(rows):
        for c in range(cols):
            regions.append(Region(index=r * cols + c,
                                  x=xs[c], y=ys[r],
                                  width=xs[c + 1] - xs[c],
                                  height=ys[r + 1] - ys[r]))
    return regions


__all__ = [
    "Region",
    "split_evenly",
]
