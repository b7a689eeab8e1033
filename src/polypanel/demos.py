"""Hand-written panels that draw straight onto a chart.

These exercise the drawing backend without going through a generated
mesh: a spiral polyline, a height field drawn as a surface and as explicit
quads, and a block of hand-placed triangles.
"""

import math


def _samples(lo=-25, hi=25, step=10.0):
    return [v / step for v in range(lo, hi)]


def wave_height(x, y):
    return math.cos(x * x + y * y)


def lines(panel):
    """spiral around the z axis"""
    pts = [(math.sin(t * 10.0), math.cos(t * 10.0), t)
           for t in (v / 100.0 for v in range(-100, 100))]
    panel.draw_polyline(pts)
    return pts


def waves(panel):
    """height field sampled on an explicit grid, drawn as a surface"""
    xs = _samples()
    ys = _samples()
    saved = panel.alpha
    panel.alpha = 0.2
    try:
        panel.draw_surface(xs, ys, wave_height)
    finally:
        panel.alpha = saved
    return xs, ys


def waves3d(panel):
    """same height field, drawn as one quad per grid cell"""
    grid = [[(x, y, wave_height(x, y)) for y in _samples()] for x in _samples()]
    return panel.draw_grid_quads(grid)


def triangles(panel):
    tris = []
    for k in range(3):
        for j in range(4):
            for i in range(5):
                tris.append([(-1.0 + k, -1.5 + j, -2.0 + i),
                             (-1.0 + k, -0.5 + j, -2.0 + i),
                             (float(k), -1.5 + j, -2.0 + i)])
    panel.draw_polygons(tris)
    return tris


__all__ = [
    "lines",
    "waves",
    "waves3d",
    "triangles",
    "wave_height",
]
