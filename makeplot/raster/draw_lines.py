from __future__ import annotations

import numpy as np

from makeplot.raster.canvas import draw_pixel
from makeplot.series import RGB


def draw_polyline(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGB) -> None:
    """Join consecutive points with one-pixel segments; a lone point is drawn as a dot."""
    if xs.size != ys.size:
        raise ValueError(f"polyline coordinate length mismatch: {xs.size} != {ys.size}")
    points = list(zip(xs.tolist(), ys.tolist()))
    if len(points) == 1:
        draw_pixel(dst, int(points[0][0]), int(points[0][1]), color)
        return
    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        _draw_segment(dst, int(x0), int(y0), int(x1), int(y1), color)


def _draw_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGB) -> None:
    # Bresenham, both endpoints inclusive.
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        draw_pixel(dst, x0, y0, color)
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
