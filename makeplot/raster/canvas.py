from __future__ import annotations

import numpy as np

from makeplot.series import RGB


def fill(dst: np.ndarray, color: RGB) -> None:
    dst[:, :, :3] = color


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGB) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    dst[y, x, :3] = color


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGB) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    dst[y, xa : xb + 1, :3] = color


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGB) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    dst[ya : yb + 1, x, :3] = color
