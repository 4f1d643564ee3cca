from __future__ import annotations

import numpy as np

from makeplot.frame import FrameLayout
from makeplot.raster.canvas import fill
from makeplot.series import RGB


class BitmapSurface:
    """Drawing target bound to a caller-owned RGB frame.

    Draws land on a private working canvas; ``present`` commits them into the
    bound frame in one copy.
    """

    def __init__(self, frame: np.ndarray, layout: FrameLayout) -> None:
        layout.check(frame)
        self._frame = frame
        self._layout = layout
        self._canvas = frame.copy()
        self._presented = False

    @property
    def layout(self) -> FrameLayout:
        return self._layout

    @property
    def width(self) -> int:
        return self._layout.width

    @property
    def height(self) -> int:
        return self._layout.height

    @property
    def canvas(self) -> np.ndarray:
        if self._presented:
            raise RuntimeError("surface already presented")
        return self._canvas

    def fill(self, color: RGB) -> None:
        fill(self.canvas, color)

    def present(self) -> None:
        np.copyto(self._frame, self.canvas)
        self._presented = True
