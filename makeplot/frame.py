from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from makeplot.errors import FrameLayoutError


@dataclass(frozen=True)
class FrameLayout:
    """Geometry shared by the pixel allocator and the image encoder."""

    width: int
    height: int
    channels: int = 3

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")
        if self.channels != 3:
            raise ValueError("only RGB frames are supported")

    @property
    def stride(self) -> int:
        return self.width * self.channels

    @property
    def byte_length(self) -> int:
        return self.stride * self.height

    @property
    def shape(self) -> tuple[int, int, int]:
        return (self.height, self.width, self.channels)

    def allocate(self) -> np.ndarray:
        return np.zeros(self.shape, dtype=np.uint8)

    def check(self, pixels: np.ndarray) -> None:
        if pixels.dtype != np.uint8 or pixels.shape != self.shape or pixels.nbytes != self.byte_length:
            raise FrameLayoutError(
                f"pixel buffer {pixels.shape}/{pixels.dtype} does not match frame layout "
                f"{self.width}x{self.height}x{self.channels} ({self.byte_length} bytes)"
            )
