from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np


RGB = tuple[int, int, int]


@dataclass(frozen=True)
class SampleSeries:
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        if self.x.ndim != 1 or self.y.ndim != 1:
            raise ValueError("sample arrays must be 1-D")
        if self.x.shape != self.y.shape:
            raise ValueError(f"x and y length mismatch: {self.x.size} != {self.y.size}")

    def __len__(self) -> int:
        return int(self.x.size)

    def pairs(self) -> Iterator[tuple[float, float]]:
        for xv, yv in zip(self.x.tolist(), self.y.tolist(), strict=True):
            yield (float(xv), float(yv))

    @classmethod
    def from_pairs(cls, pairs: list[tuple[float, float]]) -> "SampleSeries":
        if not pairs:
            return cls(x=np.empty(0, dtype=np.float64), y=np.empty(0, dtype=np.float64))
        arr = np.asarray(pairs, dtype=np.float64)
        return cls(x=arr[:, 0].copy(), y=arr[:, 1].copy())


@dataclass(frozen=True)
class SeriesStyle:
    color: RGB = (255, 0, 0)
