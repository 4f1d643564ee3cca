from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
import math

import numpy as np

from makeplot.errors import EmptyInputError, ValueRangeError
from makeplot.series import SampleSeries

LOGGER = logging.getLogger(__name__)

PADDING_RATIO = 0.1
DEGENERATE_PADDING = 1.0


@dataclass(frozen=True)
class Viewport:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class PlotTransform:
    sx: float
    tx: float
    sy: float
    ty: float


def compute_viewport(series: SampleSeries) -> Viewport:
    """Bound every sample and pad each axis by a tenth of its extent.

    An axis with zero extent (one sample, or a flat series) is padded by a fixed
    ``DEGENERATE_PADDING`` instead, so the viewport never collapses.
    """
    if len(series) == 0:
        raise EmptyInputError()

    min_x = math.inf
    max_x = -math.inf
    min_y = math.inf
    max_y = -math.inf
    for x, y in series.pairs():
        if x < min_x:
            min_x = x
        if x > max_x:
            max_x = x
        if y < min_y:
            min_y = y
        if y > max_y:
            max_y = y

    x_pad = _axis_padding(max_x - min_x, axis="x")
    y_pad = _axis_padding(max_y - min_y, axis="y")
    viewport = Viewport(min_x=min_x - x_pad, max_x=max_x + x_pad, min_y=min_y - y_pad, max_y=max_y + y_pad)
    if not (math.isfinite(viewport.width) and math.isfinite(viewport.height)):
        raise ValueRangeError(viewport.min_x, viewport.max_x, viewport.min_y, viewport.max_y)
    return viewport


def _axis_padding(extent: float, *, axis: str) -> float:
    if extent == 0.0:
        LOGGER.debug("%s extent is zero; padding by %s", axis, DEGENERATE_PADDING)
        return DEGENERATE_PADDING
    return extent * PADDING_RATIO


def build_transform(viewport: Viewport, width: int, height: int) -> PlotTransform:
    if width <= 1 or height <= 1:
        raise ValueError("plot area width/height must be > 1")
    if viewport.width <= 0 or viewport.height <= 0:
        raise ValueError("viewport must have a positive extent on both axes")
    sx = (width - 1) / viewport.width
    tx = -viewport.min_x * sx
    sy = (height - 1) / viewport.height
    ty = -viewport.min_y * sy
    return PlotTransform(sx=sx, tx=tx, sy=sy, ty=ty)


def map_to_pixels(x: np.ndarray, y: np.ndarray, transform: PlotTransform, width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    px = np.rint(x * transform.sx + transform.tx).astype(np.int32)
    py = np.rint(y * transform.sy + transform.ty).astype(np.int32)
    py = (height - 1) - py
    np.clip(px, 0, width - 1, out=px)
    np.clip(py, 0, height - 1, out=py)
    return px, py


def generate_nice_ticks(vmin: float, vmax: float, target: int) -> np.ndarray:
    """Round-numbered ticks (1, 2 or 5 times a power of ten) inside ``[vmin, vmax]``.

    May return fewer than ``target`` ticks, or none when the range is narrower than one step.
    """
    span = _nice_number(vmax - vmin, round_result=False)
    step = _nice_number(span / max(target - 1, 1), round_result=True)
    tick_min = np.ceil(vmin / step) * step
    tick_max = np.floor(vmax / step) * step

    ticks = np.arange(tick_min, tick_max + 0.5 * step, step, dtype=np.float64)
    # Snap floating-point drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks


def format_ticks_for_axis(ticks: np.ndarray) -> list[str]:
    if ticks.size == 0:
        return []
    if ticks.size == 1:
        return [_format_tick(float(ticks[0]), step=None)]
    step = float(abs(ticks[1] - ticks[0]))
    return [_format_tick(float(v), step=step) for v in ticks]


def _format_tick(value: float, *, step: float | None) -> str:
    if step is not None and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    if abs_v != 0 and (abs_v >= 1e6 or abs_v < 1e-6 or (step is not None and step < 1e-4)):
        return f"{value:.1e}"

    decimals = _decimals_from_step(step) if step is not None else 6
    out = format(Decimal(str(value)).quantize(Decimal("1").scaleb(-decimals)), "f")
    # Only trim trailing zeros for fractional values (keep 30, 40).
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def _nice_number(value: float, *, round_result: bool) -> float:
    exp = np.floor(np.log10(value))
    frac = value / (10**exp)

    if round_result:
        if frac < 1.5:
            nice_frac = 1.0
        elif frac < 3.0:
            nice_frac = 2.0
        elif frac < 7.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0
    else:
        if frac <= 1.0:
            nice_frac = 1.0
        elif frac <= 2.0:
            nice_frac = 2.0
        elif frac <= 5.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0

    return float(nice_frac * (10**exp))


def _decimals_from_step(step: float) -> int:
    exp = Decimal(str(step)).normalize().as_tuple().exponent
    return min(12, max(0, -int(exp)))
