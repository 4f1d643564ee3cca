from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math

import numpy as np

from makeplot.raster import BitmapSurface, draw_hline, draw_polyline, draw_text, draw_vline, text_size
from makeplot.scales import PlotTransform, Viewport, build_transform, format_ticks_for_axis, generate_nice_ticks, map_to_pixels
from makeplot.series import RGB, SampleSeries, SeriesStyle

LOGGER = logging.getLogger(__name__)


MARGIN_PX = 5
X_LABEL_AREA_PX = 30
Y_LABEL_AREA_PX = 30
CAPTION_FONT_PX = 50.0
MIN_CAPTION_FONT_PX = 6.0
TICK_FONT_PX = 12.0
TICK_MARK_LEN_PX = 5
TICK_LABEL_PAD_PX = 3


@dataclass(frozen=True)
class ChartStyle:
    grid_color: RGB = (224, 224, 224)
    axis_color: RGB = (0, 0, 0)
    text_color: RGB = (0, 0, 0)


@dataclass(frozen=True)
class PlotArea:
    x0: int
    y0: int
    width: int
    height: int


def resolve_plot_area(width: int, height: int, *, caption_h: int = 0) -> PlotArea:
    left = MARGIN_PX + Y_LABEL_AREA_PX
    right = MARGIN_PX
    top = MARGIN_PX + caption_h
    bottom = MARGIN_PX + X_LABEL_AREA_PX

    # Bound gutters for small frames so a drawable plot area survives.
    left = min(left, max(1, width // 3))
    right = min(right, max(1, width // 8))
    top = min(top, max(1, height // 3))
    bottom = min(bottom, max(1, height // 3))

    plot_w = width - left - right
    plot_h = height - top - bottom
    if plot_w <= 1 or plot_h <= 1:
        raise ValueError(f"{width}x{height} frame is too small for a plotting area")
    return PlotArea(x0=left, y0=top, width=plot_w, height=plot_h)


@dataclass
class ChartArea:
    """A cartesian chart laid out on a surface, with ``viewport`` as its data domain."""

    surface: BitmapSurface
    viewport: Viewport
    area: PlotArea
    transform: PlotTransform
    caption: str | None = None
    style: ChartStyle = field(default_factory=ChartStyle)

    @classmethod
    def build(
        cls,
        surface: BitmapSurface,
        viewport: Viewport,
        *,
        caption: str | None = None,
        caption_font_px: float = CAPTION_FONT_PX,
        style: ChartStyle | None = None,
    ) -> "ChartArea":
        style = style or ChartStyle()
        caption_h = 0
        if caption:
            caption_h = text_size(caption, font_size_px=caption_font_px)[1] + MARGIN_PX
        area = resolve_plot_area(surface.width, surface.height, caption_h=caption_h)
        transform = build_transform(viewport, area.width, area.height)
        chart = cls(surface=surface, viewport=viewport, area=area, transform=transform, caption=caption, style=style)
        if caption:
            chart._draw_caption(caption, caption_font_px)
        return chart

    def _draw_caption(self, caption: str, font_px: float) -> None:
        # The caption band is every row above the plot area; small frames shrink it.
        fitted = _fit_caption_font(caption, font_px, self.area.y0 - MARGIN_PX)
        if fitted is None:
            LOGGER.debug("no room for caption %r above a %d px plot area", caption, self.area.y0)
            return
        if fitted != font_px:
            LOGGER.debug("caption font reduced from %s to %s px", font_px, fitted)
        tw, _ = text_size(caption, font_size_px=fitted)
        band = self.surface.canvas[: self.area.y0]
        draw_text(band, max(0, (self.surface.width - tw) // 2), MARGIN_PX, caption, self.style.text_color, font_size_px=fitted)

    def draw_mesh(self) -> None:
        canvas = self.surface.canvas
        area = self.area
        vp = self.viewport
        right = area.x0 + area.width - 1
        bottom = area.y0 + area.height - 1

        tick_x = generate_nice_ticks(vp.min_x, vp.max_x, max(2, min(10, area.width // 60)))
        tick_y = generate_nice_ticks(vp.min_y, vp.max_y, max(2, min(10, area.height // 50)))
        px, _ = map_to_pixels(tick_x, np.full(tick_x.shape, vp.min_y), self.transform, area.width, area.height)
        _, py = map_to_pixels(np.full(tick_y.shape, vp.min_x), tick_y, self.transform, area.width, area.height)

        for gx in px.tolist():
            draw_vline(canvas, area.x0 + gx, area.y0, bottom, self.style.grid_color)
        for gy in py.tolist():
            draw_hline(canvas, area.x0, right, area.y0 + gy, self.style.grid_color)

        draw_vline(canvas, area.x0, area.y0, bottom, self.style.axis_color)
        draw_hline(canvas, area.x0, right, bottom, self.style.axis_color)

        last_label_right = -1
        for gx, label in zip(px.tolist(), format_ticks_for_axis(tick_x), strict=True):
            x = area.x0 + gx
            draw_vline(canvas, x, bottom, bottom + TICK_MARK_LEN_PX, self.style.axis_color)
            tw, _ = text_size(label, font_size_px=TICK_FONT_PX)
            label_x = x - tw // 2
            if label_x <= last_label_right:
                continue
            draw_text(
                canvas,
                label_x,
                bottom + TICK_MARK_LEN_PX + TICK_LABEL_PAD_PX,
                label,
                self.style.text_color,
                font_size_px=TICK_FONT_PX,
            )
            last_label_right = label_x + tw + TICK_LABEL_PAD_PX

        for gy, label in zip(py.tolist(), format_ticks_for_axis(tick_y), strict=True):
            y = area.y0 + gy
            draw_hline(canvas, area.x0 - TICK_MARK_LEN_PX, area.x0, y, self.style.axis_color)
            tw, th = text_size(label, font_size_px=TICK_FONT_PX)
            draw_text(
                canvas,
                max(0, area.x0 - TICK_MARK_LEN_PX - TICK_LABEL_PAD_PX - tw),
                y - th // 2,
                label,
                self.style.text_color,
                font_size_px=TICK_FONT_PX,
            )

    def draw_line_series(self, series: SampleSeries, style: SeriesStyle) -> None:
        if len(series) == 0:
            return
        px, py = map_to_pixels(series.x, series.y, self.transform, self.area.width, self.area.height)
        draw_polyline(
            self.surface.canvas,
            px + self.area.x0,
            py + self.area.y0,
            color=style.color,
        )


def _fit_caption_font(caption: str, font_px: float, max_h: int) -> float | None:
    """Largest font size up to ``font_px`` whose caption is at most ``max_h`` rows tall, or None."""
    size = font_px
    while size >= MIN_CAPTION_FONT_PX:
        th = text_size(caption, font_size_px=size)[1]
        if th <= max_h:
            return size
        size = min(size - 1.0, float(math.floor(size * max_h / th)))
    return None
