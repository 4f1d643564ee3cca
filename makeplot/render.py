from __future__ import annotations

import logging

from makeplot.chart import CAPTION_FONT_PX, ChartArea
from makeplot.encode import encode_png, frame_to_image
from makeplot.errors import drawing_stage, encoding_stage
from makeplot.frame import FrameLayout
from makeplot.options import PlotOptions
from makeplot.raster import BitmapSurface
from makeplot.scales import Viewport
from makeplot.series import SampleSeries, SeriesStyle

LOGGER = logging.getLogger(__name__)

BACKGROUND = (255, 255, 255)
SERIES_STYLE = SeriesStyle(color=(255, 0, 0))


def render_chart(series: SampleSeries, viewport: Viewport, options: PlotOptions) -> bytes:
    """Draw ``series`` as a red line over ``viewport`` and return the chart as PNG bytes.

    Drawing failures raise ``MakePlotError`` labeled with the failing stage;
    encoding failures are labeled "Failed to make plot into image".
    """
    layout = FrameLayout(width=int(options.width), height=int(options.height))
    frame = layout.allocate()
    LOGGER.debug("rendering %d samples into %dx%d frame", len(series), layout.width, layout.height)

    with drawing_stage("surface"):
        surface = BitmapSurface(frame, layout)
        surface.fill(BACKGROUND)

    with drawing_stage("chart", label="Failed to build chart"):
        chart = ChartArea.build(surface, viewport, caption=options.title, caption_font_px=CAPTION_FONT_PX)

    with drawing_stage("mesh", label="Failed to draw mesh"):
        chart.draw_mesh()

    with drawing_stage("series", label="Failed to draw series"):
        chart.draw_line_series(series, SERIES_STYLE)

    with drawing_stage("present", label="Failed to present plot"):
        surface.present()

    image = frame_to_image(frame, layout)
    with encoding_stage():
        data = encode_png(image)
    LOGGER.debug("encoded %dx%d chart into %d PNG bytes", layout.width, layout.height, len(data))
    return data
