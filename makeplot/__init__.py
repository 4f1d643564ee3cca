from makeplot.adapters import InputShape, normalize_samples
from makeplot.api import make_plot
from makeplot.errors import (
    EmptyInputError,
    FrameLayoutError,
    MakePlotError,
    MissingFieldError,
    MixedInputShapesError,
    NonFiniteValueError,
    PlotInputError,
    PlotOptionsError,
    UnsupportedElementTypeError,
    UnsupportedTopLevelShapeError,
    ValueRangeError,
    WrongTypeError,
)
from makeplot.frame import FrameLayout
from makeplot.options import PlotOptions
from makeplot.render import render_chart
from makeplot.scales import Viewport, compute_viewport
from makeplot.series import SampleSeries

__all__ = [
    "EmptyInputError",
    "FrameLayout",
    "FrameLayoutError",
    "InputShape",
    "MakePlotError",
    "MissingFieldError",
    "MixedInputShapesError",
    "NonFiniteValueError",
    "PlotInputError",
    "PlotOptions",
    "PlotOptionsError",
    "SampleSeries",
    "UnsupportedElementTypeError",
    "UnsupportedTopLevelShapeError",
    "ValueRangeError",
    "Viewport",
    "WrongTypeError",
    "compute_viewport",
    "make_plot",
    "normalize_samples",
    "render_chart",
]
