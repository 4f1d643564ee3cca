from __future__ import annotations

from typing import Any

from makeplot.adapters import normalize_samples
from makeplot.options import PlotOptions
from makeplot.render import render_chart
from makeplot.scales import compute_viewport


def make_plot(
    values: Any,
    options: PlotOptions | None = None,
    *,
    width: int | None = None,
    height: int | None = None,
    title: str | None = None,
    location: str | None = None,
) -> bytes:
    resolved = PlotOptions.from_overrides(options, width=width, height=height, title=title)
    series = normalize_samples(values, location=location)
    viewport = compute_viewport(series)
    return render_chart(series, viewport, resolved)
