from __future__ import annotations

from dataclasses import dataclass, replace
import numbers
from typing import Any

from makeplot.errors import PlotOptionsError


DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480


@dataclass(frozen=True)
class PlotOptions:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    title: str | None = None

    def __post_init__(self) -> None:
        _require_positive_int(self.width, "width")
        _require_positive_int(self.height, "height")
        if self.title is not None and not isinstance(self.title, str):
            raise PlotOptionsError(f"title must be a string, got {type(self.title).__name__}", field="title")

    @classmethod
    def from_overrides(
        cls,
        base: "PlotOptions | None" = None,
        *,
        width: Any = None,
        height: Any = None,
        title: Any = None,
    ) -> "PlotOptions":
        """Overlay the given non-None values on ``base`` (or the defaults)."""
        overrides: dict[str, Any] = {}
        if width is not None:
            overrides["width"] = width
        if height is not None:
            overrides["height"] = height
        if title is not None:
            overrides["title"] = title
        return replace(base or cls(), **overrides)


def _require_positive_int(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise PlotOptionsError(f"{name} must be an integer, got {value!r}", field=name)
    if value <= 0:
        raise PlotOptionsError(f"{name} must be > 0, got {value}", field=name)
