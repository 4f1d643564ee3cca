from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
import logging
from typing import Literal

LOGGER = logging.getLogger(__name__)

ErrorSource = Literal["drawing", "encoding"]


class PlotInputError(ValueError):
    """Raised when caller input cannot be turned into a plottable series."""

    label = "Incorrect input type"

    def __init__(
        self,
        msg: str,
        *,
        index: int | None = None,
        field: str | None = None,
        location: str | None = None,
        label: str | None = None,
    ) -> None:
        super().__init__(msg)
        self.msg = msg
        self.index = index
        self.field = field
        self.location = location
        if label is not None:
            self.label = label


class MixedInputShapesError(PlotInputError):
    label = "Input contains a mix of numbers and records"

    def __init__(self, index: int, *, location: str | None = None) -> None:
        super().__init__(
            f"Input contains a mix of numbers and records (first conflict at element {index})",
            index=index,
            location=location,
        )


class MissingFieldError(PlotInputError):
    def __init__(self, field: str, index: int, *, location: str | None = None) -> None:
        super().__init__(
            f"Missing {field} value from record {index}",
            index=index,
            field=field,
            location=location,
            label=f"Missing {field} value",
        )


class WrongTypeError(PlotInputError):
    label = "Incorrect type"

    def __init__(self, index: int, value: object, *, field: str | None = None, location: str | None = None) -> None:
        where = f"field {field!r} of element {index}" if field is not None else f"element {index}"
        super().__init__(
            f"{value!r} at {where} is not the correct type",
            index=index,
            field=field,
            location=location,
        )


class NonFiniteValueError(PlotInputError):
    label = "Non-finite value"

    def __init__(self, index: int, value: object, *, field: str | None = None, location: str | None = None) -> None:
        where = f"field {field!r} of element {index}" if field is not None else f"element {index}"
        super().__init__(f"{value!r} at {where} is not a finite number", index=index, field=field, location=location)


class UnsupportedElementTypeError(PlotInputError):
    def __init__(self, index: int, value: object, *, location: str | None = None) -> None:
        super().__init__(
            f"Incorrect input type at element {index}: {type(value).__name__}",
            index=index,
            location=location,
        )


class UnsupportedTopLevelShapeError(PlotInputError):
    def __init__(self, value: object, *, location: str | None = None) -> None:
        super().__init__(
            f"Incorrect input type: expected a list of numbers or records, got {type(value).__name__}",
            location=location,
        )


class EmptyInputError(PlotInputError):
    label = "Empty input"

    def __init__(self, *, location: str | None = None) -> None:
        super().__init__("Input contains no samples", location=location)


class ValueRangeError(PlotInputError):
    label = "Value range too large"

    def __init__(self, min_x: float, max_x: float, min_y: float, max_y: float, *, location: str | None = None) -> None:
        super().__init__(
            f"samples span x [{min_x!r}, {max_x!r}] and y [{min_y!r}, {max_y!r}], too wide to plot as floats",
            location=location,
        )


class PlotOptionsError(PlotInputError):
    label = "Invalid option"


class MakePlotError(RuntimeError):
    """A drawing or encoding failure, wrapped once with the label of the stage that failed."""

    def __init__(self, label: str, *, stage: str, source: ErrorSource, cause: BaseException) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.label = label
        self.stage = stage
        self.source = source
        self.cause = cause

    def __repr__(self) -> str:
        return f"MakePlotError(label={self.label!r}, stage={self.stage!r}, source={self.source!r}, cause={self.cause!r})"


class FrameLayoutError(RuntimeError):
    """The pixel buffer does not match the layout it was allocated for."""


@contextmanager
def drawing_stage(stage: str, label: str = "Failed to make plot") -> Iterator[None]:
    try:
        yield
    except (MakePlotError, FrameLayoutError):
        raise
    except Exception as exc:
        LOGGER.warning("drawing stage %r failed: %s", stage, exc)
        raise MakePlotError(label, stage=stage, source="drawing", cause=exc) from exc


@contextmanager
def encoding_stage(stage: str = "encode", label: str = "Failed to make plot into image") -> Iterator[None]:
    try:
        yield
    except (MakePlotError, FrameLayoutError):
        raise
    except Exception as exc:
        LOGGER.warning("encoding stage %r failed: %s", stage, exc)
        raise MakePlotError(label, stage=stage, source="encoding", cause=exc) from exc
