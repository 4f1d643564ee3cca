from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
import math
import numbers
from typing import Any

import numpy as np

from makeplot.errors import (
    EmptyInputError,
    MissingFieldError,
    MixedInputShapesError,
    NonFiniteValueError,
    UnsupportedElementTypeError,
    UnsupportedTopLevelShapeError,
    WrongTypeError,
)
from makeplot.series import SampleSeries


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


class InputShape(Enum):
    UNDETERMINED = "undetermined"
    IMPLICIT_INDEX_LIST = "implicit-index list"
    EXPLICIT_PAIR_TABLE = "explicit-pair table"


def normalize_samples(values: Any, *, location: str | None = None) -> SampleSeries:
    """Turn a list of bare numbers or of ``{"x": .., "y": ..}`` records into an ordered series.

    Bare numbers take their zero-based position as x. The first element fixes the
    input shape and every later element must share it. ``location`` is attached to
    any raised error so the caller can point at the offending argument.
    """
    elements = _top_level_elements(values, location=location)

    state = InputShape.UNDETERMINED
    pairs: list[tuple[float, float]] = []
    for i, element in enumerate(elements):
        shape = _classify(element, i, location=location)
        state = _advance_shape(state, shape, i, location=location)
        if shape is InputShape.IMPLICIT_INDEX_LIST:
            pairs.append((float(i), _to_float(element, i, location=location)))
        else:
            pairs.append(_extract_record(element, i, location=location))

    if not pairs:
        raise EmptyInputError(location=location)
    return SampleSeries.from_pairs(pairs)


def _advance_shape(state: InputShape, shape: InputShape, index: int, *, location: str | None) -> InputShape:
    if state is InputShape.UNDETERMINED or state is shape:
        return shape
    raise MixedInputShapesError(index, location=location)


def _top_level_elements(values: Any, *, location: str | None) -> Sequence[Any]:
    if torch is not None and isinstance(values, torch.Tensor):
        tensor = values.detach()
        if tensor.ndim != 1:
            raise UnsupportedTopLevelShapeError(values, location=location)
        return tensor.cpu().tolist()

    if pd is not None and isinstance(values, pd.DataFrame):
        return values.to_dict(orient="records")

    if pd is not None and isinstance(values, pd.Series):
        return values.tolist()

    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise UnsupportedTopLevelShapeError(values, location=location)
        return values.tolist()

    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        return values

    raise UnsupportedTopLevelShapeError(values, location=location)


def _classify(element: Any, index: int, *, location: str | None) -> InputShape:
    if _is_number(element):
        return InputShape.IMPLICIT_INDEX_LIST
    if isinstance(element, Mapping):
        return InputShape.EXPLICIT_PAIR_TABLE
    raise UnsupportedElementTypeError(index, element, location=location)


def _extract_record(record: Mapping[str, Any], index: int, *, location: str | None) -> tuple[float, float]:
    if "x" not in record:
        raise MissingFieldError("x", index, location=location)
    x = _numeric_field(record["x"], index, "x", location=location)
    if "y" not in record:
        raise MissingFieldError("y", index, location=location)
    y = _numeric_field(record["y"], index, "y", location=location)
    return (x, y)


def _numeric_field(value: Any, index: int, field: str, *, location: str | None) -> float:
    if not _is_number(value):
        raise WrongTypeError(index, value, field=field, location=location)
    return _to_float(value, index, field=field, location=location)


def _is_number(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def _to_float(value: Any, index: int, *, field: str | None = None, location: str | None) -> float:
    try:
        out = float(value)
    except (OverflowError, ValueError) as exc:
        raise NonFiniteValueError(index, value, field=field, location=location) from exc
    if not math.isfinite(out):
        raise NonFiniteValueError(index, out, field=field, location=location)
    return out
