from __future__ import annotations

from collections.abc import Sequence
import math
from typing import Any

import numpy as np

from termplot.errors import PlotDataError


def coerce_xy(xs: Any, ys: Any) -> tuple[np.ndarray, np.ndarray]:
    """Coerce paired coordinate input into float64 1-D arrays of equal length.

    Validation happens up front so a draw call either applies fully or raises
    before any pixel is touched.
    """
    x_arr = _coerce_1d_numeric(xs, label="x")
    y_arr = _coerce_1d_numeric(ys, label="y")
    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
    return x_arr, y_arr


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(list(value), dtype=object)
        if arr.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(arr, label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, (str, bytes)):
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except OverflowError:
            # Integers past the float range are still real numbers, just off any grid.
            out[i] = math.inf if raw > 0 else -math.inf
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
