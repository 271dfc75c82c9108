from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from boxline_plot.errors import EmptyInputError, PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_series(values: Any, *, label: str = "series") -> np.ndarray:
    """Coerce one series to a float64 array with NaN marking missing points.

    An empty series is allowed here; it only has points once padded.
    """
    arr = _coerce_1d_numeric(values, label=label).copy()
    arr[np.isinf(arr)] = np.nan
    return arr


def normalize_many(data: Any) -> list[np.ndarray]:
    if pd is not None and isinstance(data, pd.DataFrame):
        numeric_cols = [c for c in data.columns if _is_numeric_dtype(data[c])]
        if not numeric_cols:
            raise PlotDataError("DataFrame input has no numeric columns")
        return _require_points([normalize_series(data[c], label=f"column {c!r}") for c in numeric_cols])

    if isinstance(data, np.ndarray) and data.ndim == 2:
        data = list(data)

    if isinstance(data, (str, bytes, bytearray)) or not isinstance(data, Sequence):
        raise PlotDataError(f"expected a sequence of series, got {type(data)!r}")
    if len(data) == 0:
        raise PlotDataError("no series to plot")
    return _require_points([normalize_series(series, label=f"series {i}") for i, series in enumerate(data)])


def _require_points(series: list[np.ndarray]) -> list[np.ndarray]:
    if not any(arr.size for arr in series):
        raise EmptyInputError("every series is empty")
    return series


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if not _is_flat(value):
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _is_flat(value: Sequence[Any]) -> bool:
    return not any(isinstance(v, (Sequence, np.ndarray)) and not isinstance(v, (str, bytes)) for v in value)


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
