"""
Trailing simple moving average over recent health measurements, providing the flat extrapolation level, the windowed variance used for confidence bands, and a relative mean-absolute-deviation fit score.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from config import settings
from engine.errors import InsufficientDataError, InvalidRequestError


@dataclass(frozen=True)
class MovingAverageResult:
    window: int
    series: Tuple[float, ...]
    latest: float
    variance: float
    std: float
    accuracy: float


def default_window(n: int) -> int:
    return max(1, min(settings.forecast_ma_max_window, n // 2))


def moving_average(values: Sequence[float], window: int) -> np.ndarray:
    """Trailing means of every full window; length is ``len(values) - window + 1``."""
    if window <= 0:
        raise InvalidRequestError(f"window size must be positive, got {window}")
    if window > len(values):
        raise InvalidRequestError(
            f"window size {window} exceeds the number of values ({len(values)})"
        )
    arr = np.array(values, dtype=float)
    return np.convolve(arr, np.ones(window) / window, mode="valid")


def _relative_fit(recent: np.ndarray) -> float:
    mean = float(np.mean(recent))
    mad = float(np.mean(np.abs(recent - mean)))
    if mean == 0:
        return 100.0 if mad == 0 else 0.0
    # MAD relative to the magnitude of the level
    return float(min(100.0, max(0.0, (1.0 - mad / abs(mean)) * 100.0)))


def compute(values: Sequence[float], window: Optional[int] = None) -> MovingAverageResult:
    if len(values) == 0:
        raise InsufficientDataError("moving average requires at least one value")
    if window is None:
        window = default_window(len(values))

    series = moving_average(values, window)
    recent = np.array(values[-window:], dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        latest = float(np.mean(recent))
        variance = float(np.var(recent, ddof=1)) if window > 1 else 0.0
    if not (math.isfinite(latest) and math.isfinite(variance)):
        raise InsufficientDataError("values are too large for a numerically stable moving average")

    return MovingAverageResult(
        window=window,
        series=tuple(float(v) for v in series),
        latest=latest,
        variance=variance,
        std=float(np.sqrt(variance)),
        accuracy=_relative_fit(recent),
    )
