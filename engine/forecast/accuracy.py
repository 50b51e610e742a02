"""
Accuracy metrics comparing observed and forecast values: mean absolute percentage error, root mean square error, mean absolute error, and a range-normalized accuracy percentage.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class AccuracyReport:
    mape: float
    rmse: float
    mae: float
    accuracy: float
    sample_size: int = 0


def _pair(actual: Sequence[float], predicted: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    if len(actual) != len(predicted):
        raise ValueError(
            f"actual and predicted must have the same length ({len(actual)} != {len(predicted)})"
        )
    return np.array(actual, dtype=float), np.array(predicted, dtype=float)


def mape(actual: Sequence[float], predicted: Sequence[float]) -> float:
    a, p = _pair(actual, predicted)
    if len(a) == 0:
        return 0.0
    if np.any(a == 0):
        return math.inf
    return float(np.mean(np.abs((a - p) / a)) * 100.0)


def rmse(actual: Sequence[float], predicted: Sequence[float]) -> float:
    a, p = _pair(actual, predicted)
    if len(a) == 0:
        return 0.0
    return float(np.sqrt(np.mean((a - p) ** 2)))


def mae(actual: Sequence[float], predicted: Sequence[float]) -> float:
    a, p = _pair(actual, predicted)
    if len(a) == 0:
        return 0.0
    return float(np.mean(np.abs(a - p)))


def prediction_accuracy(actual: Sequence[float], predicted: Sequence[float]) -> AccuracyReport:
    a, _ = _pair(actual, predicted)
    if len(a) == 0:
        return AccuracyReport(mape=0.0, rmse=0.0, mae=0.0, accuracy=100.0)

    err = rmse(actual, predicted)
    span = float(np.max(a) - np.min(a))
    normalized = err / span if span > 0 else 0.0
    pct = mape(actual, predicted)

    return AccuracyReport(
        mape=pct if math.isfinite(pct) else 0.0,
        rmse=err,
        mae=mae(actual, predicted),
        accuracy=float(min(100.0, max(0.0, (1.0 - normalized) * 100.0))),
        sample_size=len(a),
    )
