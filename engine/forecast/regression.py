"""
Ordinary least-squares linear regression over a normalized time series, reporting slope, intercept, coefficient of determination and residual standard deviation for use in trend extrapolation and confidence bands.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from engine.errors import InsufficientDataError


@dataclass(frozen=True)
class RegressionResult:
    slope: float
    intercept: float
    r_squared: float
    residual_std: float
    sample_size: int


def _r_squared(ss_res: float, ss_tot: float) -> float:
    # a flat series is fitted exactly by a flat line
    if ss_tot == 0:
        return 1.0
    return float(min(1.0, max(0.0, 1.0 - ss_res / ss_tot)))


def fit(xs: Sequence[float], ys: Sequence[float]) -> RegressionResult:
    if len(xs) != len(ys):
        raise ValueError(f"length mismatch: {len(xs)} x values, {len(ys)} y values")
    n = len(xs)
    if n < 2:
        raise InsufficientDataError(f"linear regression requires at least 2 points, got {n}")

    x = np.array(xs, dtype=float)
    y = np.array(ys, dtype=float)
    x_mean = float(np.mean(x))
    variance = float(np.mean((x - x_mean) ** 2))
    if variance == 0:
        raise InsufficientDataError("all x values are identical; regression is undefined")

    with np.errstate(over="ignore", invalid="ignore"):
        y_mean = float(np.mean(y))
        covariance = float(np.mean((x - x_mean) * (y - y_mean)))
        slope = covariance / variance
        intercept = y_mean - slope * x_mean

        residuals = y - (slope * x + intercept)
        ss_res = float(np.sum(residuals ** 2))
        ss_tot = float(np.sum((y - y_mean) ** 2))
    if not all(math.isfinite(v) for v in (slope, intercept, ss_res, ss_tot)):
        raise InsufficientDataError("values are too large for a numerically stable fit")
    residual_std = float(np.sqrt(ss_res / (n - 2))) if n > 2 else 0.0

    return RegressionResult(
        slope=slope,
        intercept=intercept,
        r_squared=_r_squared(ss_res, ss_tot),
        residual_std=residual_std,
        sample_size=n,
    )


def predict(result: RegressionResult, x: float) -> float:
    return result.intercept + result.slope * x
