"""
Constants and configuration for Vitalcast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List

from pydantic_settings import BaseSettings


VITALCAST_LOG_LEVEL = os.getenv("VITALCAST_LOG_LEVEL", "INFO").upper()
VITALCAST_HOST = os.getenv("VITALCAST_HOST", "0.0.0.0")
VITALCAST_PORT = int(os.getenv("VITALCAST_PORT", "4323"))

API_PREFIX = "/api/v1"

# one step on the forecast axis
SECONDS_PER_DAY: float = 86400.0

# metrics whose readings may legitimately drop below zero; everything else is
# treated as non-negative when clamping confidence bounds
SIGNED_METRICS: List[str] = [
    "flexibility_sit_reach",
]


class Settings(BaseSettings):
    log_level: str = VITALCAST_LOG_LEVEL
    host: str = VITALCAST_HOST
    port: int = VITALCAST_PORT

    # minimum number of valid historical points before any forecast is produced
    forecast_min_points: int = 3
    # upper bound for the default moving-average window
    forecast_ma_max_window: int = 5

    forecast_default_horizon_days: int = 7
    forecast_max_horizon_days: int = 365
    forecast_default_confidence_level: float = 0.95

    # normal multiplier by default; student-t trades compatibility for
    # small-sample correctness
    forecast_use_student_t: bool = False
    confidence_multiplier_precision: int = 2

    forecast_domain_floor: float = 0.0
    forecast_signed_metrics: List[str] = SIGNED_METRICS

    # backtest defaults
    backtest_default_holdout_days: int = 3

    # rounding applied when serializing API responses
    api_round_precision: int = 4

    model_config = {
        "env_prefix": "VITALCAST_",
        "extra": "ignore",
    }


settings = Settings()
