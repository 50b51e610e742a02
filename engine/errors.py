"""
Error taxonomy for the forecasting engine. Components raise these; the
forecast entry point converts them into explicit failure results.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


class ForecastError(Exception):
    pass


class InsufficientDataError(ForecastError):
    pass


class InvalidRequestError(ForecastError):
    pass
