"""
Exception translation for API route functions.

:func:`handle_exceptions` wraps a route handler so that errors escaping the
forecasting engine reach the client as :class:`fastapi.HTTPException`
responses.  An ``HTTPException`` raised by the handler itself passes through
unchanged.  Engine validation errors become ``422`` responses and anything
else is logged and reported as a ``500``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from fastapi import HTTPException

from engine.errors import ForecastError, InsufficientDataError

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _translate(exc: Exception) -> HTTPException:
    if isinstance(exc, InsufficientDataError):
        return HTTPException(status_code=422, detail=f"insufficient data: {exc}")
    if isinstance(exc, ForecastError):
        return HTTPException(status_code=422, detail=str(exc))
    log.exception("unhandled error in route handler")
    return HTTPException(status_code=500, detail=str(exc))


def handle_exceptions(func: F) -> F:
    """Wrap ``func`` (sync or async) so uncaught errors become HTTP errors."""

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise _translate(exc) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            raise _translate(exc) from exc

    return cast(F, sync_wrapper)
