"""
Test cases for the route exception translation decorator.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest
from fastapi import HTTPException

from api.routes.exception import handle_exceptions
from engine.errors import InsufficientDataError, InvalidRequestError


@pytest.mark.asyncio
async def test_async_handler_errors_are_translated():
    @handle_exceptions
    async def boom(kind):
        if kind == "invalid":
            raise InvalidRequestError("bad horizon")
        if kind == "http":
            raise HTTPException(status_code=404, detail="missing")
        raise RuntimeError("kaput")

    with pytest.raises(HTTPException) as exc:
        await boom("invalid")
    assert exc.value.status_code == 422
    assert exc.value.detail == "bad horizon"

    with pytest.raises(HTTPException) as exc:
        await boom("http")
    assert exc.value.status_code == 404

    with pytest.raises(HTTPException) as exc:
        await boom("other")
    assert exc.value.status_code == 500
    assert exc.value.detail == "kaput"


def test_sync_handler_errors_are_translated():
    @handle_exceptions
    def short():
        raise InsufficientDataError("2 points")

    with pytest.raises(HTTPException) as exc:
        short()
    assert exc.value.status_code == 422
    assert "insufficient data" in exc.value.detail


def test_wrapped_handler_passes_results_through():
    @handle_exceptions
    def ok(x):
        return x * 2

    assert ok(21) == 42
    assert ok.__name__ == "ok"
