"""Map pipeline errors onto `{"error": ...}` JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from services.errors import FrameSamplingError, InvalidInputError

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("[errors] %s %s rejected: %d validation error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(status_code=400, content={"error": INVALID_INPUT_MESSAGE})


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.info("[errors] %s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"error": exc.message})


async def frame_sampling_handler(request: Request, exc: FrameSamplingError) -> JSONResponse:
    logger.warning("[errors] frame sampling failed (%s): %s", exc.kind, exc.message)
    return JSONResponse(status_code=422, content={"error": exc.message, "kind": exc.kind})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(FrameSamplingError, frame_sampling_handler)
