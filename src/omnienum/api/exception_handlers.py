# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""FastAPI exception handlers for enum deserialization errors.

Invalid enum values reach FastAPI in two shapes: raised directly from
handler code, or wrapped by request body validation inside a
``RequestValidationError``. Both are answered with HTTP 400 and the
``INVALID_ENUM_VALUE`` payload. Validation failures that involve anything
other than enum values keep FastAPI's default 422 response.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from omnienum.adapters.adapter_pydantic import collect_invalid_enum_errors
from omnienum.api.handler_error_translation import (
    INVALID_ENUM_VALUE_STATUS,
    TYPE_RESOLUTION_STATUS,
    translate_invalid_enum_values,
    translate_type_resolution_error,
)
from omnienum.errors import InvalidEnumValueError, TypeResolutionError
from omnienum.models.model_error_response import ModelErrorResponse

logger = logging.getLogger(__name__)


def _json_response(status_code: int, payload: ModelErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(mode="json"),
    )


async def handle_invalid_enum_value(
    request: Request, exc: InvalidEnumValueError
) -> JSONResponse:
    """Answer a directly raised InvalidEnumValueError with HTTP 400."""
    logger.warning("Rejected enum value on %s: %s", request.url.path, exc.message)
    return _json_response(
        INVALID_ENUM_VALUE_STATUS, translate_invalid_enum_values([exc])
    )


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer enum-only request validation failures with HTTP 400."""
    errors = exc.errors()
    enum_errors = collect_invalid_enum_errors(errors)
    if not enum_errors or len(enum_errors) != len(errors):
        return await request_validation_exception_handler(request, exc)
    logger.warning(
        "Rejected %d enum value(s) on %s: %s",
        len(enum_errors),
        request.url.path,
        enum_errors[0].message,
    )
    return _json_response(
        INVALID_ENUM_VALUE_STATUS, translate_invalid_enum_values(enum_errors)
    )


async def handle_type_resolution(
    request: Request, exc: TypeResolutionError
) -> JSONResponse:
    """Answer an integration defect with HTTP 500."""
    logger.error(
        "Enum type resolution failed on %s: %s",
        request.url.path,
        exc.reason,
        exc_info=exc,
    )
    return _json_response(TYPE_RESOLUTION_STATUS, translate_type_resolution_error(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the enum error handlers on ``app``."""
    app.add_exception_handler(InvalidEnumValueError, handle_invalid_enum_value)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation)  # type: ignore[arg-type]
    app.add_exception_handler(TypeResolutionError, handle_type_resolution)  # type: ignore[arg-type]


__all__ = [
    "handle_invalid_enum_value",
    "handle_request_validation",
    "handle_type_resolution",
    "register_exception_handlers",
]
